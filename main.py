import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel

from profiler import config
from profiler.analysis.profile_builder import EmptyFragmentsError, analyze_fragments
from profiler.models import CandidateProfile, Fragment, InterviewQuestionSet
from profiler.services.base_client import BaseLLMClient
from profiler.services.providers import create_llm_client

logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
logger = logging.getLogger(__name__)

app = FastAPI(title="Social Profile Screener")
llm_client = create_llm_client()


def get_llm_client() -> BaseLLMClient:
    return llm_client


def clean_username(raw: str) -> str:
    '''
    Accept either a bare handle or a profile URL (x.com / twitter.com).

    Args:
        raw (str): Username or URL as typed by the user.

    returns: str
    '''
    cleaned = raw.strip()
    for host in ("x.com/", "twitter.com/"):
        if host in cleaned:
            # Take the first path segment and drop query strings / trailing slashes
            cleaned = cleaned.split(host, 1)[1].split("/")[0].split("?")[0]
            break
    return cleaned.lstrip("@")


def build_fragments(tweets: List[str], now: Optional[datetime] = None) -> List[Fragment]:
    '''
    Wrap manually entered statements as fragments, newest first, one day apart.
    '''
    now = now or datetime.now(timezone.utc)
    return [
        Fragment(text=text, created_at=now - timedelta(days=index), id=f"custom_{index}")
        for index, text in enumerate(tweets)
    ]


class AnalyzeCustomRequest(BaseModel):
    '''
    Statements entered by hand for a given user.
    '''
    username: Optional[str] = None
    tweets: Optional[List[str]] = None


class GenerateQuestionsRequest(BaseModel):
    '''
    A previously produced profile (camelCase JSON) and the user it belongs to.
    '''
    analysisData: Optional[Dict[str, Any]] = None
    username: Optional[str] = None


@app.post("/api/analyze-custom", response_model=CandidateProfile)
async def analyze_custom(request: AnalyzeCustomRequest, client: BaseLLMClient = Depends(get_llm_client)):
    '''
    Analyze a list of statements and return the full candidate profile.
    Args:
        request (AnalyzeCustomRequest): Username and statements.
        client (BaseLLMClient): LLM collaborator for the external opinion.
    returns: CandidateProfile
    '''
    username = clean_username(request.username or "")
    tweets = [t for t in request.tweets or [] if t and t.strip()]
    if not username or not tweets:
        raise HTTPException(status_code=400, detail="Username and tweets are required")

    try:
        return await analyze_fragments(build_fragments(tweets), username, client)
    except EmptyFragmentsError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception(f"Analysis error for '{username}'")
        raise HTTPException(status_code=500, detail={"error": "Analysis failed", "details": str(e)})


@app.post("/api/generate-questions", response_model=InterviewQuestionSet)
async def generate_questions(request: GenerateQuestionsRequest, client: BaseLLMClient = Depends(get_llm_client)):
    '''
    Generate 4 interview questions tailored to a profile.
    Args:
        request (GenerateQuestionsRequest): Profile data and username.
        client (BaseLLMClient): LLM collaborator for question generation.
    returns: InterviewQuestionSet
    '''
    if request.analysisData is None or not request.username:
        raise HTTPException(status_code=400, detail="Analysis data and username are required")

    return await client.generate_interview_questions(request.analysisData, clean_username(request.username))
