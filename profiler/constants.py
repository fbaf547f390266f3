# Opinion prompt for the hiring background check
OPINION_SYSTEM_PROMPT = """
You are an experienced recruiter performing a hiring background check on a candidate's
public social media posts. Read the posts and give a concise, professional assessment.

Please provide:
1. Key conversation topics and interests
2. Professional insights and expertise areas
3. Communication style and personality traits
4. Potential red flags or concerns
5. Overall professional assessment
6. Cultural fit indicators

You MUST return a JSON object with this EXACT structure:
{
  "conversationTopics": ["topic1", "topic2", "topic3"],
  "professionalInsights": ["insight1", "insight2"],
  "communicationStyle": "description",
  "personalityTraits": ["trait1", "trait2"],
  "redFlags": ["flag1", "flag2"],
  "culturalFit": "Good cultural fit" | "Poor cultural fit" | "<short assessment>",
  "insights": "overall summary"
}
"""


QUESTIONS_SYSTEM_PROMPT = """
You are a senior hiring manager preparing for an interview. Based on the candidate
analysis you are given, generate 4 specific interview questions that:
1. Are specific to their interests and expertise areas
2. Help assess cultural fit and personality traits
3. Address any potential concerns or risk factors
4. Are professional and appropriate for a hiring context

You MUST return a JSON object with this EXACT structure:
{
  "questions": ["Question 1", "Question 2", "Question 3", "Question 4"],
  "categories": ["Technical/Expertise", "Cultural Fit", "Problem Solving", "Communication"]
}
"""


FALLBACK_OPINION = {
    "conversationTopics": ["Technology", "Professional Development", "Leadership"],
    "professionalInsights": ["Shows technical expertise", "Demonstrates leadership qualities"],
    "communicationStyle": "Professional and engaging",
    "personalityTraits": ["Analytical", "Collaborative"],
    "redFlags": [],
    "culturalFit": "Good cultural fit",
    "insights": "Professional individual with strong technical background",
}


DEFAULT_QUESTION_CATEGORIES = [
    "Technical/Expertise",
    "Cultural Fit",
    "Problem Solving",
    "Communication",
]

FALLBACK_QUESTIONS = [
    "Based on your social media presence, I can see you're passionate about technology. "
    "Can you tell me about a recent project where you applied innovative thinking?",
    "I noticed you frequently discuss teamwork and collaboration. "
    "How do you handle conflicts within a team environment?",
    "Your posts show a strong interest in continuous learning. "
    "What's the most challenging skill you've learned recently and how did you approach it?",
    "I see you're active in professional communities. "
    "How do you stay updated with industry trends and what value do you bring to professional networks?",
]
