from dataclasses import dataclass, field
from typing import Dict, Iterable, Tuple


@dataclass(frozen=True)
class Lexicon:
    """
    A named, read-only keyword list used for substring-presence classification.

    Keywords are lower-cased and de-duplicated (first occurrence wins) when the
    lexicon is built, so coverage scores are computed over distinct keywords.
    """
    name: str
    keywords: Tuple[str, ...]
    description: str = ""
    evidence: Tuple[str, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.keywords)


def build_lexicon(name: str, keywords: Iterable[str], description: str = "",
                  evidence: Iterable[str] = ()) -> Lexicon:
    unique = tuple(dict.fromkeys(k.lower() for k in keywords))
    return Lexicon(name=name, keywords=unique, description=description, evidence=tuple(evidence))


def _table(entries) -> Tuple[Lexicon, ...]:
    return tuple(build_lexicon(*entry) for entry in entries)


# Tokenizer stop words
STOP_WORDS = frozenset([
    'the', 'a', 'an', 'and', 'or', 'but', 'in', 'on', 'at', 'to', 'for', 'of', 'with', 'by',
    'is', 'are', 'was', 'were', 'be', 'been', 'have', 'has', 'had', 'do', 'does', 'did',
    'will', 'would', 'could', 'should', 'may', 'might', 'can', 'this', 'that', 'these',
    'those', 'i', 'you', 'he', 'she', 'it', 'we', 'they', 'me', 'him', 'her', 'us', 'them',
    'just', 'like', 'get', 'got', 'going', 'come', 'came', 'make', 'made', 'take', 'took',
    'know', 'knew', 'see', 'saw', 'think', 'thought', 'want', 'wanted', 'need', 'needed',
    'work', 'worked', 'time', 'times', 'year', 'years', 'day', 'days', 'week', 'weeks',
    'month', 'months', 'way', 'ways', 'good', 'great', 'new', 'first', 'last', 'long',
    'little', 'own', 'other', 'old', 'right', 'big', 'high', 'different', 'small', 'large',
    'next', 'early', 'young', 'important', 'few', 'public', 'bad', 'same', 'able', 'also',
    'much', 'more', 'most', 'some', 'any', 'all', 'each', 'every', 'no', 'not', 'only',
    'very', 'really', 'quite', 'rather', 'pretty', 'too', 'so', 'such', 'well', 'here',
    'there', 'where', 'when', 'why', 'how', 'what', 'who', 'which', 'whose', 'whom',
])

# Sentiment: emotion words matched by exact word equality
POSITIVE_EMOTIONS = (
    'excited', 'happy', 'proud', 'grateful', 'inspired', 'motivated', 'confident', 'optimistic',
    'enthusiastic', 'joyful', 'thrilled', 'delighted', 'amazing', 'fantastic', 'wonderful',
    'brilliant', 'excellent', 'outstanding', 'incredible', 'awesome',
)
NEGATIVE_EMOTIONS = (
    'frustrated', 'disappointed', 'worried', 'angry', 'sad', 'upset', 'concerned', 'stressed',
    'anxious', 'annoyed', 'devastated', 'terrible', 'awful', 'horrible', 'disgusting', 'pathetic',
    'useless', 'hate', 'despise', 'loathe',
)

# Ideology
PROGRESSIVE = build_lexicon("progressive", [
    "diversity", "inclusion", "climate", "renewable", "equality", "social", "community",
    "sustainable", "progressive", "environmental", "justice", "fairness", "openness",
    "transparency", "collaboration", "empowerment", "innovation", "change", "reform",
])
CONSERVATIVE = build_lexicon("conservative", [
    "tradition", "business", "profit", "efficiency", "market", "growth", "conservative",
    "stability", "proven", "established", "heritage", "values", "discipline", "order",
    "authority", "hierarchy", "structure", "consistency", "reliability", "security",
])

# Topic buckets, checked in this order
TOPIC_CATEGORIES = _table([
    ("Technology", ['tech', 'technology', 'software', 'programming', 'coding', 'development', 'ai',
                    'artificial', 'machine', 'data', 'algorithm', 'code', 'digital', 'computer',
                    'internet', 'web', 'app', 'application', 'system', 'platform', 'api', 'database',
                    'cloud', 'security', 'cyber', 'blockchain', 'crypto', 'bitcoin', 'ethereum']),
    ("Business", ['business', 'company', 'startup', 'entrepreneur', 'founder', 'ceo', 'leadership',
                  'management', 'strategy', 'marketing', 'sales', 'revenue', 'profit', 'investment',
                  'funding', 'venture', 'capital', 'market', 'economy', 'finance', 'financial',
                  'growth', 'scale', 'scaling', 'expansion', 'acquisition', 'merger']),
    ("Social", ['social', 'community', 'society', 'people', 'human', 'humanity', 'culture', 'cultural',
                'diversity', 'inclusion', 'equality', 'justice', 'rights', 'freedom', 'democracy',
                'politics', 'political', 'government', 'policy', 'public', 'welfare', 'healthcare',
                'education', 'environment', 'climate', 'sustainability']),
    ("Personal", ['personal', 'life', 'living', 'family', 'friends', 'relationship', 'love',
                  'happiness', 'success', 'achievement', 'goal', 'dream', 'passion', 'hobby',
                  'interest', 'travel', 'food', 'music', 'art', 'sport', 'fitness', 'health',
                  'wellness', 'mindfulness', 'meditation', 'balance', 'work-life']),
])

INTEREST_CATEGORIES = _table([
    ('Technology & Innovation',
     ['tech', 'technology', 'innovation', 'ai', 'artificial', 'machine', 'software', 'product',
      'startup', 'coding', 'programming', 'development', 'digital', 'data', 'algorithm',
      'machine learning', 'artificial intelligence', 'blockchain', 'crypto', 'cyber', 'security',
      'cloud', 'api', 'database', 'platform', 'system', 'app', 'application', 'code', 'developer',
      'engineer', 'programmer'],
     'Shows strong interest in technology, software development, and innovation'),
    ('Leadership & Management',
     ['team', 'leadership', 'management', 'mentoring', 'culture', 'strategy', 'vision', 'executive',
      'director', 'manager', 'lead', 'guide', 'inspire', 'motivate', 'coach', 'mentor', 'supervise',
      'organize', 'coordinate', 'delegate', 'empower', 'influence', 'decision', 'strategic'],
     'Demonstrates leadership qualities and management experience'),
    ('Learning & Development',
     ['learning', 'growth', 'education', 'development', 'skill', 'training', 'course', 'study',
      'knowledge', 'expertise', 'mastery', 'improvement', 'learn', 'teach', 'certification',
      'degree', 'university', 'college', 'school', 'book', 'read', 'research'],
     'Values continuous learning and professional development'),
    ('Social Impact',
     ['community', 'diversity', 'inclusion', 'social', 'impact', 'sustainability', 'environment',
      'climate', 'equality', 'justice', 'charity', 'volunteer', 'help', 'support', 'give', 'donate',
      'nonprofit', 'social good', 'change', 'world', 'society', 'humanitarian'],
     'Committed to social causes and making a positive impact'),
    ('Business & Finance',
     ['business', 'finance', 'investment', 'market', 'economy', 'revenue', 'profit', 'growth',
      'strategy', 'entrepreneur', 'startup', 'venture', 'capital', 'funding', 'money', 'financial',
      'economic', 'trading', 'stocks', 'invest', 'fund', 'sales', 'marketing'],
     'Business-minded with strong financial and entrepreneurial focus'),
    ('Health & Wellness',
     ['health', 'wellness', 'fitness', 'mental health', 'workout', 'exercise', 'meditation',
      'mindfulness', 'balance', 'self-care', 'healthy', 'gym', 'yoga', 'mental', 'physical',
      'nutrition', 'diet', 'lifestyle'],
     'Prioritizes health, wellness, and work-life balance'),
    ('Creative & Arts',
     ['creative', 'art', 'design', 'music', 'writing', 'photography', 'film', 'culture', 'aesthetic',
      'inspiration', 'imagination', 'artistic', 'video', 'content', 'media', 'beautiful'],
     'Creative and artistic with strong aesthetic sense'),
])

PERSONALITY_TRAITS = _table([
    ('Analytical',
     ['analyze', 'analysis', 'data', 'research', 'study', 'examine', 'evaluate', 'assess', 'metrics',
      'statistics', 'logic', 'reasoning', 'critical', 'thinking', 'methodical', 'systematic',
      'evidence', 'proof', 'conclusion', 'hypothesis', 'investigation'],
     'Demonstrates analytical thinking and data-driven decision making',
     ['Uses analytical language', 'References data and metrics', 'Shows systematic thinking']),
    ('Collaborative',
     ['team', 'together', 'collaborate', 'partnership', 'cooperation', 'collective', 'group',
      'unite', 'support', 'help', 'assist', 'work with', 'join', 'participate', 'contribute',
      'share', 'community', 'we', 'us', 'our'],
     'Values teamwork and collaborative approaches',
     ['Frequently mentions team activities', 'Uses inclusive language', 'Shows collaborative mindset']),
    ('Innovative',
     ['innovation', 'creative', 'new', 'breakthrough', 'disrupt', 'revolutionary', 'cutting-edge',
      'pioneer', 'invent', 'innovative', 'original', 'unique', 'novel', 'groundbreaking',
      'advanced', 'modern', 'future', 'next-generation'],
     'Shows innovative thinking and creative problem-solving',
     ['Uses innovation-related vocabulary', 'Mentions creative solutions', 'Shows forward-thinking approach']),
    ('Communicative',
     ['share', 'discuss', 'talk', 'communicate', 'present', 'speak', 'explain', 'express',
      'conversation', 'tell', 'describe', 'narrate', 'articulate', 'convey', 'message', 'story',
      'explanation', 'discussion', 'dialogue'],
     'Strong communication skills and expressive nature',
     ['Uses descriptive language', 'Shares stories and experiences', 'Engages in discussions']),
    ('Ambitious',
     ['goal', 'achieve', 'success', 'ambition', 'aspire', 'excel', 'outperform', 'challenge',
      'strive', 'reach', 'target', 'objective', 'aim', 'dream', 'vision', 'mission', 'accomplish',
      'succeed', 'win', 'victory', 'triumph'],
     'Goal-oriented with strong ambition and drive',
     ['Sets and mentions goals', 'Shows achievement orientation', 'Uses success-related language']),
    ('Empathetic',
     ['understand', 'care', 'support', 'help', 'listen', 'compassion', 'kindness', 'empathy',
      'considerate', 'thoughtful', 'sensitive', 'caring', 'concerned', 'worried', 'feel', 'emotion',
      'heart', 'soul', 'human', 'people'],
     'Shows empathy and emotional intelligence',
     ['Uses emotional language', 'Shows concern for others', 'Demonstrates understanding']),
    ('Detail-oriented',
     ['detail', 'precise', 'accurate', 'thorough', 'meticulous', 'careful', 'specific', 'exact',
      'comprehensive', 'complete', 'perfect', 'flawless', 'detailed'],
     'Pays attention to details and quality',
     ['Uses precise language', 'Mentions specific details', 'Shows quality focus']),
    ('Adaptable',
     ['adapt', 'flexible', 'change', 'adjust', 'evolve', 'transform', 'modify', 'versatile',
      'dynamic', 'grow', 'learn', 'improve', 'update', 'modernize', 'upgrade'],
     'Adaptable and flexible in approach',
     ['Mentions adaptation and change', 'Shows flexibility', 'Uses growth-oriented language']),
])

# Communication style word lists
FORMAL_WORDS = ('therefore', 'however', 'furthermore', 'moreover', 'consequently', 'nevertheless',
                'accordingly', 'subsequently')
INFORMAL_WORDS = ('gonna', 'wanna', 'gotta', 'kinda', 'sorta', 'yeah', 'nah', 'cool', 'awesome', 'amazing')
ENGAGEMENT_WORDS = ('you', 'your', 'we', 'us', 'our', 'together', 'share', 'discuss', 'think',
                    'believe', 'opinion')

THEMES = _table([
    ("Technology & Innovation", ["tech", "innovation", "ai", "software", "product", "startup"]),
    ("Leadership & Management", ["team", "leadership", "management", "mentoring", "culture"]),
    ("Learning & Development", ["learning", "growth", "education", "development", "skill"]),
    ("Social Impact", ["community", "diversity", "inclusion", "social", "impact"]),
    ("Work-Life Balance", ["balance", "family", "health", "wellness", "recharge"]),
    ("Sustainability", ["renewable", "sustainable", "environment", "climate", "green"]),
])

RISKS = _table([
    ("Controversial statements", ["hate", "discriminat", "racist", "sexist", "offensive", "inappropriate"]),
    ("Unprofessional behavior", ["drunk", "party", "inappropriate", "unprofessional", "wild", "crazy"]),
    ("Extreme views", ["extremist", "radical", "conspiracy", "extreme", "fanatic"]),
    ("Frequent negativity", ["always complain", "hate job", "toxic", "terrible", "awful", "worst"]),
    ("Inappropriate content", ["nsfw", "adult", "explicit", "sexual", "vulgar"]),
    ("Political extremism", ["fascist", "communist", "anarchist", "revolution", "overthrow"]),
    ("Substance references", ["drunk", "high", "stoned", "alcohol", "drugs", "smoking"]),
])


def by_name(table: Tuple[Lexicon, ...]) -> Dict[str, Lexicon]:
    return {lexicon.name: lexicon for lexicon in table}
