"""Static lexicons for tone detection and rewriting.

Everything here is read-only data; the rule objects built from it live in
``textlens.tone.rules`` and ``textlens.tone.adjust``.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Mapping, Tuple


class ToneCategory(str, Enum):
    FORMALITY = "formality"
    EMOTION = "emotion"
    STYLE = "style"

    @classmethod
    def parse(cls, value: object) -> "ToneCategory | None":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                return None
        return None


class Domain(str, Enum):
    BUSINESS = "business"
    ACADEMIC = "academic"
    MARKETING = "marketing"
    CREATIVE = "creative"
    TECHNICAL = "technical"

    @classmethod
    def parse(cls, value: object) -> "Domain | None":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                return None
        return None


MIN_LEVEL = 0
MAX_LEVEL = 4

TONE_LEVELS: Dict[ToneCategory, Tuple[str, ...]] = {
    ToneCategory.FORMALITY: ("very_casual", "casual", "neutral", "formal", "very_formal"),
    ToneCategory.EMOTION: ("reserved", "neutral", "enthusiastic", "passionate", "urgent"),
    ToneCategory.STYLE: ("concise", "balanced", "elaborate", "persuasive", "inspirational"),
}

LEVEL_DESCRIPTIONS: Dict[ToneCategory, Tuple[str, ...]] = {
    ToneCategory.FORMALITY: (
        "Very casual, conversational language",
        "Casual, friendly tone",
        "Neutral, balanced language",
        "Formal, professional tone",
        "Very formal, academic style",
    ),
    ToneCategory.EMOTION: (
        "Reserved, professional distance",
        "Neutral emotional tone",
        "Enthusiastic and positive",
        "Passionate and intense",
        "Urgent and compelling",
    ),
    ToneCategory.STYLE: (
        "Concise and direct",
        "Balanced approach",
        "Elaborate and detailed",
        "Persuasive and convincing",
        "Inspirational and motivational",
    ),
}

# -- domains ---------------------------------------------------------------

DOMAIN_KEYWORDS: Dict[Domain, Tuple[str, ...]] = {
    Domain.BUSINESS: (
        "profit", "revenue", "efficiency", "strategy", "market", "client", "stakeholder",
    ),
    Domain.ACADEMIC: (
        "research", "analysis", "methodology", "findings", "conclusion", "hypothesis",
        "evidence",
    ),
    Domain.MARKETING: (
        "amazing", "revolutionary", "exclusive", "limited", "transform", "empower",
        "unleash",
    ),
    Domain.CREATIVE: (
        "imagine", "dream", "inspire", "passion", "art", "beauty", "soul", "heart",
    ),
    Domain.TECHNICAL: (
        "algorithm", "framework", "architecture", "implementation", "optimization",
        "scalability",
    ),
}

DOMAIN_TRANSFORMS: Dict[Domain, Mapping[str, str]] = {
    Domain.BUSINESS: {
        "good": "optimal",
        "bad": "suboptimal",
        "think": "believe",
        "want": "seek",
        "need": "require",
        "make": "develop",
        "do": "execute",
        "fix": "resolve",
        "problem": "challenge",
        "solution": "approach",
    },
    Domain.ACADEMIC: {
        "think": "contend",
        "believe": "argue",
        "want": "seek",
        "need": "require",
        "show": "demonstrate",
        "prove": "establish",
        "find": "discover",
        "see": "observe",
        "use": "employ",
        "work": "function",
        "good": "effective",
        "bad": "ineffective",
    },
    Domain.MARKETING: {
        "good": "amazing",
        "great": "exceptional",
        "nice": "fantastic",
        "cool": "innovative",
        "help": "empower",
        "work": "revolutionize",
        "use": "leverage",
        "buy": "invest in",
        "get": "unlock",
        "try": "experience",
    },
    Domain.CREATIVE: {
        "good": "beautiful",
        "bad": "challenging",
        "think": "dream",
        "feel": "experience",
        "see": "behold",
        "hear": "listen to",
        "create": "craft",
        "make": "bring to life",
        "work": "dance with",
        "live": "thrive",
    },
    Domain.TECHNICAL: {
        "do": "implement",
        "make": "construct",
        "use": "utilize",
        "work": "function",
        "fix": "debug",
        "good": "robust",
        "bad": "flawed",
        "fast": "optimized",
        "slow": "inefficient",
        "easy": "streamlined",
        "hard": "complex",
    },
}

# -- formality -------------------------------------------------------------

CONTRACTIONS: Mapping[str, str] = {
    "don't": "do not",
    "can't": "cannot",
    "won't": "will not",
    "isn't": "is not",
    "aren't": "are not",
    "wasn't": "was not",
    "weren't": "were not",
    "haven't": "have not",
    "hasn't": "has not",
    "hadn't": "had not",
    "doesn't": "does not",
    "didn't": "did not",
    "shouldn't": "should not",
    "wouldn't": "would not",
    "couldn't": "could not",
    "mustn't": "must not",
    "shan't": "shall not",
    "needn't": "need not",
    "i'm": "I am",
    "i've": "I have",
    "i'll": "I will",
    "i'd": "I would",
    "you're": "you are",
    "you've": "you have",
    "you'll": "you will",
    "you'd": "you would",
    "we're": "we are",
    "we've": "we have",
    "we'll": "we will",
    "we'd": "we would",
    "they're": "they are",
    "they've": "they have",
    "they'll": "they will",
    "they'd": "they would",
    "it's": "it is",
    "that's": "that is",
    "there's": "there is",
    "what's": "what is",
    "let's": "let us",
}

CASUAL_TO_FORMAL: Mapping[str, str] = {
    **CONTRACTIONS,
    # informal words
    "guy": "person",
    "guys": "people",
    "kid": "child",
    "kids": "children",
    "stuff": "things",
    "thing": "matter",
    "things": "matters",
    "kinda": "somewhat",
    "sorta": "rather",
    "totally": "completely",
    "really": "very",
    "super": "extremely",
    "awesome": "excellent",
    "cool": "acceptable",
    "bad": "poor",
    "crap": "nonsense",
    "damn": "darn",
    "hell": "heck",
    "suck": "fail",
    "sucks": "fails",
    # slang
    "gonna": "going to",
    "wanna": "want to",
    "gotta": "have to",
    "ain't": "is not",
    "y'all": "you all",
    "ya": "you",
    "dunno": "do not know",
    "lots": "many",
    "loads": "many",
    "ton": "many",
    "tons": "many",
    # phrasal verbs
    "find out": "discover",
    "figure out": "determine",
    "work out": "resolve",
    "sort out": "organize",
    "set up": "establish",
    "carry out": "execute",
    "put off": "postpone",
    "bring up": "mention",
    "take on": "assume",
    "look into": "investigate",
    "go over": "review",
    "check out": "examine",
}

FORMAL_TO_CASUAL: Mapping[str, str] = {
    "do not": "don't",
    "cannot": "can't",
    "will not": "won't",
    "is not": "isn't",
    "are not": "aren't",
    "was not": "wasn't",
    "were not": "weren't",
    "have not": "haven't",
    "has not": "hasn't",
    "had not": "hadn't",
    "does not": "doesn't",
    "did not": "didn't",
    "should not": "shouldn't",
    "would not": "wouldn't",
    "could not": "couldn't",
    "must not": "mustn't",
    "i am": "I'm",
    "i have": "I've",
    "i will": "I'll",
    "you are": "you're",
    "we are": "we're",
    "they are": "they're",
    "it is": "it's",
    "that is": "that's",
    "let us": "let's",
    "person": "guy",
    "people": "guys",
    "child": "kid",
    "children": "kids",
    "things": "stuff",
    "matter": "thing",
    "matters": "things",
    "somewhat": "kinda",
    "rather": "sorta",
    "completely": "totally",
    "very": "really",
    "extremely": "super",
    "excellent": "awesome",
    "acceptable": "cool",
    "poor": "bad",
    "nonsense": "crap",
    "darn": "damn",
    "heck": "hell",
    "fail": "suck",
    "fails": "sucks",
    "going to": "gonna",
    "want to": "wanna",
    "have to": "gotta",
    "you all": "y'all",
    "you": "ya",
    "do not know": "dunno",
    "discover": "find out",
    "determine": "figure out",
    "resolve": "work out",
    "organize": "sort out",
    "establish": "set up",
    "execute": "carry out",
    "postpone": "put off",
    "mention": "bring up",
    "assume": "take on",
    "investigate": "look into",
    "review": "go over",
    "examine": "check out",
}

VERY_CASUAL_ADDITIONS: Mapping[str, str] = {
    "like": "ya know",
    "because": "cause",
    "about": "bout",
    "through": "thru",
    "though": "tho",
    "okay": "k",
    "great": "gr8",
    "before": "b4",
    "after": "afta",
    "friend": "buddy",
    "friends": "buddies",
    "really": "super",
    "very": "hella",
    "yes": "yep",
    "no": "nah",
    "and": "&",
    "for": "4",
    "to": "2",
    "you": "u",
    "your": "ur",
    "the": "da",
    "that": "dat",
    "this": "dis",
}

VERY_FORMAL_ADDITIONS: Mapping[str, str] = {
    "I": "one",
    "you": "the reader",
    "we": "our team",
    "they": "the aforementioned parties",
    "it": "the aforementioned item",
    "this": "the present",
    "that": "the aforementioned",
    "these": "the present items",
    "those": "the aforementioned items",
    "good": "satisfactory",
    "bad": "unsatisfactory",
    "big": "substantial",
    "small": "modest",
    "make": "fabricate",
    "do": "perform",
    "get": "obtain",
    "give": "provide",
    "take": "acquire",
    "put": "place",
    "say": "state",
    "tell": "inform",
    "ask": "inquire",
    "work": "function",
    "help": "assist",
    "need": "require",
    "want": "desire",
    "like": "appreciate",
    "think": "contemplate",
    "know": "comprehend",
    "see": "observe",
    "hear": "perceive",
    "feel": "experience",
}

# -- emotion ---------------------------------------------------------------

RESERVED_TO_ENTHUSIASTIC: Mapping[str, str] = {
    "okay": "fantastic",
    "good": "amazing",
    "fine": "wonderful",
    "nice": "excellent",
    "interesting": "fascinating",
    "like": "love",
    "enjoy": "adore",
    "happy": "thrilled",
    "satisfied": "delighted",
    "pleased": "ecstatic",
    "surprised": "amazed",
    "impressed": "blown away",
    "excited": "overjoyed",
    "interested": "passionate",
}

ENTHUSIASTIC_TO_RESERVED: Mapping[str, str] = {
    "amazing": "good",
    "fantastic": "okay",
    "wonderful": "fine",
    "excellent": "nice",
    "fascinating": "interesting",
    "love": "like",
    "adore": "enjoy",
    "thrilled": "happy",
    "delighted": "satisfied",
    "ecstatic": "pleased",
    "amazed": "surprised",
    "blown away": "impressed",
    "overjoyed": "excited",
    "passionate": "interested",
}

NEUTRAL_TO_PASSIONATE: Mapping[str, str] = {
    "think": "believe passionately",
    "feel": "burn with passion",
    "want": "yearn for",
    "need": "crave",
    "like": "adore",
    "love": "worship",
    "care": "cherish deeply",
    "matter": "matter immensely",
    "important": "vitally important",
    "significant": "profoundly significant",
}

NEUTRAL_TO_URGENT: Mapping[str, str] = {
    "should": "must immediately",
    "could": "needs to urgently",
    "might": "absolutely must",
    "maybe": "definitely should",
    "perhaps": "without question",
    "possibly": "certainly",
    "later": "right now",
    "soon": "immediately",
    "eventually": "at once",
}

# -- style -----------------------------------------------------------------

CONCISE_TO_ELABORATE: Mapping[str, str] = {
    "is": "represents",
    "has": "possesses",
    "does": "accomplishes",
    "makes": "creates",
    "shows": "demonstrates",
    "gives": "provides",
    "takes": "requires",
    "gets": "obtains",
    "sets": "establishes",
    "brings": "introduces",
    "helps": "facilitates",
    "works": "operates",
    "runs": "functions",
    "starts": "commences",
    "ends": "concludes",
    "changes": "transforms",
    "improves": "enhances",
    "fixes": "resolves",
}

ELABORATE_TO_CONCISE: Mapping[str, str] = {value: key for key, value in CONCISE_TO_ELABORATE.items()}

NEUTRAL_TO_PERSUASIVE: Mapping[str, str] = {
    "think": "believe",
    "consider": "recognize",
    "know": "understand",
    "see": "realize",
    "find": "discover",
    "good": "powerful",
    "better": "superior",
    "best": "ultimate",
    "help": "empower",
    "work": "succeed",
    "result": "achievement",
    "outcome": "breakthrough",
}

NEUTRAL_TO_INSPIRATIONAL: Mapping[str, str] = {
    "do": "achieve",
    "make": "create",
    "build": "forge",
    "create": "bring to life",
    "help": "inspire",
    "change": "transform",
    "grow": "evolve",
    "learn": "discover",
    "find": "uncover",
    "see": "envision",
    "dream": "aspire",
    "hope": "believe",
    "want": "desire",
    "need": "yearn",
}

# -- detection indicators --------------------------------------------------

FORMAL_INDICATORS = frozenset(
    [
        "therefore", "moreover", "consequently", "furthermore", "accordingly",
        "henceforth", "notwithstanding",
    ]
)
CASUAL_INDICATORS = frozenset(
    ["gonna", "wanna", "kinda", "sorta", "ya", "ain't", "dunno", "cuz", "thru"]
)
CONTRACTION_INDICATORS = frozenset(CONTRACTIONS) | {"ain't", "y'all"}
ENTHUSIASTIC_INDICATORS = frozenset(
    ["amazing", "fantastic", "wonderful", "thrilled", "excited", "passionate", "love", "adore"]
)
RESERVED_INDICATORS = frozenset(
    ["adequate", "sufficient", "acceptable", "satisfactory", "reasonable"]
)
URGENT_INDICATORS = frozenset(
    ["immediately", "urgently", "critical", "crucial", "essential", "imperative", "now"]
)
PERSUASIVE_INDICATORS = frozenset(
    ["imagine", "transform", "revolutionize", "powerful", "ultimate", "superior", "empower"]
)
INSPIRATIONAL_INDICATORS = frozenset(
    ["aspire", "dream", "achieve", "evolve", "inspire", "vision", "journey"]
)

# -- advisory suggestions --------------------------------------------------

# category -> level name -> (suggestions, ((from, to), ...))
ADVISORY_SUGGESTIONS: Dict[
    ToneCategory, Dict[str, Tuple[Tuple[str, ...], Tuple[Tuple[str, str], ...]]]
] = {
    ToneCategory.FORMALITY: {
        "very_casual": (
            (
                "Consider using full words instead of abbreviations",
                "Expand contractions for a more professional tone",
                "Use complete sentences and proper grammar",
                "Replace slang with standard vocabulary",
            ),
            (
                ("u gonna b there?", "Will you be there?"),
                ("that's gr8 stuff", "That's excellent work"),
            ),
        ),
        "very_formal": (
            (
                "Use passive voice where appropriate for academic tone",
                "Employ sophisticated vocabulary and complex sentence structures",
                "Include transitional phrases for better flow",
                "Use formal salutations and closings",
            ),
            (
                ("I think this is good", "One contends that this represents a satisfactory outcome"),
                ("We need to fix this", "It is imperative that we address this matter forthwith"),
            ),
        ),
    },
    ToneCategory.EMOTION: {
        "enthusiastic": (
            (
                "Use exclamation points to show excitement",
                "Include positive adjectives and adverbs",
                "Express genuine enthusiasm and energy",
                "Use words that convey passion and interest",
            ),
            (
                ("The project is going well", "The project is going amazingly well!"),
                ("I'm interested in this", "I'm absolutely thrilled about this!"),
            ),
        ),
        "passionate": (
            (
                "Use strong emotional language",
                "Express deep conviction and feeling",
                "Include personal investment and commitment",
                "Use words that show intensity and dedication",
            ),
            (
                ("I care about this cause", "This cause burns in my soul with unyielding passion"),
                ("This matters to me", "This profoundly matters to the very core of my being"),
            ),
        ),
        "urgent": (
            (
                "Use time-sensitive language",
                "Emphasize immediate action and consequences",
                "Create a sense of urgency and importance",
                "Use imperative language and direct calls to action",
            ),
            (
                ("We should do this soon", "We must act on this immediately!"),
                ("This needs attention", "This demands our urgent attention right now!"),
            ),
        ),
    },
    ToneCategory.STYLE: {
        "persuasive": (
            (
                "Use rhetorical questions to engage readers",
                "Include social proof and testimonials",
                "Highlight benefits over features",
                "Use action-oriented language",
                "Address potential objections",
            ),
            (
                ("This product works well", "Imagine transforming your workflow with this powerful solution!"),
                ("Buy our service", "Join thousands who've revolutionized their productivity"),
            ),
        ),
        "inspirational": (
            (
                "Use aspirational and visionary language",
                "Include metaphors and vivid imagery",
                "Focus on transformation and growth",
                "Use words that evoke emotion and possibility",
                "Create a sense of journey and achievement",
            ),
            (
                ("Start your journey", "Embark on an epic quest of self-discovery and limitless potential!"),
                ("You can succeed", "Rise above limitations and soar to heights you never imagined possible!"),
            ),
        ),
    },
}
