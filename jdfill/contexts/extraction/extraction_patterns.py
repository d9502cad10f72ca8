"""
Reusable patterns and vocabularies for job description field extraction.

Pattern classes follow a single convention:
- Dataclasses with frozen=True for immutability
- Class-level compiled patterns
- Module-level ordered lists that fix evaluation priority

The order of every *_PATTERNS list is load-bearing. Sub-extractors stop at the
first pattern that matches, so reordering changes output on ambiguous text.
"""

import re
from dataclasses import dataclass

# =============================================================================
# FIELD DEFINITIONS
# =============================================================================

EXTRACTED_FIELDS = ("title", "skills", "location", "intake", "stipend", "perks")

MAX_SKILLS = 10

DEFAULT_INTAKE = 1
MIN_INTAKE = 1
MAX_INTAKE = 100

DEFAULT_TITLE = "Intern"

# =============================================================================
# SKILL VOCABULARY
# =============================================================================

# Scan order = output order
SKILL_KEYWORDS = (
    "react",
    "angular",
    "vue",
    "javascript",
    "typescript",
    "python",
    "java",
    "node.js",
    "nodejs",
    "express",
    "mongodb",
    "sql",
    "mysql",
    "postgresql",
    "aws",
    "docker",
    "kubernetes",
    "git",
    "html",
    "css",
    "tailwind",
    "figma",
    "photoshop",
    "excel",
    "power bi",
    "tableau",
    "machine learning",
    "ml",
    "ai",
    "data analysis",
    "data science",
    "communication",
    "teamwork",
    "problem solving",
    "agile",
    "scrum",
    "api",
    "rest",
    "graphql",
    "c++",
    "c#",
    ".net",
    "flutter",
    "react native",
    "swift",
    "kotlin",
    "android",
    "ios",
    "linux",
    "devops",
    "ci/cd",
    "testing",
    "qa",
    "selenium",
)

# Words rendered fully upper-case inside a skill label
UPPERCASE_SKILL_TOKENS = frozenset({"ai", "ml", "qa", "api", "sql", "aws", "css", "html"})

# =============================================================================
# PERK VOCABULARY
# =============================================================================

PERK_KEYWORDS = (
    "certificate",
    "letter of recommendation",
    "lor",
    "flexible",
    "remote",
    "wfh",
    "work from home",
    "mentorship",
    "training",
    "ppo",
    "pre-placement",
    "bonus",
    "health insurance",
    "snacks",
    "meals",
    "team outings",
)

# Keyword -> display label; anything else is capitalized word by word
PERK_LABEL_OVERRIDES = {
    "lor": "Letter of Recommendation",
    "ppo": "PPO (Pre-Placement Offer)",
    "wfh": "Work from Home",
}

# =============================================================================
# TITLE PATTERNS
# =============================================================================


@dataclass(frozen=True)
class TitlePatterns:
    """
    Regex patterns for extracting a role title.

    Supports:
    - Lead phrases: "We are hiring a Frontend Developer"
    - Labelled fields: "Position: Data Analyst"
    - A role noun phrase opening a line: "Marketing Intern"
    """

    LEAD_PHRASE: re.Pattern = re.compile(
        r"(?:looking for|hiring|seeking|need|require)\s+(?:a\s+)?"
        r"([a-z\s]+(?:intern|developer|engineer|analyst|designer|manager|executive|associate))",
        re.IGNORECASE,
    )

    LABELLED: re.Pattern = re.compile(
        r"(?:position|role|job title|opening)[\s:]+"
        r"([a-z\s]+(?:intern|developer|engineer|analyst|designer|manager))",
        re.IGNORECASE,
    )

    LINE_START: re.Pattern = re.compile(
        r"^([a-z\s]+(?:intern|developer|engineer|analyst|designer|manager|executive))",
        re.IGNORECASE | re.MULTILINE,
    )


TITLE_PATTERNS = [
    TitlePatterns.LEAD_PHRASE,
    TitlePatterns.LABELLED,
    TitlePatterns.LINE_START,
]

# Evaluated in order against the lower-cased document when no pattern matches.
# An entry applies when every keyword in its tuple is present.
TITLE_FALLBACKS = (
    (("software", "intern"), "Software Development Intern"),
    (("frontend",), "Frontend Developer"),
    (("backend",), "Backend Developer"),
    (("full stack",), "Full Stack Developer"),
    (("fullstack",), "Full Stack Developer"),
    (("data analyst",), "Data Analyst"),
    (("data science",), "Data Science Intern"),
    (("marketing",), "Marketing Intern"),
    (("design",), "Design Intern"),
)

# =============================================================================
# LOCATION PATTERNS
# =============================================================================

INDIAN_CITIES = (
    "bangalore",
    "bengaluru",
    "mumbai",
    "delhi",
    "hyderabad",
    "chennai",
    "pune",
    "kolkata",
    "noida",
    "gurgaon",
    "gurugram",
)

INDIAN_REGIONS = ("india", "karnataka", "maharashtra", "telangana", "tamil nadu")

_CITY_PATTERN = "|".join(re.escape(c) for c in INDIAN_CITIES)
_REGION_PATTERN = "|".join(re.escape(r) for r in INDIAN_REGIONS)

# A matched span containing any of these normalizes to "Remote"
REMOTE_MARKERS = ("remote", "wfh", "work from home")

REMOTE_LABEL = "Remote"


@dataclass(frozen=True)
class LocationPatterns:
    """
    Regex patterns for extracting a work location.

    Supports:
    - Labelled phrases: "Location: Pune.", "based in Chennai,"
    - Known city names, optionally followed by a state or country
    - Remote / work-from-home indicators
    """

    # Lazy capture stops at the first period, comma, newline or end of text
    EXPLICIT: re.Pattern = re.compile(
        r"(?:location|based in|office|work from)[\s:]+([a-z\s,]+?)(?:\.|,|$|\n)",
        re.IGNORECASE,
    )

    CITY: re.Pattern = re.compile(
        rf"({_CITY_PATTERN})[,\s]*({_REGION_PATTERN})?",
        re.IGNORECASE,
    )

    REMOTE: re.Pattern = re.compile(r"(?:remote|work from home|wfh)", re.IGNORECASE)


LOCATION_PATTERNS = [
    LocationPatterns.EXPLICIT,
    LocationPatterns.CITY,
    LocationPatterns.REMOTE,
]

# =============================================================================
# INTAKE PATTERNS
# =============================================================================


@dataclass(frozen=True)
class IntakePatterns:
    """
    Regex patterns for extracting how many people are being hired.
    """

    # "3 positions", "10 interns"
    COUNT_NOUN: re.Pattern = re.compile(
        r"(\d+)\s*(?:positions?|openings?|vacancies?|interns?|candidates?)", re.IGNORECASE
    )

    # "hiring 5", "looking for 2"
    LEAD_VERB: re.Pattern = re.compile(
        r"(?:hiring|need|require|looking for)\s*(\d+)", re.IGNORECASE
    )

    # "Openings available: 4"
    AVAILABLE: re.Pattern = re.compile(
        r"(?:positions?|openings?)\s*(?:available)?[\s:]*(\d+)", re.IGNORECASE
    )


INTAKE_PATTERNS = [
    IntakePatterns.COUNT_NOUN,
    IntakePatterns.LEAD_VERB,
    IntakePatterns.AVAILABLE,
]

# =============================================================================
# STIPEND PATTERNS
# =============================================================================

# Comma-grouped thousands ("15,000") or a plain digit run ("15000")
_AMOUNT = r"(\d{1,3}(?:,\d{3})+|\d+)"

# Thousands suffix, but not the first letter of a longer word ("15k", not "15 kms")
_THOUSANDS_SUFFIX = r"([kK](?![a-zA-Z]))?"

_CURRENCY = r"(?:rs\.?|inr|₹)"

THOUSANDS_MULTIPLIER = 1000


@dataclass(frozen=True)
class StipendPatterns:
    """
    Regex patterns for extracting a monthly stipend.

    Group 1 is the amount, group 2 the optional thousands suffix.
    """

    # "Stipend: 15k", "Salary INR 12,000"
    LABELLED: re.Pattern = re.compile(
        rf"(?:stipend|salary|compensation|pay)[\s:]*{_CURRENCY}?\s*{_AMOUNT}{_THOUSANDS_SUFFIX}",
        re.IGNORECASE,
    )

    # "Rs. 10,000 per month", "₹8k pm"
    CURRENCY_PER_MONTH: re.Pattern = re.compile(
        rf"{_CURRENCY}\s*{_AMOUNT}{_THOUSANDS_SUFFIX}\s*(?:per month|/month|p\.m\.?|pm)",
        re.IGNORECASE,
    )


STIPEND_PATTERNS = [
    StipendPatterns.LABELLED,
    StipendPatterns.CURRENCY_PER_MONTH,
]
