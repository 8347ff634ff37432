"""Constants used throughout the application."""

# OpenAI generation settings
OPENAI_MODEL = "gpt-4o-mini"
TEMPERATURE = 0.5
TOP_P = 0.9
SCHEMA_NAME = "mr_sidehustle_canvas"

# CORS
# In production, replace * with the deployed frontend origin
ALLOW_ORIGIN = "*"
ALLOW_METHODS = "POST, OPTIONS"
ALLOW_HEADERS = "Content-Type"

# Request profile
REQUIRED_NUMERIC_FIELDS = ("age", "hoursPerWeek", "seedBudget")
REQUIRED_TEXT_FIELDS = ("location", "strengths", "enjoys", "skillset")

# Idea shape
IDEA_COUNT = 3
SECTION_COUNT = 10
STEP_COUNT = 3
INSIGHT_LIST_COUNT = 3
MIN_TOOLS = 2
MAX_TOOLS = 6

SECTION_HEADINGS = (
    "The customer problem",
    "The product/service",
    "Ideal customer",
    "What must be built",
    "Revenue potential",
    "Pricing strategy",
    "Finding customers",
    "Time commitment",
    "Difficulty (1–10): short reason",
    "Worthiness (1–10): short reason",
)
PRODUCT_SECTION_INDEX = 1

# Length caps
TITLE_MAX = 70
TAGLINE_MAX = 120
SECTION_BODY_MAX = 550
STEP_MAX = 140
FEASIBILITY_MAX = 240
INSIGHT_ITEM_MAX = 140
TOOL_NAME_MAX = 40
TOOL_USE_MAX = 120
KPI_MAX = {"week1": 120, "month1": 140, "quarter1": 160}

SCORE_MIN = 1
SCORE_MAX = 10
MONEY_FIELDS = ("price", "cogs", "marginPct", "startupCost", "monthlyCost")

# Output quality
MAX_SENTENCES = 3
RAW_SNIPPET_MAX = 500
SIMILARITY_THRESHOLD = 0.6
ALT_SUFFIX = " — Alt"

BANNED_PATTERNS = (
    r"guaranteed",
    r"effortless",
    r"overnight",
    r"get\s*rich",
    r"no\s*risk",
    r"passive\s*income",
    r"100%\s*success",
    r"secret\s*hack",
    r"viral\s*overnight",
)

# Emoji, pictographs and the joiners/selectors that glue them together
EMOJI_PATTERN = (
    "["
    "\u00a9\u00ae\u203c\u2049\u2122\u2139\u2194-\u2199\u21a9\u21aa"
    "\u231a-\u23ff\u24c2\u25aa-\u25fe\u2600-\u27bf\u2934\u2935"
    "\u2b05-\u2b55\u3030\u303d\u3297\u3299"
    "\u200d\ufe0e\ufe0f\u20e3"
    "\U0001f000-\U0001faff\U0001fc00-\U0001fffd"
    "]"
)

# Locale
EU_LOCATION_TOKENS = (
    "AT", "BE", "BG", "HR", "CY", "CZ", "DK", "EE", "FI", "FR", "DE", "GR",
    "HU", "IE", "IT", "LV", "LT", "LU", "MT", "NL", "PL", "PT", "RO", "SK",
    "SI", "ES", "SE", "EU",
    "Netherlands", "Germany", "France", "Spain", "Italy", "Belgium",
    "Portugal", "Ireland", "Austria", "Poland", "Czech", "Sweden",
    "Finland", "Denmark", "Greece",
)
