# Frequency ranks
RARE = 1_000_000_000  # sentinel rank for words missing from the frequency list
EXACT_RANK_LIMIT = 10_000  # ranks up to here are kept exact
THOUSANDS_RANK_LIMIT = 30_000  # coarsened to thousands up to here
MAX_RANK = 100_000  # coarsened to ten-thousands up to here, capped afterwards
VERY_RARE_RANK = 30_000  # ranks above this count as "very rare"
DISPLAY_RANK_LIMIT = 10_000  # ranks below this render as plain integers

# Compound decomposition
NOISE_KEY_LENGTH = 3  # keys this short are noise when also very rare
MAX_COMPOUND_LENGTH = 64  # longer tokens are not split

# Separable verbs
MIN_SEPARABLE_SUFFIX = 3

# Ranking quality tiers
QUALITY_VULGAR = 0
QUALITY_SPECIFIC = 1
QUALITY_NORMAL = 2
QUALITY_HIGH = 3
HIGH_QUALITY_DEF_COUNT = 5

# Dictionary annotations
VULGAR_MARKERS = ("vulg.", "vulgar", "obszön", "obscene")
GENERAL_MARKERS = ("allg.", "general")

# Output
UNRESOLVED_GLOSS = "???"
GLOSS_SEPARATOR = "; "
SEPARABLE_SOURCE_FORMAT = "({suffix}...{prefix}) {source}"

# Reference data files
DICT_DIR = "dict"
LANG_DIR = "lang"
FREQUENCY_FILE = "frequency.txt"
VARIANT_PATTERNS_FILE = "variant-patterns.txt"
SEPARABLE_PREFIXES_FILE = "separable-prefixes.txt"
EXPLICIT_VARIANTS_FILE = "explicit-variants.txt"
COMMENT_PREFIX = "#"
