# =============================================================================
# STAT STAGE CONSTANTS
# =============================================================================
MIN_STAT_STAGE = -6
MAX_STAT_STAGE = 6

MIN_CRIT_STAGE = 0
MAX_CRIT_STAGE = 4

# Gen I approximated stage multipliers, indexed by stage + 6
GEN_I_STAGE_MULTIPLIERS = (0.25, 0.28, 0.33, 0.4, 0.5, 0.66, 1, 1.5, 2, 2.5, 3, 3.5, 4)

# Gen II-IV accuracy multipliers, indexed by stage + 6 (evasion reads index 6 - stage)
# Index 10 differs between Gen II and Gens III-IV
ACCURACY_STAGE_MULTIPLIERS = (0.33, 0.36, 0.43, 0.5, 0.6, 0.75, 1, 1.33, 1.66, 2, 2.5, 2.66, 3)
GEN_II_ACCURACY_PLUS_FOUR = 2.33

# Critical hit probability per crit stage (0-4), keyed by generation range
CRIT_CHANCE_TABLES = (
    ("II", (17 / 256, 1 / 8, 1 / 4, 85 / 256, 1 / 2)),
    ("III-V", (1 / 16, 1 / 8, 1 / 4, 1 / 3, 1 / 2)),
    ("VI", (1 / 16, 1 / 8, 1 / 2, 1, 1)),
    ("VII+", (1 / 24, 1 / 8, 1 / 2, 1, 1)),
)

# =============================================================================
# STAT LIMITS
# =============================================================================
MIN_LEVEL = 1
MAX_LEVEL = 100

MAX_PER_STAT_IVS = 31
MAX_PER_STAT_EVS = 252
MAX_TOTAL_EVS = 510

MIN_BASE_STAT = 1
MAX_BASE_STAT = 255

NATURE_BOOST = 1.1
NATURE_HINDER = 0.9

# =============================================================================
# TYPE EFFECTIVENESS MULTIPLIERS
# =============================================================================
TYPE_MUL_NO_EFFECT = 0.0
TYPE_MUL_NORMAL = 1.0

# =============================================================================
# DAMAGE CALCULATION CONSTANTS
# =============================================================================
DAMAGE_RANDOM_MIN = 85  # 85% minimum damage
DAMAGE_RANDOM_MAX = 100  # 100% maximum damage
DAMAGE_RANDOM_RANGE = 16  # rand % 16 for 85-100% range

STAB_MULTIPLIER = 1.5
ADAPTABILITY_STAB_MULTIPLIER = 2.0

SCREEN_SINGLES = 0.5
SCREEN_DOUBLES = 2 / 3

SPREAD_GEN_III = 0.5
SPREAD_GEN_IV_PLUS = 0.75

BURN_MULTIPLIER = 0.5
FLASH_FIRE_MULTIPLIER = 1.5
HELPING_HAND_MULTIPLIER = 1.5
CHARGE_MULTIPLIER = 2.0
ME_FIRST_MULTIPLIER = 1.5

FILTER_MULTIPLIER = 0.75  # Solid Rock / Filter / Prism Armor
EXPERT_BELT_MULTIPLIER = 1.2
TINTED_LENS_MULTIPLIER = 2.0
LIFE_ORB_MULTIPLIER = 1.3

TYPE_BOOST_ITEM_OLD = 1.1  # Gens II-III
TYPE_BOOST_ITEM_NEW = 1.2  # Gen IV+

# =============================================================================
# BATTLE MESSAGES
# =============================================================================
MSG_NO_EFFECT = "It has no effect!"
MSG_NOT_VERY_EFFECTIVE = "It's not very effective..."
MSG_SUPER_EFFECTIVE = "It's super effective!"
