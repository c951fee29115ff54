"""
Tunable numbers of the scoring, ranking and cost models.

Kept in one place so product owners can adjust them without touching the
algorithms, and so tests can reference the same values.
"""

# ── Cross-platform efficiency multipliers ───────────────────────────
MAC_CPU_EFFICIENCY_MULTIPLIER = 1.35      # Apple-silicon per-core efficiency
MAC_RAM_EFFICIENCY_MULTIPLIER = 1.25      # unified memory
MAC_STORAGE_EFFICIENCY_MULTIPLIER = 1.10  # SSD / APFS

# ── Windows CPU tiers (keyword → base score), checked in order ──────
WINDOWS_CPU_TIERS = [
    (("i9", "ryzen 9"), 0.90),
    (("i7", "ryzen 7"), 0.80),
    (("i5", "ryzen 5"), 0.65),
    (("i3", "ryzen 3"), 0.50),
]
WINDOWS_CPU_DEFAULT_TIER = 0.60
WINDOWS_RECENT_GEN_PATTERN = r"\b(1[234]\d{3})\b"   # 12th-14th gen model numbers
WINDOWS_RECENT_GEN_BONUS = 0.05
WINDOWS_CORE_BONUSES = [   # (min physical cores, bonus)
    (12, 0.08),
    (8, 0.05),
    (6, 0.02),
]

# ── Apple CPU tiers (keyword → base score), checked in order ────────
MAC_CPU_TIERS = [
    ("ultra", 0.98),
    ("max", 0.95),
    ("pro", 0.88),
    ("m3", 0.85),
    ("m2", 0.75),
    ("m1", 0.65),
]
MAC_CPU_DEFAULT_TIER = 0.70
MAC_CORE_BONUSES = [
    (12, 0.03),
    (10, 0.02),
    (8, 0.01),
]

# ── Shared RAM / storage scales ─────────────────────────────────────
RAM_SCALE_MIN_GB = 8
RAM_SCALE_SPAN_GB = 56          # 8 GB → 0, 64 GB → 1
STORAGE_SCALE_MIN_GB = 256
STORAGE_SCALE_SPAN_GB = 1792    # 256 GB → 0, 2048 GB → 1

DEFAULT_WINDOWS_RAM_GB = 8
DEFAULT_WINDOWS_STORAGE_GB = 256

# ── Similarity bonuses ──────────────────────────────────────────────
CPU_EFFICIENCY_RATIO = 0.85
CPU_EFFICIENCY_BONUS = 0.05
RAM_EFFICIENCY_RATIO = 0.80
RAM_EFFICIENCY_BONUS = 0.03
STORAGE_EFFICIENCY_RATIO = 0.90
STORAGE_EFFICIENCY_BONUS = 0.02

PERSONA_FEATURE_BONUS = 0.02
PERSONA_GPU_MIN_CORES = 10
PERSONA_BATTERY_MIN_WH = 50
PERSONA_MAX_WEIGHT_KG = 1.5

SIMILARITY_DECIMALS = 3

# ── Delta notes ─────────────────────────────────────────────────────
CPU_NOTE_EQUIVALENT_DELTA = 0.08
CPU_NOTE_SUFFICIENT_RATIO = 0.80
CAPACITY_NOTE_EQUIVALENT_BAND = (0.95, 1.05)
CAPACITY_NOTE_SUFFICIENT_RATIO = 0.85

# ── Ranking tie-break ───────────────────────────────────────────────
AIR_BONUS = 0.05
AIR_BONUS_MIN_SIMILARITY = 0.85
PRICE_BONUS_MAX = 0.10
PRICE_BONUS_MIN_SIMILARITY = 0.90
PRICE_BONUS_REFERENCE = 10000.0     # roughly the top of the catalog
RANKING_LIMIT = 3

# ── TCO engine ──────────────────────────────────────────────────────
BATTERY_POWER_SAVINGS_PCT = 0.30    # fewer charge cycles on the Mac side
SAVINGS_PCT_CAP = 50.0
SIGNIFICANT_SAVINGS_AED = 2000

# ── Carbon model ────────────────────────────────────────────────────
GRID_CO2_KG_PER_KWH = 0.5
PC_MANUFACTURING_CO2_KG = 250
MAC_MANUFACTURING_CO2_KG = 300
TREES_PER_KG_CO2 = 0.02

# ── Port compatibility ──────────────────────────────────────────────
PORT_MISSING_PENALTY = 0.15

# ── Performance radar (0-100 before scaling to 0-1) ─────────────────
RADAR_RAM_BANDS = [   # (min effective ratio, score)
    (1.0, 95.0),
    (0.9, 90.0),
    (0.75, 80.0),
]
RADAR_RAM_LOW_BONUS = 20.0
RADAR_RAM_FLOOR = 70.0
RADAR_STORAGE_MULTIPLIER = 1.15
RADAR_STORAGE_BASELINE_CAP = 1024
RADAR_STORAGE_BASELINE_MIN = 256
RADAR_STORAGE_FLOOR = 20.0
RADAR_DEFAULT_WINDOWS_STORAGE_GB = 512
RADAR_MAC_POWER = 85.0
RADAR_SUPPORT_NEUTRAL = 50.0
RADAR_SUPPORT_BOUNDS = (70.0, 95.0)
RADAR_MAC_RESALE = 90.0

RADAR_WINDOWS_CPU = 50.0
RADAR_WINDOWS_RAM = 50.0
RADAR_WINDOWS_STORAGE_BANDS = [   # (min GB, score)
    (1024, 70.0),
    (512, 60.0),
]
RADAR_WINDOWS_STORAGE_DEFAULT = 50.0
RADAR_WINDOWS_POWER = 15.0
RADAR_WINDOWS_SUPPORT = 50.0
RADAR_WINDOWS_RESALE = 30.0

# ── Explanation thresholds ──────────────────────────────────────────
EXPLANATION_FULL_COMPAT = 0.9
EXPLANATION_MOSTLY_COMPAT = 0.7
EXCELLENT_MATCH_SIMILARITY = 0.90
GOOD_MATCH_SIMILARITY = 0.85
