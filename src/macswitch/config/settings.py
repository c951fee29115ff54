import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parents[3]
DATA_DIR = Path(os.environ.get("MACSWITCH_DATA_DIR") or BASE_DIR / "data")
LOG_DIR = BASE_DIR / "logs"

CATALOG_FILE = DATA_DIR / "macbooks.csv"
ASSUMPTIONS_FILE = DATA_DIR / "tco_assumptions.json"

SUPPORTED_YEARS = (3, 5)
DEFAULT_YEARS = 3

CURRENCY = "AED"
