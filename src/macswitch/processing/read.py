import csv
import json
from pathlib import Path
from typing import Any, List, Mapping, Optional, Tuple

import numpy as np
import pandas as pd

from ..config.settings import ASSUMPTIONS_FILE, CATALOG_FILE
from ..models import CostAssumptions, MacSpec, MachineProfile
from ..utils.logging import get_logger

logger = get_logger(__name__)

# column → (kind, default)
CATALOG_COLUMNS = {
    "model": ("str", ""),
    "chip": ("str", ""),
    "cores_cpu": ("int", 0),
    "cores_gpu": ("int", 0),
    "ram_gb": ("int", 0),
    "storage_gb": ("int", 0),
    "display_inches": ("float", 0.0),
    "display_nits": ("int", 0),
    "refresh_hz": ("int", 0),
    "weight_kg": ("float", 0.0),
    "ports": ("str", ""),
    "msrp_aed": ("int", 0),
    "launch_date": ("date", None),
    "battery_wh": ("float", 0.0),
    "wifi": ("str", ""),
}


def _sanitize_column_name(name: Any) -> str:
    return str(name).replace("\ufeff", "").strip().lower()


def read_csv_robust(path: Path) -> pd.DataFrame:
    """Read CSV with encoding fallbacks and auto delimiter detection."""
    encodings: tuple[str, ...] = ("utf-8-sig", "utf-8", "cp1252", "latin1")
    last_error: Exception | None = None
    for encoding in encodings:
        try:
            df = pd.read_csv(
                path,
                encoding=encoding,
                sep=None,
                engine="python",
                on_bad_lines="skip",
                dtype=str,
                keep_default_na=False,
            )
            df.columns = [_sanitize_column_name(c) for c in df.columns]
            return df
        except (UnicodeDecodeError, pd.errors.ParserError) as e:
            last_error = e
    assert last_error is not None
    raise last_error


def catalog_from_frame(df: pd.DataFrame) -> Tuple[MacSpec, ...]:
    """Turn a catalog table into ``MacSpec`` records.

    Missing columns take their default, cells that do not parse become 0
    (or ``None`` for the launch date), and rows without a model are dropped.
    """
    if df is None or df.empty:
        return ()

    df = df.copy()
    df.columns = [_sanitize_column_name(c) for c in df.columns]

    for col, (kind, default) in CATALOG_COLUMNS.items():
        if col not in df.columns:
            df[col] = default
        if kind == "str":
            df[col] = df[col].fillna("").astype(str).str.strip()
        elif kind == "int":
            df[col] = (
                pd.to_numeric(df[col], errors="coerce")
                .replace([np.inf, -np.inf], np.nan)
                .fillna(0)
                .astype(int)
            )
        elif kind == "float":
            df[col] = (
                pd.to_numeric(df[col], errors="coerce")
                .replace([np.inf, -np.inf], np.nan)
                .fillna(0.0)
                .astype(float)
            )
        elif kind == "date":
            df[col] = pd.to_datetime(df[col], errors="coerce")

    df = df[df["model"].ne("")]

    records = []
    for row in df[list(CATALOG_COLUMNS)].to_dict("records"):
        launch = row["launch_date"]
        row["launch_date"] = None if pd.isna(launch) else launch.date()
        records.append(MacSpec(**row))
    return tuple(records)


def load_catalog(path: Optional[Path] = None) -> Tuple[MacSpec, ...]:
    """Load the Mac catalog CSV; a missing or empty file yields an empty catalog."""
    path = Path(path) if path is not None else CATALOG_FILE
    if not path.exists():
        logger.warning("Catalog file not found: %s", path)
        return ()
    try:
        df = read_csv_robust(path)
    except (pd.errors.EmptyDataError, csv.Error):
        logger.warning("Catalog file is empty: %s", path)
        return ()

    catalog = catalog_from_frame(df)
    dropped = len(df) - len(catalog)
    if dropped:
        logger.info("Skipped %d catalog rows without a model name", dropped)
    logger.info("Loaded %d Mac models from %s", len(catalog), path.name)
    return catalog


def load_assumptions(path: Optional[Path] = None) -> CostAssumptions:
    """Load TCO assumptions from JSON; defaults when the file is missing or invalid."""
    path = Path(path) if path is not None else ASSUMPTIONS_FILE
    if not path.exists():
        logger.info("Assumptions file not found (%s), using defaults", path)
        return CostAssumptions()
    try:
        data = json.loads(path.read_text(encoding="utf-8-sig"))
    except (OSError, ValueError) as exc:
        logger.warning("Could not read assumptions %s: %s; using defaults", path, exc)
        return CostAssumptions()
    if not isinstance(data, Mapping):
        logger.warning("Assumptions file %s is not a JSON object; using defaults", path)
        return CostAssumptions()
    return CostAssumptions.from_mapping(data)


def _lookup(data: Mapping[str, Any], *keys: str) -> Any:
    lowered = {str(k).lower(): v for k, v in data.items()}
    for key in keys:
        if key in lowered:
            return lowered[key]
    return None


def profile_from_dict(data: Mapping[str, Any]) -> Tuple[MachineProfile, List[str]]:
    """Split a stored record into the machine profile and the installed-app names.

    Accepts both a bare profile and the ``{"machineInfo": ..., "installedApplications": ...}``
    envelope written by the inventory collector.
    """
    machine = _lookup(data, "machineinfo", "machine_info", "machine", "profile")
    if not isinstance(machine, Mapping):
        machine = data
    apps = _lookup(data, "installedapplications", "installed_applications", "applications", "apps") or []
    names = []
    for app in apps:
        if isinstance(app, Mapping):
            app = _lookup(app, "name") or ""
        app = str(app).strip()
        if app:
            names.append(app)
    return MachineProfile.from_dict(machine), names


def profile_user_id(data: Mapping[str, Any]) -> str:
    """``UserId`` of a stored record, ``""`` when absent."""
    value = _lookup(data, "userid", "user_id")
    return "" if value is None else str(value).strip()


def read_profile_json(path: Path) -> Mapping[str, Any]:
    path = Path(path)
    data = json.loads(path.read_text(encoding="utf-8-sig"))
    if not isinstance(data, Mapping):
        raise ValueError(f"Profile file {path} must contain a JSON object")
    return data


def load_profile(path: Path) -> Tuple[MachineProfile, List[str]]:
    return profile_from_dict(read_profile_json(path))
