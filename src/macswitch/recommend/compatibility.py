"""
Installed-application and port compatibility of a Windows setup on macOS.
"""

from typing import Iterable, List, Optional, Sequence

from ..config.compat_rules import (
    ALTERNATIVES,
    CATEGORY_NOTES,
    CATEGORY_SCORES,
    COMPAT_RULES,
    DEFAULT_ALTERNATIVE,
    DEFAULT_CATEGORY,
    DEFAULT_NOTE,
    DEFAULT_SCORE,
    HUB_RECOMMENDATION,
    NO_HUB_NEEDED,
    NOISE_PREDICATES,
    PORT_TOKENS,
    REQUIRED_PORTS,
)
from ..config.scoring_constants import PORT_MISSING_PENALTY
from ..models import CompatibilityCategory, CompatibilityRecord, MacSpec, PortCompatibility
from ..utils.logging import get_logger

logger = get_logger(__name__)


# ============================================================================
# Applications
# ============================================================================

def is_noise(name: str) -> bool:
    """True for frameworks, SDKs and system components that are not user-facing apps."""
    lowered = name.lower()
    return any(pred(lowered) for pred in NOISE_PREDICATES)


def _alternative_for(name: str) -> str:
    lowered = name.lower()
    for keyword, alternative in ALTERNATIVES:
        if keyword in lowered:
            return alternative
    return DEFAULT_ALTERNATIVE


def _record(name: str, category: str, note: Optional[str] = None, score: Optional[float] = None) -> CompatibilityRecord:
    if note is None:
        note = CATEGORY_NOTES[category].format(alternative=_alternative_for(name))
    return CompatibilityRecord(
        app_name=name,
        category=CompatibilityCategory(category),
        score=CATEGORY_SCORES[category] if score is None else score,
        note=note,
    )


def classify_app(name: str) -> Optional[CompatibilityRecord]:
    """Compatibility record for one app name, ``None`` when the entry is noise."""
    lowered = name.lower()
    if is_noise(lowered):
        return None

    for predicate, category, note in COMPAT_RULES:
        if predicate(lowered):
            return _record(name, category, note)

    return _record(name, DEFAULT_CATEGORY, DEFAULT_NOTE, DEFAULT_SCORE)


def classify_apps(apps: Optional[Iterable[str]]) -> List[CompatibilityRecord]:
    records = []
    skipped = 0
    for app in apps or []:
        name = str(app).strip()
        if not name:
            continue
        record = classify_app(name)
        if record is None:
            skipped += 1
            continue
        records.append(record)
    if skipped:
        logger.debug("Skipped %d framework/system entries", skipped)
    return records


def overall_compatibility(records: Sequence[CompatibilityRecord]) -> float:
    if not records:
        return 1.0
    return sum(r.score for r in records) / len(records)


# ============================================================================
# Ports
# ============================================================================

def check_ports(mac: MacSpec) -> PortCompatibility:
    ports = (mac.ports or "").upper()

    available = [label for label, tokens in PORT_TOKENS if any(t in ports for t in tokens)]
    missing = [label for label, tokens in REQUIRED_PORTS if not any(t in ports for t in tokens)]

    needs_hub = bool(missing)
    return PortCompatibility(
        needs_hub=needs_hub,
        missing_ports=tuple(missing),
        available_ports=tuple(available),
        hub_recommendation=(
            HUB_RECOMMENDATION.format(ports=", ".join(missing)) if needs_hub else NO_HUB_NEEDED
        ),
        score=max(0.0, 1.0 - PORT_MISSING_PENALTY * len(missing)),
    )
