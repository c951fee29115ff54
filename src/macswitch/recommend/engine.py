"""Recommendation composer: orchestrates ranking, cost, carbon and compatibility.

Entry points:
  - get_recommendation: full persona-tailored recommendation for the top match
  - get_recommendation_for_user: the same for a profile held in a ProfileStore
  - get_tiers: Good / Better / Best presentation of the top three matches
  - compare_tco: flat Windows vs. Mac cost comparison for the top match
"""

import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from ..config.rules import (
    EXPLANATION_FULL_COMPAT_TEXT,
    EXPLANATION_MOSTLY_COMPAT_TEXT,
    EXPLANATION_TEMPLATE,
    NATIVE_APPS_WORKFLOW_MATCH,
    PERSONA_ADVANTAGES,
    TIER_ADVANTAGES,
    TIER_LABELS,
    TIER_RATIONALES,
    WORKFLOW_MATCHES,
)
from ..config.scoring_constants import (
    EXPLANATION_FULL_COMPAT,
    EXPLANATION_MOSTLY_COMPAT,
    MAC_CPU_EFFICIENCY_MULTIPLIER,
    MAC_RAM_EFFICIENCY_MULTIPLIER,
    RADAR_DEFAULT_WINDOWS_STORAGE_GB,
    RADAR_MAC_POWER,
    RADAR_MAC_RESALE,
    RADAR_RAM_BANDS,
    RADAR_RAM_FLOOR,
    RADAR_RAM_LOW_BONUS,
    RADAR_STORAGE_BASELINE_CAP,
    RADAR_STORAGE_BASELINE_MIN,
    RADAR_STORAGE_FLOOR,
    RADAR_STORAGE_MULTIPLIER,
    RADAR_SUPPORT_BOUNDS,
    RADAR_SUPPORT_NEUTRAL,
    RADAR_WINDOWS_CPU,
    RADAR_WINDOWS_POWER,
    RADAR_WINDOWS_RAM,
    RADAR_WINDOWS_RESALE,
    RADAR_WINDOWS_STORAGE_BANDS,
    RADAR_WINDOWS_STORAGE_DEFAULT,
    RADAR_WINDOWS_SUPPORT,
)
from ..errors import NoMatchesError, ProfileNotFoundError
from ..models import (
    CompatibilityCategory,
    CompatibilityRecord,
    CostAssumptions,
    CostBreakdown,
    MacAdvantage,
    MacSpec,
    MachineProfile,
    Persona,
    RadarData,
    Recommendation,
    RecommendationTier,
    SimilarityResult,
    TcoComparison,
)
from ..processing.normalize import windows_ram_gb, windows_storage_gb
from ..processing.read import load_assumptions, load_catalog
from ..storage.profiles import ProfileStore, StoredProfile
from ..utils.logging import get_logger
from .carbon import calculate_footprint
from .compatibility import check_ports, classify_apps, overall_compatibility
from .personas import get_persona_weights, resolve_persona
from .ranking import rank_macs
from .tco import (
    compute_mac,
    compute_windows,
    mac_advantage_statements,
    normalize_years,
    recommendation_statements,
    resolve_windows_price,
    savings_percentage,
    total_or_zero,
)

logger = get_logger(__name__)

RADAR_METRICS = (
    "CPU Performance",
    "RAM Efficiency",
    "Storage",
    "Power Efficiency",
    "Support Cost",
    "Resale Value",
)


# ============================================================================
# Reference data (catalog + assumptions), built once per process
# ============================================================================

@dataclass(frozen=True)
class ReferenceData:
    catalog: Tuple[MacSpec, ...] = ()
    assumptions: CostAssumptions = field(default_factory=CostAssumptions)

    @classmethod
    def load(cls, catalog_path: Optional[Path] = None, assumptions_path: Optional[Path] = None) -> "ReferenceData":
        return cls(
            catalog=tuple(load_catalog(catalog_path)),
            assumptions=load_assumptions(assumptions_path),
        )


_REFERENCE: Optional[ReferenceData] = None
_REFERENCE_LOCK = threading.Lock()


def default_reference_data() -> ReferenceData:
    global _REFERENCE
    if _REFERENCE is None:
        with _REFERENCE_LOCK:
            if _REFERENCE is None:
                _REFERENCE = ReferenceData.load()
    return _REFERENCE


def reset_reference_data() -> None:
    global _REFERENCE
    with _REFERENCE_LOCK:
        _REFERENCE = None


def _inputs(catalog, assumptions) -> Tuple[Sequence[MacSpec], CostAssumptions]:
    if catalog is None or assumptions is None:
        ref = default_reference_data()
        catalog = ref.catalog if catalog is None else catalog
        assumptions = ref.assumptions if assumptions is None else assumptions
    return list(catalog), assumptions


# ============================================================================
# Narrative pieces
# ============================================================================

def build_explanation(
    profile: MachineProfile,
    top: SimilarityResult,
    persona: Persona,
    compat: Sequence[CompatibilityRecord],
) -> str:
    text = EXPLANATION_TEMPLATE.format(
        processor=profile.processor,
        win_ram=int(round(windows_ram_gb(profile))),
        model=top.mac.model,
        mac_ram=top.mac.ram_gb,
        persona=persona.value,
    )
    if compat:
        score = overall_compatibility(compat)
        if score >= EXPLANATION_FULL_COMPAT:
            text += EXPLANATION_FULL_COMPAT_TEXT
        elif score >= EXPLANATION_MOSTLY_COMPAT:
            text += EXPLANATION_MOSTLY_COMPAT_TEXT
    return text


def _band(value: float, bands, default: float) -> float:
    for threshold, score in bands:
        if value >= threshold:
            return score
    return default


def build_radar(
    profile: MachineProfile,
    mac: MacSpec,
    windows_tco: CostBreakdown,
    mac_tco: CostBreakdown,
) -> RadarData:
    """Radar-chart values in [0, 1]; the Windows side is a fixed reference baseline."""
    win_ram = int(round(windows_ram_gb(profile)))
    win_storage = int(round(windows_storage_gb(profile, default=RADAR_DEFAULT_WINDOWS_STORAGE_GB)))

    cpu = min(mac.cores_cpu * MAC_CPU_EFFICIENCY_MULTIPLIER / max(profile.physical_cores, 1) * 100, 100)

    ram_ratio = mac.ram_gb * MAC_RAM_EFFICIENCY_MULTIPLIER / max(win_ram, 1)
    ram = _band(ram_ratio, RADAR_RAM_BANDS, max(ram_ratio * 100 + RADAR_RAM_LOW_BONUS, RADAR_RAM_FLOOR))

    if win_storage > RADAR_STORAGE_BASELINE_CAP:
        baseline = RADAR_STORAGE_BASELINE_CAP
    else:
        baseline = max(win_storage, RADAR_STORAGE_BASELINE_MIN)
    storage = min(mac.storage_gb * RADAR_STORAGE_MULTIPLIER / baseline * 100, 100)
    storage = max(storage, RADAR_STORAGE_FLOOR)

    support = RADAR_SUPPORT_NEUTRAL
    if windows_tco.recurring_per_year > 0 and mac_tco.recurring_per_year > 0:
        ratio = mac_tco.recurring_per_year / windows_tco.recurring_per_year
        lo, hi = RADAR_SUPPORT_BOUNDS
        support = min(max(100.0 - ratio * 50.0, lo), hi)

    mac_values = [cpu, ram, storage, RADAR_MAC_POWER, support, RADAR_MAC_RESALE]
    win_values = [
        RADAR_WINDOWS_CPU,
        RADAR_WINDOWS_RAM,
        _band(win_storage, RADAR_WINDOWS_STORAGE_BANDS, RADAR_WINDOWS_STORAGE_DEFAULT),
        RADAR_WINDOWS_POWER,
        RADAR_WINDOWS_SUPPORT,
        RADAR_WINDOWS_RESALE,
    ]
    return RadarData(
        windows={k: v / 100.0 for k, v in zip(RADAR_METRICS, win_values)},
        mac={k: max(0.0, min(v, 100.0)) / 100.0 for k, v in zip(RADAR_METRICS, mac_values)},
    )


def workflow_matches(persona: Persona, compat: Sequence[CompatibilityRecord]) -> List[str]:
    matches = list(WORKFLOW_MATCHES.get(persona.value, []))
    if any(r.category is CompatibilityCategory.NATIVE_MACOS for r in compat):
        matches.append(NATIVE_APPS_WORKFLOW_MATCH)
    return matches


def mac_advantages(persona: Persona) -> List[MacAdvantage]:
    rows = PERSONA_ADVANTAGES.get(persona.value) or PERSONA_ADVANTAGES[Persona.GENERAL.value]
    return [MacAdvantage(title, description, limitation) for title, description, limitation in rows]


# ============================================================================
# Tiers
# ============================================================================

def build_tiers(
    matches: Sequence[SimilarityResult],
    assumptions: CostAssumptions,
    years: int,
    windows_tco: CostBreakdown,
) -> List[RecommendationTier]:
    tiers = []
    for label, match in zip(TIER_LABELS, matches):
        mac_tco = compute_mac(assumptions, years, match.mac.msrp_aed)
        savings = windows_tco.total - mac_tco.total
        tiers.append(RecommendationTier(
            tier=label,
            mac=match.mac,
            similarity=match.similarity,
            total_cost=round(total_or_zero(mac_tco), 2),
            savings=round(max(savings, 0.0), 2),
            savings_pct=savings_percentage(windows_tco.total, mac_tco.total, decimals=1),
            rationale=TIER_RATIONALES[label],
            advantages=tuple(TIER_ADVANTAGES[label]),
        ))
    return tiers


def _tier_mac(tiers: Sequence[RecommendationTier], label: str, fallback: MacSpec) -> MacSpec:
    for t in tiers:
        if t.tier == label:
            return t.mac
    return fallback


# ============================================================================
# Entry points
# ============================================================================

def get_recommendation(
    profile: MachineProfile,
    catalog: Optional[Iterable[MacSpec]] = None,
    persona: Any = None,
    apps: Optional[Iterable[str]] = None,
    years: Any = 3,
    windows_price: Any = 0,
    assumptions: Optional[CostAssumptions] = None,
) -> Recommendation:
    """Compose the full recommendation for ``profile``.

    ``persona`` may be a :class:`Persona`, a tag string or ``None`` (detected
    from ``apps``, falling back to General). Raises :class:`NoMatchesError`
    when the catalog yields no match.
    """
    catalog, assumptions = _inputs(catalog, assumptions)
    apps = list(apps or [])
    years = normalize_years(years)

    persona = resolve_persona(persona, apps)
    weights = get_persona_weights(persona)

    matches = rank_macs(profile, catalog, weights)
    if not matches:
        raise NoMatchesError()
    top = matches[0]

    windows_price = resolve_windows_price(profile, windows_price)
    windows_tco = compute_windows(assumptions, years, windows_price)
    mac_tco = compute_mac(assumptions, years, top.mac.msrp_aed)

    tiers = build_tiers(matches, assumptions, years, windows_tco)
    compat = classify_apps(apps)

    logger.info(
        "Recommending %s for %s (%s persona, similarity %.3f)",
        top.mac.model, profile.processor or "unknown CPU", persona.value, top.similarity,
    )
    return Recommendation(
        recommended_mac=top.mac,
        cost_optimized_mac=_tier_mac(tiers, "Good", top.mac),
        performance_optimized_mac=_tier_mac(tiers, "Best", top.mac),
        similarity=top.similarity,
        explanation=build_explanation(profile, top, persona, compat),
        persona=persona,
        app_compatibilities=tuple(compat),
        port_compatibility=check_ports(top.mac),
        carbon_footprint=calculate_footprint(assumptions, windows_tco, mac_tco, years),
        radar=build_radar(profile, top.mac, windows_tco, mac_tco),
        workflow_matches=tuple(workflow_matches(persona, compat)),
        mac_advantages=tuple(mac_advantages(persona)),
        windows_tco=windows_tco,
        mac_tco=mac_tco,
        tiers=tuple(tiers),
    )


def stored_profile(store: ProfileStore, user_id: str) -> StoredProfile:
    record = store.get(user_id)
    if record is None:
        raise ProfileNotFoundError(user_id)
    return record


def get_recommendation_for_user(
    store: ProfileStore,
    user_id: str,
    apps: Optional[Iterable[str]] = None,
    **options: Any,
) -> Recommendation:
    """:func:`get_recommendation` for the profile stored under ``user_id``.

    The stored application list is used unless ``apps`` is given. Raises
    :class:`ProfileNotFoundError` for an unknown user.
    """
    record = stored_profile(store, user_id)
    if apps is None:
        apps = record.applications
    return get_recommendation(record.machine, apps=apps, **options)


def _ranked(profile, catalog, persona) -> List[SimilarityResult]:
    tag = Persona.parse(persona)
    if tag is None and persona not in (None, ""):
        logger.warning("Unknown persona %r, ranking without persona weights", persona)
    weights = get_persona_weights(tag) if tag is not None else None
    matches = rank_macs(profile, catalog, weights)
    if not matches:
        raise NoMatchesError()
    return matches


def get_tiers(
    profile: MachineProfile,
    catalog: Optional[Iterable[MacSpec]] = None,
    persona: Any = None,
    years: Any = 3,
    windows_price: Any = 0,
    assumptions: Optional[CostAssumptions] = None,
) -> List[RecommendationTier]:
    """Good / Better / Best tiers with each Mac's TCO and its savings over the Windows machine."""
    catalog, assumptions = _inputs(catalog, assumptions)
    years = normalize_years(years)
    matches = _ranked(profile, catalog, persona)

    windows_price = resolve_windows_price(profile, windows_price)
    windows_tco = compute_windows(assumptions, years, windows_price)
    return build_tiers(matches, assumptions, years, windows_tco)


def compare_tco(
    profile: MachineProfile,
    catalog: Optional[Iterable[MacSpec]] = None,
    persona: Any = None,
    years: Any = 3,
    windows_price: Any = 0,
    assumptions: Optional[CostAssumptions] = None,
) -> TcoComparison:
    catalog, assumptions = _inputs(catalog, assumptions)
    years = normalize_years(years)
    top = _ranked(profile, catalog, persona)[0]

    windows_price = resolve_windows_price(profile, windows_price)
    windows_tco = compute_windows(assumptions, years, windows_price)
    mac_tco = compute_mac(assumptions, years, top.mac.msrp_aed)
    savings = windows_tco.total - mac_tco.total

    return TcoComparison(
        suggested_model=top.mac.model,
        chip=top.mac.chip,
        ram_gb=top.mac.ram_gb,
        storage_gb=top.mac.storage_gb,
        price_aed=top.mac.msrp_aed,
        similarity=top.similarity,
        windows=windows_tco,
        mac=mac_tco,
        savings_aed=round(savings, 2),
        savings_pct=savings_percentage(windows_tco.total, mac_tco.total, floor=False),
        mac_advantages=tuple(mac_advantage_statements(assumptions)),
        recommendations=tuple(recommendation_statements(top, savings, years)),
        years=years,
    )
