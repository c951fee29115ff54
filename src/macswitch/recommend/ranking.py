"""Mac ranker: scores every catalog entry, orders them and picks three distinct matches."""

from typing import Iterable, List, Optional

import pandas as pd

from ..config.scoring_constants import (
    AIR_BONUS,
    AIR_BONUS_MIN_SIMILARITY,
    CAPACITY_NOTE_EQUIVALENT_BAND,
    CAPACITY_NOTE_SUFFICIENT_RATIO,
    CPU_NOTE_EQUIVALENT_DELTA,
    CPU_NOTE_SUFFICIENT_RATIO,
    MAC_RAM_EFFICIENCY_MULTIPLIER,
    MAC_STORAGE_EFFICIENCY_MULTIPLIER,
    PRICE_BONUS_MAX,
    PRICE_BONUS_MIN_SIMILARITY,
    PRICE_BONUS_REFERENCE,
    RANKING_LIMIT,
)
from ..config.settings import CURRENCY
from ..models import MacSpec, MachineProfile, PersonaWeights, SimilarityResult
from ..processing.normalize import (
    mac_vector,
    windows_ram_gb,
    windows_storage_gb,
    windows_vector,
)
from ..utils.logging import get_logger
from .similarity import score_mac

logger = get_logger(__name__)


# ============================================================================
# Delta notes
# ============================================================================

def cpu_note(mac_score: float, win_score: float, chip: str, label: str = "CPU") -> str:
    if abs(mac_score - win_score) < CPU_NOTE_EQUIVALENT_DELTA:
        return f"{label}: equivalent (Mac efficient architecture)"
    if mac_score > win_score:
        return f"{label}: ↑ Mac stronger (efficient {chip})"
    if mac_score >= win_score * CPU_NOTE_SUFFICIENT_RATIO:
        return f"{label}: ~ Mac sufficient (efficient {chip})"
    return f"{label}: ↓ Mac weaker"


def capacity_note(mac_raw: int, multiplier: float, win_gb: float, label: str) -> str:
    """RAM / storage note comparing the Mac's effective GB with the Windows GB."""
    effective = int(mac_raw * multiplier)
    win = int(round(win_gb))
    lo, hi = CAPACITY_NOTE_EQUIVALENT_BAND
    detail = f"Mac {mac_raw} GB ≈ {effective} GB effective vs Win {win} GB"
    if win * lo <= effective <= win * hi:
        return f"{label}: equivalent (Mac {mac_raw} GB ≈ Win {win} GB)"
    if effective > win:
        return f"{label}: ↑ Mac better ({detail})"
    if effective >= win * CAPACITY_NOTE_SUFFICIENT_RATIO:
        return f"{label}: ~ Mac sufficient ({detail})"
    return f"{label}: ↓ Mac lower ({detail})"


def price_note(mac: MacSpec) -> str:
    return f"{CURRENCY} {mac.msrp_aed:,}" if mac.is_priced else "—"


# ============================================================================
# Scoring
# ============================================================================

def score_catalog(
    profile: MachineProfile,
    catalog: Iterable[MacSpec],
    weights: Optional[PersonaWeights] = None,
) -> List[SimilarityResult]:
    """Similarity result for every catalog entry, in catalog order."""
    win_vec = windows_vector(profile, weights)
    win_ram = windows_ram_gb(profile)
    win_storage = windows_storage_gb(profile)

    results = []
    for mac in catalog:
        mac_vec = mac_vector(mac, weights)
        sim = score_mac(win_vec, mac, weights)
        logger.debug("%s %sGB/%sGB -> %.3f", mac.model, mac.ram_gb, mac.storage_gb, sim)
        results.append(SimilarityResult(
            mac=mac,
            similarity=sim,
            cpu_note=cpu_note(mac_vec[0], win_vec[0], mac.chip),
            ram_note=capacity_note(mac.ram_gb, MAC_RAM_EFFICIENCY_MULTIPLIER, win_ram, "RAM"),
            storage_note=capacity_note(mac.storage_gb, MAC_STORAGE_EFFICIENCY_MULTIPLIER, win_storage, "Storage"),
            price_note=price_note(mac),
        ))
    return results


def composite_score(result: SimilarityResult) -> float:
    """Similarity plus the Air preference and the low-price preference among near-equal matches."""
    score = result.similarity
    mac = result.mac
    if "air" in mac.model.lower() and result.similarity >= AIR_BONUS_MIN_SIMILARITY:
        score += AIR_BONUS
    if result.similarity >= PRICE_BONUS_MIN_SIMILARITY and mac.is_priced:
        score += (1.0 - mac.msrp_aed / PRICE_BONUS_REFERENCE) * PRICE_BONUS_MAX
    return score


# ============================================================================
# Ranking
# ============================================================================

def _select_distinct(ordered: List[SimilarityResult], limit: int) -> List[SimilarityResult]:
    picked = []
    seen = set()
    for r in ordered:
        if r.mac.signature in seen:
            continue
        picked.append(r)
        seen.add(r.mac.signature)
        if len(picked) >= limit:
            return picked

    # backfill with duplicates, keeping the overall order
    chosen = {id(r) for r in picked}
    for r in ordered:
        if len(picked) >= limit:
            break
        if id(r) not in chosen:
            picked.append(r)
            chosen.add(id(r))
    return picked


def rank_macs(
    profile: MachineProfile,
    catalog: Iterable[MacSpec],
    weights: Optional[PersonaWeights] = None,
    limit: int = RANKING_LIMIT,
) -> List[SimilarityResult]:
    """Top ``limit`` matches, distinct by (model, RAM, storage) whenever the catalog allows."""
    results = score_catalog(profile, catalog, weights)
    if not results:
        return []

    table = pd.DataFrame({
        "composite": [composite_score(r) for r in results],
        "price": [r.mac.msrp_aed if r.mac.is_priced else float("inf") for r in results],
    })
    table = table.sort_values(by=["composite", "price"], ascending=[False, True], kind="mergesort")
    ordered = [results[i] for i in table.index]

    top = _select_distinct(ordered, limit)
    logger.info(
        "Ranked %d catalog entries, top match %s (%.3f)",
        len(results), top[0].mac.model, top[0].similarity,
    )
    return top
