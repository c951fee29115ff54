import re
from typing import Optional

import numpy as np

from ..config.scoring_constants import (
    DEFAULT_WINDOWS_RAM_GB,
    DEFAULT_WINDOWS_STORAGE_GB,
    MAC_CORE_BONUSES,
    MAC_CPU_DEFAULT_TIER,
    MAC_CPU_EFFICIENCY_MULTIPLIER,
    MAC_CPU_TIERS,
    MAC_RAM_EFFICIENCY_MULTIPLIER,
    MAC_STORAGE_EFFICIENCY_MULTIPLIER,
    RAM_SCALE_MIN_GB,
    RAM_SCALE_SPAN_GB,
    STORAGE_SCALE_MIN_GB,
    STORAGE_SCALE_SPAN_GB,
    WINDOWS_CORE_BONUSES,
    WINDOWS_CPU_DEFAULT_TIER,
    WINDOWS_CPU_TIERS,
    WINDOWS_RECENT_GEN_BONUS,
    WINDOWS_RECENT_GEN_PATTERN,
)
from ..models import MacSpec, MachineProfile, PersonaWeights

_RECENT_GEN_RE = re.compile(WINDOWS_RECENT_GEN_PATTERN)


def clamp(value: float, lo: float = 0.0, hi: float = 1.0) -> float:
    return max(lo, min(hi, value))


def _core_bonus(cores: int, brackets) -> float:
    for min_cores, bonus in brackets:
        if cores >= min_cores:
            return bonus
    return 0.0


# ============================================================================
# CPU scores
# ============================================================================

def cpu_score_windows(processor: Optional[str], physical_cores: int = 0) -> float:
    """
    Windows-family CPU score in [0, 1].

    Base tier from the family keyword ("i7", "ryzen 7", ...), +0.05 when a
    12th-14th generation model number stands alone in the name, plus a
    core-count bracket bonus.
    """
    name = (processor or "").lower()
    score = WINDOWS_CPU_DEFAULT_TIER
    for keywords, tier in WINDOWS_CPU_TIERS:
        if any(k in name for k in keywords):
            score = tier
            break

    if _RECENT_GEN_RE.search(name):
        score += WINDOWS_RECENT_GEN_BONUS

    score += _core_bonus(physical_cores or 0, WINDOWS_CORE_BONUSES)
    return clamp(score)


def cpu_score_mac(chip: Optional[str], cpu_cores: int = 0) -> float:
    """Apple-family CPU score in [0, 1], scaled by the Apple-silicon efficiency multiplier."""
    name = (chip or "").lower()
    score = MAC_CPU_DEFAULT_TIER
    for keyword, tier in MAC_CPU_TIERS:
        if keyword in name:
            score = tier
            break

    score += _core_bonus(cpu_cores or 0, MAC_CORE_BONUSES)
    return clamp(score * MAC_CPU_EFFICIENCY_MULTIPLIER)


# ============================================================================
# RAM / storage scales
# ============================================================================

def norm_ram(gb: float) -> float:
    return clamp((gb - RAM_SCALE_MIN_GB) / RAM_SCALE_SPAN_GB)


def norm_storage(gb: float) -> float:
    return clamp((gb - STORAGE_SCALE_MIN_GB) / STORAGE_SCALE_SPAN_GB)


def norm_ram_mac(gb: float) -> float:
    return norm_ram(gb * MAC_RAM_EFFICIENCY_MULTIPLIER)


def norm_storage_mac(gb: float) -> float:
    return norm_storage(gb * MAC_STORAGE_EFFICIENCY_MULTIPLIER)


# ============================================================================
# Profile parsing
# ============================================================================

def parse_gb(text: Optional[str], default: Optional[float] = None) -> Optional[float]:
    """Leading number of a value+unit string such as ``"16 GB"``; ``default`` when it does not parse."""
    if text is None:
        return default
    parts = str(text).split()
    if not parts:
        return default
    try:
        value = float(parts[0])
    except ValueError:
        return default
    return value if np.isfinite(value) else default


def windows_ram_gb(profile: MachineProfile) -> int:
    """Installed RAM rounded to whole GB, 8 when the collector value does not parse."""
    return int(round(parse_gb(profile.total_memory_gb, DEFAULT_WINDOWS_RAM_GB)))


def windows_storage_gb(profile: MachineProfile, default: int = DEFAULT_WINDOWS_STORAGE_GB) -> int:
    """Largest disk in whole GB, ``default`` when no disk parses to a positive size."""
    sizes = [parse_gb(d.size_gb) for d in profile.disks]
    sizes = [int(round(s)) for s in sizes if s is not None]
    sizes = [s for s in sizes if s > 0]
    return max(sizes) if sizes else default


# ============================================================================
# Weighted feature vectors (cpu, ram, storage)
# ============================================================================

def _weights(weights: Optional[PersonaWeights]) -> np.ndarray:
    if weights is None:
        return np.ones(3)
    return np.array([weights.cpu, weights.ram, weights.storage], dtype=float)


def windows_vector(profile: MachineProfile, weights: Optional[PersonaWeights] = None) -> np.ndarray:
    raw = np.array([
        cpu_score_windows(profile.processor, profile.physical_cores),
        norm_ram(windows_ram_gb(profile)),
        norm_storage(windows_storage_gb(profile)),
    ], dtype=float)
    return raw * _weights(weights)


def mac_vector(mac: MacSpec, weights: Optional[PersonaWeights] = None) -> np.ndarray:
    raw = np.array([
        cpu_score_mac(mac.chip, mac.cores_cpu),
        norm_ram_mac(mac.ram_gb),
        norm_storage_mac(mac.storage_gb),
    ], dtype=float)
    return raw * _weights(weights)
