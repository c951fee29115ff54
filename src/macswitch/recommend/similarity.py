"""
Cosine similarity between the Windows reference vector and a Mac vector,
with efficiency and persona bonuses on top.
"""

from typing import Optional

import numpy as np

from ..config.scoring_constants import (
    CPU_EFFICIENCY_BONUS,
    CPU_EFFICIENCY_RATIO,
    PERSONA_BATTERY_MIN_WH,
    PERSONA_FEATURE_BONUS,
    PERSONA_GPU_MIN_CORES,
    PERSONA_MAX_WEIGHT_KG,
    RAM_EFFICIENCY_BONUS,
    RAM_EFFICIENCY_RATIO,
    SIMILARITY_DECIMALS,
    STORAGE_EFFICIENCY_BONUS,
    STORAGE_EFFICIENCY_RATIO,
)
from ..models import MacSpec, PersonaWeights
from ..processing.normalize import clamp, mac_vector


def cosine_similarity(a, b) -> float:
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    na = np.linalg.norm(a)
    nb = np.linalg.norm(b)
    if na == 0 or nb == 0:
        return 0.0
    return float(np.dot(a, b) / (na * nb))


def efficiency_adjusted_similarity(win_vec, mac_vec) -> float:
    """Cosine plus a fixed bonus per axis where the Mac reaches a share of the Windows value."""
    win_vec = np.asarray(win_vec, dtype=float)
    mac_vec = np.asarray(mac_vec, dtype=float)
    sim = cosine_similarity(win_vec, mac_vec)

    if mac_vec[0] >= win_vec[0] * CPU_EFFICIENCY_RATIO:
        sim += CPU_EFFICIENCY_BONUS
    if mac_vec[1] >= win_vec[1] * RAM_EFFICIENCY_RATIO:
        sim += RAM_EFFICIENCY_BONUS
    if mac_vec[2] >= win_vec[2] * STORAGE_EFFICIENCY_RATIO:
        sim += STORAGE_EFFICIENCY_BONUS
    return clamp(sim)


def persona_bonus(mac: MacSpec, weights: Optional[PersonaWeights]) -> float:
    if weights is None:
        return 0.0
    bonus = 0.0
    if weights.gpu > 1.0 and mac.cores_gpu >= PERSONA_GPU_MIN_CORES:
        bonus += PERSONA_FEATURE_BONUS
    if weights.battery > 1.0 and mac.battery_wh >= PERSONA_BATTERY_MIN_WH:
        bonus += PERSONA_FEATURE_BONUS
    if weights.portability > 1.0 and mac.weight_kg <= PERSONA_MAX_WEIGHT_KG:
        bonus += PERSONA_FEATURE_BONUS
    return bonus


def score_mac(win_vec, mac: MacSpec, weights: Optional[PersonaWeights] = None) -> float:
    sim = efficiency_adjusted_similarity(win_vec, mac_vector(mac, weights))
    sim = clamp(sim + persona_bonus(mac, weights))
    return round(sim, SIMILARITY_DECIMALS)
