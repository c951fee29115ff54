"""Persona weight lookup and persona detection from installed applications."""

from typing import Any, Iterable, Optional

from ..config.rules import PERSONA_DETECTION_ORDER, PERSONA_WEIGHTS
from ..models import Persona, PersonaWeights
from ..utils.logging import get_logger

logger = get_logger(__name__)


def get_persona_weights(persona: Optional[Persona]) -> PersonaWeights:
    persona = Persona.parse(persona) or Persona.GENERAL
    cpu, ram, storage, gpu, battery, portability, description = PERSONA_WEIGHTS[persona.value]
    return PersonaWeights(
        cpu=cpu,
        ram=ram,
        storage=storage,
        gpu=gpu,
        battery=battery,
        portability=portability,
        description=description,
    )


def detect_persona(apps: Optional[Iterable[str]]) -> Persona:
    """First persona (in precedence order) with a keyword inside any app name."""
    names = [str(a).lower() for a in (apps or [])]
    for tag, keywords in PERSONA_DETECTION_ORDER:
        if any(k in name for name in names for k in keywords):
            return Persona(tag)
    return Persona.GENERAL


def resolve_persona(tag: Any = None, apps: Optional[Iterable[str]] = None) -> Persona:
    """Explicit persona when valid, else detection from ``apps``, else General."""
    persona = Persona.parse(tag)
    if persona is not None:
        return persona
    if tag not in (None, ""):
        logger.warning("Unknown persona %r, ignoring", tag)

    apps = list(apps or [])
    if apps:
        detected = detect_persona(apps)
        logger.info("Detected persona %s from %d applications", detected.value, len(apps))
        return detected
    return Persona.GENERAL
