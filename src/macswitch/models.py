"""Plain data records exchanged between the normalizer, ranker, cost models and callers."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields, replace
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple


def _text(value: Any) -> str:
    return "" if value is None else str(value).strip()


def _int(value: Any, default: int = 0) -> int:
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return default


def _pick(data: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    """First present key, compared case-insensitively (collector output is PascalCase)."""
    lowered = {str(k).lower(): v for k, v in data.items()}
    for key in keys:
        if key.lower() in lowered:
            return lowered[key.lower()]
    return default


class Persona(str, Enum):
    DEVELOPER = "Developer"
    DESIGNER = "Designer"
    OFFICE_WORKER = "OfficeWorker"
    IT_ADMIN = "ITAdmin"
    DATA_ANALYST = "DataAnalyst"
    STUDENT = "Student"
    GENERAL = "General"

    @classmethod
    def parse(cls, value: Any) -> Optional["Persona"]:
        """Case-insensitive lookup by tag; ``None`` for blanks and unknown tags."""
        if isinstance(value, Persona):
            return value
        text = _text(value).lower()
        if not text:
            return None
        for persona in cls:
            if persona.value.lower() == text or persona.name.lower() == text:
                return persona
        return None


class CompatibilityCategory(str, Enum):
    NATIVE_MACOS = "NativeMacOS"
    WEB_SAAS = "WebSaaS"
    ROSETTA2_COMPATIBLE = "Rosetta2Compatible"
    REQUIRES_VIRTUALIZATION = "RequiresVirtualization"
    NOT_COMPATIBLE = "NotCompatible"
    ALTERNATIVE_AVAILABLE = "AlternativeAvailable"


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


class _Record:
    def to_dict(self) -> Dict[str, Any]:
        return _plain(asdict(self))


# ---------------------------------------------------------------------------
# Source machine
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DiskInfo(_Record):
    name: str = ""
    file_system: str = ""
    size_gb: str = ""
    free_gb: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DiskInfo":
        return cls(
            name=_text(_pick(data, "name")),
            file_system=_text(_pick(data, "file_system", "filesystem")),
            size_gb=_text(_pick(data, "size_gb", "sizegb", "size")),
            free_gb=_text(_pick(data, "free_gb", "freegb", "free")),
        )


@dataclass(frozen=True)
class MachineProfile(_Record):
    computer_name: str = ""
    manufacturer: str = ""
    model: str = ""
    os_name: str = ""
    os_version: str = ""
    build_number: str = ""
    processor: str = ""
    physical_cores: int = 0
    logical_cores: int = 0
    total_memory_gb: str = ""
    disks: Tuple[DiskInfo, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MachineProfile":
        disks = _pick(data, "disks", default=None) or []
        return cls(
            computer_name=_text(_pick(data, "computer_name", "computername")),
            manufacturer=_text(_pick(data, "manufacturer")),
            model=_text(_pick(data, "model")),
            os_name=_text(_pick(data, "os_name", "osname")),
            os_version=_text(_pick(data, "os_version", "osversion")),
            build_number=_text(_pick(data, "build_number", "buildnumber")),
            processor=_text(_pick(data, "processor")),
            physical_cores=_int(_pick(data, "physical_cores", "physicalcores")),
            logical_cores=_int(_pick(data, "logical_cores", "logicalcores")),
            total_memory_gb=_text(_pick(data, "total_memory_gb", "totalmemorygb")),
            disks=tuple(
                d if isinstance(d, DiskInfo) else DiskInfo.from_dict(d)
                for d in disks
            ),
        )


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class MacSpec(_Record):
    model: str
    chip: str = ""
    cores_cpu: int = 0
    cores_gpu: int = 0
    ram_gb: int = 0
    storage_gb: int = 0
    display_inches: float = 0.0
    display_nits: int = 0
    refresh_hz: int = 0
    weight_kg: float = 0.0
    ports: str = ""
    msrp_aed: int = 0
    launch_date: Optional[date] = None
    battery_wh: float = 0.0
    wifi: str = ""

    @property
    def signature(self) -> Tuple[str, int, int]:
        return (self.model, self.ram_gb, self.storage_gb)

    @property
    def is_priced(self) -> bool:
        return self.msrp_aed > 0


# ---------------------------------------------------------------------------
# Personas
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PersonaWeights(_Record):
    cpu: float = 1.0
    ram: float = 1.0
    storage: float = 1.0
    gpu: float = 1.0
    battery: float = 1.0
    portability: float = 1.0
    description: str = ""


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SimilarityResult(_Record):
    mac: MacSpec
    similarity: float
    cpu_note: str = ""
    ram_note: str = ""
    storage_note: str = ""
    price_note: str = ""


# ---------------------------------------------------------------------------
# Cost model
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CostAssumptions(_Record):
    region: str = "UAE"
    power_cost_aed_per_kwh: float = 0.30
    work_hours_per_day: float = 8
    workdays_per_year: float = 240
    windows_avg_watts: float = 35
    mac_avg_watts: float = 15
    windows_licensing_aed: float = 0
    security_suite_aed_per_year: float = 250
    mdm_cost_aed_per_year: float = 0
    helpdesk_hours_per_year: float = 3
    helpdesk_cost_aed_per_hour: float = 120
    mac_resale_value_pct: float = 0.50
    pc_resale_value_pct: float = 0.15
    mac_productivity_gain_pct: float = 0.06
    mac_helpdesk_reduction_pct: float = 0.40
    windows_downtime_hours_per_year: float = 8
    mac_downtime_hours_per_year: float = 2
    hourly_productivity_value_aed: float = 50
    mac_security_advantage_pct: float = 0.30
    mac_minutes_saved_per_day: float = 10.0

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "CostAssumptions":
        """Build from a flat key/value record.

        Keys match case-insensitively; unknown keys are ignored and values
        that do not parse keep their default.
        """
        defaults = cls()
        lowered = {str(k).strip().lower(): v for k, v in data.items()}
        values: Dict[str, Any] = {}
        for f in fields(cls):
            if f.name not in lowered:
                continue
            raw = lowered[f.name]
            if f.name == "region":
                values[f.name] = _text(raw) or defaults.region
                continue
            try:
                values[f.name] = float(raw)
            except (TypeError, ValueError):
                values[f.name] = getattr(defaults, f.name)
        return cls(**values)

    def replace(self, **changes: Any) -> "CostAssumptions":
        return replace(self, **changes)

    @property
    def hours_per_year(self) -> float:
        return self.work_hours_per_day * self.workdays_per_year


@dataclass(frozen=True)
class CostBreakdown(_Record):
    years: int
    upfront: float
    recurring_per_year: float
    resale_at_end: float
    total: float
    productivity_gain: float = 0.0
    downtime_cost: float = 0.0
    security_savings: float = 0.0


# ---------------------------------------------------------------------------
# Compatibility / carbon / radar
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CompatibilityRecord(_Record):
    app_name: str
    category: CompatibilityCategory
    score: float
    note: str = ""


@dataclass(frozen=True)
class PortCompatibility(_Record):
    needs_hub: bool = False
    missing_ports: Tuple[str, ...] = ()
    available_ports: Tuple[str, ...] = ()
    hub_recommendation: str = ""
    score: float = 1.0


@dataclass(frozen=True)
class CarbonFootprint(_Record):
    windows_co2_kg: float = 0.0
    mac_co2_kg: float = 0.0
    savings_co2_kg: float = 0.0
    equivalent_trees: float = 0.0
    description: str = ""


@dataclass(frozen=True)
class RadarData(_Record):
    windows: Dict[str, float] = field(default_factory=dict)
    mac: Dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class MacAdvantage(_Record):
    title: str
    description: str
    windows_limitation: str


# ---------------------------------------------------------------------------
# Composer outputs
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RecommendationTier(_Record):
    tier: str
    mac: MacSpec
    similarity: float
    total_cost: float
    savings: float
    savings_pct: float
    rationale: str = ""
    advantages: Tuple[str, ...] = ()


@dataclass(frozen=True)
class TcoComparison(_Record):
    suggested_model: str
    chip: str
    ram_gb: int
    storage_gb: int
    price_aed: int
    similarity: float
    windows: CostBreakdown
    mac: CostBreakdown
    savings_aed: float
    savings_pct: float
    mac_advantages: Tuple[str, ...] = ()
    recommendations: Tuple[str, ...] = ()
    years: int = 3


@dataclass(frozen=True)
class Recommendation(_Record):
    recommended_mac: MacSpec
    cost_optimized_mac: MacSpec
    performance_optimized_mac: MacSpec
    similarity: float
    explanation: str
    persona: Persona
    app_compatibilities: Tuple[CompatibilityRecord, ...]
    port_compatibility: PortCompatibility
    carbon_footprint: CarbonFootprint
    radar: RadarData
    workflow_matches: Tuple[str, ...]
    mac_advantages: Tuple[MacAdvantage, ...]
    windows_tco: CostBreakdown
    mac_tco: CostBreakdown
    tiers: Tuple[RecommendationTier, ...] = ()

    @property
    def matches(self) -> List[MacSpec]:
        return [t.mac for t in self.tiers]
