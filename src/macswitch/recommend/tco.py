"""Total cost of ownership for the Windows machine and a candidate Mac.

All amounts are in AED. ``compute_windows`` / ``compute_mac`` are pure
functions of (assumptions, years, purchase price).
"""

from typing import Any, List, Optional

from ..config.rules import (
    WINDOWS_PRICE_DEFAULT,
    WINDOWS_PRICE_ESTIMATES,
    WINDOWS_PRICE_RAM_THRESHOLD_GB,
)
from ..config.scoring_constants import (
    BATTERY_POWER_SAVINGS_PCT,
    EXCELLENT_MATCH_SIMILARITY,
    GOOD_MATCH_SIMILARITY,
    SAVINGS_PCT_CAP,
    SIGNIFICANT_SAVINGS_AED,
)
from ..config.settings import CURRENCY, DEFAULT_YEARS, SUPPORTED_YEARS
from ..models import CostAssumptions, CostBreakdown, MachineProfile, SimilarityResult
from ..processing.normalize import parse_gb
from ..utils.logging import get_logger

logger = get_logger(__name__)


def _power_cost_per_year(a: CostAssumptions, watts: float) -> float:
    kwh_per_year = watts / 1000.0 * a.hours_per_year
    return kwh_per_year * a.power_cost_aed_per_kwh


def compute_windows(a: CostAssumptions, years: int, price: float) -> CostBreakdown:
    power = _power_cost_per_year(a, a.windows_avg_watts)
    recurring = (
        power
        + a.security_suite_aed_per_year
        + a.mdm_cost_aed_per_year
        + a.helpdesk_hours_per_year * a.helpdesk_cost_aed_per_hour
    )
    resale = price * a.pc_resale_value_pct
    downtime = a.windows_downtime_hours_per_year * a.hourly_productivity_value_aed * years
    upfront = price + a.windows_licensing_aed
    return CostBreakdown(
        years=years,
        upfront=upfront,
        recurring_per_year=recurring,
        resale_at_end=resale,
        total=upfront + recurring * years - resale + downtime,
        productivity_gain=0.0,
        downtime_cost=downtime,
        security_savings=0.0,
    )


def compute_mac(a: CostAssumptions, years: int, price: float) -> CostBreakdown:
    """Mac TCO.

    Helpdesk hours and the security suite are reduced by the Mac advantage
    percentages, and a battery-life saving (30 % of the yearly power cost)
    is taken off the total for fewer charge cycles. ``security_savings``
    carries the security delta plus that battery saving.
    """
    power = _power_cost_per_year(a, a.mac_avg_watts)
    helpdesk_hours = a.helpdesk_hours_per_year * (1.0 - a.mac_helpdesk_reduction_pct)
    security = a.security_suite_aed_per_year * (1.0 - a.mac_security_advantage_pct)
    recurring = (
        power
        + a.mdm_cost_aed_per_year
        + helpdesk_hours * a.helpdesk_cost_aed_per_hour
        + security
    )
    resale = price * a.mac_resale_value_pct
    downtime = a.mac_downtime_hours_per_year * a.hourly_productivity_value_aed * years
    battery_savings = power * BATTERY_POWER_SAVINGS_PCT * years
    security_savings = a.security_suite_aed_per_year * a.mac_security_advantage_pct * years
    return CostBreakdown(
        years=years,
        upfront=price,
        recurring_per_year=recurring,
        resale_at_end=resale,
        total=price + recurring * years - resale + downtime - battery_savings,
        productivity_gain=0.0,
        downtime_cost=downtime,
        security_savings=security_savings + battery_savings,
    )


# ============================================================================
# Inputs
# ============================================================================

def normalize_years(years: Any) -> int:
    """Horizon in years: 3 or 5; anything else (including 5.5) falls back to 3."""
    try:
        number = float(years)
    except (TypeError, ValueError):
        number = None
    value = int(number) if number is not None and number.is_integer() else None
    if value in SUPPORTED_YEARS:
        return value
    if years not in (None, ""):
        logger.warning("Unsupported horizon %r years, using %d", years, DEFAULT_YEARS)
    return DEFAULT_YEARS


def estimate_windows_price(profile: MachineProfile) -> float:
    """Rough purchase price of the Windows machine from its CPU family and RAM."""
    processor = (profile.processor or "").lower()
    memory_gb = parse_gb(profile.total_memory_gb, 0.0)
    for keywords, (high_ram, low_ram) in WINDOWS_PRICE_ESTIMATES:
        if any(k in processor for k in keywords):
            return float(high_ram if memory_gb >= WINDOWS_PRICE_RAM_THRESHOLD_GB else low_ram)
    return float(WINDOWS_PRICE_DEFAULT)


def resolve_windows_price(profile: MachineProfile, price: Any = 0) -> float:
    """Caller's price when positive, otherwise the estimate."""
    try:
        value = float(price or 0)
    except (TypeError, ValueError):
        value = 0.0
    if value > 0:
        return value
    estimate = estimate_windows_price(profile)
    logger.info("No Windows price given, estimated %s %.0f for %s", CURRENCY, estimate, profile.processor or "unknown CPU")
    return estimate


# ============================================================================
# Savings presentation
# ============================================================================

def savings_percentage(windows_total: float, mac_total: float, decimals: int = 2,
                       floor: bool = True) -> float:
    """Savings as a percentage of the Windows total, capped at 50.

    With ``floor`` the result is clamped to [0, 50]; without it a Mac that
    costs more gives a negative percentage.
    """
    if windows_total <= 0:
        return 0.0
    pct = min((windows_total - mac_total) / windows_total * 100.0, SAVINGS_PCT_CAP)
    if floor:
        pct = max(0.0, pct)
    return round(pct, decimals)


def mac_advantage_statements(a: CostAssumptions) -> List[str]:
    return [
        "Unified memory architecture - more efficient RAM usage than Windows",
        "Industry-leading battery life - work unplugged longer, less charging time",
        f"{a.mac_helpdesk_reduction_pct * 100:.0f}% fewer helpdesk tickets - macOS is more stable",
        "Built-in security features - no need for expensive antivirus software",
        f"Better resale value - retains {a.mac_resale_value_pct * 100:.0f}% value "
        f"vs {a.pc_resale_value_pct * 100:.0f}% for Windows PCs",
        "Silent operation - no fan noise during normal use",
    ]


def recommendation_statements(
    top: SimilarityResult,
    savings: float,
    years: int,
) -> List[str]:
    out = []
    if top.similarity >= EXCELLENT_MATCH_SIMILARITY:
        out.append("Excellent match - This Mac will meet or exceed your current Windows performance")
    elif top.similarity >= GOOD_MATCH_SIMILARITY:
        out.append("Good match - Mac's efficiency means it will perform similarly to your Windows machine")

    if savings > SIGNIFICANT_SAVINGS_AED:
        out.append(f"Significant savings: Save {CURRENCY} {savings:.0f} over {years} years with Mac")
    elif savings > 0:
        out.append(f"Cost-effective: Mac offers better value with {CURRENCY} {savings:.0f} savings")

    model = top.mac.model.lower()
    if "air" in model:
        out.append("MacBook Air provides excellent value - perfect for most professional workloads")
    elif "pro" in model:
        out.append("MacBook Pro offers professional-grade performance for demanding tasks")
    return out


def total_or_zero(breakdown: Optional[CostBreakdown]) -> float:
    return max(breakdown.total, 0.0) if breakdown is not None else 0.0
