from ..config.scoring_constants import (
    GRID_CO2_KG_PER_KWH,
    MAC_MANUFACTURING_CO2_KG,
    PC_MANUFACTURING_CO2_KG,
    TREES_PER_KG_CO2,
)
from ..models import CarbonFootprint, CostAssumptions, CostBreakdown


def calculate_footprint(
    a: CostAssumptions,
    windows_tco: CostBreakdown,
    mac_tco: CostBreakdown,
    years: int,
) -> CarbonFootprint:
    """Manufacturing plus operational CO2 of each machine over ``years``.

    The cost breakdowns are accepted so callers can pass the pair they just
    computed; the emissions only depend on wattage and usage hours.
    """
    windows_kwh = a.windows_avg_watts / 1000.0 * a.hours_per_year
    mac_kwh = a.mac_avg_watts / 1000.0 * a.hours_per_year

    windows_co2 = PC_MANUFACTURING_CO2_KG + windows_kwh * GRID_CO2_KG_PER_KWH * years
    mac_co2 = MAC_MANUFACTURING_CO2_KG + mac_kwh * GRID_CO2_KG_PER_KWH * years
    savings = windows_co2 - mac_co2
    trees = savings * TREES_PER_KG_CO2

    if savings > 0:
        description = (
            f"Switching to Mac reduces carbon footprint by {round(savings, 1)} kg CO2, "
            f"equivalent to {round(trees, 1)} trees planted"
        )
    else:
        description = "Similar carbon footprint"

    return CarbonFootprint(
        windows_co2_kg=round(windows_co2, 2),
        mac_co2_kg=round(mac_co2, 2),
        savings_co2_kg=round(savings, 2),
        equivalent_trees=round(trees, 1),
        description=description,
    )
