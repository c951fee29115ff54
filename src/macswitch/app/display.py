from typing import Sequence

from ..config.settings import CURRENCY
from ..models import Recommendation, RecommendationTier, TcoComparison
from ..utils.console import rule, safe_print


def _money(value: float) -> str:
    return f"{CURRENCY} {value:,.0f}"


def display_recommendation(rec: Recommendation, show_breakdown: bool = False) -> None:
    mac = rec.recommended_mac
    rule()
    safe_print(f"RECOMMENDED MAC ({rec.persona.value})".center(60))
    rule()
    safe_print(f"\n{mac.model} - {mac.chip}, {mac.ram_gb} GB / {mac.storage_gb} GB")
    safe_print(f"Similarity: {rec.similarity:.3f}")
    if mac.is_priced:
        safe_print(f"Price: {_money(mac.msrp_aed)}")
    safe_print(f"Cost-optimized: {rec.cost_optimized_mac.model}")
    safe_print(f"Performance-optimized: {rec.performance_optimized_mac.model}")

    safe_print("\n" + rec.explanation)

    rule("-")
    safe_print(f"TCO over {rec.windows_tco.years} years")
    safe_print(f"  Windows: {_money(rec.windows_tco.total)}")
    safe_print(f"  Mac:     {_money(rec.mac_tco.total)}")
    if show_breakdown:
        for label, tco in (("Windows", rec.windows_tco), ("Mac", rec.mac_tco)):
            safe_print(
                f"  {label}: upfront {_money(tco.upfront)}, recurring {_money(tco.recurring_per_year)}/yr, "
                f"resale {_money(tco.resale_at_end)}, downtime {_money(tco.downtime_cost)}"
            )
    safe_print(f"  {rec.carbon_footprint.description}")

    ports = rec.port_compatibility
    safe_print(f"\nPorts: {ports.hub_recommendation}")

    if rec.app_compatibilities:
        rule("-")
        safe_print("Applications")
        for app in rec.app_compatibilities:
            safe_print(f"  {app.app_name}: {app.category.value} ({app.score:.2f}) - {app.note}")

    if rec.workflow_matches:
        rule("-")
        for line in rec.workflow_matches:
            safe_print(f"  * {line}")

    rule("-")
    for adv in rec.mac_advantages:
        safe_print(f"  {adv.title}: {adv.description}")
        if show_breakdown:
            safe_print(f"      vs Windows: {adv.windows_limitation}")


def display_tiers(tiers: Sequence[RecommendationTier]) -> None:
    rule()
    for t in tiers:
        safe_print(f"{t.tier:<7} {t.mac.model} ({t.mac.ram_gb} GB / {t.mac.storage_gb} GB)")
        safe_print(f"        similarity {t.similarity:.3f}, TCO {_money(t.total_cost)}, "
                   f"saves {_money(t.savings)} ({t.savings_pct:.1f}%)")
        safe_print(f"        {t.rationale}")
    rule()


def display_comparison(cmp: TcoComparison) -> None:
    rule()
    safe_print(f"{cmp.suggested_model} - {cmp.chip}, {cmp.ram_gb} GB / {cmp.storage_gb} GB")
    safe_print(f"Similarity {cmp.similarity:.3f}")
    rule("-")
    safe_print(f"Windows TCO ({cmp.years} years): {_money(cmp.windows.total)}")
    safe_print(f"Mac TCO ({cmp.years} years):     {_money(cmp.mac.total)}")
    safe_print(f"Savings: {_money(cmp.savings_aed)} ({cmp.savings_pct:.2f}%)")
    rule("-")
    for line in cmp.mac_advantages:
        safe_print(f"  + {line}")
    for line in cmp.recommendations:
        safe_print(f"  > {line}")
    rule()
