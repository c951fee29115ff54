"""macswitch: Windows-to-Mac migration decision support.

Public API surface; import submodules directly for full access:
  macswitch.config.rules  - persona tables, narrative texts
  macswitch.config.scoring_constants  - tunable scoring and cost numbers
  macswitch.processing.read  - catalog / assumptions / profile loading
  macswitch.recommend.engine  - recommendation, tiers, TCO comparison
  macswitch.storage.profiles  - per-user machine profile store
  macswitch.app.cli  - CLI entry point
"""

from .models import CostAssumptions, MacSpec, MachineProfile, Persona
from .processing.read import load_assumptions, load_catalog, load_profile
from .recommend.engine import compare_tco, get_recommendation, get_recommendation_for_user, get_tiers
from .storage.profiles import InMemoryProfileStore


def main():
    """CLI entry point."""
    from .app.main import main as _main
    return _main()


__all__ = [
    "CostAssumptions",
    "MacSpec",
    "MachineProfile",
    "Persona",
    "InMemoryProfileStore",
    "load_assumptions",
    "load_catalog",
    "load_profile",
    "compare_tco",
    "get_recommendation",
    "get_recommendation_for_user",
    "get_tiers",
    "main",
]
