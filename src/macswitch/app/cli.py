import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from ..config.settings import ASSUMPTIONS_FILE, CATALOG_FILE
from ..errors import CatalogUnavailableError, NoMatchesError, ProfileNotFoundError
from ..models import Persona
from ..processing.read import load_assumptions, load_catalog, read_profile_json
from ..recommend.engine import compare_tco, get_recommendation_for_user, get_tiers
from ..storage.profiles import InMemoryProfileStore
from ..utils.console import safe_print
from ..utils.logging import get_logger, set_level
from .display import display_comparison, display_recommendation, display_tiers

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="macswitch",
        description="Compare a Windows machine with the MacBook catalog",
    )
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--profile", type=Path, required=True,
                        help="Machine profile JSON (collector output)")
    common.add_argument("--catalog", type=Path, default=CATALOG_FILE,
                        help="MacBook catalog CSV")
    common.add_argument("--assumptions", type=Path, default=ASSUMPTIONS_FILE,
                        help="TCO assumptions JSON")
    common.add_argument("--persona", type=_persona_arg, metavar="PERSONA",
                        help="One of: %s. Detected from installed apps when omitted "
                             "or not recognised" % ", ".join(p.value for p in Persona))
    common.add_argument("--user", default=None,
                        help="Store the profile under this user id (default: its UserId)")
    common.add_argument("--years", default=3, help="TCO horizon, 3 or 5 (anything else means 3)")
    common.add_argument("--windows-price", type=float, default=0,
                        help="Windows purchase price in AED (estimated when 0)")
    common.add_argument("--apps", nargs="*", default=None,
                        help="Installed application names (overrides the profile list)")
    common.add_argument("--json", action="store_true", help="Print the result as JSON")
    common.add_argument("--debug", action="store_true", help="Verbose logging and cost breakdown")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("recommend", parents=[common], help="Full recommendation for the top match")
    sub.add_parser("tiers", parents=[common], help="Good / Better / Best matches")
    sub.add_parser("tco", parents=[common], help="Windows vs. Mac cost comparison")
    return parser


def _persona_arg(value: str) -> str:
    # unknown tags pass through; the engine logs them and falls back to detection
    persona = Persona.parse(value)
    return persona.value if persona is not None else value


def _dump(payload) -> None:
    safe_print(json.dumps(payload, indent=2, ensure_ascii=False))


def run(args: argparse.Namespace) -> int:
    catalog = load_catalog(args.catalog)
    if not catalog:
        raise CatalogUnavailableError(args.catalog)
    assumptions = load_assumptions(args.assumptions)
    store = InMemoryProfileStore()
    record = store.import_profile(read_profile_json(args.profile), user_id=args.user)
    profile = record.machine

    options = dict(
        catalog=catalog,
        persona=args.persona,
        years=args.years,
        windows_price=args.windows_price,
        assumptions=assumptions,
    )

    if args.command == "recommend":
        rec = get_recommendation_for_user(store, record.user_id, apps=args.apps, **options)
        if args.json:
            _dump(rec.to_dict())
        else:
            display_recommendation(rec, show_breakdown=args.debug)
    elif args.command == "tiers":
        tiers = get_tiers(profile, **options)
        if args.json:
            _dump([t.to_dict() for t in tiers])
        else:
            display_tiers(tiers)
    elif args.command == "tco":
        cmp = compare_tco(profile, **options)
        if args.json:
            _dump(cmp.to_dict())
        else:
            display_comparison(cmp)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.debug:
        set_level("DEBUG")

    try:
        return run(args)
    except (CatalogUnavailableError, NoMatchesError, ProfileNotFoundError) as exc:
        logger.error("%s", exc)
        safe_print(f"Error: {exc}", file=sys.stderr)
        return 1
    except (OSError, ValueError) as exc:
        logger.error("Could not read input: %s", exc)
        safe_print(f"Error: {exc}", file=sys.stderr)
        return 1
