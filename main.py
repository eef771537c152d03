"""Command-line entrypoint for local outfit suggestions."""

from __future__ import annotations

import argparse
import json

from agents.outfit_stylist_agent import NO_OUTFITS_MESSAGE
from stylist_app.app import StylistApp
from stylist_app.config import StylistConfig


def _whole_number(value: str) -> int:
    try:
        return int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected a whole number, got {value!r}") from exc


def _positive_int(value: str) -> int:
    number = _whole_number(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def _non_negative_int(value: str) -> int:
    number = _whole_number(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative, got {number}")
    return number


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Suggest outfits from a local wardrobe database")
    parser.add_argument("--database", help="Path to the SQLite wardrobe database.")
    parser.add_argument("--user", help="User id whose wardrobe to use.")
    parser.add_argument("--temperature", type=float, help="Forecast high in Fahrenheit.")
    parser.add_argument("--category", choices=["cold", "cool", "warm", "hot"], help="Temperature category.")
    parser.add_argument("--occasion", help="Casual, Work, Date or Active.")
    parser.add_argument("--count", type=_positive_int, help="Number of suggestions to return.")
    parser.add_argument(
        "--pick",
        type=_non_negative_int,
        help="Show only the suggestion N steps after the best one, wrapping past the end.",
    )
    parser.add_argument("--wear", action="store_true", help="Log the picked suggestion as worn today.")
    parser.add_argument("--save", action="store_true", help="Keep the picked suggestion as a favourite.")
    parser.add_argument("--evaluate", action="store_true", help="Run the evaluation scenarios and exit.")
    return parser


def _pick_outfit(app: StylistApp, args: argparse.Namespace) -> int:
    cycle = app.stylist.suggestion_cycle(
        user_id=args.user,
        occasion=args.occasion,
        temperature_category=args.category,
        temperature_f=args.temperature,
        count=args.count,
    )
    if not len(cycle):
        print(NO_OUTFITS_MESSAGE)
        return 1

    for _ in range(args.pick or 0):
        cycle.advance()
    chosen = cycle.current
    result = {"position": cycle.index, "of": len(cycle), "outfit": chosen.to_dict()}
    if args.wear:
        result["wear_id"] = app.stylist.log_wear(args.user, chosen).wear_id
    if args.save:
        result["saved_outfit_id"] = app.stylist.save_outfit(args.user, chosen).outfit_id
    print(json.dumps(result, indent=2, default=str))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)

    if args.evaluate:
        from evaluation.harness import run_smoke_checks

        lines = run_smoke_checks()
        print("\n".join(lines))
        return 0 if all(line.endswith("passed") for line in lines) else 1

    if not args.user:
        _parser().error("--user is required unless --evaluate is given")

    config = StylistConfig.from_env()
    if args.database:
        config.database_path = args.database
    app = StylistApp(config=config)

    if args.pick is not None or args.wear or args.save:
        return _pick_outfit(app, args)

    response = app.stylist.recommend_outfits(
        user_id=args.user,
        occasion=args.occasion,
        temperature_category=args.category,
        temperature_f=args.temperature,
        count=args.count,
    )
    print(json.dumps(response, indent=2, default=str))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
