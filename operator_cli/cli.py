"""Operator CLI for sat rarity classification."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Dict, List, Optional

from rarity_core.engine import CoordinateError, derive_rarity, validate_coordinate
from rarity_core.models import InvalidRarity, InvalidRarityCode, PositionalCoordinate, Rarity
from rarity_core.schedule import EmissionSchedule, ScheduleError

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="sat-rarity")
    parser.add_argument("--verbose", action="store_true")
    parser.add_argument("--halving-interval", type=int)
    parser.add_argument("--diffchange-interval", type=int)
    parser.add_argument("--initial-subsidy", type=int)
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_parser = subparsers.add_parser("parse")
    parse_parser.add_argument("name")
    parse_parser.set_defaults(func=_parse)

    code_parser = subparsers.add_parser("code")
    code_parser.add_argument("value", type=int)
    code_parser.set_defaults(func=_code)

    tiers_parser = subparsers.add_parser("tiers")
    tiers_parser.set_defaults(func=_tiers)

    derive_parser = subparsers.add_parser("derive")
    derive_parser.add_argument("--epoch", required=True, type=int)
    derive_parser.add_argument("--epoch-position", required=True, type=int)
    derive_parser.add_argument("--period-position", required=True, type=int)
    derive_parser.add_argument("--subsidy-position", required=True, type=int)
    derive_parser.add_argument("--subsidy", type=int)
    derive_parser.set_defaults(func=_derive)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return args.func(args)
    except (
        CoordinateError,
        InvalidRarity,
        InvalidRarityCode,
        ScheduleError,
    ) as exc:
        logger.warning("rejected %s command: %s", args.command, exc)
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2


def _parse(args: argparse.Namespace) -> int:
    rarity = Rarity.parse(args.name)
    print(json.dumps(_rarity_to_dict(rarity), indent=2))
    return 0


def _code(args: argparse.Namespace) -> int:
    rarity = Rarity.from_code(args.value)
    print(rarity)
    return 0


def _tiers(args: argparse.Namespace) -> int:
    print(json.dumps([_rarity_to_dict(rarity) for rarity in Rarity], indent=2))
    return 0


def _derive(args: argparse.Namespace) -> int:
    schedule = _build_schedule(args)
    coordinate = PositionalCoordinate(
        epoch=args.epoch,
        epoch_position=args.epoch_position,
        period_position=args.period_position,
        subsidy_position=args.subsidy_position,
    )
    if coordinate.epoch < 0:
        raise CoordinateError("epoch cannot be negative.")
    subsidy = args.subsidy if args.subsidy is not None else schedule.subsidy(coordinate.epoch)
    validate_coordinate(coordinate, subsidy)

    rarity = derive_rarity(coordinate, subsidy, schedule)
    logger.debug("derived %s for %s with subsidy %d", rarity, coordinate, subsidy)
    output = {
        "coordinate": coordinate.to_dict(),
        "subsidy": subsidy,
        "rarity": rarity.value,
    }
    print(json.dumps(output, indent=2))
    return 0


def _build_schedule(args: argparse.Namespace) -> EmissionSchedule:
    base = EmissionSchedule.from_env()
    return EmissionSchedule(
        halving_interval=_override(args.halving_interval, base.halving_interval),
        diffchange_interval=_override(args.diffchange_interval, base.diffchange_interval),
        initial_subsidy=_override(args.initial_subsidy, base.initial_subsidy),
    )


def _override(value: Optional[int], default: int) -> int:
    return default if value is None else value


def _rarity_to_dict(rarity: Rarity) -> Dict[str, object]:
    return {
        "rarity": rarity.value,
        "code": rarity.code,
        "black": rarity.is_black,
    }


if __name__ == "__main__":
    raise SystemExit(main())
