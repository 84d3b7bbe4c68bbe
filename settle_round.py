#!/usr/bin/env python3
"""
Golf round settlement CLI

Settles a round file under its game format (stroke play, best ball,
Nassau with presses, skins, Stableford, scramble) and prints the result.

Usage:
    python settle_round.py data/sample_round.json
    python settle_round.py data/sample_round.json --output results/saturday.json --excel results/saturday.xlsx
    python settle_round.py data/sample_round.json --stableford-config my_points.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from golfscore import (
    ScoringSession,
    load_round,
    save_settlement,
    validate_round,
    validate_settlement,
    write_settlement_workbook,
)
from golfscore.config import get_stableford_table, reset_stableford_table, update_stableford_points
from golfscore.logging_config import setup_logging


def parse_points(values: list[str]) -> dict[str, int]:
    """Parse band=points pairs, e.g. birdie=4."""
    points = {}
    for value in values:
        band, _, number = value.partition('=')
        if not band or not number.lstrip('-').isdigit():
            raise argparse.ArgumentTypeError(f'Expected band=points, got {value!r}')
        points[band] = int(number)
    return points


def main():
    parser = argparse.ArgumentParser(description="Settle a golf round: stroke play, best ball, Nassau, skins, Stableford")
    parser.add_argument(
        "round_file",
        help="Path to the round JSON file",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Write the settlement JSON to this path",
    )
    parser.add_argument(
        "--excel", "-x",
        default=None,
        help="Write a scorecard workbook (.xlsx) to this path",
    )
    parser.add_argument(
        "--stableford-config", "-s",
        default=None,
        help="Stableford point table JSON (defaults to ~/.golfscore/stableford_config.json, or $GOLFSCORE_CONFIG_DIR)",
    )
    parser.add_argument(
        "--set-points",
        nargs="+",
        metavar="BAND=POINTS",
        default=None,
        help="Change Stableford points before settling (e.g. birdie=4 par=2)",
    )
    parser.add_argument(
        "--reset-points",
        action="store_true",
        help="Restore the default Stableford points before settling",
    )
    parser.add_argument(
        "--log-dir",
        default=None,
        help="Directory for log files (file logging is off unless set)",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only print warnings and the settlement",
    )

    args = parser.parse_args()

    logger = setup_logging(
        level=logging.WARNING if args.quiet else logging.INFO,
        log_dir=Path(args.log_dir) if args.log_dir else None,
    )

    round_path = Path(args.round_file)
    if not round_path.exists():
        print(f"Round file not found: {round_path}")
        sys.exit(1)

    try:
        if args.reset_points:
            reset_stableford_table(args.stableford_config)
        if args.set_points:
            update_stableford_points(args.stableford_config, **parse_points(args.set_points))
        table = get_stableford_table(args.stableford_config)
        round_ = load_round(round_path)
    except (ValueError, argparse.ArgumentTypeError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    errors = validate_round(round_)
    if errors:
        print(f"Round file has {len(errors)} problem(s):")
        for error in errors:
            print(f"  - {error}")
        sys.exit(1)

    session = ScoringSession(round_, stableford_table=table)
    settlement = session.settle()

    for warning in validate_settlement(settlement):
        logger.warning(warning)

    print(json.dumps(settlement, indent=2))

    if args.output:
        save_settlement(args.output, settlement)
    if args.excel:
        write_settlement_workbook(session, args.excel)


if __name__ == "__main__":
    main()
