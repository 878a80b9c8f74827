# -*- coding: utf-8 -*-
"""
Command-line access to the roster and the score calculator.

Usage:
    python -m nutritrack.cli users
    python -m nutritrack.cli validate <user_id> <phone_number>
    python -m nutritrack.cli score <user_id> [--sex Female] [--category Fruits ...]
    python -m nutritrack.cli insights <user_id>
    python -m nutritrack.cli report <user_id> [--sex Female] [--category Fruits ...]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import settings
from .data_loader import DatasetUnavailableError
from .directory import UserDirectory
from .scoring.calculator import QUESTIONNAIRE_COLUMNS, ScoreCalculator, max_score_for
from .scoring.report import build_report, format_score


def _data_file(args: argparse.Namespace) -> Path:
    return Path(args.data_file) if args.data_file else settings.data_file


def cmd_users(args: argparse.Namespace) -> int:
    """List roster user ids."""
    for user_id in sorted(UserDirectory(_data_file(args)).list_user_ids()):
        print(user_id)
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    """Check a user id + phone number pair."""
    if UserDirectory(_data_file(args)).validate(args.user_id, args.phone_number):
        print("valid")
        return 0
    print("Invalid ID or Phone Number.")
    return 1


def cmd_score(args: argparse.Namespace) -> int:
    """Total score over the selected questionnaire categories."""
    calculator = ScoreCalculator(_data_file(args))
    score = calculator.total_score(args.user_id, args.sex, args.category or [])
    print(f"{format_score(score)}/100")
    return 0


def cmd_insights(args: argparse.Namespace) -> int:
    """Per-category breakdown."""
    breakdown = ScoreCalculator(_data_file(args)).category_breakdown(args.user_id)
    if not breakdown:
        print(f"No data for user {args.user_id}")
        return 0
    width = max(len(name) for name in breakdown)
    for name, value in breakdown.items():
        print(f"{name:<{width}}  {format_score(value)}/{max_score_for(name)}")
    return 0


def cmd_report(args: argparse.Namespace) -> int:
    """Shareable text report."""
    calculator = ScoreCalculator(_data_file(args))
    total = calculator.total_score(args.user_id, args.sex, args.category or [])
    print(build_report(calculator.category_breakdown(args.user_id), total))
    return 0


def _add_selection_args(sub: argparse.ArgumentParser) -> None:
    sub.add_argument("user_id", help="Roster user id")
    sub.add_argument("--sex", default="Male", help="Male or Female (default: Male)")
    sub.add_argument(
        "--category",
        action="append",
        choices=sorted(QUESTIONNAIRE_COLUMNS),
        help="Selected food category (repeatable)",
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="NutriTrack CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--data-file",
        help="Path to the roster CSV (default: bundled user_data.csv)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    subparsers.add_parser("users", help="List user ids")

    validate_parser = subparsers.add_parser("validate", help="Validate credentials")
    validate_parser.add_argument("user_id")
    validate_parser.add_argument("phone_number")

    _add_selection_args(subparsers.add_parser("score", help="Total food quality score"))

    insights_parser = subparsers.add_parser("insights", help="Per-category breakdown")
    insights_parser.add_argument("user_id")

    _add_selection_args(subparsers.add_parser("report", help="Shareable text report"))

    args = parser.parse_args(argv)

    logging.basicConfig(level="DEBUG" if args.verbose else settings.log_level)

    if not args.command:
        parser.print_help()
        return 1

    commands = {
        "users": cmd_users,
        "validate": cmd_validate,
        "score": cmd_score,
        "insights": cmd_insights,
        "report": cmd_report,
    }

    try:
        return commands[args.command](args)
    except DatasetUnavailableError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
