"""Command-line interface for the quarter-week calendar and pod analytics.

Provides subcommands: `weeks` and `summary` (team view with `--pod`,
individual view with `--user`). Each command is implemented as a
`cmd_*` function that accepts an argparse namespace and returns an exit code.
"""
from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

from dotenv import load_dotenv

from pod_progress.aggregate.frames import member_stats_frame
from pod_progress.aggregate.members import team_summary, user_summary
from pod_progress.config import get_settings
from pod_progress.ingest.load_snapshot import load_snapshot
from pod_progress.logging_config import configure_logging
from pod_progress.models import Snapshot
from pod_progress.weeks.resolver import current_week_number, weeks_elapsed

log = logging.getLogger(__name__)


# --------------------------------------------------
# WEEKS
# --------------------------------------------------
def cmd_weeks(args: argparse.Namespace) -> int:
    """Print the weeks of the current quarter that have begun.

    Args:
        args: argparse namespace with `week_start_day` and `today`.
    """
    week_start_day = args.week_start_day
    if week_start_day is None:
        week_start_day = get_settings().default_week_start_day

    current = current_week_number(week_start_day, args.today)
    for week in weeks_elapsed(week_start_day, args.today):
        marker = "*" if week.number == current else " "
        print(f"{marker} Week {week.number:>2}  {week.date_range}")
    return 0


# --------------------------------------------------
# SUMMARY
# --------------------------------------------------
def cmd_summary(args: argparse.Namespace) -> int:
    """Print the team summary and member ranking of a pod, or a user summary.

    Args:
        args: argparse namespace with `snapshot`, `pod` or `user`, `quarter`,
            `week`, `today`.
    """
    snapshot = load_snapshot(args.snapshot)
    if args.user is not None:
        return _print_user_summary(snapshot, args)

    summary = team_summary(snapshot, args.pod, args.quarter, args.week, args.today)
    if summary is None:
        print(f"Pod {args.pod!r} not found in {args.snapshot}", file=sys.stderr)
        return 1

    wb = summary.weekly_breakdown
    print(f"Pod {summary.pod_id} | {summary.quarter} | week {summary.week_number}")
    print(
        f"Goals: {summary.goals.total} total, {summary.goals.completed} completed, "
        f"{summary.goals.in_progress} in progress, {summary.goals.not_started} not started"
    )
    print(f"Completion rate: {summary.completion_rate}%  Average progress: {summary.average_progress}%")
    print(
        f"Week {summary.week_number} milestones: {wb.completed}/{wb.total} completed "
        f"({wb.rate}%), {wb.in_progress} in progress, {wb.not_started} not started"
    )
    print(f"Check-ins this week: {summary.check_in_rate}%")
    print()
    print(member_stats_frame(summary.members).to_string(index=False))
    return 0


def _print_user_summary(snapshot: Snapshot, args: argparse.Namespace) -> int:
    us = user_summary(snapshot, args.user, args.quarter, args.week, args.today)
    wb = us.weekly_breakdown
    print(f"User {us.user_id} | {us.quarter} | week {us.week_number}")
    print(
        f"Goals: {us.goals.total} total, {us.goals.completed} completed, "
        f"{us.goals.in_progress} in progress, {us.goals.not_started} not started"
    )
    print(f"Completion rate: {us.completion_rate}%  Average progress: {us.average_progress}%")
    print(
        f"Week {us.week_number} milestones: {wb.completed}/{wb.total} completed "
        f"({wb.rate}%), {wb.in_progress} in progress, {wb.not_started} not started"
    )
    print(
        f"All time: {us.completed_goals}/{us.total_goals} goals, "
        f"{us.completed_milestones}/{us.total_milestones} milestones completed"
    )
    return 0


# --------------------------------------------------
# CLI
# --------------------------------------------------
def _iso_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {value!r}") from exc


def build_parser() -> argparse.ArgumentParser:
    """Build and return the top-level argument parser for the CLI.

    Returns:
        Configured argparse.ArgumentParser instance.
    """
    p = argparse.ArgumentParser(prog="pod-progress")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_weeks = sub.add_parser("weeks", help="list the weeks of the current quarter")
    p_weeks.add_argument("--week-start-day", type=int, choices=range(7), default=None)
    p_weeks.add_argument("--today", type=_iso_date, default=None)

    p_summary = sub.add_parser("summary", help="team summary from a snapshot file")
    p_summary.add_argument("snapshot", type=Path)
    target = p_summary.add_mutually_exclusive_group(required=True)
    target.add_argument("--pod")
    target.add_argument("--user")
    p_summary.add_argument("--quarter", default=None)
    p_summary.add_argument("--week", type=int, default=None)
    p_summary.add_argument("--today", type=_iso_date, default=None)

    return p


def main(argv: list[str] | None = None) -> int:
    """CLI entry point: parse args, configure logging and dispatch commands."""
    load_dotenv()
    args = build_parser().parse_args(argv)

    settings = get_settings()
    configure_logging(settings.log_path, settings.log_level)

    if args.cmd == "weeks":
        return cmd_weeks(args)
    if args.cmd == "summary":
        return cmd_summary(args)
    raise SystemExit(2)


if __name__ == "__main__":
    sys.exit(main())
