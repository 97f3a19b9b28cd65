# SPDX-License-Identifier: MIT
"""Command-line entry point: validate work items exported as JSON.

Usage:
    python -m wicheck items.json --current-iteration 2026-S21

Environment variables:
    WICHECK_PROFILE : gate profile: general | strict | pedantic (default: general)
    WICHECK_POLICY  : path to a policy JSON file (default: built-in policy)

Exit status: 0 when every report passes the gate, 1 when any fails, 2 on bad input.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter

from wicheck.entities import Iteration, WorkItem
from wicheck.rules import check_gate, load_policy, load_profile
from wicheck.rules.config import PROFILES
from wicheck.validator import WorkItemValidator

log = logging.getLogger(__name__)

_ITEMS_ADAPTER: TypeAdapter[WorkItem | list[WorkItem]] = TypeAdapter(WorkItem | list[WorkItem])


def load_work_items(path: Path) -> list[WorkItem]:
    """Parse a JSON file holding one work item or a list of them.

    Raises:
        FileNotFoundError: If path doesn't exist.
        ValidationError: If the JSON does not describe work items.
    """
    parsed = _ITEMS_ADAPTER.validate_json(path.read_bytes())
    return parsed if isinstance(parsed, list) else [parsed]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wicheck", description="Check work items against the project policy"
    )
    parser.add_argument("items", type=Path, help="JSON file with one work item or a list")
    parser.add_argument(
        "--current-iteration",
        default=None,
        help="ID of the current iteration (enables the schedule rule)",
    )
    parser.add_argument(
        "--current-iteration-name",
        default="",
        help="Display name of the current iteration",
    )
    parser.add_argument(
        "--profile",
        choices=sorted(PROFILES),
        default=None,
        help="Gate profile (overrides WICHECK_PROFILE env var)",
    )
    parser.add_argument(
        "--policy",
        default=None,
        help="Policy JSON file (overrides WICHECK_POLICY env var)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        profile = load_profile(args.profile)
        policy = load_policy(args.policy)
        items = load_work_items(args.items)
    except (OSError, ValueError) as e:
        # pydantic's ValidationError is a ValueError
        print(f"wicheck: {e}", file=sys.stderr)
        return 2

    current = None
    if args.current_iteration:
        current = Iteration(id=args.current_iteration, name=args.current_iteration_name)

    reports: list[dict[str, Any]] = []
    failed = False
    for item in items:
        report = WorkItemValidator.validate_wi(item, current, policy=policy)
        if report is None:
            continue
        gate = check_gate(report, profile)
        failed = failed or gate
        log.debug("%s: %d issue(s), gate=%s", item.formatted_id, len(report), gate)
        reports.append({"formatted_id": item.formatted_id, "failed": gate, **report.to_dict()})

    json.dump({"profile": profile.name, "reports": reports}, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 1 if failed else 0
