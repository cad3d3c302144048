"""Command-line interface for building a Deadball roster from stat exports."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from deadball_roster.assembler import MissingStatsError, RosterGenerationError, RosterSession
from deadball_roster.config import get_rules
from deadball_roster.config_loader import ColumnProfile
from deadball_roster.export import export_filename, roster_to_csv, roster_to_text
from deadball_roster.ingest import load_stat_csv
from deadball_roster.ratings import RandomRatingSource


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a Deadball roster from season stats")
    parser.add_argument("batting", type=Path, help="Path to batting stats CSV")
    parser.add_argument("pitching", type=Path, help="Path to pitching stats CSV")
    parser.add_argument("--team-name", default="", help="Team name for the sheet title and filename")
    parser.add_argument(
        "--format",
        choices=("csv", "txt"),
        default="csv",
        help="Export format (default: csv)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output path (default: <Team>_roster.<format>)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for pitcher batting ratings so reruns produce the same sheet",
    )
    parser.add_argument(
        "--batting-column",
        action="append",
        default=[],
        help="Column mapping for the batting CSV (e.g., BA=AVG)",
    )
    parser.add_argument(
        "--pitching-column",
        action="append",
        default=[],
        help="Column mapping for the pitching CSV (e.g., Player=Name)",
    )
    parser.add_argument("--ruleset", default="DEADBALL", help="Roster ruleset (default: DEADBALL)")
    parser.add_argument("--load-profile", type=Path, help="Load column profile JSON", default=None)
    parser.add_argument("--save-profile", type=Path, help="Save column profile JSON", default=None)
    parser.add_argument("-v", "--verbose", action="store_true", help="Log generation details")
    return parser.parse_args(argv)


def _parse_mapping(entries: list[str]) -> dict[str, str]:
    mapping: dict[str, str] = {}
    for entry in entries:
        if "=" not in entry:
            raise ValueError(f"Invalid mapping entry '{entry}', expected key=value")
        key, value = entry.split("=", 1)
        mapping[key.strip()] = value.strip()
    return mapping


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        rules = get_rules(args.ruleset)
    except KeyError as exc:
        raise SystemExit(str(exc.args[0])) from exc

    try:
        profile = ColumnProfile(
            batting_columns=_parse_mapping(args.batting_column),
            pitching_columns=_parse_mapping(args.pitching_column),
        )
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc
    if args.load_profile:
        profile = ColumnProfile.load(args.load_profile).merged(profile)
    if args.save_profile:
        profile.save(args.save_profile)
        print(f"Saved column profile to {args.save_profile}")

    session = RosterSession()
    session.batting_rows = load_stat_csv(args.batting)
    session.pitching_rows = load_stat_csv(args.pitching)

    try:
        output = session.generate(
            team_name=args.team_name,
            rating_source=RandomRatingSource(args.seed),
            profile=profile,
            rules=rules,
        )
    except (MissingStatsError, RosterGenerationError) as exc:
        print(exc.message, file=sys.stderr)
        raise SystemExit(1) from exc

    print(
        f"Batting: {output.batting_report.accepted_rows}/{output.batting_report.total_rows} rows used; "
        f"pitching: {output.pitching_report.accepted_rows}/{output.pitching_report.total_rows} rows used"
    )

    team_name = session.display_team_name
    if args.format == "txt":
        content = roster_to_text(output.roster, team_name)
    else:
        content = roster_to_csv(output.roster, team_name)
    destination = args.output or Path(export_filename(team_name, args.format))
    destination.write_text(content, encoding="utf-8")
    print(f"Wrote {args.format} roster to {destination}")


if __name__ == "__main__":
    main()
