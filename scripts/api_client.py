"""Lightweight REST client for the Deadball roster API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the Deadball roster REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("batting", type=Path, nargs="?", help="Batting stats CSV")
    parser.add_argument("pitching", type=Path, nargs="?", help="Pitching stats CSV")
    parser.add_argument("--team-name", default="", help="Team name for the roster sheet")
    parser.add_argument("--show", action="store_true", help="Print the current roster and exit")
    parser.add_argument(
        "--export",
        choices=("csv", "txt"),
        help="Download the current roster in this format after generating",
    )
    parser.add_argument("--export-path", type=Path, help="Destination path for the export")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.show:
            resp = client.get("/roster")
            if resp.status_code == 404:
                raise SystemExit("no roster has been generated yet")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return

        if args.batting is not None:
            resp = client.post(
                "/stats/batting",
                files={"batting": (args.batting.name, args.batting.read_bytes(), "text/csv")},
            )
            resp.raise_for_status()
            print("Batting upload:", json.dumps(resp.json()))
        if args.pitching is not None:
            resp = client.post(
                "/stats/pitching",
                files={"pitching": (args.pitching.name, args.pitching.read_bytes(), "text/csv")},
            )
            resp.raise_for_status()
            print("Pitching upload:", json.dumps(resp.json()))

        resp = client.post("/roster", data={"team_name": args.team_name})
        if resp.status_code in (400, 500):
            raise SystemExit(resp.json().get("detail", resp.text))
        resp.raise_for_status()
        payload = resp.json()
        print(f"Generated roster for {payload['team_name']}")
        for section in payload["sections"]:
            print(f"  {section['title']}: {len(section['players'])} players")

        if args.export:
            resp = client.get(f"/roster/export.{args.export}")
            resp.raise_for_status()
            if args.export_path:
                args.export_path.write_text(resp.text, encoding="utf-8")
                print(f"{args.export.upper()} export saved to {args.export_path}")
            else:
                print(resp.text)


if __name__ == "__main__":
    main()
