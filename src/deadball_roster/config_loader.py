"""Persist and load column profiles for stat exports with non-standard headers."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict


@dataclass
class ColumnProfile:
    """Canonical column -> source header, e.g. ``{"BA": "AVG", "Player": "First|Last"}``."""

    batting_columns: Dict[str, str] = field(default_factory=dict)
    pitching_columns: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def load(cls, path: Path) -> "ColumnProfile":
        data = json.loads(path.read_text(encoding="utf-8"))
        return cls(
            batting_columns=data.get("batting_columns", {}),
            pitching_columns=data.get("pitching_columns", {}),
        )

    def save(self, path: Path) -> None:
        payload = {
            "batting_columns": self.batting_columns,
            "pitching_columns": self.pitching_columns,
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    def merged(self, other: "ColumnProfile") -> "ColumnProfile":
        """Return a profile where ``other``'s entries win over this one's."""

        return ColumnProfile(
            batting_columns=self.batting_columns | other.batting_columns,
            pitching_columns=self.pitching_columns | other.pitching_columns,
        )
