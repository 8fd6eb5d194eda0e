"""Persist and load input-location profiles for the analysis CLI."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from fifavalue.errors import DataUnavailable


@dataclass(frozen=True)
class DataPaths:
    players: Path
    value_trends: Optional[Path] = None
    skill_trends: Optional[Path] = None

    @classmethod
    def load(cls, path: Path) -> "DataPaths":
        """Read a JSON profile; relative entries resolve against its directory."""

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise DataUnavailable(f"Unable to read profile {path}: {exc}", path=path) from exc
        except json.JSONDecodeError as exc:
            raise DataUnavailable(f"Profile {path} is not valid JSON: {exc}", path=path) from exc
        base = path.parent

        def resolve(key: str) -> Optional[Path]:
            raw = data.get(key)
            if not raw:
                return None
            candidate = Path(raw)
            return candidate if candidate.is_absolute() else base / candidate

        players = resolve("players")
        if players is None:
            raise DataUnavailable(f"Profile {path} does not name a players table", path=path)
        return cls(
            players=players,
            value_trends=resolve("value_trends"),
            skill_trends=resolve("skill_trends"),
        )

    def save(self, path: Path) -> None:
        payload = {
            key: str(value)
            for key, value in (
                ("players", self.players),
                ("value_trends", self.value_trends),
                ("skill_trends", self.skill_trends),
            )
            if value is not None
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
