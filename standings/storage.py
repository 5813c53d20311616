import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Tuple

from standings.config import (
    DEFAULT_TEAM_CODES,
    MATCH_SLOTS,
    SCHEMA_VERSION,
    SIDES,
)
from standings.exceptions import TieFileError, UnsupportedSchemaError
from standings.models import Baseline

REQUIRED_FIELDS = {
    "schema_version",
    "teams",
    "baseline",
}

BASELINE_FIELDS = ("encounters", "matches", "sets", "points")


@dataclass
class TieConfig:
    team_names: Dict[str, str]
    team_codes: Dict[str, str]
    baseline: Baseline
    match_ids: Tuple[str, ...] = MATCH_SLOTS
    entries: List[Dict] = field(default_factory=list)
    wait_for_clinch: bool = False


def validate_schema(data: dict):
    if not isinstance(data, dict):
        raise TieFileError("tie file must contain a JSON object")

    missing = REQUIRED_FIELDS - set(data.keys())
    if missing:
        raise TieFileError(f"Missing field(s): {sorted(missing)}")

    if data["schema_version"] != SCHEMA_VERSION:
        raise UnsupportedSchemaError(
            f"Unsupported schema_version: {data['schema_version']}"
        )

    for key in ("teams", "baseline"):
        if not isinstance(data[key], dict) or set(data[key].keys()) != set(SIDES):
            raise TieFileError(f"{key} must contain exactly keys {list(SIDES)}")

    for side in SIDES:
        if "name" not in data["teams"][side]:
            raise TieFileError(f"teams.{side} has no name")

        stats = data["baseline"][side]
        for key in BASELINE_FIELDS:
            value = stats.get(key)
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise TieFileError(
                    f"baseline.{side}.{key} must be a non-negative integer"
                )

    matches = data.get("matches", list(MATCH_SLOTS))
    if not isinstance(matches, list) or not matches:
        raise TieFileError("matches must be a non-empty list")
    if len(set(matches)) != len(matches):
        raise TieFileError("matches must not repeat")

    if not isinstance(data.get("entries", []), list):
        raise TieFileError("entries must be list")

    if not isinstance(data.get("wait_for_clinch", False), bool):
        raise TieFileError("wait_for_clinch must be true or false")


def load_tie(path: Path) -> TieConfig:
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Tie file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise TieFileError(f"{path}: invalid JSON ({e})") from e

    return parse_tie(data)


def parse_tie(data: dict) -> TieConfig:
    validate_schema(data)

    teams = data["teams"]

    return TieConfig(
        team_names={side: str(teams[side]["name"]) for side in SIDES},
        team_codes={
            side: str(teams[side].get("code", DEFAULT_TEAM_CODES[side]))
            for side in SIDES
        },
        baseline=Baseline.from_dict(data["baseline"]),
        match_ids=tuple(str(m) for m in data.get("matches", MATCH_SLOTS)),
        entries=list(data.get("entries", [])),
        wait_for_clinch=data.get("wait_for_clinch", False),
    )
