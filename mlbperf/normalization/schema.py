"""Schema validation for raw game and roster records."""

from typing import Dict, List, Sequence

SCHEMA_VERSION = "v1"


# Each entry lists alternatives; any one key satisfies the requirement.
REQUIRED_FIELDS: Dict[str, List[Sequence[str]]] = {
    "games": [
        ("homeTeamCode", "home_team_code"),
        ("awayTeamCode", "away_team_code"),
        ("date", "game_date"),
    ],
    "players": [("name", "player_name", "id")],
}


class SchemaValidationError(ValueError):
    pass


def _present(row: Dict, keys: Sequence[str]) -> bool:
    return any(row.get(key) not in (None, "") for key in keys)


def validate_record(name: str, row: Dict, idx: int = 0) -> None:
    required = REQUIRED_FIELDS.get(name)
    if not required:
        return
    if not isinstance(row, dict):
        raise SchemaValidationError(f"{name} row {idx} is not an object")
    missing = [keys[0] for keys in required if not _present(row, keys)]
    if missing:
        raise SchemaValidationError(
            f"{name} row {idx} missing fields: {', '.join(missing)}"
        )


def validate_table(name: str, rows: list) -> None:
    """Validate a raw table payload."""
    for idx, row in enumerate(rows):
        validate_record(name, row, idx)
