"""Canonical ID helpers."""

from typing import Optional


def canonicalize_team_code(team: Optional[str]) -> str:
    return (team or "").strip().upper()


def canonicalize_team_name(name: Optional[str]) -> str:
    return " ".join((name or "").strip().split())


def same_team(left: Optional[str], right: Optional[str]) -> bool:
    """Compare two team codes case-insensitively; blank codes never match."""
    left_code = canonicalize_team_code(left)
    return bool(left_code) and left_code == canonicalize_team_code(right)
