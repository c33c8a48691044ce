"""
Tolerant parsing of loosely-typed stat and date fields.

Feeds deliver numbers as ints, floats, or strings (".287", "3.45", "-.--",
"7.1" innings). Each semantic type gets its own parser, and every parser
falls back to zero (or None for dates) instead of raising.
"""

from datetime import date, datetime
from typing import Any, Optional
import logging
import math
import re

logger = logging.getLogger(__name__)

_RATE_JUNK = re.compile(r"[^\d.\-]")
_DATE_FORMATS = (
    "%Y-%m-%d",
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%m/%d/%y",
    "%Y%m%d",
    "%b %d, %Y",
    "%B %d, %Y",
)


def parse_rate(value: Any) -> float:
    """
    Parse a rate stat (batting average, ERA, WHIP, OPS).

    Accepts numbers and strings, including the leading-dot convention
    for averages (".287" -> 0.287). Placeholders such as "-.--" and
    anything unparseable return 0.0.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
        return number if math.isfinite(number) else 0.0
    text = _RATE_JUNK.sub("", str(value).strip())
    if not text:
        return 0.0
    if text.startswith("."):
        text = "0" + text
    elif text.startswith("-."):
        text = "-0" + text[1:]
    try:
        number = float(text)
    except ValueError:
        logger.debug("Unparseable rate value %r", value)
        return 0.0
    return number if math.isfinite(number) else 0.0


def parse_count(value: Any) -> int:
    """Parse a counting stat (hits, runs, strikeouts). Unparseable -> 0."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            logger.debug("Non-finite count value %r", value)
            return 0
        return int(value)
    text = str(value).strip()
    if not text:
        return 0
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        logger.debug("Unparseable count value %r", value)
        return 0
    if not math.isfinite(number):
        logger.debug("Non-finite count value %r", value)
        return 0
    return int(number)


def parse_innings_pitched(value: Any) -> float:
    """
    Convert innings pitched to true innings.

    Baseball notation uses the tenths digit for outs: "7.1" is 7 1/3
    innings and "7.2" is 7 2/3. Unknown fractions are dropped.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    text = str(value).strip()
    if not text:
        return 0.0
    if "." not in text:
        try:
            number = float(text)
        except ValueError:
            return 0.0
        return number if math.isfinite(number) else 0.0
    whole, _, fraction = text.partition(".")
    try:
        full_innings = int(whole) if whole else 0
    except ValueError:
        return 0.0
    outs = fraction[:1]
    if outs == "1":
        return full_innings + 1 / 3
    if outs == "2":
        return full_innings + 2 / 3
    return float(full_innings)


def parse_optional_rate(value: Any) -> Optional[float]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return parse_rate(value)


def parse_optional_count(value: Any) -> Optional[int]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return parse_count(value)


def parse_score(value: Any) -> Optional[int]:
    """
    Parse a game score. Integral floats ("5.0", 5.0) are accepted; missing,
    fractional or unparseable scores stay None, never 0.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        number = float(str(value).strip())
    except ValueError:
        logger.debug("Unparseable score %r", value)
        return None
    if not math.isfinite(number) or not number.is_integer():
        logger.debug("Non-integral score %r", value)
        return None
    return int(number)


def parse_game_date(value: Any) -> Optional[date]:
    """Parse a game date; ISO timestamps keep only their calendar date."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if not text:
        return None
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        pass
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def short_date_label(value: Any, fallback_length: int = 5) -> str:
    """Month/day label ("4/12"); raw truncated text when the date won't parse."""
    parsed = parse_game_date(value)
    if parsed is None:
        return str(value or "")[:fallback_length]
    return f"{parsed.month}/{parsed.day}"
