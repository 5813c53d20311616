import math
import re
from typing import Any, Tuple

from standings.config import MAX_SCORE, POINTS_TO_WIN_SET, TEAM_A

_LEADING_INT = re.compile(r"\s*([+-]?)(\d+)")


def normalize_score(raw: Any) -> int:
    """
    Turn a typed value into an engine score.

    Anything that does not parse as an integer, or is negative, becomes 0.
    Values above 30 are clamped to 30.
    """
    if raw is None or isinstance(raw, bool):
        return 0

    if isinstance(raw, float) and not math.isfinite(raw):
        return 0

    if isinstance(raw, (int, float)):
        value = int(raw)
    else:
        # leading integer only: "12" -> 12, "7.5" -> 7, "abc" -> 0
        m = _LEADING_INT.match(str(raw))
        if not m:
            return 0
        sign, digits = m.groups()
        if sign == "-":
            return 0
        # more than two significant digits is already above the cap
        if len(digits.lstrip("0")) > 2:
            return MAX_SCORE
        value = int(digits)

    if value < 0:
        return 0

    return min(value, MAX_SCORE)


def auto_complete(score_a: int, score_b: int, side: str) -> Tuple[int, int]:
    """
    Complete a set from the side that was just edited.

    - edited side in (0, 11) and the other side 0 -> other side becomes 11
    - both sides on 11 -> edited side drops to 10
    """
    if side == TEAM_A:
        edited, other = score_a, score_b
    else:
        edited, other = score_b, score_a

    if 0 < edited < POINTS_TO_WIN_SET and other == 0:
        other = POINTS_TO_WIN_SET
    elif edited == POINTS_TO_WIN_SET and other == POINTS_TO_WIN_SET:
        edited = POINTS_TO_WIN_SET - 1

    if side == TEAM_A:
        return edited, other

    return other, edited
