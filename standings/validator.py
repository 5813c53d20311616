from typing import Optional

from standings.config import POINTS_TO_WIN_SET, TEAM_A, TEAM_B


def is_valid_set(score_a: int, score_b: int) -> bool:
    """
    A set counts only when it is a finished game to 11:
    one side on exactly 11, the other strictly below.

    (0, 0) is an unplayed set and (11, 11) cannot be reached.
    """
    if score_a == 0 and score_b == 0:
        return False

    if score_a == POINTS_TO_WIN_SET and score_b == POINTS_TO_WIN_SET:
        return False

    if score_a == POINTS_TO_WIN_SET:
        return score_b < POINTS_TO_WIN_SET

    if score_b == POINTS_TO_WIN_SET:
        return score_a < POINTS_TO_WIN_SET

    return False


def set_winner(score_a: int, score_b: int) -> Optional[str]:
    if not is_valid_set(score_a, score_b):
        return None

    return TEAM_A if score_a > score_b else TEAM_B
