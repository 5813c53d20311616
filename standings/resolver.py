from typing import Iterable, List

from standings.config import SETS_TO_WIN, TEAM_A, TEAM_B
from standings.log import setup_logger
from standings.models import MatchResult, SetScore
from standings.validator import set_winner

logger = setup_logger(__name__)


def resolve_match(sets: Iterable[SetScore], match_id: str = "") -> MatchResult:
    """
    Fold the sets of one match into set counts and a winner.

    Valid sets are counted in play order until a side reaches 3 set wins.
    Valid sets entered after that point stay stored but are not counted.
    A match where both sides reach 3 valid sets has no winner and is
    flagged malformed.
    """
    sets_a = 0
    sets_b = 0
    winner = None
    counted: List[bool] = []

    # counts over every valid set, used only to detect impossible matches
    raw_a = 0
    raw_b = 0
    trailing = 0

    for s in sets:
        side = set_winner(s.team_a, s.team_b)

        if side == TEAM_A:
            raw_a += 1
        elif side == TEAM_B:
            raw_b += 1

        if side is None:
            counted.append(False)
            continue

        if winner is not None:
            trailing += 1
            counted.append(False)
            continue

        if side == TEAM_A:
            sets_a += 1
        else:
            sets_b += 1

        counted.append(True)

        if sets_a == SETS_TO_WIN:
            winner = TEAM_A
        elif sets_b == SETS_TO_WIN:
            winner = TEAM_B

    malformed = raw_a >= SETS_TO_WIN and raw_b >= SETS_TO_WIN

    if malformed:
        # no rule can pick a side here
        winner = None
        logger.error(
            "Match %s has %d-%d valid sets: both sides reached %d set wins",
            match_id or "?", raw_a, raw_b, SETS_TO_WIN,
        )
    elif trailing:
        logger.warning(
            "Match %s: %d set(s) entered after the match was decided are ignored",
            match_id or "?", trailing,
        )

    return MatchResult(
        sets_won_a=sets_a,
        sets_won_b=sets_b,
        winner=winner,
        counted=tuple(counted),
        trailing_sets=trailing,
        malformed=malformed,
    )
