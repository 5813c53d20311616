from typing import Optional

from standings.config import TEAM_A, TEAM_B
from standings.log import setup_logger
from standings.models import Totals

logger = setup_logger(__name__)

# tie-break order once encounters are level
TIEBREAK_ORDER = ("matches", "sets", "points")


def resolve_champion(totals: Totals) -> Optional[str]:
    """
    Tie-break cascade (Article 19 of the competition rules):

    1. more encounters wins outright
    2. encounters level and non-zero: more matches
    3. then more sets
    4. then more points
    5. level on everything: no champion yet
    """
    a = totals.team_a
    b = totals.team_b

    if a.encounters > b.encounters:
        return TEAM_A
    if b.encounters > a.encounters:
        return TEAM_B

    if a.encounters == 0:
        return None

    for key in TIEBREAK_ORDER:
        value_a = getattr(a, key)
        value_b = getattr(b, key)

        if value_a > value_b:
            return TEAM_A
        if value_b > value_a:
            return TEAM_B

    return None


class ChampionResolver:
    """
    Latching wrapper around resolve_champion.

    The first non-null result is kept and returned by every later call,
    whatever totals are passed in.
    """

    def __init__(self):
        self._champion: Optional[str] = None

    @property
    def champion(self) -> Optional[str]:
        return self._champion

    @property
    def is_decided(self) -> bool:
        return self._champion is not None

    def resolve(self, totals: Totals) -> Optional[str]:
        if self._champion is not None:
            return self._champion

        champion = resolve_champion(totals)

        if champion is not None:
            self._champion = champion
            logger.info(
                "Champion declared: %s (encounters %s)",
                champion, totals.global_score,
            )

        return self._champion
