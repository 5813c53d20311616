from typing import Optional, Sequence

from standings.config import TEAM_A, TEAM_B
from standings.exceptions import ResultsMismatchError
from standings.models import Baseline, MatchResult, MatchState, TeamStats, Totals
from standings.resolver import resolve_match
from standings.validator import set_winner


def aggregate(
    baseline: Baseline,
    matches: Sequence[MatchState],
    results: Optional[Sequence[MatchResult]] = None,
) -> Totals:
    """
    Fold every match of the live leg on top of the first leg baseline.

    `results` may carry resolve_match output already computed for the same
    matches, in the same order. Only counted sets contribute sets and
    points, and both sides' points of a counted set are added.

    The live leg encounter goes to the side with more match wins in this
    leg alone. An even split gives no encounter to anyone.
    """
    if results is None:
        results = [resolve_match(m.sets, m.match_id) for m in matches]

    if len(results) != len(matches):
        raise ResultsMismatchError("results must match the matches one to one")

    leg_matches_a = 0
    leg_matches_b = 0
    sets_a = sets_b = 0
    points_a = points_b = 0

    for match, result in zip(matches, results):
        if result.winner == TEAM_A:
            leg_matches_a += 1
        elif result.winner == TEAM_B:
            leg_matches_b += 1

        for s, counted in zip(match.sets, result.counted):
            if not counted:
                continue

            if set_winner(s.team_a, s.team_b) == TEAM_A:
                sets_a += 1
            else:
                sets_b += 1

            points_a += s.team_a
            points_b += s.team_b

    won_leg_a = leg_matches_a > leg_matches_b
    won_leg_b = leg_matches_b > leg_matches_a

    return Totals(
        team_a=_add(baseline.team_a, won_leg_a, leg_matches_a, sets_a, points_a),
        team_b=_add(baseline.team_b, won_leg_b, leg_matches_b, sets_b, points_b),
    )


def _add(base: TeamStats, won_leg: bool, matches: int, sets: int,
         points: int) -> TeamStats:
    return TeamStats(
        encounters=base.encounters + (1 if won_leg else 0),
        matches=base.matches + matches,
        sets=base.sets + sets,
        points=base.points + points,
    )
