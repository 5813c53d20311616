from typing import Dict, Iterable, List, Optional

from standings.config import MATCH_SLOTS
from standings.engine import StandingsEngine
from standings.models import Baseline
from standings.session import ScoreEntry


def build_standings_timeline(
    entries: List[Dict],
    baseline: Optional[Baseline] = None,
    match_ids: Iterable[str] = MATCH_SLOTS,
    wait_for_clinch: bool = False,
) -> List[Dict]:
    """
    Replays the live leg from scratch using score entries.
    Returns a flattened row after each entry.
    Stops once a champion is declared.
    Does NOT mutate external state.
    """
    engine = StandingsEngine(baseline, match_ids, wait_for_clinch=wait_for_clinch)

    timeline: List[Dict] = []

    for index, raw in enumerate(entries):
        entry = ScoreEntry.from_dict(raw)

        snapshot = engine.submit_score(
            entry.match_id, entry.set_index, entry.side, entry.value
        )

        match = engine.get_match_state(entry.match_id)
        current_set = match.sets[entry.set_index]
        a = snapshot.totals.team_a
        b = snapshot.totals.team_b

        row = {
            "entry_index": index + 1,
            "match_id": entry.match_id,
            "set_number": entry.set_index + 1,
            "score_a": current_set.score_a,
            "score_b": current_set.score_b,
            "match_winner": match.winner,
            "encounters_a": a.encounters,
            "encounters_b": b.encounters,
            "matches_a": a.matches,
            "matches_b": b.matches,
            "sets_a": a.sets,
            "sets_b": b.sets,
            "points_a": a.points,
            "points_b": b.points,
            "champion": snapshot.champion,
        }

        timeline.append(row)

        if snapshot.champion is not None:
            break

    return timeline
