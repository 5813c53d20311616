from copy import deepcopy
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from standings.config import MATCH_SLOTS
from standings.engine import StandingsEngine
from standings.models import Baseline, StandingsSnapshot

ENTRY_FIELDS = ("match_id", "set_index", "side", "value")


@dataclass(frozen=True)
class ScoreEntry:
    match_id: str
    set_index: int
    side: str
    value: Any

    @staticmethod
    def from_dict(d: Dict) -> "ScoreEntry":
        if not isinstance(d, dict):
            raise ValueError(f"invalid entry format: {d!r}")

        missing = [f for f in ENTRY_FIELDS if f not in d]
        if missing:
            raise ValueError(f"invalid entry format, missing {missing}")

        try:
            set_index = int(d["set_index"])
        except (TypeError, ValueError):
            raise ValueError(
                f"invalid set_index: {d['set_index']!r}"
            ) from None

        return ScoreEntry(
            match_id=str(d["match_id"]),
            set_index=set_index,
            side=str(d["side"]),
            value=d["value"],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "match_id": self.match_id,
            "set_index": self.set_index,
            "side": self.side,
            "value": self.value,
        }


class TieSession:
    """
    Single live leg session.

    Responsibilities:
    - Own one StandingsEngine instance
    - Bulk replay score entries (atomic)
    - Store the timeline of standings snapshots
    - Export the applied entries
    """

    def __init__(
        self,
        baseline: Optional[Baseline] = None,
        match_ids: Iterable[str] = MATCH_SLOTS,
        team_names: Optional[Dict[str, str]] = None,
        wait_for_clinch: bool = False,
    ):
        self._baseline = baseline
        self._wait_for_clinch = wait_for_clinch
        self._match_ids = tuple(match_ids)
        self._team_names = team_names
        self._engine = self._new_engine()
        self._timeline: List[StandingsSnapshot] = []
        self._entries: List[ScoreEntry] = []

    # ---------------------------------------------------------
    # Core API
    # ---------------------------------------------------------

    def load_entries(self, entries: List[Dict]) -> List[StandingsSnapshot]:
        """
        Replay score entries from a list of dicts on a fresh engine.
        Atomic: if any entry fails -> no state mutation.
        Entries after the champion is declared are checked but not kept.
        """
        if not isinstance(entries, list):
            raise ValueError("entries must be a list")

        score_entries = [ScoreEntry.from_dict(e) for e in entries]

        temp_engine = self._new_engine()
        temp_timeline: List[StandingsSnapshot] = []
        applied: List[ScoreEntry] = []

        for entry in score_entries:
            finished = temp_engine.is_finished
            snapshot = temp_engine.submit_score(
                entry.match_id, entry.set_index, entry.side, entry.value
            )
            if finished:
                continue
            temp_timeline.append(snapshot)
            applied.append(entry)

        self._engine = temp_engine
        self._timeline = temp_timeline
        self._entries = applied

        return list(self._timeline)

    def submit(self, match_id: str, set_index: int, side: str,
               value: Any) -> StandingsSnapshot:
        finished = self._engine.is_finished
        snapshot = self._engine.submit_score(match_id, set_index, side, value)

        # the engine ignored it, nothing to record
        if finished:
            return snapshot

        self._entries.append(ScoreEntry(match_id, set_index, side, value))
        self._timeline.append(snapshot)

        return snapshot

    def get_snapshot(self) -> StandingsSnapshot:
        if not self._timeline:
            return self._engine.snapshot()

        return self._timeline[-1]

    def get_timeline(self) -> List[StandingsSnapshot]:
        return list(self._timeline)

    def export_entries(self) -> List[Dict]:
        return [deepcopy(e.to_dict()) for e in self._entries]

    def reset(self):
        self._engine = self._new_engine()
        self._timeline = []
        self._entries = []

    @property
    def engine(self) -> StandingsEngine:
        return self._engine

    def _new_engine(self) -> StandingsEngine:
        return StandingsEngine(
            self._baseline,
            self._match_ids,
            self._team_names,
            wait_for_clinch=self._wait_for_clinch,
        )
