from typing import Any, Dict, Iterable, List, Optional

from standings.aggregator import aggregate
from standings.champion import ChampionResolver
from standings.config import (
    DEFAULT_BASELINE,
    DEFAULT_TEAM_NAMES,
    MATCH_SLOTS,
    MAX_SETS,
    SETS_TO_WIN,
    SIDES,
    TEAM_A,
    TEAM_B,
)
from standings.exceptions import (
    InvalidSetIndexError,
    InvalidSideError,
    UnknownMatchError,
)
from standings.log import setup_logger
from standings.models import (
    Baseline,
    MatchResult,
    MatchSnapshot,
    MatchState,
    ScenarioSummary,
    SetScore,
    SetSnapshot,
    Side,
    StandingsSnapshot,
    Totals,
)
from standings.normalizer import auto_complete as complete_set
from standings.normalizer import normalize_score
from standings.resolver import resolve_match
from standings.scenarios import build_scenario_summary
from standings.validator import is_valid_set, set_winner

logger = setup_logger(__name__)


class StandingsEngine:
    """
    Standings engine for the live leg of a two-leg tie.

    Responsibilities:
    - Accept raw score input per match / set / side
    - Keep the set slots of every match
    - Recompute match winners, totals and champion on every change
    - Produce immutable snapshots for the display side

    The champion is looked for after every change. With
    `wait_for_clinch` the look is deferred until the live leg can no
    longer change the outcome.
    """

    def __init__(
        self,
        baseline: Optional[Baseline] = None,
        match_ids: Iterable[str] = MATCH_SLOTS,
        team_names: Optional[Dict[str, str]] = None,
        wait_for_clinch: bool = False,
    ):
        self.baseline = baseline or Baseline.from_dict(DEFAULT_BASELINE)
        self.team_names = dict(team_names or DEFAULT_TEAM_NAMES)
        self.matches: Dict[str, MatchState] = {
            match_id: MatchState(match_id=match_id) for match_id in match_ids
        }

        self.wait_for_clinch = wait_for_clinch
        self._champion = ChampionResolver()
        self._results: Dict[str, MatchResult] = {}
        self._totals: Optional[Totals] = None

        self._validate_initial_state()
        self._recompute()

    # =========================================================
    # PUBLIC API
    # =========================================================

    def submit_score(
        self,
        match_id: str,
        set_index: int,
        side: Side,
        raw_value: Any,
        auto_complete: bool = True,
    ) -> StandingsSnapshot:
        """
        Store one typed score and recompute everything.

        Once a champion is declared the engine is terminal: the value is
        ignored and the current snapshot is returned.
        """
        match = self._get_match(match_id)
        self._validate_side(side)
        self._validate_set_index(match, set_index)

        if self._champion.is_decided:
            logger.warning(
                "Champion already declared, ignoring score for %s set %d",
                match_id, set_index + 1,
            )
            return self.snapshot()

        value = normalize_score(raw_value)
        current_set = match.sets[set_index]

        if side == TEAM_A:
            current_set.team_a = value
        else:
            current_set.team_b = value

        if auto_complete:
            current_set.team_a, current_set.team_b = complete_set(
                current_set.team_a, current_set.team_b, side
            )

        logger.debug(
            "Score %s set %d -> %d-%d",
            match_id, set_index + 1, current_set.team_a, current_set.team_b,
        )

        return self.recompute_all()

    def recompute_all(self) -> StandingsSnapshot:
        """
        Full recompute: matches -> totals -> champion.
        """
        self._recompute()
        self._update_champion()
        return self.snapshot()

    def get_match_state(self, match_id: str) -> MatchSnapshot:
        return self._build_match_snapshot(self._get_match(match_id))

    def get_totals(self) -> Totals:
        return self._totals

    def get_champion(self) -> Optional[str]:
        return self._champion.champion

    def get_scenario_summary(self) -> ScenarioSummary:
        return build_scenario_summary(
            self._totals,
            self._remaining_matches(),
            self._champion.champion,
            self.team_names,
        )

    def snapshot(self) -> StandingsSnapshot:
        return StandingsSnapshot(
            matches=tuple(
                self._build_match_snapshot(m) for m in self.matches.values()
            ),
            totals=self._totals,
            champion=self._champion.champion,
            summary=self.get_scenario_summary(),
        )

    @property
    def is_finished(self) -> bool:
        return self._champion.is_decided

    # =========================================================
    # VALIDATION
    # =========================================================

    def _validate_initial_state(self):
        if not self.matches:
            raise ValueError("at least one match slot is required")

        for side in SIDES:
            if side not in self.team_names:
                raise ValueError(f"missing team name for {side}")

    def _get_match(self, match_id: str) -> MatchState:
        try:
            return self.matches[match_id]
        except KeyError:
            raise UnknownMatchError(f"Unknown match: {match_id}") from None

    def _validate_side(self, side: str):
        if side not in SIDES:
            raise InvalidSideError(f"Invalid side: {side}")

    def _validate_set_index(self, match: MatchState, set_index: int):
        if not isinstance(set_index, int) or isinstance(set_index, bool):
            raise InvalidSetIndexError(f"Invalid set index: {set_index!r}")

        if not 0 <= set_index < len(match.sets):
            raise InvalidSetIndexError(
                f"Set {set_index + 1} of {match.match_id} is not open "
                f"({len(match.sets)} open)"
            )

    # =========================================================
    # SET SLOTS
    # =========================================================

    def _open_next_slots(self, match: MatchState):
        """
        After each valid set a further slot opens while neither side has
        3 set wins, up to 5 slots. Open slots are never removed.
        """
        a_sets = 0
        b_sets = 0

        for index, s in enumerate(list(match.sets)):
            if not is_valid_set(s.team_a, s.team_b):
                continue

            if set_winner(s.team_a, s.team_b) == TEAM_A:
                a_sets += 1
            else:
                b_sets += 1

            if a_sets < SETS_TO_WIN and b_sets < SETS_TO_WIN and index < MAX_SETS - 1:
                while len(match.sets) < index + 2:
                    match.sets.append(SetScore())

    # =========================================================
    # RECOMPUTE
    # =========================================================

    def _recompute(self):
        results: List[MatchResult] = []

        for match in self.matches.values():
            self._open_next_slots(match)

            result = resolve_match(match.sets, match.match_id)
            match.winner = result.winner

            self._results[match.match_id] = result
            results.append(result)

        self._totals = aggregate(
            self.baseline, list(self.matches.values()), results
        )

    def _update_champion(self):
        if self._champion.is_decided:
            return

        if not self.wait_for_clinch or self._remaining_matches() == 0:
            self._champion.resolve(self._totals)
            return

        # leg clinched early: only a difference in encounters is final,
        # matches / sets / points still move with the remaining matches
        if self._leg_clinched():
            a = self._totals.team_a
            b = self._totals.team_b
            if a.encounters != b.encounters:
                self._champion.resolve(self._totals)

    def _leg_clinched(self) -> bool:
        wins_a = sum(1 for r in self._results.values() if r.winner == TEAM_A)
        wins_b = sum(1 for r in self._results.values() if r.winner == TEAM_B)
        return max(wins_a, wins_b) * 2 > len(self._results)

    def _remaining_matches(self) -> int:
        return sum(1 for r in self._results.values() if r.winner is None)

    # =========================================================
    # SNAPSHOT
    # =========================================================

    def _build_match_snapshot(self, match: MatchState) -> MatchSnapshot:
        result = self._results[match.match_id]

        sets = tuple(
            SetSnapshot(
                number=index + 1,
                score_a=s.team_a,
                score_b=s.team_b,
                is_valid=is_valid_set(s.team_a, s.team_b),
                winner=set_winner(s.team_a, s.team_b),
                counted=result.counted[index],
            )
            for index, s in enumerate(match.sets)
        )

        return MatchSnapshot(
            match_id=match.match_id,
            sets=sets,
            sets_won_a=result.sets_won_a,
            sets_won_b=result.sets_won_b,
            winner=result.winner,
            open_slots=len(match.sets),
            malformed=result.malformed,
        )
