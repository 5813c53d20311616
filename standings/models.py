from dataclasses import dataclass, field
from typing import Dict, List, Literal, Optional, Tuple

Side = Literal["team_a", "team_b"]


@dataclass
class SetScore:
    team_a: int = 0
    team_b: int = 0


@dataclass
class MatchState:
    match_id: str
    sets: List[SetScore] = field(default_factory=lambda: [SetScore()])
    winner: Optional[str] = None


@dataclass(frozen=True)
class TeamStats:
    encounters: int = 0
    matches: int = 0
    sets: int = 0
    points: int = 0

    @staticmethod
    def from_dict(d: Dict) -> "TeamStats":
        return TeamStats(
            encounters=int(d.get("encounters", 0)),
            matches=int(d.get("matches", 0)),
            sets=int(d.get("sets", 0)),
            points=int(d.get("points", 0)),
        )


# --- DERIVED / SNAPSHOT TYPES ---

@dataclass(frozen=True)
class Baseline:
    """
    First leg results carried into the live leg.
    """
    team_a: TeamStats
    team_b: TeamStats

    @staticmethod
    def from_dict(d: Dict) -> "Baseline":
        return Baseline(
            team_a=TeamStats.from_dict(d.get("team_a", {})),
            team_b=TeamStats.from_dict(d.get("team_b", {})),
        )


@dataclass(frozen=True)
class Totals:
    team_a: TeamStats
    team_b: TeamStats

    def for_side(self, side: str) -> TeamStats:
        return self.team_a if side == "team_a" else self.team_b

    @property
    def global_score(self) -> str:
        return f"{self.team_a.encounters} - {self.team_b.encounters}"


@dataclass(frozen=True)
class MatchResult:
    sets_won_a: int
    sets_won_b: int
    winner: Optional[str]
    counted: Tuple[bool, ...] = ()
    trailing_sets: int = 0
    malformed: bool = False


@dataclass(frozen=True)
class SetSnapshot:
    number: int
    score_a: int
    score_b: int
    is_valid: bool
    winner: Optional[str]
    counted: bool


@dataclass(frozen=True)
class MatchSnapshot:
    match_id: str
    sets: Tuple[SetSnapshot, ...]
    sets_won_a: int
    sets_won_b: int
    winner: Optional[str]
    open_slots: int
    malformed: bool = False

    @property
    def is_finished(self) -> bool:
        return self.winner is not None

    @property
    def in_progress(self) -> bool:
        return self.winner is None and (self.sets_won_a > 0 or self.sets_won_b > 0)


@dataclass(frozen=True)
class ScenarioSummary:
    kind: str
    lines: Tuple[str, ...]

    def to_text(self) -> str:
        return "\n".join(self.lines)


@dataclass(frozen=True)
class StandingsSnapshot:
    matches: Tuple[MatchSnapshot, ...]
    totals: Totals
    champion: Optional[str]
    summary: ScenarioSummary

    @property
    def global_score(self) -> str:
        return self.totals.global_score

    @property
    def remaining_matches(self) -> int:
        return sum(1 for m in self.matches if m.winner is None)
