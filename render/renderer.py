from typing import Dict, List, Optional

from standings.config import DEFAULT_TEAM_CODES, DEFAULT_TEAM_NAMES, TEAM_A, TEAM_B
from standings.models import MatchSnapshot, StandingsSnapshot


class ScoreboardRenderer:

    WIDTH = 56

    def __init__(
        self,
        snapshot: StandingsSnapshot,
        team_names: Optional[Dict[str, str]] = None,
        team_codes: Optional[Dict[str, str]] = None,
    ):
        if snapshot is None:
            raise ValueError("Snapshot cannot be empty")

        self.snapshot = snapshot
        self.team_names = team_names or DEFAULT_TEAM_NAMES
        self.team_codes = team_codes or DEFAULT_TEAM_CODES

    def render(self) -> str:
        lines: List[str] = []

        self._draw_header(lines)
        self._draw_matches(lines)
        self._draw_team_stats(lines)
        self._draw_scenarios(lines)

        return "\n".join(lines)

    # ----------------------------------------------------
    # DRAWING
    # ----------------------------------------------------

    def _rule(self, lines: List[str], char: str = "="):
        lines.append(char * self.WIDTH)

    def _draw_header(self, lines: List[str]):
        code_a = self.team_codes[TEAM_A]
        code_b = self.team_codes[TEAM_B]

        self._rule(lines)
        lines.append(
            f"{code_a} {self.snapshot.global_score} {code_b}".center(self.WIDTH)
        )

        champion = self.snapshot.champion
        if champion is not None:
            lines.append(f"CHAMPION: {self.team_names[champion]}".center(self.WIDTH))

        self._rule(lines)

    def _draw_matches(self, lines: List[str]):
        for match in self.snapshot.matches:
            sets = "  ".join(
                self._format_set(s.score_a, s.score_b, s.winner)
                for s in match.sets
                if s.score_a or s.score_b
            )
            lines.append(f"{match.match_id:<4} {sets:<36} {self._match_result(match)}")

        self._rule(lines, "-")

    def _format_set(self, score_a: int, score_b: int, winner: Optional[str]) -> str:
        # winning side marked with its code initial, unresolved sets with "?"
        if winner is None:
            tag = "?"
        else:
            tag = self.team_codes[winner][0]

        return f"{score_a}-{score_b}{tag}"

    def _match_result(self, match: MatchSnapshot) -> str:
        if match.winner is not None:
            code = self.team_codes[match.winner]
            return f"Winner: {code} ({match.sets_won_a}-{match.sets_won_b})"

        if match.in_progress:
            return f"In play: {match.sets_won_a}-{match.sets_won_b}"

        return ""

    def _draw_team_stats(self, lines: List[str]):
        lines.append(f"{'':<28}{'Enc':>6}{'Mat':>6}{'Sets':>7}{'Pts':>7}")

        for side in (TEAM_A, TEAM_B):
            stats = self.snapshot.totals.for_side(side)
            name = self.team_names[side][:27]
            lines.append(
                f"{name:<28}{stats.encounters:>6}{stats.matches:>6}"
                f"{stats.sets:>7}{stats.points:>7}"
            )

        self._rule(lines, "-")

    def _draw_scenarios(self, lines: List[str]):
        lines.extend(self.snapshot.summary.lines)
        self._rule(lines)
