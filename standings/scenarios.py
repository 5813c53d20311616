from typing import Dict, Optional

from standings.config import DEFAULT_TEAM_NAMES, TEAM_A, TEAM_B
from standings.models import ScenarioSummary, Totals


def build_scenario_summary(
    totals: Totals,
    remaining_matches: int,
    champion: Optional[str] = None,
    team_names: Optional[Dict[str, str]] = None,
) -> ScenarioSummary:
    """
    Describe what each team still needs, from the current totals.
    """
    names = team_names or DEFAULT_TEAM_NAMES

    if champion is not None:
        return ScenarioSummary(
            kind="champion",
            lines=(
                f"{names[champion]} is the CHAMPION!",
                "The final has been decided under the Article 19 tie-break criteria.",
            ),
        )

    if remaining_matches == 0:
        return ScenarioSummary(
            kind="completed",
            lines=("All matches completed. Checking tie-break criteria...",),
        )

    a = totals.team_a
    b = totals.team_b

    if a.encounters == b.encounters:
        return ScenarioSummary(
            kind="level",
            lines=(
                f"{names[TEAM_A]} needs:",
                "  - Win the second leg to force the tie-break",
                f"  - Current lead in matches: {a.matches - b.matches}",
                f"{names[TEAM_B]} needs:",
                "  - A draw or a win keeps the first leg advantage",
                f"  - Current lead in matches: {b.matches - a.matches}",
            ),
        )

    return ScenarioSummary(
        kind="standing",
        lines=(
            "Current standing:",
            f"{names[TEAM_A]}: {a.encounters} encounters",
            f"{names[TEAM_B]}: {b.encounters} encounters",
            f"Matches remaining: {remaining_matches}",
        ),
    )
