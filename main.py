from render.renderer import ScoreboardRenderer
from standings.config import DEFAULT_TEAM_CODES, TEAM_A, TEAM_B
from standings.engine import StandingsEngine

# the default first leg puts IES ahead, so hold the champion until the leg is settled
engine = StandingsEngine(wait_for_clinch=True)

# DX: PPC wins 3-0, each set typed as the loser's score
for set_index, ies_points in enumerate([5, 7, 9]):
    engine.submit_score("DX", set_index, TEAM_B, ies_points)

# DF: IES takes the first set
engine.submit_score("DF", 0, TEAM_A, 8)

# 11-11 is never stored: the field being typed drops to 10
engine.submit_score("DF", 1, TEAM_A, 11)
engine.submit_score("DF", 1, TEAM_B, 11)

print("DF set 2 after typing 11-11:")
print(engine.get_match_state("DF").sets[1])

print()
print(ScoreboardRenderer(engine.snapshot(), engine.team_names, DEFAULT_TEAM_CODES).render())
