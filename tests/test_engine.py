import pytest

from standings.config import MATCH_SLOTS
from standings.engine import StandingsEngine
from standings.exceptions import (
    InvalidSetIndexError,
    InvalidSideError,
    UnknownMatchError,
)
from standings.models import Baseline, TeamStats


def create_engine(baseline=None, match_ids=MATCH_SLOTS):
    # nothing to separate the teams until a leg encounter is won
    if baseline is None:
        baseline = Baseline(TeamStats(), TeamStats())
    return StandingsEngine(baseline, match_ids)


def other(side):
    return "team_b" if side == "team_a" else "team_a"


def win_set(engine, match_id, set_index, winner, loser_points=5):
    # typing the loser's score auto-completes the winner to 11
    engine.submit_score(match_id, set_index, other(winner), loser_points)


def win_match(engine, match_id, winner, loser_points=5):
    for set_index in range(3):
        win_set(engine, match_id, set_index, winner, loser_points)


# ---------- MATCH RESULTS ----------

@pytest.mark.parametrize("sequence, expected_winner", [
    (["A", "A", "A"], "team_a"),            # 3-0
    (["A", "A", "B", "A"], "team_a"),       # 3-1
    (["A", "B", "A", "B", "A"], "team_a"),  # 3-2
    (["B", "B", "B"], "team_b"),            # 0-3
    (["A", "B", "B", "B"], "team_b"),       # 1-3
    (["A", "B", "A", "B", "B"], "team_b"),  # 2-3
])
def test_match_outcomes(sequence, expected_winner):
    engine = create_engine()

    for set_index, winner in enumerate(sequence):
        win_set(engine, "DX", set_index, "team_a" if winner == "A" else "team_b")

    match = engine.get_match_state("DX")
    assert match.winner == expected_winner
    assert match.is_finished is True


def test_spec_match_3_1():
    engine = create_engine()

    engine.submit_score("DX", 0, "team_b", 3)
    engine.submit_score("DX", 1, "team_b", 5)
    engine.submit_score("DX", 2, "team_a", 8)
    engine.submit_score("DX", 3, "team_b", 7)

    match = engine.get_match_state("DX")
    assert [(s.score_a, s.score_b) for s in match.sets] == [
        (11, 3), (11, 5), (8, 11), (11, 7),
    ]
    assert (match.sets_won_a, match.sets_won_b) == (3, 1)
    assert match.winner == "team_a"


# ---------- AUTO-COMPLETE ----------

def test_auto_complete_on_submit():
    engine = create_engine()

    engine.submit_score("DF", 0, "team_a", "6")

    s = engine.get_match_state("DF").sets[0]
    assert (s.score_a, s.score_b) == (6, 11)
    assert s.winner == "team_b"


def test_11_11_forces_edited_field_to_10():
    engine = create_engine()

    engine.submit_score("DF", 0, "team_a", 11)
    engine.submit_score("DF", 0, "team_b", 11)

    s = engine.get_match_state("DF").sets[0]
    assert (s.score_a, s.score_b) == (11, 10)
    assert s.is_valid is True


def test_auto_complete_can_be_disabled():
    engine = create_engine()

    engine.submit_score("DF", 0, "team_a", 6, auto_complete=False)

    s = engine.get_match_state("DF").sets[0]
    assert (s.score_a, s.score_b) == (6, 0)
    assert s.is_valid is False


def test_malformed_input_is_absorbed():
    engine = create_engine()

    engine.submit_score("DM", 0, "team_a", "abc", auto_complete=False)
    engine.submit_score("DM", 0, "team_b", "45", auto_complete=False)

    s = engine.get_match_state("DM").sets[0]
    assert (s.score_a, s.score_b) == (0, 30)
    assert s.is_valid is False


# ---------- SET SLOTS ----------

def test_only_first_slot_open_initially():
    engine = create_engine()

    assert engine.get_match_state("DX").open_slots == 1

    with pytest.raises(InvalidSetIndexError):
        engine.submit_score("DX", 1, "team_a", 5)


def test_valid_set_opens_next_slot():
    engine = create_engine()

    engine.submit_score("DX", 0, "team_a", 7, auto_complete=False)
    assert engine.get_match_state("DX").open_slots == 1

    engine.submit_score("DX", 0, "team_b", 11)
    assert engine.get_match_state("DX").open_slots == 2


def test_no_fourth_slot_after_3_0():
    engine = create_engine()

    win_match(engine, "DX", "team_a")

    assert engine.get_match_state("DX").open_slots == 3

    with pytest.raises(InvalidSetIndexError):
        engine.submit_score("DX", 3, "team_b", 5)


def test_no_sixth_slot():
    engine = create_engine()

    for set_index, winner in enumerate(["team_a", "team_b", "team_a", "team_b", "team_a"]):
        win_set(engine, "IM1", set_index, winner)

    assert engine.get_match_state("IM1").open_slots == 5


# ---------- CONTRACT ERRORS ----------

def test_unknown_match():
    engine = create_engine()

    with pytest.raises(UnknownMatchError):
        engine.submit_score("XX", 0, "team_a", 5)

    with pytest.raises(ValueError):
        engine.get_match_state("XX")


def test_invalid_side():
    engine = create_engine()

    with pytest.raises(InvalidSideError):
        engine.submit_score("DX", 0, "player_a", 5)


def test_needs_match_slots():
    with pytest.raises(ValueError):
        create_engine(match_ids=())


# ---------- TOTALS ----------

def test_initial_totals_are_baseline():
    baseline = Baseline(TeamStats(0, 3, 10, 200), TeamStats(1, 4, 14, 225))
    engine = create_engine(baseline)

    totals = engine.get_totals()
    assert totals.team_a == baseline.team_a
    assert totals.team_b == baseline.team_b
    assert totals.global_score == "0 - 1"


def test_correction_recomputes_from_scratch():
    engine = create_engine()
    before = engine.get_totals()

    engine.submit_score("DX", 0, "team_b", 4)
    assert engine.get_totals().team_a.points == before.team_a.points + 11

    # back to an incomplete set
    engine.submit_score("DX", 0, "team_a", 9, auto_complete=False)

    assert engine.get_totals() == before
