import pytest

from standings.session import TieSession


# ---------------------------------------------------------
# Helpers
# ---------------------------------------------------------

def new_session():
    # champion only once the live leg is settled
    return TieSession(wait_for_clinch=True)


def make_entries(match_id, sequence, loser_points=5):
    """
    sequence = ["a", "b", "a", ...] set winners in play order
    """
    return [
        {
            "match_id": match_id,
            "set_index": i,
            "side": "team_b" if w == "a" else "team_a",
            "value": str(loser_points),
        }
        for i, w in enumerate(sequence)
    ]


# ---------------------------------------------------------
# Validation branches
# ---------------------------------------------------------

def test_entries_must_be_list():
    session = new_session()

    with pytest.raises(ValueError):
        session.load_entries("not_a_list")


def test_invalid_entry_format_missing_key():
    session = new_session()

    entries = [{"match_id": "DX", "set_index": 0}]  # missing side/value

    with pytest.raises(ValueError):
        session.load_entries(entries)


def test_invalid_side_atomic():
    session = new_session()
    session.load_entries(make_entries("DX", ["a"]))

    entries = make_entries("DF", ["a", "b"]) + [
        {"match_id": "DF", "set_index": 2, "side": "wrong", "value": "3"},
    ]

    with pytest.raises(ValueError):
        session.load_entries(entries)

    # previous replay untouched
    assert len(session.get_timeline()) == 1
    assert session.get_snapshot().matches[1].sets[0].score_a == 0


def test_unopened_set_atomic():
    session = new_session()

    entries = [{"match_id": "DX", "set_index": 3, "side": "team_a", "value": "3"}]

    with pytest.raises(ValueError):
        session.load_entries(entries)

    assert session.get_timeline() == []


# ---------------------------------------------------------
# Empty snapshot branch
# ---------------------------------------------------------

def test_get_snapshot_when_empty():
    session = new_session()

    snapshot = session.get_snapshot()

    assert session.get_timeline() == []
    assert snapshot.global_score == "0 - 1"
    assert snapshot.remaining_matches == 7


# ---------------------------------------------------------
# Replay
# ---------------------------------------------------------

def test_replay_full_match():
    session = new_session()

    timeline = session.load_entries(make_entries("DM", ["a", "b", "a", "a"]))

    final = timeline[-1]
    dm = final.matches[2]

    assert len(timeline) == 4
    assert dm.match_id == "DM"
    assert dm.winner == "team_a"
    assert final.totals.team_a.matches == 4


def test_replay_deterministic():
    entries = make_entries("DX", ["a", "b", "a"]) + make_entries("IM1", ["b"])

    t1 = new_session().load_entries(entries)
    t2 = new_session().load_entries(entries)

    assert t1[-1] == t2[-1]


def test_submit_appends_to_timeline():
    session = new_session()
    session.load_entries(make_entries("DX", ["a"]))

    snapshot = session.submit("DX", 1, "team_a", 6)

    assert len(session.get_timeline()) == 2
    assert session.get_snapshot() == snapshot
    assert snapshot.matches[0].sets_won_b == 1


# ---------------------------------------------------------
# Reset behavior
# ---------------------------------------------------------

def test_reset_clears_state():
    session = new_session()

    session.load_entries(make_entries("DX", ["a", "a", "b"]))

    session.reset()

    assert session.get_timeline() == []
    assert session.export_entries() == []

    # load again after reset
    timeline = session.load_entries(make_entries("DX", ["b"]))

    assert timeline[-1].matches[0].sets_won_b == 1


# ---------------------------------------------------------
# Export entries
# ---------------------------------------------------------

def test_export_entries_roundtrip():
    session = new_session()

    entries = make_entries("IF2", ["a", "b", "a"])
    session.load_entries(entries)

    assert session.export_entries() == entries


# ---------------------------------------------------------
# After the champion
# ---------------------------------------------------------

def test_submit_after_champion_is_not_recorded():
    # default first leg baseline: team_b leads 1-0 in encounters
    session = TieSession()
    session.load_entries(make_entries("DX", ["a"]))

    assert session.get_snapshot().champion == "team_b"

    snapshot = session.submit("DX", 1, "team_a", 6)

    assert snapshot.champion == "team_b"
    assert snapshot.matches[0].sets[1].score_a == 0
    assert len(session.get_timeline()) == 1
    assert len(session.export_entries()) == 1


def test_replayed_entries_after_champion_are_not_recorded():
    session = TieSession()

    timeline = session.load_entries(make_entries("DX", ["a", "a", "b"]))

    assert len(timeline) == 1
    assert session.export_entries() == make_entries("DX", ["a"])


def test_replayed_entries_after_champion_are_still_checked():
    session = TieSession()

    entries = make_entries("DX", ["a"]) + [
        {"match_id": "ZZ", "set_index": 0, "side": "team_a", "value": "3"},
    ]

    with pytest.raises(ValueError):
        session.load_entries(entries)

    assert session.get_timeline() == []
