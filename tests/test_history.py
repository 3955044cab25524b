from mexicanopairing import HistoryTracker, Player
from mexicanopairing.pairing import RoundRecord, pair_key


def _match():
    a, b, c, d = (Player(id=pid) for pid in ("a", "b", "c", "d"))
    return (a, b), (c, d)


def test_pair_key_is_unordered():
    assert pair_key("a", "b") == pair_key("b", "a")


def test_record_collects_partners_opponents_and_sitters():
    record = RoundRecord()
    record.add_match(*_match())
    record.add_sitters([Player(id="e")])

    assert record.partner_pairs == [pair_key("a", "b"), pair_key("c", "d")]
    assert set(record.opponent_pairs) == {
        pair_key("a", "c"),
        pair_key("a", "d"),
        pair_key("b", "c"),
        pair_key("b", "d"),
    }
    assert record.sitter_ids == ["e"]
    assert record.player_ids == ["a", "b", "c", "d"]


def test_apply_accumulates_counts():
    record = RoundRecord()
    record.add_match(*_match())
    record.add_sitters([Player(id="e")])

    history = HistoryTracker()
    history.apply(record)
    history.apply(record)

    assert history.partner_count("b", "a") == 2
    assert history.opponent_count("d", "a") == 2
    assert history.opponent_count("a", "b") == 0
    assert history.sit_count("e") == 2
    assert history.sit_count("a") == 0
    assert history.play_count("a") == 2
    assert history.play_count("e") == 0


def test_repeat_sums_over_a_split():
    history = HistoryTracker()
    history.partner_counts[pair_key("a", "b")] = 2
    history.partner_counts[pair_key("c", "d")] = 1
    history.opponent_counts[pair_key("a", "c")] = 1
    history.opponent_counts[pair_key("b", "d")] = 3

    team1, team2 = _match()
    assert history.partner_repeats(team1, team2) == 3
    assert history.opponent_repeats(team1, team2) == 4


def test_copy_is_independent():
    history = HistoryTracker()
    history.sit_counts["a"] = 1

    copied = history.copy()
    copied.sit_counts["a"] += 1
    copied.partner_counts[pair_key("a", "b")] += 1

    assert history.sit_count("a") == 1
    assert history.partner_count("a", "b") == 0


def test_history_serialization():
    record = RoundRecord()
    record.add_match(*_match())
    record.add_sitters([Player(id="e")])
    history = HistoryTracker()
    history.apply(record)

    data = history.to_dict()

    assert data["partner_counts"] == [
        {"players": ["a", "b"], "count": 1},
        {"players": ["c", "d"], "count": 1},
    ]
    assert data["sit_counts"] == {"e": 1}
    assert data["play_counts"] == {"a": 1, "b": 1, "c": 1, "d": 1}
    assert HistoryTracker.from_dict(data) == history


def test_history_from_empty_dict():
    history = HistoryTracker.from_dict({})
    assert history.partner_count("a", "b") == 0
    assert history.to_dict() == {
        "partner_counts": [],
        "opponent_counts": [],
        "sit_counts": {},
        "play_counts": {},
    }
