import pytest

from mexicanopairing import HistoryTracker, Player
from mexicanopairing.pairing.availability import available_players, skipping_players
from mexicanopairing.pairing.sit_out import (
    least_played_first,
    playing_slots,
    select_mixed_sitters,
    select_sitters,
    unit_sit_count,
)


def _units(count):
    return [(Player(id=f"p{i + 1}"),) for i in range(count)]


def _unit_ids(units):
    return [p.id for unit in units for p in unit]


@pytest.mark.parametrize(
    "eligible, courts, expected",
    [(0, 2, 0), (3, 2, 0), (4, 2, 4), (7, 2, 4), (8, 2, 8), (10, 2, 8), (40, 5, 20)],
)
def test_playing_slots(eligible, courts, expected):
    assert playing_slots(eligible, courts) == expected


def test_everyone_plays_when_slots_suffice():
    units = _units(8)
    playing, sitting = select_sitters(units, 8, HistoryTracker())

    assert playing == units
    assert sitting == []


def test_ties_sit_from_the_end_of_input_order():
    playing, sitting = select_sitters(_units(10), 8, HistoryTracker())

    assert _unit_ids(sitting) == ["p9", "p10"]
    assert _unit_ids(playing) == [f"p{i}" for i in range(1, 9)]


def test_players_who_sat_most_play_first():
    history = HistoryTracker()
    history.sit_counts.update({"p9": 1, "p10": 1})

    playing, sitting = select_sitters(_units(10), 8, history)

    assert _unit_ids(sitting) == ["p7", "p8"]
    # both lists keep input order
    assert _unit_ids(playing) == ["p1", "p2", "p3", "p4", "p5", "p6", "p9", "p10"]


def test_pair_sit_count_is_the_sum_of_both_partners():
    a, b = Player(id="a"), Player(id="b")
    history = HistoryTracker()
    history.sit_counts.update({"a": 2, "b": 1})

    assert unit_sit_count((a, b), history) == 3
    assert unit_sit_count((a,), history) == 2


def test_pairs_sit_out_as_units():
    pairs = [
        (Player(id="a0"), Player(id="a1")),
        (Player(id="b0"), Player(id="b1")),
        (Player(id="c0"), Player(id="c1")),
    ]
    history = HistoryTracker()
    history.sit_counts.update({"c0": 1})

    playing, sitting = select_sitters(pairs, 2, history)

    assert sitting == [pairs[1]]
    assert playing == [pairs[0], pairs[2]]


def test_selection_does_not_touch_history():
    history = HistoryTracker()
    select_sitters(_units(10), 8, history)
    assert sum(history.sit_counts.values()) == 0


def test_available_players_filters_status_and_skips():
    players = [
        Player(id="active"),
        Player(id="late", status="late"),
        Player(id="departed", status="departed"),
        Player(id="no-show", status="no_show"),
        Player(id="skipper", skip_rounds={2}),
    ]

    assert [p.id for p in available_players(players, 1)] == ["active", "skipper"]
    assert [p.id for p in available_players(players, 2)] == ["active"]
    assert [p.id for p in skipping_players(players, 2)] == ["skipper"]
    assert skipping_players(players, 1) == []


def test_inactive_skippers_are_not_listed_as_skipping():
    players = [Player(id="gone", status="departed", skip_rounds={1})]
    assert skipping_players(players, 1) == []


def _gendered(males, females):
    return [Player(id=f"m{i + 1}", gender="male") for i in range(males)] + [
        Player(id=f"f{i + 1}", gender="female") for i in range(females)
    ]


def test_mixed_sit_out_keeps_genders_even():
    players = _gendered(6, 4)

    playing, sitting = select_mixed_sitters(players, 8, HistoryTracker())

    assert _unit_ids(sitting) == ["m5", "m6"]
    assert sum(unit[0].is_female for unit in playing) == 4


def test_mixed_sit_out_puts_sit_count_before_gender():
    players = _gendered(6, 4)
    history = HistoryTracker()
    history.sit_counts.update({"m5": 1, "m6": 1})

    playing, sitting = select_mixed_sitters(players, 8, history)

    assert {"m5", "m6"} <= set(_unit_ids(playing))
    assert all(unit[0].is_male for unit in sitting)


def test_least_played_first_priority():
    history = HistoryTracker()
    history.play_counts.update({"p1": 2, "p2": 2, "p3": 1})

    playing, sitting = select_sitters(_units(6), 4, history, least_played_first)

    assert _unit_ids(playing) == ["p3", "p4", "p5", "p6"]
    assert _unit_ids(sitting) == ["p1", "p2"]
