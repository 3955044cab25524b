import pytest

from mexicanopairing import (
    Gender,
    GeneratorConfig,
    InvalidConfigurationException,
    Match,
    MatchupPreference,
    PairingMode,
    Player,
    PlayerStatus,
    Round,
    TeamFormation,
)
from mexicanopairing.exceptions import InvalidPlayerDataException, PlayerException


def _four():
    return [Player(id=f"p{i}", name=f"Player {i}") for i in range(1, 5)]


# ---- Player ----


def test_player_defaults():
    player = Player(id="p1")

    assert player.rating == 5.0
    assert player.gender is Gender.UNSPECIFIED
    assert player.status is PlayerStatus.ACTIVE
    assert player.skip_rounds == set()
    assert player.is_active


def test_player_coerces_strings_to_enums():
    player = Player(id="p1", gender="female", status="late", skip_rounds=[2, 3])

    assert player.gender is Gender.FEMALE
    assert player.is_female and not player.is_male
    assert player.status is PlayerStatus.LATE
    assert not player.is_active
    assert player.skip_rounds == {2, 3}
    assert player.is_skipping(3)
    assert not player.is_skipping(1)


def test_player_rejects_bad_data():
    with pytest.raises(InvalidPlayerDataException):
        Player(id="")
    with pytest.raises(InvalidPlayerDataException):
        Player(id="p1", status="injured")
    with pytest.raises(PlayerException):
        Player(id="p1", gender="robot")


def test_player_serialization():
    player = Player(
        id="p1",
        name="Ana",
        rating=6.5,
        gender="female",
        skip_rounds={3, 1},
        partner_id="p2",
        total_points=42,
    )

    data = player.to_dict()

    assert data["gender"] == "female"
    assert data["status"] == "active"
    assert data["skip_rounds"] == [1, 3]
    assert Player.from_dict(data) == player


def test_player_from_minimal_dict():
    player = Player.from_dict({"id": 7})

    assert player.id == "7"
    assert player.rating == 5.0
    assert player.gender is Gender.UNSPECIFIED

    with pytest.raises(InvalidPlayerDataException):
        Player.from_dict({"name": "nobody"})


def test_player_str():
    assert str(Player(id="p1", name="Ana", rating=6.5)) == "Ana (6.5)"
    assert str(Player(id="p1")) == "p1 (5.0)"


# ---- Match and Round ----


def test_match_validates_players():
    p1, p2, p3, p4 = _four()

    with pytest.raises(ValueError):
        Match(team1=(p1,), team2=(p3, p4))
    with pytest.raises(ValueError):
        Match(team1=(p1, p2), team2=(p1, p4))


def test_round_serialization_uses_ids():
    p1, p2, p3, p4 = _four()
    p5 = Player(id="p5")
    p6 = Player(id="p6", skip_rounds={1})
    round_ = Round(
        number=1,
        matches=[Match(team1=(p1, p4), team2=(p2, p3), court=1)],
        sitting_players=[p5],
        skipping_players=[p6],
    )

    data = round_.to_dict()

    assert data == {
        "number": 1,
        "matches": [
            {
                "court": 1,
                "team1": ["p1", "p4"],
                "team2": ["p2", "p3"],
                "team1_score": None,
                "team2_score": None,
            }
        ],
        "sitting_players": ["p5"],
        "skipping_players": ["p6"],
    }
    by_id = {p.id: p for p in (p1, p2, p3, p4, p5, p6)}
    restored = Round.from_dict(data, by_id)
    assert restored == round_
    assert restored.playing_players == [p1, p4, p2, p3]


def test_match_scores_round_trip():
    p1, p2, p3, p4 = _four()
    match = Match(team1=(p1, p2), team2=(p3, p4), court=2)
    assert not match.is_scored

    match.team1_score, match.team2_score = 15, 9
    restored = Match.from_dict(match.to_dict(), {p.id: p for p in (p1, p2, p3, p4)})

    assert restored.is_scored
    assert (restored.court, restored.team1_score, restored.team2_score) == (2, 15, 9)


def test_round_from_dict_rejects_unknown_players():
    with pytest.raises(InvalidPlayerDataException):
        Round.from_dict({"number": 1, "sitting_players": ["ghost"]}, {})


def test_empty_round():
    round_ = Round(number=3)
    assert round_.is_empty
    assert round_.playing_players == []


# ---- GeneratorConfig ----


def test_config_defaults_and_coercion():
    config = GeneratorConfig(courts=3, mode="americano", matchup_preference="mixed_only")

    assert config.balance_teams is True
    assert config.mode is PairingMode.AMERICANO
    assert config.matchup_preference is MatchupPreference.MIXED_ONLY
    assert config.team_formation is TeamFormation.AMERICANO


@pytest.mark.parametrize("courts", [0, -2, 1.0, True, "2", None])
def test_config_rejects_bad_courts(courts):
    with pytest.raises(InvalidConfigurationException):
        GeneratorConfig(courts=courts)


def test_config_rejects_unknown_mode():
    with pytest.raises(InvalidConfigurationException):
        GeneratorConfig(courts=1, mode="king_of_the_court")


def test_config_serialization():
    config = GeneratorConfig(courts=2, balance_teams=False, mode="fixed_partner", seed=5)

    data = config.to_dict()

    assert data == {
        "courts": 2,
        "balance_teams": False,
        "matchup_preference": "any",
        "mode": "fixed_partner",
        "seed": 5,
    }
    assert GeneratorConfig.from_dict(data) == config


def test_config_from_dict_requires_courts():
    with pytest.raises(InvalidConfigurationException):
        GeneratorConfig.from_dict({"mode": "mexicano"})
