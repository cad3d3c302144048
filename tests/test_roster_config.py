import pytest

from deadball_roster.config import DEADBALL_RULES, get_rules


def test_get_rules_is_case_insensitive():
    rules = get_rules("deadball")
    assert rules is DEADBALL_RULES
    assert rules.lineup_size == 8
    assert rules.position_player_count == 12


def test_get_rules_missing_raises():
    with pytest.raises(KeyError):
        get_rules("CURLING")


def test_placeholder_names_follow_pattern():
    assert DEADBALL_RULES.bench_placeholder.name(3) == "Bench Player 3"
    assert DEADBALL_RULES.starter_placeholder.name(1) == "Starting Pitcher 1"
    assert DEADBALL_RULES.reliever_placeholder.name(7) == "Relief Pitcher 7"
    assert DEADBALL_RULES.lineup_placeholder.name(2) == "Lineup Player 2"


def test_placeholder_ratings():
    assert (DEADBALL_RULES.bench_placeholder.batting_target, DEADBALL_RULES.bench_placeholder.on_base_target) == (20, 25)
    assert (DEADBALL_RULES.starter_placeholder.batting_target, DEADBALL_RULES.starter_placeholder.on_base_target) == (15, 20)
    assert (DEADBALL_RULES.reliever_placeholder.batting_target, DEADBALL_RULES.reliever_placeholder.on_base_target) == (12, 18)
    assert DEADBALL_RULES.starter_placeholder.pitch_die == "d4"
