import pytest

from deadball_roster.assembler import (
    MISSING_STATS_MESSAGE,
    MissingStatsError,
    RosterGenerationError,
    RosterSession,
    generate_roster,
    rating_source_from_env,
)
from deadball_roster.config_loader import ColumnProfile
from deadball_roster.ingest import parse_stat_text
from deadball_roster.ratings import FixedRatingSource, RandomRatingSource


BATTING = parse_stat_text(
    """Player,Pos,G,PA,HR,2B,SO,SB,BA,OBP,SLG,WAR
Catcher One,C,120,450,18,22,90,1,.255,.320,.430,3.1
First Base*,1B,150,620,30,30,120,2,.270,.350,.500,2.5
Second Base#,2B,140,580,10,28,70,15,.280,.340,.400,2.9
"""
)

PITCHING = parse_stat_text(
    """Player,ERA,G,GS,IP,SO,HR,BB
Ace Starter,2.45,32,32,200.1,220,15,40
Closer*,1.80,65,0,66.0,80,3,18
"""
)


def test_missing_batting_rows_raise():
    with pytest.raises(MissingStatsError) as excinfo:
        generate_roster([], PITCHING)
    assert excinfo.value.message == MISSING_STATS_MESSAGE


def test_missing_pitching_rows_raise():
    with pytest.raises(MissingStatsError):
        generate_roster(BATTING, None)


def test_generate_roster_reports_counts():
    output = generate_roster(BATTING, PITCHING, rating_source=FixedRatingSource())

    assert output.batting_report.accepted_rows == 3
    assert output.pitching_report.accepted_rows == 2
    assert output.roster.lineup[0].name == "Catcher One"
    assert output.roster.starting_pitchers[0].name == "Ace Starter"
    assert output.roster.starting_pitchers[0].traits == ("K+", "GB+", "CN+", "ST+")
    assert output.roster.relief_pitchers[0].name == "Closer"
    assert output.roster.relief_pitchers[0].pitch_die == "d20"


def test_generation_is_repeatable_with_a_seed():
    first = generate_roster(BATTING, PITCHING, rating_source=RandomRatingSource(99))
    second = generate_roster(BATTING, PITCHING, rating_source=RandomRatingSource(99))

    assert first.roster == second.roster


def test_generation_does_not_mutate_inputs():
    before = [dict(row) for row in BATTING]

    generate_roster(
        BATTING,
        PITCHING,
        rating_source=FixedRatingSource(),
        profile=ColumnProfile(batting_columns={"Player": "Pos|Player"}),
    )

    assert BATTING == before


def test_profile_maps_renamed_columns():
    batting = [{"Name": "Renamed Hitter", "AVG": ".310", "OBP": ".380", "PA": "400", "Pos": "SS"}]

    output = generate_roster(
        batting,
        PITCHING,
        rating_source=FixedRatingSource(),
        profile=ColumnProfile(batting_columns={"Player": "Name", "BA": "AVG"}),
    )

    hitter = next(p for p in output.roster.lineup if not p.placeholder)
    assert hitter.name == "Renamed Hitter"
    assert hitter.batting_target == 31


def test_session_requires_both_sources():
    session = RosterSession()
    session.batting_rows = BATTING

    with pytest.raises(MissingStatsError):
        session.generate()
    assert session.roster is None


def test_session_keeps_previous_roster_on_failure(monkeypatch):
    session = RosterSession()
    session.batting_rows = BATTING
    session.pitching_rows = PITCHING
    session.generate(team_name="  Mudville  ", rating_source=FixedRatingSource())
    previous = session.roster

    def boom(*args, **kwargs):
        raise RuntimeError("disk full")

    monkeypatch.setattr("deadball_roster.assembler.service.assemble_roster", boom)
    with pytest.raises(RosterGenerationError) as excinfo:
        session.generate(team_name="Other", rating_source=FixedRatingSource())

    assert excinfo.value.message == "Error generating roster: disk full"
    assert session.roster is previous
    assert session.team_name == "Mudville"
    assert session.display_team_name == "Mudville"


def test_session_default_team_name():
    session = RosterSession()
    assert session.display_team_name == "Team"


def test_rating_source_from_env(monkeypatch):
    monkeypatch.setenv("DEADBALL_RATING_SEED", "5")
    first = rating_source_from_env()
    second = rating_source_from_env()
    assert first.pitcher_batting_target() == second.pitcher_batting_target()
    assert first.seed == 5


def test_rating_source_from_env_ignores_bad_seed(monkeypatch, caplog):
    monkeypatch.setenv("DEADBALL_RATING_SEED", "not-a-number")

    source = rating_source_from_env()

    assert source.seed is None
    assert "DEADBALL_RATING_SEED" in caplog.text
