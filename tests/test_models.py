"""Tests for data models."""

from datetime import date

import pytest

from squadboard.models import (
    AttendanceRecord,
    Game,
    GameStat,
    InjuryRecord,
    IllnessRecord,
    MatchResult,
    Outcome,
    Player,
    TrainingSession,
)


class TestPlayer:
    """Tests for Player model."""

    def test_create_player(self) -> None:
        """Test basic player creation."""
        player = Player(id="p1", name="Emma Larsen", position="GK", jersey_number=1)
        assert player.name == "Emma Larsen"
        assert player.position == "GK"
        assert player.jersey_number == 1
        assert player.injured is False
        assert player.sick is False

    def test_empty_id_raises(self) -> None:
        """Test that an empty id raises error."""
        with pytest.raises(ValueError, match="id cannot be empty"):
            Player(id="", name="Nobody")

    def test_negative_jersey_raises(self) -> None:
        """Test that a negative jersey number raises error."""
        with pytest.raises(ValueError, match="jersey_number cannot be negative"):
            Player(id="p1", name="Test", jersey_number=-4)

    def test_injured_from_flag(self) -> None:
        """Injury flag alone marks the player injured."""
        player = Player(id="p1", name="Test", is_injured=True)
        assert player.injured is True

    def test_injured_from_active_record(self) -> None:
        """An active injury record marks the player injured."""
        player = Player(id="p1", name="Test", injuries=[InjuryRecord(type="Knee")])
        assert player.injured is True
        assert len(player.active_injuries) == 1

    def test_recovered_injury_not_active(self) -> None:
        """A recovered injury does not count."""
        player = Player(
            id="p1",
            name="Test",
            injuries=[InjuryRecord(type="Knee", status="RECOVERED")],
        )
        assert player.injured is False
        assert player.active_injuries == []

    def test_sick_from_record_or_flag(self) -> None:
        """Illness comes from either an active record or the flag."""
        assert Player(id="p1", name="A", is_sick=True).sick is True
        assert Player(id="p2", name="B", illnesses=[IllnessRecord(type="Flu")]).sick is True
        assert (
            Player(id="p3", name="C", illnesses=[IllnessRecord(type="Flu", status="resolved")]).sick
            is False
        )


class TestGameStat:
    """Tests for GameStat model."""

    def test_defaults(self) -> None:
        """All counting stats default to zero."""
        stat = GameStat(player_id="p1", game_id="g1")
        assert stat.minutes == 0
        assert stat.goals == 0
        assert stat.assists == 0
        assert stat.yellow_cards == 0
        assert stat.red_cards == 0
        assert stat.rating is None
        assert stat.started is False
        assert stat.substitutions == []

    def test_negative_goals_raises(self) -> None:
        """Test that negative stats raise error."""
        with pytest.raises(ValueError, match="goals cannot be negative"):
            GameStat(player_id="p1", game_id="g1", goals=-1)

    def test_rating_out_of_range_raises(self) -> None:
        """Ratings must be between 1 and 5."""
        with pytest.raises(ValueError, match="rating must be between 1 and 5"):
            GameStat(player_id="p1", game_id="g1", rating=6)


class TestGame:
    """Tests for Game model."""

    def test_create_game(self) -> None:
        """Test basic game creation."""
        game = Game(id="g1", date=date(2025, 3, 1), opponent="Riverside FC", score="2-1")
        assert game.duration == 90
        assert game.has_stats is False
        assert game.get_stat("p1") is None

    def test_non_positive_duration_raises(self) -> None:
        """Test that a zero duration raises error."""
        with pytest.raises(ValueError, match="duration must be positive"):
            Game(id="g1", date=date(2025, 3, 1), opponent="X", duration=0)

    def test_duplicate_player_stat_raises(self) -> None:
        """At most one stat line per player in a game."""
        with pytest.raises(ValueError, match="duplicate stat"):
            Game(
                id="g1",
                date=date(2025, 3, 1),
                opponent="X",
                stats=[
                    GameStat(player_id="p1", game_id="g1"),
                    GameStat(player_id="p1", game_id="g1", goals=1),
                ],
            )

    def test_get_stat(self) -> None:
        """Stat lines can be looked up by player."""
        stat = GameStat(player_id="p1", game_id="g1", goals=2)
        game = Game(id="g1", date=date(2025, 3, 1), opponent="X", stats=[stat])
        assert game.get_stat("p1") is stat


class TestMatchResult:
    """Tests for MatchResult model."""

    def test_is_decided(self) -> None:
        """Only undecided results are excluded from the record."""
        assert MatchResult(1, 0, Outcome.WIN).is_decided is True
        assert MatchResult(0, 0, Outcome.UNDECIDED).is_decided is False


class TestTrainingSession:
    """Tests for TrainingSession model."""

    def test_attended_count(self) -> None:
        """Count players marked present."""
        session = TrainingSession(
            id="t1",
            date=date(2025, 2, 25),
            attendance=[
                AttendanceRecord(player_id="p1", attended=True),
                AttendanceRecord(player_id="p2", attended=False),
                AttendanceRecord(player_id="p3", attended=True),
            ],
        )
        assert session.has_attendance is True
        assert session.attended_count == 2

    def test_no_attendance(self) -> None:
        """A session without records has no attendance."""
        session = TrainingSession(id="t1", date=date(2025, 2, 25))
        assert session.has_attendance is False
        assert session.attended_count == 0
