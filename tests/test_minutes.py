"""Tests for minutes-played calculation."""

from datetime import date

from squadboard.analysis.minutes import (
    compute_minutes,
    minutes_from_ledger,
    recalculate_minutes,
)
from squadboard.models import Game, GameStat, SubstitutionEntry


class TestStarters:
    """Minutes for players in the starting XI."""

    def test_full_match(self) -> None:
        """A starter never taken off plays the whole match."""
        stat = GameStat(player_id="p1", game_id="g1", started=True)
        assert compute_minutes(stat, 90) == 90

    def test_full_match_uses_game_duration(self) -> None:
        """Short youth games give short full-match figures."""
        stat = GameStat(player_id="p1", game_id="g1", started=True)
        assert compute_minutes(stat, 60) == 60

    def test_taken_off(self) -> None:
        """A starter taken off at 65 played 65 minutes."""
        stat = GameStat(
            player_id="p1",
            game_id="g1",
            started=True,
            substitutions=[SubstitutionEntry(out_minute=65, replaced_by="p2")],
        )
        assert compute_minutes(stat, 90) == 65
        assert compute_minutes(stat, 90) == compute_minutes(stat, 90)

    def test_taken_off_legacy_field(self) -> None:
        """The legacy substitution_minute gives the same result."""
        stat = GameStat(player_id="p1", game_id="g1", started=True, substitution_minute=65)
        assert compute_minutes(stat, 90) == 65

    def test_reentry(self) -> None:
        """A starter off at 30 and back on at 60 played 60 minutes."""
        stat = GameStat(
            player_id="p1",
            game_id="g1",
            started=True,
            substitutions=[
                SubstitutionEntry(out_minute=30),
                SubstitutionEntry(in_minute=60),
            ],
        )
        assert compute_minutes(stat, 90) == 60

    def test_reentry_and_off_again(self) -> None:
        """Each interval on the pitch is added up."""
        stat = GameStat(
            player_id="p1",
            game_id="g1",
            started=True,
            substitutions=[
                SubstitutionEntry(out_minute=20),
                SubstitutionEntry(in_minute=40, out_minute=70),
            ],
        )
        assert compute_minutes(stat, 90) == 50

    def test_first_entry_without_out(self) -> None:
        """A first entry without out_minute counts as the full match."""
        stat = GameStat(
            player_id="p1",
            game_id="g1",
            started=True,
            substitutions=[SubstitutionEntry(replaced_by="p9")],
        )
        assert compute_minutes(stat, 90) == 90


class TestSubstitutes:
    """Minutes for players who started on the bench."""

    def test_brought_on(self) -> None:
        """A substitute on at 65 played 25 minutes of a 90-minute game."""
        stat = GameStat(
            player_id="p2",
            game_id="g1",
            substitutions=[SubstitutionEntry(in_minute=65)],
        )
        assert compute_minutes(stat, 90) == 25

    def test_brought_on_legacy_field(self) -> None:
        """The legacy substitution_in_minute gives the same result."""
        stat = GameStat(player_id="p2", game_id="g1", substitution_in_minute=65)
        assert compute_minutes(stat, 90) == 25

    def test_brought_on_and_off_legacy(self) -> None:
        """Legacy in and out minutes give the interval between them."""
        stat = GameStat(
            player_id="p2",
            game_id="g1",
            substitution_in_minute=46,
            substitution_minute=80,
        )
        assert compute_minutes(stat, 90) == 34

    def test_unused(self) -> None:
        """An unused substitute played no minutes."""
        stat = GameStat(player_id="p2", game_id="g1")
        assert compute_minutes(stat, 90) == 0

    def test_entries_without_in_minute_ignored(self) -> None:
        """Entries a substitute never came on for add nothing."""
        stat = GameStat(
            player_id="p2",
            game_id="g1",
            substitutions=[SubstitutionEntry(out_minute=50)],
        )
        assert compute_minutes(stat, 90) == 0


class TestMalformedLedgers:
    """Stored data that breaks the ledger rules never breaks the calculation."""

    def test_out_before_in_contributes_nothing(self) -> None:
        """An interval going backwards adds zero minutes."""
        stat = GameStat(
            player_id="p2",
            game_id="g1",
            substitutions=[
                SubstitutionEntry(in_minute=70, out_minute=60),
                SubstitutionEntry(in_minute=80),
            ],
        )
        assert compute_minutes(stat, 90) == 10

    def test_negative_out_minute_clamped(self) -> None:
        """A negative out minute counts as zero."""
        entries = [SubstitutionEntry(out_minute=-10)]
        assert minutes_from_ledger(entries, started=True, duration=90) == 0

    def test_empty_ledger(self) -> None:
        """An empty ledger yields the full match or nothing."""
        assert minutes_from_ledger([], started=True, duration=90) == 90
        assert minutes_from_ledger([], started=False, duration=90) == 0


class TestRecalculateMinutes:
    """Tests for recalculating a whole game."""

    def test_recalculates_every_stat(self) -> None:
        """Every stat line gets a figure."""
        game = Game(
            id="g1",
            date=date(2025, 3, 1),
            opponent="Riverside FC",
            duration=70,
            stats=[
                GameStat(player_id="p1", game_id="g1", started=True, substitution_minute=50),
                GameStat(player_id="p2", game_id="g1", substitution_in_minute=50),
                GameStat(player_id="p3", game_id="g1"),
            ],
        )
        assert recalculate_minutes(game) == {"p1": 50, "p2": 20, "p3": 0}

    def test_stats_left_unchanged(self) -> None:
        """Recalculation does not touch stored minutes."""
        stat = GameStat(player_id="p1", game_id="g1", started=True, minutes=12)
        game = Game(id="g1", date=date(2025, 3, 1), opponent="X", stats=[stat])
        recalculate_minutes(game)
        assert stat.minutes == 12
