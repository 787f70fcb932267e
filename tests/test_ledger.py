"""Tests for the substitution ledger and legacy normalization."""

import pytest

from squadboard.analysis.ledger import (
    InvalidIntervalError,
    SubstitutionLedger,
    append_entry,
    build_ledger,
    normalize_ledger,
)
from squadboard.analysis.minutes import compute_minutes
from squadboard.models import GameStat, SubstitutionEntry


class TestSubstitutionLedger:
    """Tests for appending entries to a ledger."""

    def test_empty_ledger_is_valid(self) -> None:
        """A ledger may hold no entries."""
        ledger = SubstitutionLedger(duration=90)
        assert len(ledger) == 0
        assert ledger.last_minute is None

    def test_append_valid_entries(self) -> None:
        """Entries in time order are accepted."""
        ledger = SubstitutionLedger(duration=90, started=True)
        append_entry(ledger, SubstitutionEntry(out_minute=40))
        append_entry(ledger, SubstitutionEntry(in_minute=60, out_minute=75))
        append_entry(ledger, SubstitutionEntry(in_minute=80))
        assert len(ledger) == 3
        assert ledger.last_minute == 80

    def test_append_returns_ledger(self) -> None:
        """append_entry returns the ledger it extended."""
        ledger = SubstitutionLedger(duration=90)
        assert append_entry(ledger, SubstitutionEntry(in_minute=10)) is ledger

    def test_out_before_in_rejected(self) -> None:
        """An entry going off before coming on is rejected."""
        ledger = SubstitutionLedger(duration=90)
        with pytest.raises(InvalidIntervalError, match="before in_minute"):
            ledger.append(SubstitutionEntry(in_minute=50, out_minute=40))

    def test_minute_beyond_duration_rejected(self) -> None:
        """Minutes must fall inside the match."""
        ledger = SubstitutionLedger(duration=60)
        with pytest.raises(InvalidIntervalError, match="outside match duration"):
            ledger.append(SubstitutionEntry(in_minute=65))

    def test_negative_minute_rejected(self) -> None:
        """Negative minutes are rejected."""
        ledger = SubstitutionLedger(duration=90)
        with pytest.raises(InvalidIntervalError):
            ledger.append(SubstitutionEntry(out_minute=-5))

    def test_entry_going_back_in_time_rejected(self) -> None:
        """An entry may not start before the last recorded minute."""
        ledger = SubstitutionLedger(duration=90)
        ledger.append(SubstitutionEntry(in_minute=30, out_minute=60))
        with pytest.raises(InvalidIntervalError, match="earlier than last recorded"):
            ledger.append(SubstitutionEntry(in_minute=45))
        assert len(ledger) == 1

    def test_reentry_at_same_minute_allowed(self) -> None:
        """Coming back on in the minute the player went off is fine."""
        ledger = SubstitutionLedger(duration=90, started=True)
        ledger.append(SubstitutionEntry(out_minute=60))
        ledger.append(SubstitutionEntry(in_minute=60))
        assert len(ledger) == 2

    def test_entry_after_open_interval_rejected(self) -> None:
        """Nothing may follow an interval that runs to full time."""
        ledger = SubstitutionLedger(duration=90, started=True)
        ledger.append(SubstitutionEntry(out_minute=30))
        ledger.append(SubstitutionEntry(in_minute=40))
        with pytest.raises(InvalidIntervalError, match="until full time"):
            ledger.append(SubstitutionEntry(in_minute=50))
        with pytest.raises(InvalidIntervalError, match="until full time"):
            ledger.append(SubstitutionEntry(out_minute=70))
        assert len(ledger) == 2

    def test_starter_cannot_come_on(self) -> None:
        """A starter must go off before coming back on."""
        ledger = SubstitutionLedger(duration=90, started=True)
        with pytest.raises(InvalidIntervalError, match="already on the pitch"):
            ledger.append(SubstitutionEntry(in_minute=20, out_minute=40))

    def test_substitute_cannot_go_off_first(self) -> None:
        """A substitute must come on before going off."""
        ledger = SubstitutionLedger(duration=90)
        with pytest.raises(InvalidIntervalError, match="not on the pitch"):
            ledger.append(SubstitutionEntry(out_minute=40))

    def test_on_pitch_tracking(self) -> None:
        """on_pitch follows the recorded entries."""
        ledger = SubstitutionLedger(duration=90, started=True)
        assert ledger.on_pitch is True
        ledger.append(SubstitutionEntry(out_minute=30))
        assert ledger.on_pitch is False
        ledger.append(SubstitutionEntry(in_minute=45, out_minute=60))
        assert ledger.on_pitch is False
        assert ledger.open_ended is False
        ledger.append(SubstitutionEntry(in_minute=75))
        assert ledger.on_pitch is True
        assert ledger.open_ended is True

    def test_invalid_interval_is_value_error(self) -> None:
        """Callers catching ValueError also catch ledger rejections."""
        assert issubclass(InvalidIntervalError, ValueError)


class TestNormalizeLedger:
    """Tests for folding legacy fields into the ledger."""

    def test_new_shape_passes_through(self) -> None:
        """Entries are copied unchanged when no legacy data applies."""
        stat = GameStat(
            player_id="p1",
            game_id="g1",
            started=True,
            substitutions=[SubstitutionEntry(out_minute=65, replaced_by="p2")],
        )
        entries = normalize_ledger(stat)
        assert entries == [SubstitutionEntry(out_minute=65, replaced_by="p2")]
        assert entries[0] is not stat.substitutions[0]

    def test_starter_legacy_minute_becomes_entry(self) -> None:
        """A starter with only substitution_minute gets one out entry."""
        stat = GameStat(player_id="p1", game_id="g1", started=True, substitution_minute=55)
        assert normalize_ledger(stat) == [SubstitutionEntry(out_minute=55)]

    def test_starter_legacy_fills_missing_first_out(self) -> None:
        """The legacy minute completes a first entry lacking out_minute."""
        stat = GameStat(
            player_id="p1",
            game_id="g1",
            started=True,
            substitution_minute=50,
            substitutions=[SubstitutionEntry(), SubstitutionEntry(in_minute=70)],
        )
        entries = normalize_ledger(stat)
        assert entries[0].out_minute == 50
        assert entries[1].in_minute == 70
        assert stat.substitutions[0].out_minute is None

    def test_starter_legacy_ignored_when_first_out_present(self) -> None:
        """The ledger's own out minute wins over the legacy field."""
        stat = GameStat(
            player_id="p1",
            game_id="g1",
            started=True,
            substitution_minute=50,
            substitutions=[SubstitutionEntry(out_minute=65)],
        )
        assert normalize_ledger(stat)[0].out_minute == 65

    def test_substitute_legacy_in_minute(self) -> None:
        """A substitute with legacy fields gets one in/out entry."""
        stat = GameStat(
            player_id="p2",
            game_id="g1",
            substitution_in_minute=60,
            substitution_minute=80,
        )
        assert normalize_ledger(stat) == [SubstitutionEntry(in_minute=60, out_minute=80)]

    def test_substitute_legacy_ignored_with_entries(self) -> None:
        """The newer list wins for substitutes."""
        stat = GameStat(
            player_id="p2",
            game_id="g1",
            substitution_in_minute=60,
            substitutions=[SubstitutionEntry(in_minute=70)],
        )
        assert normalize_ledger(stat) == [SubstitutionEntry(in_minute=70)]

    def test_unused_substitute_has_empty_ledger(self) -> None:
        """A substitute who never came on has no entries."""
        stat = GameStat(player_id="p2", game_id="g1")
        assert normalize_ledger(stat) == []


class TestBuildLedger:
    """Tests for build_ledger."""

    def test_builds_validated_ledger(self) -> None:
        """Normalized entries are validated into a ledger."""
        stat = GameStat(player_id="p1", game_id="g1", started=True, substitution_minute=30)
        ledger = build_ledger(stat, duration=60)
        assert ledger.duration == 60
        assert ledger.entries == [SubstitutionEntry(out_minute=30)]

    def test_rejects_malformed_stored_entries(self) -> None:
        """Stored entries that break the ledger rules are rejected."""
        stat = GameStat(
            player_id="p1",
            game_id="g1",
            substitutions=[SubstitutionEntry(in_minute=70, out_minute=60)],
        )
        with pytest.raises(InvalidIntervalError):
            build_ledger(stat)

    def test_rejects_overlapping_reentry(self) -> None:
        """A starter coming on twice without going off is rejected."""
        stat = GameStat(
            player_id="p1",
            game_id="g1",
            started=True,
            substitutions=[
                SubstitutionEntry(out_minute=30),
                SubstitutionEntry(in_minute=40),
                SubstitutionEntry(in_minute=50),
            ],
        )
        with pytest.raises(InvalidIntervalError):
            build_ledger(stat, duration=90)

    def test_ledger_uses_starting_status(self) -> None:
        """build_ledger knows whether the player started."""
        assert build_ledger(GameStat(player_id="p1", game_id="g1", started=True)).started
        assert not build_ledger(GameStat(player_id="p2", game_id="g1")).started


ACCEPTED_LEDGERS = [
    (True, []),
    (True, [SubstitutionEntry(out_minute=65)]),
    (True, [SubstitutionEntry(out_minute=30), SubstitutionEntry(in_minute=60)]),
    (True, [SubstitutionEntry(out_minute=0), SubstitutionEntry(in_minute=0)]),
    (
        True,
        [
            SubstitutionEntry(out_minute=20),
            SubstitutionEntry(in_minute=40, out_minute=70),
            SubstitutionEntry(in_minute=80),
        ],
    ),
    (True, [SubstitutionEntry(out_minute=60), SubstitutionEntry(in_minute=60)]),
    (True, [SubstitutionEntry(replaced_by="p9")]),
    (False, []),
    (False, [SubstitutionEntry(in_minute=65)]),
    (False, [SubstitutionEntry(in_minute=0, out_minute=90)]),
    (
        False,
        [
            SubstitutionEntry(in_minute=10, out_minute=30),
            SubstitutionEntry(in_minute=30, out_minute=60),
            SubstitutionEntry(in_minute=60),
        ],
    ),
    (False, [SubstitutionEntry(), SubstitutionEntry(in_minute=85)]),
]


class TestMinutesBound:
    """Minutes from any accepted ledger stay within the match."""

    @pytest.mark.parametrize("started,entries", ACCEPTED_LEDGERS)
    @pytest.mark.parametrize("duration", [60, 90])
    def test_minutes_within_duration(
        self, started: bool, entries: list[SubstitutionEntry], duration: int
    ) -> None:
        """0 <= minutes <= duration for every ledger build_ledger accepts."""
        stat = GameStat(player_id="p1", game_id="g1", started=started, substitutions=entries)
        if any(
            m is not None and m > duration
            for e in entries
            for m in (e.in_minute, e.out_minute)
        ):
            with pytest.raises(InvalidIntervalError):
                build_ledger(stat, duration)
            return

        build_ledger(stat, duration)
        assert 0 <= compute_minutes(stat, duration) <= duration
