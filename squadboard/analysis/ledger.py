"""Substitution ledger: the on/off-field intervals of one player in one game."""

from dataclasses import dataclass, field
from typing import Optional

from ..models.game import DEFAULT_GAME_DURATION, GameStat, SubstitutionEntry


class InvalidIntervalError(ValueError):
    """Raised when a substitution entry would corrupt a ledger."""

    pass


@dataclass
class SubstitutionLedger:
    """
    Ordered list of substitution entries for one player in one game.

    Entries are validated on append so that minutes calculated from the
    ledger stay within the match duration: intervals on the pitch never
    overlap, and nothing may follow an interval that runs to full time.

    Attributes:
        duration: Length of the match in minutes.
        started: Whether the player was on the pitch at kick-off.
        entries: Recorded entries, ordered by time.
    """

    duration: int = DEFAULT_GAME_DURATION
    started: bool = False
    entries: list[SubstitutionEntry] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def on_pitch(self) -> bool:
        """Whether the player is on the pitch after the recorded entries."""
        on = self.started
        for entry in self.entries:
            if entry.in_minute is not None:
                on = True
            if entry.out_minute is not None:
                on = False
        return on

    @property
    def open_ended(self) -> bool:
        """Whether the player stays on until full time."""
        if not self.entries:
            return False
        return self.on_pitch and self.entries[-1].out_minute is None

    @property
    def last_minute(self) -> Optional[int]:
        """Latest minute recorded in the ledger, if any."""
        for entry in reversed(self.entries):
            minutes = [m for m in (entry.in_minute, entry.out_minute) if m is not None]
            if minutes:
                return max(minutes)
        return None

    def append(self, entry: SubstitutionEntry) -> None:
        """
        Validate and append an entry.

        Args:
            entry: The entry to record.

        Raises:
            InvalidIntervalError: If a minute falls outside the match, the
                entry goes off before it comes on, it starts before the last
                recorded minute, or it overlaps the time already on the
                pitch.
        """
        for label, minute in (("in_minute", entry.in_minute), ("out_minute", entry.out_minute)):
            if minute is not None and not 0 <= minute <= self.duration:
                raise InvalidIntervalError(
                    f"{label} {minute} outside match duration 0-{self.duration}"
                )

        if (
            entry.in_minute is not None
            and entry.out_minute is not None
            and entry.out_minute < entry.in_minute
        ):
            raise InvalidIntervalError(
                f"out_minute {entry.out_minute} is before in_minute {entry.in_minute}"
            )

        last = self.last_minute
        first = entry.in_minute if entry.in_minute is not None else entry.out_minute
        if last is not None and first is not None and first < last:
            raise InvalidIntervalError(
                f"entry at minute {first} is earlier than last recorded minute {last}"
            )

        if self.open_ended:
            raise InvalidIntervalError("player is already on the pitch until full time")
        if entry.in_minute is not None and self.on_pitch:
            raise InvalidIntervalError(
                f"in_minute {entry.in_minute} while the player is already on the pitch"
            )
        if entry.in_minute is None and entry.out_minute is not None and not self.on_pitch:
            raise InvalidIntervalError(
                f"out_minute {entry.out_minute} while the player is not on the pitch"
            )

        self.entries.append(entry)


def append_entry(ledger: SubstitutionLedger, entry: SubstitutionEntry) -> SubstitutionLedger:
    """
    Append an entry to a ledger after validating it.

    Args:
        ledger: The ledger to extend.
        entry: The new entry.

    Returns:
        The same ledger, for chaining.

    Raises:
        InvalidIntervalError: If the entry is rejected.
    """
    ledger.append(entry)
    return ledger


def normalize_ledger(stat: GameStat) -> list[SubstitutionEntry]:
    """
    Fold the legacy single-substitution fields into a list of entries.

    Older stat lines only carry ``substitution_minute`` (starter taken off)
    and ``substitution_in_minute`` (substitute brought on). Newer ones carry
    a ``substitutions`` list. This returns one list in the newer shape
    without validating it, so the read path never fails on old data.

    Args:
        stat: The player's stat line.

    Returns:
        A new list of entries; the stat itself is not modified.
    """
    entries = [
        SubstitutionEntry(e.in_minute, e.out_minute, e.replaced_by)
        for e in stat.substitutions
    ]

    if stat.started:
        if entries:
            if entries[0].out_minute is None and stat.substitution_minute is not None:
                entries[0].out_minute = stat.substitution_minute
        elif stat.substitution_minute is not None:
            entries.append(SubstitutionEntry(out_minute=stat.substitution_minute))
        return entries

    if not entries and stat.substitution_in_minute is not None:
        entries.append(
            SubstitutionEntry(
                in_minute=stat.substitution_in_minute,
                out_minute=stat.substitution_minute,
            )
        )
    return entries


def build_ledger(stat: GameStat, duration: int = DEFAULT_GAME_DURATION) -> SubstitutionLedger:
    """
    Build a validated ledger from a stat line.

    Args:
        stat: The player's stat line.
        duration: Length of the match in minutes.

    Returns:
        SubstitutionLedger holding the normalized entries.

    Raises:
        InvalidIntervalError: If any stored entry is malformed.
    """
    ledger = SubstitutionLedger(duration=duration, started=stat.started)
    for entry in normalize_ledger(stat):
        ledger.append(entry)
    return ledger
