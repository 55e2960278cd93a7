"""Fretboard model.

Maps strings and frets to pitch classes for a fretted instrument in a
given tuning. Strings are indexed low to high (0 = low E in standard
guitar tuning).
"""

from __future__ import annotations

from collections.abc import Collection
from typing import TYPE_CHECKING

from chord_resolver.pitch_class import index_of, transpose

if TYPE_CHECKING:
    from chord_resolver.voicing.models import Frets

STANDARD_TUNING: tuple[str, ...] = ("E", "A", "D", "G", "B", "E")

# Highest fret of the instrument
MAX_FRET = 15


def note_at(string: int, fret: int, tuning: tuple[str, ...] = STANDARD_TUNING) -> str:
    """Return the note sounding at a string and fret.

    Examples
    --------
    >>> note_at(0, 3)
    'G'
    >>> note_at(4, 1)
    'C'
    """
    return transpose(tuning[string], fret)


def positions_on_string(
    string: int,
    pitch_classes: Collection[int],
    max_fret: int = MAX_FRET,
    tuning: tuple[str, ...] = STANDARD_TUNING,
) -> list[tuple[int, int]]:
    """Find the frets on one string that sound a chord tone.

    Parameters
    ----------
    string : int
        String index.
    pitch_classes : Collection[int]
        Chord tones as pitch classes.
    max_fret : int
        Highest fret to consider.
    tuning : tuple[str, ...]
        Open-string notes, low to high.

    Returns
    -------
    list[tuple[int, int]]
        (fret, pitch class) pairs in ascending fret order.

    Examples
    --------
    >>> positions_on_string(5, {0, 4, 7}, max_fret=5)
    [(0, 4), (3, 7)]
    """
    open_pc = index_of(tuning[string])
    positions = []
    for fret in range(max_fret + 1):
        pc = (open_pc + fret) % 12
        if pc in pitch_classes:
            positions.append((fret, pc))
    return positions


def fret_span(frets: Frets) -> int:
    """Distance between the lowest and highest fretted note.

    Open and muted strings are ignored.

    Examples
    --------
    >>> fret_span((None, 3, 2, 0, 1, 0))
    2
    """
    fretted = [f for f in frets if f is not None and f > 0]
    if not fretted:
        return 0
    return max(fretted) - min(fretted)


def base_fret(frets: Frets) -> int:
    """Lowest fretted position, 1 if only open or muted strings."""
    fretted = [f for f in frets if f is not None and f > 0]
    return min(fretted) if fretted else 1


def bass_note(frets: Frets, tuning: tuple[str, ...] = STANDARD_TUNING) -> str | None:
    """Lowest sounding note, or None if every string is muted.

    Examples
    --------
    >>> bass_note((None, 3, 2, 0, 1, 0))
    'C'
    """
    for string, fret in enumerate(frets):
        if fret is not None:
            return note_at(string, fret, tuning)
    return None


def count_muted(frets: Frets) -> int:
    """Number of muted strings."""
    return sum(1 for f in frets if f is None)


def count_open(frets: Frets) -> int:
    """Number of open strings."""
    return sum(1 for f in frets if f == 0)


def sounding_pitch_classes(frets: Frets, tuning: tuple[str, ...] = STANDARD_TUNING) -> frozenset[int]:
    """Pitch classes sounding in a fingering.

    Examples
    --------
    >>> sorted(sounding_pitch_classes((None, 0, 2, 2, 1, 0)))
    [0, 4, 9]
    """
    return frozenset((index_of(tuning[s]) + f) % 12 for s, f in enumerate(frets) if f is not None)
