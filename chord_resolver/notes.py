"""Chord note generation.

This module combines a root with a formula from the formula table to
produce the notes of a chord, and reduces large chords (11ths, 13ths) to a
playable subset while reporting which tones were left out.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chord_resolver.formulas import INTERVAL_NAMES, get_formula
from chord_resolver.models import GeneratedChord
from chord_resolver.pitch_class import index_of, transpose

if TYPE_CHECKING:
    from chord_resolver.models import ParsedChord

# Intervals dropped first when a chord has too many tones: 5th, 9th, 11th
OMISSION_PRIORITY: tuple[int, ...] = (7, 14, 17)

THIRDS = frozenset({3, 4})


def _unique_notes(root: str, intervals: tuple[int, ...]) -> tuple[str, ...]:
    """Apply intervals to root, keeping the first note of each pitch class."""
    notes: list[str] = []
    seen: set[int] = set()
    for interval in intervals:
        note = transpose(root, interval)
        pc = index_of(note)
        if pc not in seen:
            seen.add(pc)
            notes.append(note)
    return tuple(notes)


def reduce_chord_tones(intervals: tuple[int, ...], max_tones: int) -> tuple[tuple[int, ...], tuple[str, ...]]:
    """Drop lower-priority tones until at most ``max_tones`` remain.

    The 5th goes first, then the 9th, then the 11th. The root, the third and
    the top interval of the formula (the tone that names the chord) are
    never dropped, so a chord may stay above ``max_tones``.

    Parameters
    ----------
    intervals : tuple[int, ...]
        Full formula.
    max_tones : int
        Maximum number of distinct pitch classes to keep.

    Returns
    -------
    tuple[tuple[int, ...], tuple[str, ...]]
        Kept intervals and the names of the omitted tones.

    Examples
    --------
    >>> reduce_chord_tones((0, 4, 7, 10, 14, 21), 5)
    ((0, 4, 10, 14, 21), ('5th',))
    >>> reduce_chord_tones((0, 4, 7), 5)
    ((0, 4, 7), ())
    """
    kept = list(intervals)
    omitted: list[str] = []
    protected = {0, intervals[-1]} | (THIRDS & set(intervals))
    for interval in OMISSION_PRIORITY:
        if len({i % 12 for i in kept}) <= max_tones:
            break
        if interval in kept and interval not in protected:
            kept.remove(interval)
            omitted.append(INTERVAL_NAMES[interval])
    return tuple(kept), tuple(omitted)


def generate_notes(root: str, quality: str, max_tones: int | None = None) -> GeneratedChord | None:
    """Generate the notes of a chord from its root and quality token.

    Parameters
    ----------
    root : str
        Root note in any spelling (e.g., "Bb", "F#").
    quality : str
        Formula key or alias (e.g., "m7", "min7", "").
    max_tones : int | None
        If given, reduce the chord to at most this many tones where the
        omission rules allow it.

    Returns
    -------
    GeneratedChord | None
        The notes, root first and spelled with sharps, or None if the
        quality has no formula.

    Raises
    ------
    ValueError
        If the root is not a valid note.

    Examples
    --------
    >>> generate_notes("G", "7").notes
    ('G', 'B', 'D', 'F')
    >>> generate_notes("Bb", "").notes
    ('A#', 'D', 'F')
    >>> generate_notes("C", "nope") is None
    True
    """
    formula = get_formula(quality)
    if formula is None:
        return None

    intervals = formula
    omitted: tuple[str, ...] = ()
    if max_tones is not None:
        intervals, omitted = reduce_chord_tones(formula, max_tones)

    return GeneratedChord(
        root=transpose(root, 0),
        notes=_unique_notes(root, intervals),
        intervals=intervals,
        omitted=omitted,
    )


def notes_for(parsed: ParsedChord, max_tones: int | None = None) -> GeneratedChord | None:
    """Generate the notes of a parsed chord.

    Examples
    --------
    >>> from chord_resolver.normalizer import parse_chord_name
    >>> notes_for(parse_chord_name("F#m")).notes
    ('F#', 'A', 'C#')
    """
    return generate_notes(parsed.root, parsed.suffix, max_tones=max_tones)
