"""Pitch class arithmetic for chord resolution.

This module provides the 12-tone chromatic table, the enharmonic alias
table and index/transpose operations. Every note name that enters the
engine is reduced to a pitch class (0-11, C=0) before any arithmetic, and
every note name that leaves it is spelled from the canonical sharp table.
A flat root is therefore accepted on input but reported with sharps on
output ("Bb" major yields "A#", "D", "F").
"""

from __future__ import annotations

from collections.abc import Iterable

# Canonical spellings, sharps preferred
NOTES: tuple[str, ...] = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")

# Alternative spellings to pitch class
ENHARMONIC_ALIASES: dict[str, int] = {
    "Db": 1,
    "Eb": 3,
    "Fb": 4,
    "E#": 5,
    "Gb": 6,
    "Ab": 8,
    "Bb": 10,
    "Cb": 11,
    "B#": 0,
    # Double sharps
    "C##": 2,
    "D##": 4,
    "E##": 6,
    "F##": 7,
    "G##": 9,
    "A##": 11,
    "B##": 1,
    # Double flats
    "Cbb": 10,
    "Dbb": 0,
    "Ebb": 2,
    "Fbb": 3,
    "Gbb": 5,
    "Abb": 7,
    "Bbb": 9,
}

NOTE_TO_PC: dict[str, int] = {**{note: pc for pc, note in enumerate(NOTES)}, **ENHARMONIC_ALIASES}


def clean_note(note: str) -> str:
    """Normalize unicode accidentals and letter case of a note name.

    Examples
    --------
    >>> clean_note("b♭")
    'Bb'
    >>> clean_note(" f♯ ")
    'F#'
    """
    note = note.strip().replace("♯", "#").replace("♭", "b").replace("𝄪", "##")
    if not note:
        return note
    return note[0].upper() + note[1:]


def index_of(note: str) -> int | None:
    """Return the pitch class of a note name, or None if unknown.

    Parameters
    ----------
    note : str
        Note name (e.g., "C", "F#", "Bb", "Cb", "F##", "Bbb").

    Returns
    -------
    int | None
        Pitch class (0-11, where C=0), or None for an unknown note.

    Examples
    --------
    >>> index_of("C")
    0
    >>> index_of("Bb")
    10
    >>> index_of("Cb")
    11
    >>> index_of("H") is None
    True
    """
    if not isinstance(note, str):
        return None
    return NOTE_TO_PC.get(clean_note(note))


def note_name(index: int) -> str:
    """Return the canonical spelling of a pitch class, wrapping modulo 12.

    Examples
    --------
    >>> note_name(10)
    'A#'
    >>> note_name(12)
    'C'
    """
    return NOTES[index % 12]


def canonical_note(note: str) -> str:
    """Respell a note with the canonical sharp/natural table.

    Raises
    ------
    ValueError
        If the note name is not recognized.

    Examples
    --------
    >>> canonical_note("Bb")
    'A#'
    >>> canonical_note("Fb")
    'E'
    """
    return transpose(note, 0)


def transpose(note: str, semitones: int) -> str:
    """Transpose a note by a number of semitones.

    Offsets beyond one octave (e.g., +21 for a 13th) and negative offsets
    wrap modulo 12. The result always uses the canonical spelling.

    Parameters
    ----------
    note : str
        Note name to transpose.
    semitones : int
        Number of semitones (positive = up).

    Returns
    -------
    str
        Transposed note, spelled with sharps.

    Raises
    ------
    ValueError
        If the note name is not recognized.

    Examples
    --------
    >>> transpose("B", 1)
    'C'
    >>> transpose("C", 21)
    'A'
    >>> transpose("Bb", 0)
    'A#'
    """
    pc = index_of(note)
    if pc is None:
        msg = f"Unknown note: {note}"
        raise ValueError(msg)
    return NOTES[(pc + semitones) % 12]


def same_pitch_class(note1: str, note2: str) -> bool:
    """Check if two note names are enharmonically equivalent.

    Examples
    --------
    >>> same_pitch_class("C#", "Db")
    True
    >>> same_pitch_class("C", "H")
    False
    """
    pc1 = index_of(note1)
    return pc1 is not None and pc1 == index_of(note2)


def pitch_class_set(notes: Iterable[str]) -> frozenset[int]:
    """Convert note names to a set of pitch classes, skipping unknown names.

    Examples
    --------
    >>> sorted(pitch_class_set(["C", "E", "G", "Fb"]))
    [0, 4, 7]
    """
    return frozenset(pc for pc in (index_of(n) for n in notes) if pc is not None)
