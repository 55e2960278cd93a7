"""Curated chord dictionaries.

A dictionary maps canonical chord names to ``ChordEntry`` records holding
hand-curated voicings. ``GUITAR_CHORDS`` is the bundled default.

Examples
--------
>>> from chord_resolver.dictionary import GUITAR_CHORDS, get_chord
>>> get_chord("Am").voicings[0].frets
(None, 0, 2, 2, 1, 0)
>>> has_chord("Am") and not has_chord("Am9")
True
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chord_resolver.dictionary.guitar import GUITAR_CHORDS
from chord_resolver.dictionary.loader import load_dictionary_json, parse_dictionary_data, validate_dictionary

if TYPE_CHECKING:
    from collections.abc import Mapping

    from chord_resolver.models import ChordEntry


def get_chord_names(chords: Mapping[str, ChordEntry] = GUITAR_CHORDS) -> tuple[str, ...]:
    """All canonical names in a dictionary, in dictionary order."""
    return tuple(chords)


def has_chord(name: str, chords: Mapping[str, ChordEntry] = GUITAR_CHORDS) -> bool:
    """True if ``name`` is a key of the dictionary (no normalization)."""
    return name in chords


def get_chord(name: str, chords: Mapping[str, ChordEntry] = GUITAR_CHORDS) -> ChordEntry | None:
    """Return the entry for a canonical name, or None."""
    return chords.get(name)


__all__ = [
    "GUITAR_CHORDS",
    "get_chord",
    "get_chord_names",
    "has_chord",
    "load_dictionary_json",
    "parse_dictionary_data",
    "validate_dictionary",
]
