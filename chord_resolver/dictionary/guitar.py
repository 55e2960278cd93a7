"""Bundled guitar chord dictionary.

Hand-curated fingerings for the 21 most common open and barre chords in
standard tuning. Keys are canonical chord names.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from chord_resolver.models import BarrePosition, ChordEntry, Voicing

if TYPE_CHECKING:
    from collections.abc import Mapping

    from chord_resolver.models import ChordQuality


def _entry(
    name: str,
    root: str,
    quality: ChordQuality,
    voicing: Voicing,
    extensions: tuple[str, ...] = (),
) -> ChordEntry:
    return ChordEntry(
        canonical=name,
        display=name,
        root=root,
        quality=quality,
        voicings=(voicing,),
        extensions=extensions,
    )


_CHORDS = (
    # Major
    _entry(
        "C",
        "C",
        "major",
        Voicing("c-open", "Open", (None, 3, 2, 0, 1, 0), (None, 3, 2, None, 1, None), difficulty="easy"),
    ),
    _entry(
        "D",
        "D",
        "major",
        Voicing("d-open", "Open", (None, None, 0, 2, 3, 2), (None, None, None, 1, 3, 2), difficulty="easy"),
    ),
    _entry(
        "E",
        "E",
        "major",
        Voicing("e-open", "Open", (0, 2, 2, 1, 0, 0), (None, 2, 3, 1, None, None), difficulty="easy"),
    ),
    _entry(
        "F",
        "F",
        "major",
        Voicing(
            "f-barre",
            "Barre",
            (1, 3, 3, 2, 1, 1),
            (1, 3, 4, 2, 1, 1),
            barres=(BarrePosition(fret=1, from_string=0, to_string=5),),
            base_fret=1,
            difficulty="intermediate",
        ),
    ),
    _entry(
        "G",
        "G",
        "major",
        Voicing("g-open", "Open", (3, 2, 0, 0, 0, 3), (2, 1, None, None, None, 3), difficulty="easy"),
    ),
    _entry(
        "A",
        "A",
        "major",
        Voicing("a-open", "Open", (None, 0, 2, 2, 2, 0), (None, None, 1, 2, 3, None), difficulty="easy"),
    ),
    _entry(
        "B",
        "B",
        "major",
        Voicing(
            "b-barre",
            "Barre",
            (None, 2, 4, 4, 4, 2),
            (None, 1, 2, 3, 4, 1),
            barres=(BarrePosition(fret=2, from_string=1, to_string=5),),
            base_fret=2,
            difficulty="intermediate",
        ),
    ),
    # Minor
    _entry(
        "Am",
        "A",
        "minor",
        Voicing("am-open", "Open", (None, 0, 2, 2, 1, 0), (None, None, 2, 3, 1, None), difficulty="easy"),
    ),
    _entry(
        "Dm",
        "D",
        "minor",
        Voicing("dm-open", "Open", (None, None, 0, 2, 3, 1), (None, None, None, 2, 3, 1), difficulty="easy"),
    ),
    _entry(
        "Em",
        "E",
        "minor",
        Voicing("em-open", "Open", (0, 2, 2, 0, 0, 0), (None, 2, 3, None, None, None), difficulty="easy"),
    ),
    _entry(
        "Bm",
        "B",
        "minor",
        Voicing(
            "bm-barre",
            "Barre",
            (None, 2, 4, 4, 3, 2),
            (None, 1, 3, 4, 2, 1),
            barres=(BarrePosition(fret=2, from_string=1, to_string=5),),
            base_fret=2,
            difficulty="intermediate",
        ),
    ),
    _entry(
        "F#m",
        "F#",
        "minor",
        Voicing(
            "fsm-barre",
            "Barre",
            (2, 4, 4, 2, 2, 2),
            (1, 3, 4, 1, 1, 1),
            barres=(BarrePosition(fret=2, from_string=0, to_string=5),),
            base_fret=2,
            difficulty="intermediate",
        ),
    ),
    # Dominant sevenths
    _entry(
        "G7",
        "G",
        "dominant",
        Voicing("g7-open", "Open", (3, 2, 0, 0, 0, 1), (3, 2, None, None, None, 1), difficulty="easy"),
        ("7",),
    ),
    _entry(
        "A7",
        "A",
        "dominant",
        Voicing("a7-open", "Open", (None, 0, 2, 0, 2, 0), (None, None, 2, None, 3, None), difficulty="easy"),
        ("7",),
    ),
    _entry(
        "D7",
        "D",
        "dominant",
        Voicing("d7-open", "Open", (None, None, 0, 2, 1, 2), (None, None, None, 2, 1, 3), difficulty="easy"),
        ("7",),
    ),
    _entry(
        "E7",
        "E",
        "dominant",
        Voicing("e7-open", "Open", (0, 2, 0, 1, 0, 0), (None, 2, None, 1, None, None), difficulty="easy"),
        ("7",),
    ),
    # Minor sevenths
    _entry(
        "Am7",
        "A",
        "minor",
        Voicing("am7-open", "Open", (None, 0, 2, 0, 1, 0), (None, None, 2, None, 1, None), difficulty="easy"),
        ("7",),
    ),
    _entry(
        "Em7",
        "E",
        "minor",
        Voicing("em7-open", "Open", (0, 2, 0, 0, 0, 0), (None, 2, None, None, None, None), difficulty="easy"),
        ("7",),
    ),
    # Suspended
    _entry(
        "Dsus4",
        "D",
        "suspended",
        Voicing("dsus4-open", "Open", (None, None, 0, 2, 3, 3), (None, None, None, 1, 2, 3), difficulty="easy"),
        ("sus4",),
    ),
    _entry(
        "Asus4",
        "A",
        "suspended",
        Voicing("asus4-open", "Open", (None, 0, 2, 2, 3, 0), (None, None, 1, 2, 3, None), difficulty="easy"),
        ("sus4",),
    ),
    # Add
    _entry(
        "Cadd9",
        "C",
        "add",
        Voicing("cadd9-open", "Open", (None, 3, 2, 0, 3, 0), (None, 2, 1, None, 3, None), difficulty="easy"),
        ("add9",),
    ),
)

GUITAR_CHORDS: Mapping[str, ChordEntry] = MappingProxyType({entry.canonical: entry for entry in _CHORDS})
