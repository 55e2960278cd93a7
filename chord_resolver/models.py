"""Data models for chord resolution.

This module defines the immutable value types that flow through the
resolution pipeline: parsed chord names, generated note content, curated
dictionary entries with their voicings, and the final lookup result.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

ChordQuality = Literal[
    "major",
    "minor",
    "diminished",
    "half-diminished",
    "augmented",
    "suspended",
    "add",
    "dominant",
    "power",
]

LookupStatus = Literal["found", "generated", "partial", "similar", "unknown"]

Difficulty = Literal["easy", "intermediate", "advanced"]


@dataclass(frozen=True)
class ParsedChord:
    """A chord name broken into its components.

    Parameters
    ----------
    root : str
        The root note as spelled in the input (e.g., "A", "Bb", "F#").
    quality : ChordQuality
        The quality category.
    extensions : tuple[str, ...]
        Ordered extension tokens (e.g., ("7",), ("maj7",), ("7", "b5")).
    canonical : str
        Normalized name used for dictionary lookup and equality.
    display : str
        User-facing name.
    residue : str
        Unrecognized tail of the input, kept verbatim.
    bass : str | None
        Slash-chord bass note, if any. Not part of the canonical name.

    Examples
    --------
    >>> chord = ParsedChord(root="A", quality="minor", extensions=("7",), canonical="Am7", display="Am7")
    >>> chord.suffix
    'm7'
    """

    root: str
    quality: ChordQuality
    extensions: tuple[str, ...]
    canonical: str
    display: str
    residue: str = ""
    bass: str | None = None

    @property
    def suffix(self) -> str:
        """The canonical name without its root; the formula key."""
        return self.canonical[len(self.root) :]

    def __str__(self) -> str:
        """Return the canonical name."""
        return self.canonical


@dataclass(frozen=True)
class GeneratedChord:
    """Note content derived from a root and a formula.

    Parameters
    ----------
    root : str
        Canonical (sharp) spelling of the root.
    notes : tuple[str, ...]
        Deduplicated notes, root first.
    intervals : tuple[int, ...]
        The intervals that produced ``notes``.
    omitted : tuple[str, ...]
        Names of tones dropped for playability (e.g., ("5th",)).
    """

    root: str
    notes: tuple[str, ...]
    intervals: tuple[int, ...]
    omitted: tuple[str, ...] = ()

    @property
    def is_partial(self) -> bool:
        """True if tones were dropped from the full formula."""
        return bool(self.omitted)


@dataclass(frozen=True)
class BarrePosition:
    """A barre across adjacent strings.

    Parameters
    ----------
    fret : int
        The barred fret.
    from_string : int
        First string (0 = low E).
    to_string : int
        Last string, inclusive.
    """

    fret: int
    from_string: int
    to_string: int


@dataclass(frozen=True)
class Voicing:
    """One playable fingering of a chord.

    Parameters
    ----------
    id : str
        Identifier unique within the chord (e.g., "am-open").
    name : str
        Short label ("Open", "Barre", "Position 5", ...).
    frets : tuple[int | None, ...]
        Fret per string, low to high; None = muted, 0 = open.
    fingers : tuple[int | None, ...] | None
        Finger per string (1 = index ... 4 = pinky), if known.
    barres : tuple[BarrePosition, ...]
        Barres in this voicing.
    base_fret : int
        Lowest fret of the diagram window.
    difficulty : Difficulty | None
        Difficulty tag, if known.
    """

    id: str
    name: str
    frets: tuple[int | None, ...]
    fingers: tuple[int | None, ...] | None = None
    barres: tuple[BarrePosition, ...] = ()
    base_fret: int = 1
    difficulty: Difficulty | None = None


@dataclass(frozen=True)
class ChordEntry:
    """A curated dictionary entry.

    Parameters
    ----------
    canonical : str
        Dictionary key; equal to the normalized chord name.
    display : str
        User-facing name.
    root : str
        Root note as spelled in the dictionary.
    quality : ChordQuality
        The quality category.
    voicings : tuple[Voicing, ...]
        Fingerings; the first one is the default.
    extensions : tuple[str, ...]
        Extension tokens of the chord name.
    """

    canonical: str
    display: str
    root: str
    quality: ChordQuality
    voicings: tuple[Voicing, ...]
    extensions: tuple[str, ...] = ()


@dataclass(frozen=True)
class ResolvedChord:
    """A chord ready to render.

    Parameters
    ----------
    canonical : str
        Normalized chord name.
    display : str
        User-facing name.
    root : str
        Root note as spelled in the input.
    quality : ChordQuality
        The quality category.
    extensions : tuple[str, ...]
        Extension tokens.
    notes : tuple[str, ...]
        Chord tones, root first, sharp spelling.
    voicings : tuple[Voicing, ...]
        Curated or generated fingerings.
    omitted : tuple[str, ...]
        Tones dropped for playability.
    """

    canonical: str
    display: str
    root: str
    quality: ChordQuality
    extensions: tuple[str, ...]
    notes: tuple[str, ...]
    voicings: tuple[Voicing, ...]
    omitted: tuple[str, ...] = ()

    def voicing(self, index: int = 0) -> Voicing | None:
        """Return the voicing at ``index``, or None if there is none."""
        if 0 <= index < len(self.voicings):
            return self.voicings[index]
        return None

    @property
    def default_voicing(self) -> Voicing | None:
        """The first voicing, or None for a chord without voicings."""
        return self.voicing(0)


@dataclass(frozen=True)
class LookupResult:
    """Outcome of resolving one chord name.

    Parameters
    ----------
    status : LookupStatus
        Which resolution tier produced the result.
    display_name : str
        Name to show, always available.
    chord : ResolvedChord | None
        The resolved chord for found, generated and partial results.
    suggestions : tuple[str, ...]
        Ranked same-root chord names for similar results.
    warning : str | None
        Set for partial results.
    is_generated : bool
        True if the chord was derived algorithmically.
    """

    status: LookupStatus
    display_name: str
    chord: ResolvedChord | None = None
    suggestions: tuple[str, ...] = ()
    warning: str | None = None
    is_generated: bool = False

    @property
    def notes(self) -> tuple[str, ...]:
        """Chord tones of the resolved chord, or an empty tuple."""
        return self.chord.notes if self.chord is not None else ()

    @property
    def has_diagram(self) -> bool:
        """True if the result carries at least one voicing."""
        return self.chord is not None and self.chord.default_voicing is not None
