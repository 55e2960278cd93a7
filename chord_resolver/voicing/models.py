"""Data models for voicing generation.

This module defines the search constraints, the raw candidates produced by
the backtracking search and their scores.
"""

from __future__ import annotations

from dataclasses import dataclass

# A fret per string, low to high; None = muted, 0 = open
Frets = tuple[int | None, ...]


@dataclass(frozen=True)
class GeneratorConstraints:
    """Limits for the voicing search.

    Parameters
    ----------
    max_fret_span : int
        Largest distance between fretted notes (open strings excluded).
    require_root : bool
        Require the root as the lowest sounding note.
    min_strings : int
        Minimum number of sounding strings.
    max_muted_strings : int
        Maximum number of muted strings.
    max_fret : int
        Highest fret considered.
    require_third : bool
        Require the third when the chord has one.
    """

    max_fret_span: int = 4
    require_root: bool = True
    min_strings: int = 4
    max_muted_strings: int = 2
    max_fret: int = 12
    require_third: bool = True


@dataclass(frozen=True)
class VoicingCandidate:
    """A fret combination that only sounds chord tones.

    Parameters
    ----------
    frets : Frets
        Fret per string.
    pitch_classes : frozenset[int]
        Distinct pitch classes sounding.
    bass_note : str | None
        Lowest sounding note.
    fret_span : int
        Distance between the lowest and highest fretted note.
    base_fret : int
        Lowest fretted position (1 if only open strings).
    played_strings : int
        Number of sounding strings.
    has_root : bool
        Root is sounding.
    has_third : bool
        A major or minor third is sounding.
    has_fifth : bool
        The perfect fifth is sounding.
    """

    frets: Frets
    pitch_classes: frozenset[int]
    bass_note: str | None
    fret_span: int
    base_fret: int
    played_strings: int
    has_root: bool
    has_third: bool
    has_fifth: bool


@dataclass(frozen=True)
class VoicingScore:
    """Score of a candidate, higher is better.

    Parameters
    ----------
    playability : float
        Small span, open strings, low position (0-30).
    voice_leading : float
        Root in bass, third and fifth present (-15 to 30).
    ergonomics : float
        Common shape, no string skips (0-20).
    completeness : float
        Share of chord tones sounding (0-25).
    sonority : float
        Number and spread of sounding strings (0-10).
    """

    playability: float
    voice_leading: float
    ergonomics: float
    completeness: float
    sonority: float

    @property
    def total(self) -> float:
        """Sum of all components."""
        return self.playability + self.voice_leading + self.ergonomics + self.completeness + self.sonority
