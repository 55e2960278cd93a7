"""Chord formula table.

This module maps chord-quality tokens to interval vectors (semitone offsets
from the root). Formula keys are the canonical quality suffixes produced by
the normalizer, so a canonical chord name is always ``root + key``. Aliases
map alternative spellings (e.g., "min7", "-7", "M7") onto those keys.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from chord_resolver.models import ChordQuality

# Formula key (canonical quality suffix) to semitone offsets from root.
# Offsets above 11 are compound intervals (14 = 9th, 17 = 11th, 21 = 13th).
CHORD_FORMULAS: Mapping[str, tuple[int, ...]] = MappingProxyType(
    {
        # Triads
        "": (0, 4, 7),
        "m": (0, 3, 7),
        "dim": (0, 3, 6),
        "aug": (0, 4, 8),
        # Power chord
        "5": (0, 7),
        # Suspended
        "sus2": (0, 2, 7),
        "sus4": (0, 5, 7),
        # Sixth chords
        "6": (0, 4, 7, 9),
        "m6": (0, 3, 7, 9),
        "69": (0, 4, 7, 9, 14),
        "m69": (0, 3, 7, 9, 14),
        # Seventh chords
        "7": (0, 4, 7, 10),
        "maj7": (0, 4, 7, 11),
        "m7": (0, 3, 7, 10),
        "mmaj7": (0, 3, 7, 11),
        "dim7": (0, 3, 6, 9),
        "m7b5": (0, 3, 6, 10),
        "aug7": (0, 4, 8, 10),
        # Suspended sevenths
        "7sus2": (0, 2, 7, 10),
        "7sus4": (0, 5, 7, 10),
        "9sus4": (0, 5, 7, 10, 14),
        # Added tones
        "add2": (0, 2, 4, 7),
        "add4": (0, 4, 5, 7),
        "add9": (0, 4, 7, 14),
        "add11": (0, 4, 7, 17),
        "madd9": (0, 3, 7, 14),
        "madd11": (0, 3, 7, 17),
        # Ninths
        "9": (0, 4, 7, 10, 14),
        "maj9": (0, 4, 7, 11, 14),
        "m9": (0, 3, 7, 10, 14),
        "mmaj9": (0, 3, 7, 11, 14),
        # Elevenths
        "11": (0, 4, 7, 10, 14, 17),
        "maj11": (0, 4, 7, 11, 14, 17),
        "m11": (0, 3, 7, 10, 14, 17),
        # Thirteenths (11th omitted, as commonly voiced)
        "13": (0, 4, 7, 10, 14, 21),
        "maj13": (0, 4, 7, 11, 14, 21),
        "m13": (0, 3, 7, 10, 14, 21),
        # Altered dominants
        "7b5": (0, 4, 6, 10),
        "7b9": (0, 4, 7, 10, 13),
        "7#9": (0, 4, 7, 10, 15),
        "7#11": (0, 4, 7, 10, 18),
        "7b13": (0, 4, 7, 10, 20),
        "7#5#9": (0, 4, 8, 10, 15),
        "7b5b9": (0, 4, 6, 10, 13),
        "maj7#11": (0, 4, 7, 11, 18),
        "maj7#5": (0, 4, 8, 11),
    }
)

# Alternative quality spellings to formula key
QUALITY_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        # Major
        "M": "",
        "maj": "",
        "major": "",
        "Δ": "",
        # Minor
        "min": "m",
        "mi": "m",
        "-": "m",
        "minor": "m",
        # Diminished
        "o": "dim",
        "°": "dim",
        "diminished": "dim",
        # Augmented
        "+": "aug",
        "augmented": "aug",
        "#5": "aug",
        # Suspended
        "sus": "sus4",
        "suspended": "sus4",
        # Sixths
        "maj6": "6",
        "M6": "6",
        "min6": "m6",
        "-6": "m6",
        "6/9": "69",
        "6add9": "69",
        # Sevenths
        "dom7": "7",
        "dom": "7",
        "M7": "maj7",
        "Δ7": "maj7",
        "ma7": "maj7",
        "min7": "m7",
        "mi7": "m7",
        "-7": "m7",
        "mM7": "mmaj7",
        "minmaj7": "mmaj7",
        "m(maj7)": "mmaj7",
        "-maj7": "mmaj7",
        "o7": "dim7",
        "°7": "dim7",
        "ø": "m7b5",
        "ø7": "m7b5",
        "m7-5": "m7b5",
        "min7b5": "m7b5",
        "hdim7": "m7b5",
        "+7": "aug7",
        "7+5": "aug7",
        "7-5": "7b5",
        "7#5": "aug7",
        # Suspended sevenths
        "7sus": "7sus4",
        "sus7": "7sus4",
        "sus47": "7sus4",
        "sus27": "7sus2",
        "9sus": "9sus4",
        # Added tones
        "2": "add2",
        "add": "add9",
        "min(add9)": "madd9",
        "m(add9)": "madd9",
        # Extended
        "dom9": "9",
        "M9": "maj9",
        "Δ9": "maj9",
        "min9": "m9",
        "-9": "m9",
        "mM9": "mmaj9",
        "M11": "maj11",
        "min11": "m11",
        "-11": "m11",
        "M13": "maj13",
        "min13": "m13",
        "-13": "m13",
    }
)

# Interval (semitones, compound) to the name used when a tone is omitted
INTERVAL_NAMES: Mapping[int, str] = MappingProxyType(
    {
        0: "root",
        2: "2nd",
        3: "3rd",
        4: "3rd",
        5: "4th",
        6: "5th",
        7: "5th",
        8: "5th",
        9: "6th",
        10: "7th",
        11: "7th",
        13: "9th",
        14: "9th",
        15: "9th",
        17: "11th",
        18: "11th",
        20: "13th",
        21: "13th",
    }
)

_LOWER_FORMULA_KEYS: dict[str, str] = {key.lower(): key for key in CHORD_FORMULAS}
_LOWER_ALIASES: dict[str, str] = {}
for _alias, _key in QUALITY_ALIASES.items():
    # Case-sensitive aliases ("M7" vs "m7") must not shadow a real key
    if _alias.lower() not in _LOWER_FORMULA_KEYS:
        _LOWER_ALIASES.setdefault(_alias.lower(), _key)


def resolve_formula_key(token: str) -> str | None:
    """Resolve a quality token or alias to its formula key.

    Resolution order: exact key, exact alias, case-insensitive key,
    case-insensitive alias. Case matters first so that "M7" (major seventh)
    is not read as "m7" (minor seventh).

    Parameters
    ----------
    token : str
        Quality token (e.g., "m7", "min7", "M7", "ø").

    Returns
    -------
    str | None
        The formula key, or None if the token is not recognized.

    Examples
    --------
    >>> resolve_formula_key("min7")
    'm7'
    >>> resolve_formula_key("M7")
    'maj7'
    >>> resolve_formula_key("MAJ9")
    'maj9'
    >>> resolve_formula_key("xyz") is None
    True
    """
    if not isinstance(token, str):
        return None
    token = token.strip()
    if token in CHORD_FORMULAS:
        return token
    if token in QUALITY_ALIASES:
        return QUALITY_ALIASES[token]
    lowered = token.lower()
    if lowered in _LOWER_FORMULA_KEYS:
        return _LOWER_FORMULA_KEYS[lowered]
    return _LOWER_ALIASES.get(lowered)


def get_formula(token: str) -> tuple[int, ...] | None:
    """Return the interval vector for a quality token, or None.

    Examples
    --------
    >>> get_formula("m7b5")
    (0, 3, 6, 10)
    >>> get_formula("-")
    (0, 3, 7)
    >>> get_formula("sus9") is None
    True
    """
    key = resolve_formula_key(token)
    if key is None:
        return None
    return CHORD_FORMULAS[key]


def quality_category(formula_key: str) -> ChordQuality:
    """Get the quality category of a formula key.

    Examples
    --------
    >>> quality_category("m9")
    'minor'
    >>> quality_category("13")
    'dominant'
    >>> quality_category("m7b5")
    'half-diminished'
    """
    if formula_key == "5":
        return "power"
    if formula_key == "m7b5":
        return "half-diminished"
    if formula_key.startswith("dim"):
        return "diminished"
    if formula_key.startswith("aug") or "#5" in formula_key:
        return "augmented"
    if formula_key.startswith("m") and not formula_key.startswith("maj"):
        return "minor"
    if "sus" in formula_key:
        return "suspended"
    if formula_key.startswith("add"):
        return "add"
    if formula_key[:1].isdigit() and not formula_key.startswith("6"):
        return "dominant"
    return "major"


def validate_formula_table(
    formulas: Mapping[str, tuple[int, ...]] = CHORD_FORMULAS,
    aliases: Mapping[str, str] = QUALITY_ALIASES,
) -> None:
    """Check the static formula and alias tables for programmer errors.

    Parameters
    ----------
    formulas : Mapping[str, tuple[int, ...]]
        Formula table to check.
    aliases : Mapping[str, str]
        Alias table to check.

    Raises
    ------
    ValueError
        If a formula is empty, does not start at 0 or is not strictly
        increasing, or if an alias points at a missing formula key.
    """
    for key, intervals in formulas.items():
        if not intervals or intervals[0] != 0:
            msg = f"Formula {key!r} must start at 0: {intervals}"
            raise ValueError(msg)
        if any(b <= a for a, b in zip(intervals, intervals[1:])):
            msg = f"Formula {key!r} must be strictly increasing: {intervals}"
            raise ValueError(msg)
    for alias, key in aliases.items():
        if key not in formulas:
            msg = f"Alias {alias!r} points at unknown formula {key!r}"
            raise ValueError(msg)
