"""Notation converter between canonical names, pychord and Harte formats.

This module maps the canonical quality suffixes used by the resolver
(e.g., "m7b5") to pychord's quality names (e.g., "m7-5") and to Harte
shorthand (e.g., "hdim7"), and parses chords written in either notation
back into ``ParsedChord`` objects.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chord_resolver.normalizer import BASS_RE, parse_chord_name

if TYPE_CHECKING:
    from pychord import Chord as PyChord

    from chord_resolver.models import ParsedChord

# Canonical suffix to pychord quality name
SUFFIX_TO_PYCHORD: dict[str, str] = {
    "": "",
    "m": "m",
    "dim": "dim",
    "aug": "aug",
    "5": "5",
    "sus2": "sus2",
    "sus4": "sus4",
    "6": "6",
    "m6": "m6",
    "7": "7",
    "maj7": "maj7",
    "m7": "m7",
    "mmaj7": "mmaj7",
    "dim7": "dim7",
    "m7b5": "m7-5",
    "aug7": "aug7",
    "7sus2": "7sus2",
    "7sus4": "7sus4",
    "add9": "add9",
    "madd9": "madd9",
    "9": "9",
    "maj9": "maj9",
    "m9": "m9",
    "11": "11",
    "maj11": "maj11",
    "m11": "m11",
    "13": "13",
    "maj13": "maj13",
    "m13": "m13",
}

# Canonical suffix to Harte shorthand (with added degrees where Harte has
# no shorthand of its own)
SUFFIX_TO_HARTE: dict[str, str] = {
    "": "maj",
    "m": "min",
    "dim": "dim",
    "aug": "aug",
    "5": "5",
    "sus2": "sus2",
    "sus4": "sus4",
    "6": "maj6",
    "m6": "min6",
    "69": "maj6(9)",
    "m69": "min6(9)",
    "7": "7",
    "maj7": "maj7",
    "m7": "min7",
    "mmaj7": "minmaj7",
    "dim7": "dim7",
    "m7b5": "hdim7",
    "aug7": "aug7",
    "7sus2": "7sus2",
    "7sus4": "7sus4",
    "9sus4": "sus4(b7,9)",
    "add2": "maj(2)",
    "add4": "maj(4)",
    "add9": "maj(9)",
    "add11": "maj(11)",
    "madd9": "min(9)",
    "madd11": "min(11)",
    "9": "9",
    "maj9": "maj9",
    "m9": "min9",
    "mmaj9": "minmaj7(9)",
    "11": "11",
    "maj11": "maj11",
    "m11": "min11",
    "13": "13",
    "maj13": "maj13",
    "m13": "min13",
    "7b9": "7(b9)",
    "7#9": "7(#9)",
    "7#11": "7(#11)",
    "7b13": "7(b13)",
}

PYCHORD_TO_SUFFIX: dict[str, str] = {v: k for k, v in SUFFIX_TO_PYCHORD.items()}
PYCHORD_TO_SUFFIX.update({"M7": "maj7", "mM7": "mmaj7", "m7b5": "m7b5", "sus47": "7sus4", "sus27": "7sus2"})

HARTE_TO_SUFFIX: dict[str, str] = {}
for _suffix, _harte in SUFFIX_TO_HARTE.items():
    HARTE_TO_SUFFIX.setdefault(_harte, _suffix)
HARTE_TO_SUFFIX.update({"sus4(b7)": "7sus4", "sus2(b7)": "7sus2"})


def _quality(table: dict[str, str], key: str, notation: str) -> str:
    if key in table:
        return table[key]
    msg = f"Unknown {notation} quality: {key!r}"
    raise ValueError(msg)


def to_harte(parsed: ParsedChord) -> str:
    """Convert a parsed chord to Harte notation.

    The root keeps its input spelling. A slash bass is appended as a note.

    Parameters
    ----------
    parsed : ParsedChord
        The chord to convert.

    Returns
    -------
    str
        Chord in Harte notation (e.g., "A:min7", "C:maj/E").

    Raises
    ------
    ValueError
        If the chord's quality has no Harte equivalent.

    Examples
    --------
    >>> to_harte(parse_chord_name("Amin7"))
    'A:min7'
    >>> to_harte(parse_chord_name("Bbø"))
    'Bb:hdim7'
    """
    result = f"{parsed.root}:{_quality(SUFFIX_TO_HARTE, parsed.suffix, 'Harte')}"
    if parsed.bass:
        result = f"{result}/{parsed.bass}"
    return result


def to_pychord(parsed: ParsedChord) -> str:
    """Convert a parsed chord to pychord notation.

    Raises
    ------
    ValueError
        If the chord's quality has no pychord equivalent.

    Examples
    --------
    >>> to_pychord(parse_chord_name("Am7b5"))
    'Am7-5'
    >>> to_pychord(parse_chord_name("C/E"))
    'C/E'
    """
    result = f"{parsed.root}{_quality(SUFFIX_TO_PYCHORD, parsed.suffix, 'pychord')}"
    if parsed.bass:
        result = f"{result}/{parsed.bass}"
    return result


def as_pychord(parsed: ParsedChord) -> PyChord:
    """Build a ``pychord.Chord`` for a parsed chord.

    Examples
    --------
    >>> as_pychord(parse_chord_name("G7")).components()
    ['G', 'B', 'D', 'F']
    """
    from pychord import Chord as PyChord

    return PyChord(to_pychord(parsed))


def from_pychord(chord_str: str) -> ParsedChord:
    """Parse a pychord notation string into a ``ParsedChord``.

    Parameters
    ----------
    chord_str : str
        Chord in pychord notation (e.g., "Gm7", "F#dim7/A").

    Returns
    -------
    ParsedChord
        The chord in canonical form.

    Raises
    ------
    ValueError
        If pychord rejects the string or its quality has no canonical
        suffix.

    Examples
    --------
    >>> from_pychord("Gm7-5").canonical
    'Gm7b5'
    """
    from pychord import Chord as PyChord

    pc = PyChord(chord_str)
    suffix = _quality(PYCHORD_TO_SUFFIX, str(pc.quality), "canonical")
    return _parse(pc.root, suffix, pc.on or None, chord_str)


def from_harte(chord_str: str) -> ParsedChord:
    """Parse a Harte notation string into a ``ParsedChord``.

    A bass given as a note is kept; a bass given as a scale degree
    (e.g., "C:maj/3") is dropped.

    Parameters
    ----------
    chord_str : str
        Chord in Harte notation (e.g., "G:min7", "C:maj").

    Returns
    -------
    ParsedChord
        The chord in canonical form.

    Raises
    ------
    ValueError
        If the shorthand has no canonical suffix.

    Examples
    --------
    >>> from_harte("G:min7").canonical
    'Gm7'
    """
    from harte.harte import Harte

    hc = Harte(chord_str)
    root = hc.get_root()
    shorthand = hc.get_shorthand() or "maj"
    suffix = _quality(HARTE_TO_SUFFIX, shorthand, "canonical")

    bass = None
    if "/" in chord_str:
        bass_part = chord_str.split("/")[-1]
        if BASS_RE.match(bass_part):
            bass = bass_part

    return _parse(root, suffix, bass, chord_str)


def _parse(root: str, suffix: str, bass: str | None, source: str) -> ParsedChord:
    name = f"{root}{suffix}" if bass is None else f"{root}{suffix}/{bass}"
    parsed = parse_chord_name(name)
    if parsed is None:
        msg = f"Cannot parse chord: {source!r}"
        raise ValueError(msg)
    return parsed
