"""Chord name parser and normalizer.

This module turns arbitrary chord-name strings (typed by users or produced
by upstream extraction) into ``ParsedChord`` objects. A single tokenizer
feeds both canonicalization and note generation.

A chord suffix is read as one base token followed by extension tokens::

    C   maj7        -> root "C", base "",  extensions ("maj7",)
    A   m 7 b5      -> root "A", base "m", extensions ("7", "b5")
    F#  dim 7       -> root "F#", base "dim", extensions ("7",)

Whatever the tokenizer cannot read is kept verbatim as the residue, so that
"Amz" stays distinguishable from "Am" and can be offered suggestions.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from chord_resolver.formulas import quality_category, resolve_formula_key
from chord_resolver.models import ParsedChord
from chord_resolver.pitch_class import clean_note, index_of

logger = logging.getLogger(__name__)

# Longer inputs are rejected outright
MAX_CHORD_NAME_LENGTH = 50

UNICODE_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("♯", "#"),
    ("♭", "b"),
    ("−", "-"),
    ("△", "Δ"),
    ("º", "°"),
    ("Ø", "ø"),
)

ROOT_RE = re.compile(r"^([A-Ga-g])([#b]?)")
BASS_RE = re.compile(r"^[A-Ga-g][#b]?$")
STRIP_RE = re.compile(r"[\s()\[\]]+")

# Base tokens in precedence order: (pattern, canonical base, implied extensions).
# A pattern whose canonical base is None only peeks; the extension
# tokenizer consumes the text (e.g., "maj7" stays one extension token).
_MAJOR_WITH_DIGIT = r"(?:(?i:major|maj)|M(?![Ii])|Δ)(?:13|11|9|7)"
BASE_PATTERNS: tuple[tuple[re.Pattern[str], str | None, tuple[str, ...]], ...] = (
    (re.compile(r"ø7?"), "m", ("7", "b5")),
    (re.compile(_MAJOR_WITH_DIGIT), None, ()),
    (re.compile(r"(?i:dom)(?=13|11|9|7)"), "", ()),
    (re.compile(r"(?i:major|maj)"), "", ()),
    (re.compile(r"(?i:minor|min|mi)"), "m", ()),
    (re.compile(r"M(?![Ii])|Δ"), "", ()),
    (re.compile(r"m|-"), "m", ()),
    (re.compile(r"(?i:diminished|dim)|o|°"), "dim", ()),
    (re.compile(r"(?i:augmented|aug)|\+"), "aug", ()),
)

ALTERATION_SIGNS = {"b": "b", "-": "b", "#": "#", "+": "#"}

EXTENSION_PATTERNS: tuple[tuple[re.Pattern[str], Callable[[re.Match[str]], str]], ...] = (
    (re.compile(r"(?:(?i:major|maj)|M(?![Ii])|Δ)(13|11|9|7)"), lambda m: f"maj{m.group(1)}"),
    (re.compile(r"(?i:sus)([24])?"), lambda m: f"sus{m.group(1) or '4'}"),
    (re.compile(r"(?i:add)(13|11|9|4|2)"), lambda m: f"add{m.group(1)}"),
    (re.compile(r"([b#+\-])(13|11|9|5)"), lambda m: f"{ALTERATION_SIGNS[m.group(1)]}{m.group(2)}"),
    (re.compile(r"13|11|9|7|6|5"), lambda m: m.group(0)),
)


def clean_chord_input(text: str) -> str:
    """Normalize unicode symbols and drop whitespace and brackets.

    Examples
    --------
    >>> clean_chord_input("  B♭ m(add9) ")
    'Bbmadd9'
    >>> clean_chord_input("C6/9")
    'C69'
    """
    text = text.strip()
    for src, dst in UNICODE_REPLACEMENTS:
        text = text.replace(src, dst)
    text = STRIP_RE.sub("", text)
    return text.replace("6/9", "69")


def split_bass(text: str) -> tuple[str, str | None]:
    """Split a trailing slash bass note off a cleaned chord string.

    Only a single slash followed by a valid note is treated as a bass;
    anything else is left for the tokenizer.

    Examples
    --------
    >>> split_bass("C/E")
    ('C', 'E')
    >>> split_bass("Am/G/B")
    ('Am/G/B', None)
    """
    head, sep, tail = text.rpartition("/")
    if not sep or not head or "/" in head or not BASS_RE.match(tail):
        return text, None
    return head, clean_note(tail)


def tokenize_suffix(rest: str) -> tuple[str, tuple[str, ...], str]:
    """Split a chord suffix into base, extension tokens and residue.

    Parameters
    ----------
    rest : str
        Cleaned chord text after the root.

    Returns
    -------
    tuple[str, tuple[str, ...], str]
        Canonical base ("", "m", "dim" or "aug"), ordered extension tokens
        and the unparsed remainder.

    Examples
    --------
    >>> tokenize_suffix("min7b5")
    ('m', ('7', 'b5'), '')
    >>> tokenize_suffix("M7")
    ('', ('maj7',), '')
    >>> tokenize_suffix("mz")
    ('m', (), 'z')
    """
    base = ""
    extensions: list[str] = []
    pos = 0
    for pattern, canonical_base, implied in BASE_PATTERNS:
        match = pattern.match(rest)
        if match is None:
            continue
        if canonical_base is not None:
            base = canonical_base
            extensions.extend(implied)
            pos = match.end()
        break

    while pos < len(rest):
        for pattern, render in EXTENSION_PATTERNS:
            match = pattern.match(rest, pos)
            if match is not None:
                extensions.append(render(match))
                pos = match.end()
                break
        else:
            break

    return base, tuple(extensions), rest[pos:]


def _split_root(text: str) -> tuple[str, str] | None:
    match = ROOT_RE.match(text)
    if match is None:
        return None
    root = match.group(1).upper() + match.group(2)
    if index_of(root) is None:
        return None
    return root, text[match.end() :]


def parse_chord_name(text: str, max_length: int = MAX_CHORD_NAME_LENGTH) -> ParsedChord | None:
    """Parse a chord string into its components.

    Handles common spellings: Am, Amin, A-, Ami, Am7, Amaj7, AM7, Asus,
    Cadd9, F#m, B♭, Cø, C°7, C+, C/E, and lowercase input.

    Parameters
    ----------
    text : str
        The chord name to parse.
    max_length : int
        Inputs longer than this (after trimming) are rejected.

    Returns
    -------
    ParsedChord | None
        The parsed chord, or None if the input is empty, too long or has
        no valid root.

    Examples
    --------
    >>> chord = parse_chord_name("Amin7")
    >>> chord.root, chord.quality, chord.extensions, chord.canonical
    ('A', 'minor', ('7',), 'Am7')
    >>> parse_chord_name("Hm") is None
    True
    """
    if not isinstance(text, str):
        return None
    stripped = text.strip()
    if not stripped:
        return None
    if len(stripped) > max_length:
        logger.debug("Chord name too long: %d chars", len(stripped))
        return None

    cleaned, bass = split_bass(clean_chord_input(stripped))
    split = _split_root(cleaned)
    if split is None:
        logger.debug("No valid root in chord name: %r", text)
        return None
    root, rest = split

    base, extensions, residue = tokenize_suffix(rest)
    canonical = root + base + "".join(extensions) + residue

    # The canonical name must read back as the same chord; otherwise fall
    # back to the cleaned input so that normalization stays idempotent.
    reread = _split_root(canonical)
    if reread is None or reread[0] != root or tokenize_suffix(reread[1]) != (base, extensions, residue):
        canonical = root + rest

    suffix = canonical[len(root) :]
    formula_key = resolve_formula_key(suffix)
    if formula_key is not None and formula_key != suffix:
        # Alias spellings collapse onto the formula key ("sus47" -> "7sus4")
        tokens = tokenize_suffix(formula_key)
        if not tokens[2] and tokens[0] + "".join(tokens[1]) == formula_key:
            base, extensions, residue = tokens
            canonical = root + formula_key
    quality = quality_category(formula_key if formula_key is not None else base + "".join(extensions))

    display = canonical if bass is None else f"{canonical}/{bass}"
    return ParsedChord(
        root=root,
        quality=quality,
        extensions=extensions,
        canonical=canonical,
        display=display,
        residue=residue,
        bass=bass,
    )


def normalize_chord_name(text: str) -> str:
    """Normalize a chord name to its canonical form for dictionary lookup.

    Unparseable input is returned unchanged.

    Examples
    --------
    >>> normalize_chord_name("Amin")
    'Am'
    >>> normalize_chord_name("Cmaj")
    'C'
    >>> normalize_chord_name("CM7")
    'Cmaj7'
    """
    parsed = parse_chord_name(text)
    return parsed.canonical if parsed is not None else text


def get_display_name(text: str) -> str:
    """Get a display-friendly chord name.

    Examples
    --------
    >>> get_display_name("a min")
    'Am'
    >>> get_display_name("C/E")
    'C/E'
    """
    parsed = parse_chord_name(text)
    return parsed.display if parsed is not None else text


def chords_equal(chord1: str, chord2: str) -> bool:
    """Check if two chord names refer to the same chord.

    Examples
    --------
    >>> chords_equal("Am", "A-")
    True
    >>> chords_equal("Am", "A")
    False
    """
    return normalize_chord_name(chord1) == normalize_chord_name(chord2)
