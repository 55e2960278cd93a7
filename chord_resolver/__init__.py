"""Chord resolver library for turning free-text chord names into playable chords.

This library parses and normalizes chord names in any common spelling,
derives their notes from an interval table, and resolves them against a
curated voicing dictionary, falling back to generated voicings and
did-you-mean suggestions.

Examples
--------
>>> from chord_resolver import lookup_chord, normalize_chord_name, chords_equal

>>> # Normalize spellings
>>> normalize_chord_name("A min7")
'Am7'
>>> chords_equal("Am", "A-")
True

>>> # Dictionary chords
>>> result = lookup_chord("Am")
>>> result.status, result.notes
('found', ('A', 'C', 'E'))

>>> # Generated chords
>>> result = lookup_chord("Bb")
>>> result.status, result.notes
('generated', ('A#', 'D', 'F'))

>>> # Unrecognized qualities
>>> lookup_chord("Amz").status
'similar'
"""

from chord_resolver.config import ResolverConfig
from chord_resolver.converter import as_pychord, from_harte, from_pychord, to_harte, to_pychord
from chord_resolver.dictionary import (
    GUITAR_CHORDS,
    get_chord,
    get_chord_names,
    has_chord,
    load_dictionary_json,
    parse_dictionary_data,
    validate_dictionary,
)
from chord_resolver.formulas import CHORD_FORMULAS, QUALITY_ALIASES, get_formula, validate_formula_table
from chord_resolver.lookup import (
    ChordResolver,
    default_voicing,
    has_any_diagrams,
    lookup_chord,
    lookup_chords,
)
from chord_resolver.models import (
    BarrePosition,
    ChordEntry,
    GeneratedChord,
    LookupResult,
    ParsedChord,
    ResolvedChord,
    Voicing,
)
from chord_resolver.normalizer import chords_equal, get_display_name, normalize_chord_name, parse_chord_name
from chord_resolver.notes import generate_notes
from chord_resolver.pitch_class import index_of, transpose

__all__ = [
    "CHORD_FORMULAS",
    "GUITAR_CHORDS",
    "QUALITY_ALIASES",
    "BarrePosition",
    "ChordEntry",
    "ChordResolver",
    "GeneratedChord",
    "LookupResult",
    "ParsedChord",
    "ResolvedChord",
    "ResolverConfig",
    "Voicing",
    "as_pychord",
    "chords_equal",
    "default_voicing",
    "from_harte",
    "from_pychord",
    "generate_notes",
    "get_chord",
    "get_chord_names",
    "get_display_name",
    "get_formula",
    "has_any_diagrams",
    "has_chord",
    "index_of",
    "load_dictionary_json",
    "lookup_chord",
    "lookup_chords",
    "normalize_chord_name",
    "parse_chord_name",
    "parse_dictionary_data",
    "to_harte",
    "to_pychord",
    "transpose",
    "validate_dictionary",
    "validate_formula_table",
]
