"""Load and validate curated chord dictionaries.

Dictionaries are read-only mappings from canonical chord name to
``ChordEntry``. External dictionaries are JSON documents of the form::

    {
        "chords": [
            {
                "canonical": "Am",
                "display": "Am",
                "voicings": [
                    {"id": "am-open", "name": "Open", "frets": [null, 0, 2, 2, 1, 0]}
                ]
            },
            ...
        ]
    }

``root``, ``quality`` and ``extensions`` are derived from the name when
omitted. Voicings accept ``fingers``, ``barres`` (``fret``, ``from_string``,
``to_string``), ``base_fret`` and ``difficulty``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, get_args

from chord_resolver.models import BarrePosition, ChordEntry, ChordQuality, Difficulty, Voicing
from chord_resolver.normalizer import parse_chord_name
from chord_resolver.voicing.fretboard import STANDARD_TUNING

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

_QUALITIES = frozenset(get_args(ChordQuality))
_DIFFICULTIES = frozenset(get_args(Difficulty))


def _optional_frets(values: list[Any] | None, field: str, canonical: str) -> tuple[int | None, ...] | None:
    if values is None:
        return None
    result: list[int | None] = []
    for value in values:
        if value is not None and (isinstance(value, bool) or not isinstance(value, int) or value < 0):
            msg = f"Invalid {field} value {value!r} in chord {canonical!r}"
            raise ValueError(msg)
        result.append(value)
    return tuple(result)


def _parse_voicing(item: dict[str, Any], canonical: str) -> Voicing:
    try:
        voicing_id = str(item["id"])
        frets = _optional_frets(list(item["frets"]), "fret", canonical)
        barres = tuple(
            BarrePosition(fret=int(b["fret"]), from_string=int(b["from_string"]), to_string=int(b["to_string"]))
            for b in item.get("barres", ())
        )
        base = int(item.get("base_fret", 1))
        fingers = _optional_frets(item.get("fingers"), "finger", canonical)
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        msg = f"Malformed voicing in chord {canonical!r}: {e!r}"
        raise ValueError(msg) from e

    difficulty = item.get("difficulty")
    if difficulty is not None and difficulty not in _DIFFICULTIES:
        msg = f"Unknown difficulty {difficulty!r} in chord {canonical!r}"
        raise ValueError(msg)

    return Voicing(
        id=voicing_id,
        name=str(item.get("name", voicing_id)),
        frets=frets,
        fingers=fingers,
        barres=barres,
        base_fret=base,
        difficulty=difficulty,
    )


def _parse_entry(item: dict[str, Any]) -> ChordEntry:
    canonical = item.get("canonical") if isinstance(item, dict) else None
    if not isinstance(canonical, str) or not canonical:
        msg = f"Chord record without a canonical name: {item!r}"
        raise ValueError(msg)

    parsed = parse_chord_name(canonical)
    if parsed is None:
        msg = f"Unparseable chord name: {canonical!r}"
        raise ValueError(msg)

    quality = item.get("quality", parsed.quality)
    if quality not in _QUALITIES:
        msg = f"Unknown quality {quality!r} in chord {canonical!r}"
        raise ValueError(msg)

    voicings = tuple(_parse_voicing(v, canonical) for v in item.get("voicings", ()))
    return ChordEntry(
        canonical=canonical,
        display=str(item.get("display", canonical)),
        root=str(item.get("root", parsed.root)),
        quality=quality,
        voicings=voicings,
        extensions=tuple(item.get("extensions", parsed.extensions)),
    )


def validate_dictionary(chords: Mapping[str, ChordEntry], string_count: int = len(STANDARD_TUNING)) -> None:
    """Check a dictionary for structural errors.

    Parameters
    ----------
    chords : Mapping[str, ChordEntry]
        The dictionary to check.
    string_count : int
        Number of strings every voicing must describe.

    Raises
    ------
    ValueError
        If a key differs from its entry's canonical name, a name is not in
        canonical form, a voicing has the wrong number of strings or a barre
        lies outside the fretboard.
    """
    for key, entry in chords.items():
        if key != entry.canonical:
            msg = f"Dictionary key {key!r} does not match entry {entry.canonical!r}"
            raise ValueError(msg)
        parsed = parse_chord_name(key)
        if parsed is None or parsed.canonical != key:
            msg = f"Dictionary key {key!r} is not a canonical chord name"
            raise ValueError(msg)
        for voicing in entry.voicings:
            if len(voicing.frets) != string_count:
                msg = f"Voicing {voicing.id!r} of {key!r} has {len(voicing.frets)} strings, expected {string_count}"
                raise ValueError(msg)
            if voicing.fingers is not None and len(voicing.fingers) != string_count:
                msg = f"Voicing {voicing.id!r} of {key!r} has {len(voicing.fingers)} fingers, expected {string_count}"
                raise ValueError(msg)
            for barre in voicing.barres:
                if not 0 <= barre.from_string <= barre.to_string < string_count:
                    msg = f"Voicing {voicing.id!r} of {key!r} has an invalid barre {barre}"
                    raise ValueError(msg)


def parse_dictionary_data(
    data: dict[str, Any],
    string_count: int = len(STANDARD_TUNING),
    strict: bool = True,
) -> Mapping[str, ChordEntry]:
    """Build a dictionary from already-loaded JSON data.

    Parameters
    ----------
    data : dict[str, Any]
        Dictionary data with a "chords" key.
    string_count : int
        Number of strings every voicing must describe.
    strict : bool
        If True, any bad record raises. If False, bad records are logged
        and skipped.

    Returns
    -------
    Mapping[str, ChordEntry]
        Read-only mapping keyed by canonical name.

    Raises
    ------
    ValueError
        In strict mode, for duplicate keys, non-canonical names, wrong fret
        counts and malformed records. In either mode, if ``data`` is not
        a JSON object.
    """
    if not isinstance(data, dict):
        msg = f"Dictionary data must be an object, got {type(data).__name__}"
        raise ValueError(msg)

    chords: dict[str, ChordEntry] = {}
    for item in data.get("chords", []):
        try:
            entry = _parse_entry(item)
            if entry.canonical in chords:
                msg = f"Duplicate chord {entry.canonical!r}"
                raise ValueError(msg)
            validate_dictionary({entry.canonical: entry}, string_count)
        except ValueError as e:
            if strict:
                raise
            logger.warning("Skipping dictionary record: %s", e)
            continue
        chords[entry.canonical] = entry

    return MappingProxyType(chords)


def load_dictionary_json(
    path: str | Path,
    string_count: int = len(STANDARD_TUNING),
    strict: bool = True,
) -> Mapping[str, ChordEntry]:
    """Load a chord dictionary from a JSON file.

    Parameters
    ----------
    path : str | Path
        Path to the JSON file.
    string_count : int
        Number of strings every voicing must describe.
    strict : bool
        See ``parse_dictionary_data``.

    Returns
    -------
    Mapping[str, ChordEntry]
        Read-only mapping keyed by canonical name.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    json.JSONDecodeError
        If the file is not valid JSON.
    ValueError
        If a record is invalid (strict mode).
    """
    path = Path(path)
    with path.open(encoding="utf-8") as f:
        data = json.load(f)

    return parse_dictionary_data(data, string_count=string_count, strict=strict)
