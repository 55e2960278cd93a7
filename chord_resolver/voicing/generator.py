"""Voicing search.

Builds playable fingerings string by string with a backtracking search.
Every sounding string plays a chord tone; constraints on fret span, muted
strings, bass note and third prune the search. When nothing fits, the
constraints are relaxed step by step.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING

from chord_resolver.models import BarrePosition
from chord_resolver.pitch_class import index_of, pitch_class_set
from chord_resolver.voicing.fretboard import (
    STANDARD_TUNING,
    base_fret,
    bass_note,
    fret_span,
    positions_on_string,
)
from chord_resolver.voicing.models import GeneratorConstraints, VoicingCandidate

if TYPE_CHECKING:
    from collections.abc import Sequence

    from chord_resolver.voicing.models import Frets

logger = logging.getLogger(__name__)

DEFAULT_CONSTRAINTS = GeneratorConstraints()

# Applied in order until the search yields candidates
FALLBACK_RELAXATIONS: tuple[dict[str, object], ...] = (
    {},
    {"require_root": False},
    {"require_root": False, "max_muted_strings": 3, "min_strings": 3},
    {"require_root": False, "max_muted_strings": 3, "min_strings": 3, "max_fret_span": 5},
    {"require_root": False, "max_muted_strings": 3, "min_strings": 3, "max_fret_span": 5, "require_third": False},
)


def generate_candidates(
    chord_notes: Sequence[str],
    root: str,
    constraints: GeneratorConstraints = DEFAULT_CONSTRAINTS,
    tuning: tuple[str, ...] = STANDARD_TUNING,
) -> list[VoicingCandidate]:
    """Generate every fingering that satisfies the constraints.

    Parameters
    ----------
    chord_notes : Sequence[str]
        Chord tones (any spelling).
    root : str
        Root note of the chord.
    constraints : GeneratorConstraints
        Search limits.
    tuning : tuple[str, ...]
        Open-string notes, low to high.

    Returns
    -------
    list[VoicingCandidate]
        Candidates in search order.
    """
    chord_pcs = pitch_class_set(chord_notes)
    root_pc = index_of(root)
    third_pcs = {(root_pc + 3) % 12, (root_pc + 4) % 12}
    chord_has_third = bool(third_pcs & chord_pcs)
    fifth_pc = (root_pc + 7) % 12
    string_count = len(tuning)
    options = [positions_on_string(s, chord_pcs, constraints.max_fret, tuning) for s in range(string_count)]
    candidates: list[VoicingCandidate] = []

    def finish(frets: Frets, played: frozenset[int]) -> None:
        played_strings = string_count - frets.count(None)
        if played_strings < constraints.min_strings:
            return
        bass = bass_note(frets, tuning)
        if constraints.require_root and (bass is None or index_of(bass) != root_pc):
            return
        if root_pc not in played:
            return
        has_third = bool(third_pcs & played)
        if constraints.require_third and chord_has_third and not has_third:
            return
        candidates.append(
            VoicingCandidate(
                frets=frets,
                pitch_classes=played,
                bass_note=bass,
                fret_span=fret_span(frets),
                base_fret=base_fret(frets),
                played_strings=played_strings,
                has_root=True,
                has_third=has_third,
                has_fifth=fifth_pc in played,
            )
        )

    def build(string: int, frets: Frets, fretted: tuple[int, ...], played: frozenset[int]) -> None:
        if string == string_count:
            finish(frets, played)
            return

        # Mute this string
        if frets.count(None) < constraints.max_muted_strings:
            build(string + 1, (*frets, None), fretted, played)

        # Play a chord tone on this string
        for fret, pc in options[string]:
            next_fretted = fretted
            if fret > 0:
                next_fretted = (*fretted, fret)
                if max(next_fretted) - min(next_fretted) > constraints.max_fret_span:
                    continue
            build(string + 1, (*frets, fret), next_fretted, played | {pc})

    build(0, (), (), frozenset())
    return candidates


def generate_candidates_with_fallback(
    chord_notes: Sequence[str],
    root: str,
    constraints: GeneratorConstraints = DEFAULT_CONSTRAINTS,
    tuning: tuple[str, ...] = STANDARD_TUNING,
) -> list[VoicingCandidate]:
    """Generate candidates, relaxing the constraints until some are found.

    Relaxation order: root no longer required in the bass, then more muted
    strings, then a wider span, then no third required.

    Returns
    -------
    list[VoicingCandidate]
        Candidates from the first step that yields any, or an empty list.
    """
    for changes in FALLBACK_RELAXATIONS:
        candidates = generate_candidates(chord_notes, root, replace(constraints, **changes), tuning)
        if candidates:
            if changes:
                logger.debug("Relaxed voicing constraints for %s: %s", root, changes)
            return candidates
    logger.debug("No voicing found for notes %s", list(chord_notes))
    return []


def detect_barres(frets: Frets) -> tuple[BarrePosition, ...]:
    """Find an index-finger barre in a fingering.

    A barre is the lowest fretted position pressed on two or more strings,
    reaching up to the highest sounding string, with every string under it
    sounding. Fingerings with open strings have no barre.

    Examples
    --------
    >>> detect_barres((1, 3, 3, 2, 1, 1))
    (BarrePosition(fret=1, from_string=0, to_string=5),)
    >>> detect_barres((None, 3, 5, 5, 5, 3))
    (BarrePosition(fret=3, from_string=1, to_string=5),)
    >>> detect_barres((None, 0, 2, 2, 2, 0))
    ()
    """
    sounding = [s for s, f in enumerate(frets) if f is not None]
    if not sounding or any(frets[s] == 0 for s in sounding):
        return ()

    lowest = min(f for f in frets if f is not None)
    strings = [s for s, f in enumerate(frets) if f == lowest]
    start, end = strings[0], strings[-1]
    if end == start or end != sounding[-1]:
        return ()
    if any(frets[s] is None for s in range(start, end + 1)):
        return ()
    return (BarrePosition(fret=lowest, from_string=start, to_string=end),)
