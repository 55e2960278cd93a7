"""Voicing scorer.

Ranks candidate fingerings by playability and musicality: small stretches
and open strings, root in the bass, third present, resemblance to the
common open shapes, chord-tone coverage and a full sound.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chord_resolver.pitch_class import index_of, pitch_class_set
from chord_resolver.voicing.fretboard import count_open
from chord_resolver.voicing.models import VoicingScore

if TYPE_CHECKING:
    from collections.abc import Sequence

    from chord_resolver.voicing.models import Frets, VoicingCandidate

# Open-position CAGED shapes plus the open minor shapes
COMMON_SHAPES: tuple[Frets, ...] = (
    (0, 2, 2, 1, 0, 0),  # E
    (None, 0, 2, 2, 2, 0),  # A
    (None, 3, 2, 0, 1, 0),  # C
    (3, 2, 0, 0, 0, 3),  # G
    (None, None, 0, 2, 3, 2),  # D
    (None, 0, 2, 2, 1, 0),  # Am
    (0, 2, 2, 0, 0, 0),  # Em
    (None, None, 0, 2, 3, 1),  # Dm
)


def shape_match(frets: Frets) -> float:
    """Best fraction of strings matching a common shape's muted/open/fretted pattern.

    Examples
    --------
    >>> shape_match((None, 3, 2, 0, 1, 0))
    1.0
    """
    best = 0.0
    for shape in COMMON_SHAPES:
        matches = 0
        for fret, shape_fret in zip(frets, shape):
            if fret is None or shape_fret is None:
                matches += fret is None and shape_fret is None
            elif (fret == 0) == (shape_fret == 0):
                matches += 1
        best = max(best, matches / len(shape))
    return best


def has_string_skips(frets: Frets) -> bool:
    """True if a muted string sits between two sounding strings.

    Examples
    --------
    >>> has_string_skips((3, None, 0, 0, 0, 3))
    True
    >>> has_string_skips((None, None, 0, 2, 3, 2))
    False
    """
    played = [i for i, f in enumerate(frets) if f is not None]
    return any(b - a > 1 for a, b in zip(played, played[1:]))


def stretch_difficulty(frets: Frets) -> float:
    """Worst fret distance per string distance among fretted notes wider than 2 frets."""
    fretted = [(s, f) for s, f in enumerate(frets) if f is not None and f > 0]
    worst = 0.0
    for i, (s1, f1) in enumerate(fretted):
        for s2, f2 in fretted[i + 1 :]:
            fret_diff = abs(f1 - f2)
            if fret_diff > 2:
                worst = max(worst, fret_diff / abs(s1 - s2))
    return worst


def score_candidate(candidate: VoicingCandidate, chord_notes: Sequence[str]) -> VoicingScore:
    """Score a candidate fingering.

    Parameters
    ----------
    candidate : VoicingCandidate
        The fingering to score.
    chord_notes : Sequence[str]
        Chord tones, root first.

    Returns
    -------
    VoicingScore
        Component scores; ``total`` is their sum.
    """
    frets = candidate.frets

    playability = 0.0
    if candidate.fret_span <= 2:
        playability += 15
    elif candidate.fret_span <= 3:
        playability += 10
    elif candidate.fret_span <= 4:
        playability += 5
    playability += min(count_open(frets) * 2, 6)
    if candidate.base_fret <= 3:
        playability += 6
    elif candidate.base_fret <= 5:
        playability += 4
    elif candidate.base_fret <= 7:
        playability += 2
    playability -= min(stretch_difficulty(frets) * 2, 6)
    playability = max(0.0, playability)

    root_pc = index_of(chord_notes[0])
    chord_pcs = pitch_class_set(chord_notes)
    voice_leading = 0.0
    if candidate.has_root and candidate.bass_note is not None:
        voice_leading += 15 if index_of(candidate.bass_note) == root_pc else 8
    if candidate.has_third:
        voice_leading += 10
    elif {(root_pc + 3) % 12, (root_pc + 4) % 12} & chord_pcs:
        voice_leading -= 15
    if candidate.has_fifth:
        voice_leading += 5

    ergonomics = float(round(shape_match(frets) * 12))
    if not has_string_skips(frets):
        ergonomics += 5
    low_muted = frets[0] is None or frets[1] is None
    middle_muted = frets[2] is None or frets[3] is None
    if low_muted and not middle_muted:
        ergonomics += 3

    coverage = len(candidate.pitch_classes & chord_pcs) / len(chord_pcs)
    if coverage >= 1:
        completeness = 25.0
    elif coverage >= 0.8:
        completeness = 15.0
    elif coverage >= 0.6:
        completeness = 8.0
    else:
        completeness = 2.0

    sonority = 0.0
    if candidate.played_strings >= 5:
        sonority += 5
    elif candidate.played_strings >= 4:
        sonority += 4
    elif candidate.played_strings >= 3:
        sonority += 2
    played = [i for i, f in enumerate(frets) if f is not None]
    spread = played[-1] - played[0] + 1 if played else 0
    if spread >= 5:
        sonority += 5
    elif spread >= 4:
        sonority += 3
    elif spread >= 3:
        sonority += 2

    return VoicingScore(
        playability=playability,
        voice_leading=voice_leading,
        ergonomics=ergonomics,
        completeness=completeness,
        sonority=sonority,
    )


def rank_candidates(
    candidates: Sequence[VoicingCandidate],
    chord_notes: Sequence[str],
    limit: int = 5,
) -> list[tuple[VoicingCandidate, VoicingScore]]:
    """Score candidates and return the best ``limit``, highest first.

    Ties keep search order, so ranking is deterministic.
    """
    scored = [(candidate, score_candidate(candidate, chord_notes)) for candidate in candidates]
    scored.sort(key=lambda pair: pair[1].total, reverse=True)
    return scored[:limit]
