"""Turn ranked candidates into renderable voicings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chord_resolver.models import Voicing
from chord_resolver.voicing.fretboard import STANDARD_TUNING, count_open
from chord_resolver.voicing.generator import DEFAULT_CONSTRAINTS, detect_barres, generate_candidates_with_fallback
from chord_resolver.voicing.scorer import rank_candidates

if TYPE_CHECKING:
    from collections.abc import Sequence

    from chord_resolver.models import Difficulty
    from chord_resolver.voicing.models import GeneratorConstraints, VoicingCandidate, VoicingScore


def _difficulty(candidate: VoicingCandidate, score: VoicingScore, has_barre: bool) -> Difficulty:
    if score.total >= 70 and candidate.fret_span <= 2 and not has_barre:
        return "easy"
    if score.total < 50 or candidate.fret_span >= 4 or has_barre:
        return "advanced"
    return "intermediate"


def _voicing_name(candidate: VoicingCandidate, has_barre: bool) -> str:
    if candidate.base_fret > 3:
        return f"Position {candidate.base_fret}"
    if has_barre:
        return "Barre"
    if count_open(candidate.frets) >= 3:
        return "Open"
    return "Standard"


def candidate_to_voicing(candidate: VoicingCandidate, score: VoicingScore, index: int = 0) -> Voicing:
    """Build a ``Voicing`` from a scored candidate.

    Parameters
    ----------
    candidate : VoicingCandidate
        The fingering.
    score : VoicingScore
        Its score, used for the difficulty tag.
    index : int
        Rank of the candidate, used in the id.

    Returns
    -------
    Voicing
        Named "Position N" above the third fret, else "Barre", "Open" (three
        or more open strings) or "Standard".
    """
    barres = detect_barres(candidate.frets)
    return Voicing(
        id=f"gen-{index}",
        name=_voicing_name(candidate, bool(barres)),
        frets=candidate.frets,
        barres=barres,
        base_fret=candidate.base_fret,
        difficulty=_difficulty(candidate, score, bool(barres)),
    )


def build_voicings(
    notes: Sequence[str],
    root: str,
    constraints: GeneratorConstraints | None = None,
    limit: int = 5,
    tuning: tuple[str, ...] = STANDARD_TUNING,
) -> tuple[Voicing, ...]:
    """Generate, rank and convert voicings for a set of chord tones.

    Parameters
    ----------
    notes : Sequence[str]
        Chord tones, root first.
    root : str
        Root note.
    constraints : GeneratorConstraints | None
        Search limits; the defaults when None.
    limit : int
        Maximum number of voicings returned.
    tuning : tuple[str, ...]
        Open-string notes, low to high.

    Returns
    -------
    tuple[Voicing, ...]
        Best voicings first. Every voicing sounds the root, and the third
        when the chord has one; lower-ranked voicings may omit other tones.
        Empty if no fingering qualifies even after relaxing ``constraints``.

    Examples
    --------
    >>> voicings = build_voicings(("C", "E", "G"), "C", limit=3)
    >>> len(voicings)
    3
    >>> voicings[0].frets
    (None, 3, 2, 0, 1, 0)
    """
    if not notes or limit <= 0:
        return ()
    candidates = generate_candidates_with_fallback(notes, root, constraints or DEFAULT_CONSTRAINTS, tuning)
    ranked = rank_candidates(candidates, notes, limit)
    return tuple(candidate_to_voicing(candidate, score, i) for i, (candidate, score) in enumerate(ranked))
