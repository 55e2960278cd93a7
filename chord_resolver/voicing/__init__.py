"""Guitar voicing generation.

This package finds playable fingerings for arbitrary chord tones: a
fretboard model, a backtracking search with constraint relaxation, barre
detection and a playability scorer.

Examples
--------
>>> from chord_resolver.voicing import build_voicings
>>> build_voicings(("A", "C", "E"), "A")[0].frets
(None, 0, 2, 2, 1, 0)
"""

from chord_resolver.voicing.builder import build_voicings, candidate_to_voicing
from chord_resolver.voicing.fretboard import STANDARD_TUNING, note_at
from chord_resolver.voicing.generator import (
    DEFAULT_CONSTRAINTS,
    detect_barres,
    generate_candidates,
    generate_candidates_with_fallback,
)
from chord_resolver.voicing.models import GeneratorConstraints, VoicingCandidate, VoicingScore
from chord_resolver.voicing.scorer import rank_candidates, score_candidate

__all__ = [
    "DEFAULT_CONSTRAINTS",
    "STANDARD_TUNING",
    "GeneratorConstraints",
    "VoicingCandidate",
    "VoicingScore",
    "build_voicings",
    "candidate_to_voicing",
    "detect_barres",
    "generate_candidates",
    "generate_candidates_with_fallback",
    "note_at",
    "rank_candidates",
    "score_candidate",
]
