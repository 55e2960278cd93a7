"""Tests for fretboard helpers, voicing search and scoring."""

import pytest

from chord_resolver.models import BarrePosition
from chord_resolver.pitch_class import index_of
from chord_resolver.voicing import (
    GeneratorConstraints,
    build_voicings,
    detect_barres,
    generate_candidates,
    generate_candidates_with_fallback,
    note_at,
    rank_candidates,
    score_candidate,
)
from chord_resolver.voicing.fretboard import (
    base_fret,
    bass_note,
    count_muted,
    count_open,
    fret_span,
    positions_on_string,
    sounding_pitch_classes,
)
from chord_resolver.voicing.scorer import has_string_skips, shape_match, stretch_difficulty

C_MAJOR = ("C", "E", "G")
A_MINOR = ("A", "C", "E")


@pytest.fixture
def c_candidates():
    """Candidates for C major keyed by frets."""
    return {c.frets: c for c in generate_candidates(C_MAJOR, "C")}


class TestFretboard:
    """Test the fretboard model."""

    @pytest.mark.parametrize(
        "string, fret, expected",
        [(0, 0, "E"), (0, 3, "G"), (1, 3, "C"), (4, 1, "C"), (5, 12, "E"), (2, 2, "E")],
    )
    def test_note_at(self, string: int, fret: int, expected: str) -> None:
        assert note_at(string, fret) == expected

    def test_positions_on_string(self) -> None:
        assert positions_on_string(5, {0, 4, 7}, max_fret=5) == [(0, 4), (3, 7)]

    def test_shape_metrics(self) -> None:
        frets = (None, 3, 2, 0, 1, 0)
        assert fret_span(frets) == 2
        assert base_fret(frets) == 1
        assert bass_note(frets) == "C"
        assert count_muted(frets) == 1
        assert count_open(frets) == 2
        assert sounding_pitch_classes(frets) == frozenset({0, 4, 7})

    def test_all_open_or_muted(self) -> None:
        frets = (None, None, None, 0, 0, 0)
        assert fret_span(frets) == 0
        assert base_fret(frets) == 1
        assert bass_note((None,) * 6) is None


class TestGenerateCandidates:
    """Test the backtracking voicing search."""

    def test_open_c_found(self, c_candidates) -> None:
        assert (None, 3, 2, 0, 1, 0) in c_candidates

    def test_open_a_minor_found(self) -> None:
        frets = {c.frets for c in generate_candidates(A_MINOR, "A")}
        assert (None, 0, 2, 2, 1, 0) in frets

    def test_candidates_respect_constraints(self, c_candidates) -> None:
        constraints = GeneratorConstraints()
        chord_pcs = {0, 4, 7}
        for frets, candidate in c_candidates.items():
            assert len(frets) == 6
            assert count_muted(frets) <= constraints.max_muted_strings
            assert candidate.played_strings >= constraints.min_strings
            assert candidate.fret_span <= constraints.max_fret_span
            assert index_of(candidate.bass_note) == 0
            assert candidate.pitch_classes <= chord_pcs
            assert candidate.has_third
            assert all(f is None or f <= constraints.max_fret for f in frets)

    def test_bass_not_root_is_rejected(self, c_candidates) -> None:
        assert (0, 3, 2, 0, 1, 0) not in c_candidates

    def test_fallback_relaxes_constraints(self) -> None:
        strict = GeneratorConstraints(min_strings=6, max_muted_strings=0, max_fret_span=0)
        assert generate_candidates(C_MAJOR, "C", strict) == []
        relaxed = generate_candidates_with_fallback(C_MAJOR, "C", strict)
        assert relaxed
        assert all(index_of("C") in c.pitch_classes for c in relaxed)


class TestDetectBarres:
    """Test barre detection."""

    @pytest.mark.parametrize(
        "frets, expected",
        [
            ((1, 3, 3, 2, 1, 1), (BarrePosition(1, 0, 5),)),
            ((None, 2, 4, 4, 3, 2), (BarrePosition(2, 1, 5),)),
            ((2, 4, 4, 2, 2, 2), (BarrePosition(2, 0, 5),)),
            ((None, 0, 2, 2, 2, 0), ()),
            ((None, 0, 2, 2, 1, 0), ()),
            ((None, None, 0, 2, 3, 2), ()),
            ((None, 3, 5, 5, 5, None), ()),
            ((None,) * 6, ()),
        ],
    )
    def test_detect_barres(self, frets, expected) -> None:
        assert detect_barres(frets) == expected


class TestScorer:
    """Test candidate scoring and ranking."""

    def test_open_c_score(self, c_candidates) -> None:
        score = score_candidate(c_candidates[(None, 3, 2, 0, 1, 0)], C_MAJOR)
        assert score.playability == 25
        assert score.voice_leading == 30
        assert score.ergonomics == 20
        assert score.completeness == 25
        assert score.sonority == 10
        assert score.total == 110

    def test_missing_fifth_scores_lower(self, c_candidates) -> None:
        full = score_candidate(c_candidates[(None, 3, 2, 0, 1, 0)], C_MAJOR)
        no_fifth = score_candidate(c_candidates[(None, 3, 2, None, 1, 0)], C_MAJOR)
        assert no_fifth.total < full.total

    def test_shape_match(self) -> None:
        assert shape_match((0, 2, 2, 1, 0, 0)) == 1.0
        assert shape_match((5, 7, 7, 6, 5, 5)) < 1.0

    def test_string_skips(self) -> None:
        assert has_string_skips((3, None, 0, 0, 0, 3))
        assert not has_string_skips((None, 3, 2, 0, 1, 0))

    def test_stretch(self) -> None:
        assert stretch_difficulty((None, 3, 2, 0, 1, 0)) == 0
        assert stretch_difficulty((1, None, None, None, None, 5)) == pytest.approx(0.8)

    def test_rank_candidates(self, c_candidates) -> None:
        ranked = rank_candidates(list(c_candidates.values()), C_MAJOR, limit=4)
        assert len(ranked) == 4
        totals = [score.total for _, score in ranked]
        assert totals == sorted(totals, reverse=True)
        assert ranked[0][0].frets == (None, 3, 2, 0, 1, 0)


class TestBuildVoicings:
    """Test conversion of ranked candidates to voicings."""

    def test_best_c_voicing(self) -> None:
        voicings = build_voicings(C_MAJOR, "C")
        assert 0 < len(voicings) <= 5
        best = voicings[0]
        assert best.id == "gen-0"
        assert best.frets == (None, 3, 2, 0, 1, 0)
        assert best.difficulty == "easy"
        assert best.barres == ()
        assert best.name == "Standard"

    def test_best_a_minor_voicing(self) -> None:
        assert build_voicings(A_MINOR, "A")[0].frets == (None, 0, 2, 2, 1, 0)

    def test_ids_are_unique(self) -> None:
        voicings = build_voicings(("G", "B", "D", "F"), "G")
        assert len({v.id for v in voicings}) == len(voicings)

    def test_limit(self) -> None:
        assert len(build_voicings(C_MAJOR, "C", limit=2)) == 2
        assert build_voicings(C_MAJOR, "C", limit=0) == ()

    def test_no_notes(self) -> None:
        assert build_voicings((), "C") == ()

    def test_position_name(self) -> None:
        voicings = build_voicings(C_MAJOR, "C", limit=50)
        for voicing in voicings:
            if voicing.base_fret > 3:
                assert voicing.name == f"Position {voicing.base_fret}"

    def test_voicings_sound_root_and_third(self) -> None:
        """Every voicing keeps the root and third, even when other tones drop out."""
        notes = ("C", "E", "G", "A#", "D#")
        voicings = build_voicings(notes, "C")
        assert voicings
        for voicing in voicings:
            sounding = sounding_pitch_classes(voicing.frets)
            assert {index_of("C"), index_of("E")} <= sounding
