"""Tests for chord name parsing and normalization."""

import pytest

from chord_resolver.normalizer import (
    chords_equal,
    clean_chord_input,
    get_display_name,
    normalize_chord_name,
    parse_chord_name,
    split_bass,
    tokenize_suffix,
)
from chord_resolver.pitch_class import NOTES


class TestNormalize:
    """Test canonical names of common spellings."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Am", "Am"),
            ("Amin", "Am"),
            ("A-", "Am"),
            ("Ami", "Am"),
            ("Aminor", "Am"),
            ("am", "Am"),
            ("A m", "Am"),
            ("Am7", "Am7"),
            ("Amin7", "Am7"),
            ("A-7", "Am7"),
            ("Amaj7", "Amaj7"),
            ("AM7", "Amaj7"),
            ("AΔ7", "Amaj7"),
            ("CMaj7", "Cmaj7"),
            ("Cmaj", "C"),
            ("Cmajor", "C"),
            ("CM", "C"),
            ("CMi", "Cm"),
            ("Asus", "Asus4"),
            ("Asus2", "Asus2"),
            ("Cadd9", "Cadd9"),
            ("C(add9)", "Cadd9"),
            ("F#m", "F#m"),
            ("B♭", "Bb"),
            ("B♭m7", "Bbm7"),
            ("Cø", "Cm7b5"),
            ("Cø7", "Cm7b5"),
            ("Cm7-5", "Cm7b5"),
            ("C°7", "Cdim7"),
            ("Co", "Cdim"),
            ("Cdim", "Cdim"),
            ("C+", "Caug"),
            ("Caug", "Caug"),
            ("C7+5", "Caug7"),
            ("Gdom7", "G7"),
            ("C6/9", "C69"),
            ("C7sus4", "C7sus4"),
            ("CmM7", "Cmmaj7"),
            ("Cm(maj7)", "Cmmaj7"),
            ("  Dm7 ", "Dm7"),
        ],
    )
    def test_canonical(self, text: str, expected: str) -> None:
        assert normalize_chord_name(text) == expected

    @pytest.mark.parametrize("text", ["Hm", "XYZ123", "123", "", "   ", "#m"])
    def test_unparseable_returned_unchanged(self, text: str) -> None:
        assert normalize_chord_name(text) == text

    @pytest.mark.parametrize(
        "text",
        [
            "Am",
            "Amin7",
            "AM7",
            "Cø",
            "C°7",
            "C+",
            "Asus",
            "C6/9",
            "Amz",
            "CMajo",
            "BM#5",
            "Cmaj7#11",
            "C/E",
            "G7b9#5",
            "Fadd",
            "dmi",
            "E-maj7",
        ],
    )
    def test_idempotent(self, text: str) -> None:
        once = normalize_chord_name(text)
        assert normalize_chord_name(once) == once


class TestParseChordName:
    """Test the components of parsed chords."""

    def test_minor_seventh(self) -> None:
        chord = parse_chord_name("Amin7")
        assert chord is not None
        assert chord.root == "A"
        assert chord.quality == "minor"
        assert chord.extensions == ("7",)
        assert chord.canonical == "Am7"
        assert chord.suffix == "m7"

    def test_major_seventh_is_one_extension(self) -> None:
        chord = parse_chord_name("Cmaj7")
        assert chord.quality == "major"
        assert chord.extensions == ("maj7",)

    def test_half_diminished(self) -> None:
        chord = parse_chord_name("Am7b5")
        assert chord.quality == "half-diminished"
        assert chord.extensions == ("7", "b5")

    def test_half_diminished_symbol(self) -> None:
        chord = parse_chord_name("Aø")
        assert chord.canonical == "Am7b5"
        assert chord.quality == "half-diminished"

    def test_diminished_seventh(self) -> None:
        chord = parse_chord_name("F#dim7")
        assert chord.root == "F#"
        assert chord.quality == "diminished"
        assert chord.extensions == ("7",)

    @pytest.mark.parametrize(
        "text, quality",
        [
            ("C", "major"),
            ("G7", "dominant"),
            ("C13", "dominant"),
            ("Dsus4", "suspended"),
            ("Cadd9", "add"),
            ("C+", "augmented"),
            ("E5", "power"),
            ("Bbm", "minor"),
        ],
    )
    def test_quality(self, text: str, quality: str) -> None:
        assert parse_chord_name(text).quality == quality

    def test_root_keeps_flat_spelling(self) -> None:
        chord = parse_chord_name("bb")
        assert chord.root == "Bb"
        assert chord.canonical == "Bb"

    def test_slash_bass_only_in_display(self) -> None:
        chord = parse_chord_name("C/e")
        assert chord.canonical == "C"
        assert chord.display == "C/E"
        assert chord.bass == "E"
        assert str(chord) == "C"

    def test_residue_kept(self) -> None:
        chord = parse_chord_name("Amz")
        assert chord.canonical == "Amz"
        assert chord.residue == "z"

    @pytest.mark.parametrize("text", ["", "   ", "Hm", "XYZ123", "123", "#"])
    def test_invalid(self, text: str) -> None:
        assert parse_chord_name(text) is None

    def test_non_string(self) -> None:
        assert parse_chord_name(None) is None  # type: ignore[arg-type]

    def test_length_cap(self) -> None:
        assert parse_chord_name("A" + "m" * 49) is not None
        assert parse_chord_name("A" + "m" * 50) is None
        assert parse_chord_name("A" * 100) is None

    def test_length_cap_applies_after_trimming(self) -> None:
        assert parse_chord_name("  " + "A" + "m" * 49 + "  ") is not None

    def test_custom_length_cap(self) -> None:
        assert parse_chord_name("Am7", max_length=2) is None

    @pytest.mark.parametrize("root", NOTES)
    def test_all_roots(self, root: str) -> None:
        assert parse_chord_name(root + "m").root == root


class TestTokenizer:
    """Test the low-level helpers."""

    def test_clean_chord_input(self) -> None:
        assert clean_chord_input(" F♯ m ( 7 ) ") == "F#m7"

    def test_split_bass(self) -> None:
        assert split_bass("G/B") == ("G", "B")
        assert split_bass("C/X") == ("C/X", None)
        assert split_bass("C") == ("C", None)

    @pytest.mark.parametrize(
        "rest, expected",
        [
            ("", ("", (), "")),
            ("m7b5", ("m", ("7", "b5"), "")),
            ("maj9", ("", ("maj9",), "")),
            ("7sus", ("", ("7", "sus4"), "")),
            ("add11", ("", ("add11",), "")),
            ("7-9", ("", ("7", "b9"), "")),
            ("dimz", ("dim", (), "z")),
        ],
    )
    def test_tokenize_suffix(self, rest: str, expected: tuple) -> None:
        assert tokenize_suffix(rest) == expected


class TestEquality:
    """Test display names and equality."""

    def test_chords_equal(self) -> None:
        assert chords_equal("Am", "Amin") is True
        assert chords_equal("Am", "A-") is True
        assert chords_equal("Am", "A") is False

    @pytest.mark.parametrize(
        "alias, canonical",
        [
            ("Csus47", "C7sus4"),
            ("Csus7", "C7sus4"),
            ("C2", "Cadd2"),
            ("C7#5", "Caug7"),
            ("C6add9", "C69"),
            ("Cma7", "Cmaj7"),
        ],
    )
    def test_alias_spellings_share_canonical_name(self, alias: str, canonical: str) -> None:
        assert chords_equal(alias, canonical)
        assert normalize_chord_name(alias) == canonical
        assert normalize_chord_name(canonical) == canonical

    def test_chords_equal_ignores_case_of_root(self) -> None:
        assert chords_equal("am7", "Amin7")

    def test_display_name(self) -> None:
        assert get_display_name("a min") == "Am"
        assert get_display_name("G/B") == "G/B"
        assert get_display_name("Hm") == "Hm"
