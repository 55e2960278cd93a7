"""Tests for the chord formula table."""

import pytest

from chord_resolver.formulas import (
    CHORD_FORMULAS,
    QUALITY_ALIASES,
    get_formula,
    quality_category,
    resolve_formula_key,
    validate_formula_table,
)


class TestFormulaTable:
    """Test the static tables."""

    def test_table_is_valid(self) -> None:
        validate_formula_table()

    @pytest.mark.parametrize("key", list(CHORD_FORMULAS))
    def test_formula_starts_at_zero_and_increases(self, key: str) -> None:
        intervals = CHORD_FORMULAS[key]
        assert intervals[0] == 0
        assert all(b > a for a, b in zip(intervals, intervals[1:]))

    @pytest.mark.parametrize("alias", list(QUALITY_ALIASES))
    def test_alias_targets_exist(self, alias: str) -> None:
        assert QUALITY_ALIASES[alias] in CHORD_FORMULAS

    def test_tables_are_read_only(self) -> None:
        with pytest.raises(TypeError):
            CHORD_FORMULAS["new"] = (0, 1)  # type: ignore[index]


class TestValidateFormulaTable:
    """Test detection of table errors."""

    def test_formula_not_starting_at_zero(self) -> None:
        with pytest.raises(ValueError, match="must start at 0"):
            validate_formula_table({"bad": (1, 4, 7)}, {})

    def test_formula_not_increasing(self) -> None:
        with pytest.raises(ValueError, match="strictly increasing"):
            validate_formula_table({"bad": (0, 7, 4)}, {})

    def test_duplicate_interval(self) -> None:
        with pytest.raises(ValueError, match="strictly increasing"):
            validate_formula_table({"bad": (0, 4, 4)}, {})

    def test_dangling_alias(self) -> None:
        with pytest.raises(ValueError, match="unknown formula"):
            validate_formula_table({"": (0, 4, 7)}, {"M": "missing"})


class TestResolveFormulaKey:
    """Test quality token resolution."""

    @pytest.mark.parametrize(
        "token, expected",
        [
            ("m7", "m7"),
            ("min", "m"),
            ("-", "m"),
            ("minor", "m"),
            ("M", ""),
            ("maj", ""),
            ("M7", "maj7"),
            ("min7", "m7"),
            ("-7", "m7"),
            ("ø", "m7b5"),
            ("m7-5", "m7b5"),
            ("o", "dim"),
            ("°7", "dim7"),
            ("+", "aug"),
            ("sus", "sus4"),
            ("7sus", "7sus4"),
            ("MAJ7", "maj7"),
            ("Dim", "dim"),
        ],
    )
    def test_known_tokens(self, token: str, expected: str) -> None:
        assert resolve_formula_key(token) == expected

    def test_case_sensitive_before_insensitive(self) -> None:
        assert resolve_formula_key("M7") == "maj7"
        assert resolve_formula_key("m7") == "m7"

    @pytest.mark.parametrize("token", ["xyz", "sus9", "mz"])
    def test_unknown_tokens(self, token: str) -> None:
        assert resolve_formula_key(token) is None
        assert get_formula(token) is None

    def test_get_formula(self) -> None:
        assert get_formula("7") == (0, 4, 7, 10)
        assert get_formula("min") == (0, 3, 7)


class TestQualityCategory:
    """Test quality categories of formula keys."""

    @pytest.mark.parametrize(
        "key, expected",
        [
            ("", "major"),
            ("maj7", "major"),
            ("6", "major"),
            ("m", "minor"),
            ("m7", "minor"),
            ("mmaj7", "minor"),
            ("dim", "diminished"),
            ("dim7", "diminished"),
            ("m7b5", "half-diminished"),
            ("aug", "augmented"),
            ("aug7", "augmented"),
            ("7#5#9", "augmented"),
            ("sus4", "suspended"),
            ("7sus4", "suspended"),
            ("add9", "add"),
            ("7", "dominant"),
            ("13", "dominant"),
            ("5", "power"),
        ],
    )
    def test_categories(self, key: str, expected: str) -> None:
        assert quality_category(key) == expected
