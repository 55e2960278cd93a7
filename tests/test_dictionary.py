"""Tests for curated chord dictionaries."""

import json

import pytest

from chord_resolver.dictionary import (
    GUITAR_CHORDS,
    get_chord,
    get_chord_names,
    has_chord,
    load_dictionary_json,
    parse_dictionary_data,
    validate_dictionary,
)
from chord_resolver.models import ChordEntry, Voicing
from chord_resolver.normalizer import normalize_chord_name
from chord_resolver.notes import generate_notes
from chord_resolver.pitch_class import pitch_class_set
from chord_resolver.voicing.fretboard import sounding_pitch_classes

EXPECTED_CHORDS = [
    "C", "D", "E", "F", "G", "A", "B",
    "Am", "Dm", "Em", "Bm", "F#m",
    "G7", "A7", "D7", "E7",
    "Am7", "Em7",
    "Dsus4", "Asus4",
    "Cadd9",
]  # fmt: skip


@pytest.fixture
def dictionary_data() -> dict:
    """A small valid dictionary document."""
    return {
        "chords": [
            {
                "canonical": "Am",
                "display": "A minor",
                "voicings": [
                    {
                        "id": "am-open",
                        "name": "Open",
                        "frets": [None, 0, 2, 2, 1, 0],
                        "fingers": [None, None, 2, 3, 1, None],
                        "difficulty": "easy",
                    }
                ],
            },
            {
                "canonical": "Bm",
                "voicings": [
                    {
                        "id": "bm-barre",
                        "name": "Barre",
                        "frets": [None, 2, 4, 4, 3, 2],
                        "barres": [{"fret": 2, "from_string": 1, "to_string": 5}],
                        "base_fret": 2,
                    }
                ],
            },
        ]
    }


class TestGuitarChords:
    """Test the bundled dictionary."""

    def test_contents(self) -> None:
        assert list(get_chord_names()) == EXPECTED_CHORDS

    def test_is_valid(self) -> None:
        validate_dictionary(GUITAR_CHORDS)

    def test_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            GUITAR_CHORDS["X"] = GUITAR_CHORDS["C"]  # type: ignore[index]

    @pytest.mark.parametrize("name", EXPECTED_CHORDS)
    def test_keys_are_canonical(self, name: str) -> None:
        assert normalize_chord_name(name) == name
        assert GUITAR_CHORDS[name].canonical == name

    @pytest.mark.parametrize("name", EXPECTED_CHORDS)
    def test_voicings_sound_chord_tones(self, name: str) -> None:
        entry = GUITAR_CHORDS[name]
        chord_pcs = pitch_class_set(generate_notes(entry.root, name[len(entry.root) :]).notes)
        for voicing in entry.voicings:
            assert sounding_pitch_classes(voicing.frets) <= chord_pcs

    def test_helpers(self) -> None:
        assert has_chord("Am")
        assert not has_chord("Amin")
        assert get_chord("G7").quality == "dominant"
        assert get_chord("Am9") is None

    def test_barre_chords(self) -> None:
        voicing = get_chord("F").voicings[0]
        assert voicing.barres[0].fret == 1
        assert voicing.difficulty == "intermediate"


class TestParseDictionaryData:
    """Test building dictionaries from JSON data."""

    def test_valid(self, dictionary_data) -> None:
        chords = parse_dictionary_data(dictionary_data)
        assert list(chords) == ["Am", "Bm"]
        am = chords["Am"]
        assert am.display == "A minor"
        assert am.root == "A"
        assert am.quality == "minor"
        assert am.voicings[0].frets == (None, 0, 2, 2, 1, 0)
        assert am.voicings[0].difficulty == "easy"
        bm = chords["Bm"]
        assert bm.display == "Bm"
        assert bm.voicings[0].barres[0].to_string == 5
        assert bm.voicings[0].base_fret == 2

    def test_empty(self) -> None:
        assert len(parse_dictionary_data({})) == 0

    def test_duplicate_raises(self, dictionary_data) -> None:
        dictionary_data["chords"].append(dictionary_data["chords"][0])
        with pytest.raises(ValueError, match="Duplicate"):
            parse_dictionary_data(dictionary_data)

    def test_non_canonical_key_raises(self, dictionary_data) -> None:
        dictionary_data["chords"][0]["canonical"] = "Amin"
        with pytest.raises(ValueError, match="not a canonical"):
            parse_dictionary_data(dictionary_data)

    def test_wrong_string_count_raises(self, dictionary_data) -> None:
        dictionary_data["chords"][0]["voicings"][0]["frets"] = [0, 2, 2, 1, 0]
        with pytest.raises(ValueError, match="strings"):
            parse_dictionary_data(dictionary_data)

    @pytest.mark.parametrize(
        "record",
        [
            {"voicings": []},
            {"canonical": "Hm"},
            {"canonical": "Am", "voicings": [{"name": "no id or frets"}]},
            {"canonical": "Am", "voicings": [{"id": "x", "frets": [0, 0, 0, 0, 0, -1]}]},
            {"canonical": "Am", "voicings": [{"id": "x", "frets": [0] * 6, "difficulty": "hard"}]},
            {"canonical": "Am", "quality": "weird", "voicings": []},
            {"canonical": "Am", "voicings": [{"id": "x", "frets": [0] * 6, "base_fret": [1]}]},
            {"canonical": "Am", "voicings": [{"id": "x", "frets": [0] * 6, "fingers": 3}]},
            "Am",
        ],
    )
    def test_malformed_raises(self, record) -> None:
        with pytest.raises(ValueError):
            parse_dictionary_data({"chords": [record]})

    def test_lenient_skips_bad_records(self, dictionary_data, caplog) -> None:
        dictionary_data["chords"].append({"canonical": "Amin"})
        with caplog.at_level("WARNING", logger="chord_resolver.dictionary.loader"):
            chords = parse_dictionary_data(dictionary_data, strict=False)
        assert list(chords) == ["Am", "Bm"]
        assert "Skipping dictionary record" in caplog.text

    def test_lenient_skips_bad_base_fret(self, dictionary_data, caplog) -> None:
        dictionary_data["chords"].append(
            {"canonical": "C", "voicings": [{"id": "c", "frets": [None, 3, 2, 0, 1, 0], "base_fret": [1]}]}
        )
        with caplog.at_level("WARNING", logger="chord_resolver.dictionary.loader"):
            chords = parse_dictionary_data(dictionary_data, strict=False)
        assert "C" not in chords
        assert "Skipping dictionary record" in caplog.text

    @pytest.mark.parametrize("data", [[], "chords", None])
    def test_non_object_data_raises(self, data) -> None:
        with pytest.raises(ValueError, match="must be an object"):
            parse_dictionary_data(data, strict=False)

    def test_custom_string_count(self) -> None:
        data = {"chords": [{"canonical": "C", "voicings": [{"id": "c-uke", "frets": [0, 0, 0, 3]}]}]}
        assert parse_dictionary_data(data, string_count=4)["C"].voicings[0].frets == (0, 0, 0, 3)


class TestLoadDictionaryJson:
    """Test loading dictionaries from files."""

    def test_load(self, tmp_path, dictionary_data) -> None:
        path = tmp_path / "chords.json"
        path.write_text(json.dumps(dictionary_data), encoding="utf-8")
        chords = load_dictionary_json(path)
        assert set(chords) == {"Am", "Bm"}

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            load_dictionary_json(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            load_dictionary_json(str(path))


class TestValidateDictionary:
    """Test validation of in-memory dictionaries."""

    def test_key_mismatch(self) -> None:
        entry = GUITAR_CHORDS["C"]
        with pytest.raises(ValueError, match="does not match"):
            validate_dictionary({"D": entry})

    def test_bad_barre(self) -> None:
        from chord_resolver.models import BarrePosition

        voicing = Voicing("x", "Barre", (1, 1, 1, 1, 1, 1), barres=(BarrePosition(1, 0, 6),))
        entry = ChordEntry("C", "C", "C", "major", (voicing,))
        with pytest.raises(ValueError, match="invalid barre"):
            validate_dictionary({"C": entry})
