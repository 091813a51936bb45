import pytest

from scoring.phonetics import phonetic_similarity, to_phonetic_pattern


class TestPhoneticPattern:
    @pytest.mark.parametrize("word,pattern", [
        ("bebida", "pepita"),
        ("gato", "kato"),
        ("zapato", "sapato"),
        ("carro", "caro"),
        ("mamma", "nana"),
        ("Más", "nas"),
        ("lola", "rora"),
    ])
    def test_reduces_sound_classes(self, word, pattern):
        assert to_phonetic_pattern(word) == pattern

    def test_collapses_runs_after_merging(self):
        # d and t merge first, then the doubled t collapses
        assert to_phonetic_pattern("adtó") == "ato"


class TestPhoneticSimilarity:
    def test_matching_patterns(self):
        assert phonetic_similarity("bata", "pata") == pytest.approx(0.9)

    def test_empty_words(self):
        assert phonetic_similarity("", "") == 0.0

    def test_unrelated_words(self):
        assert phonetic_similarity("sol", "xyz") == 0.0

    def test_scales_edit_similarity(self):
        # one edit in four characters, scaled by 0.8
        assert phonetic_similarity("casa", "cosa") == pytest.approx(0.6)
