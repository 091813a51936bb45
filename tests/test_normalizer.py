import pytest

from scoring.normalizer import normalize, normalize_for_pronunciation, split_words

PHRASES = [
    "¿Dónde está el baño?",
    "  Hola,   ¿cómo  estás? ",
    "Je voudrais un café, s'il vous plaît.",
    "Wie spät ist es?!",
    "¡Buenos días!\tSeñor;",
    "",
]


class TestNormalize:
    def test_strips_spanish_punctuation(self):
        assert normalize("¿Dónde está el baño?") == "dónde está el baño"

    def test_collapses_whitespace(self):
        assert normalize("  Hola,   ¿cómo  estás? ") == "hola cómo estás"

    def test_keeps_apostrophes_and_accents(self):
        assert normalize("S'il vous plaît!") == "s'il vous plaît"

    @pytest.mark.parametrize("phrase", PHRASES)
    def test_idempotent(self, phrase):
        assert normalize(normalize(phrase)) == normalize(phrase)

    def test_split_words(self):
        assert split_words("¡Hola!   amigo ") == ["hola", "amigo"]
        assert split_words("¿?") == []


class TestNormalizeForPronunciation:
    @pytest.mark.parametrize("word,expected", [
        ("baño", "bano"),
        ("vaca", "baca"),
        ("calle", "caye"),
        ("perro", "pero"),
        ("hola", "ola"),
        ("Está", "esta"),
        ("français", "francais"),
        ("être", "etre"),
        ("müde", "mude"),
        ("straße", "strasse"),
    ])
    def test_folds_spelling(self, word, expected):
        assert normalize_for_pronunciation(word) == expected
