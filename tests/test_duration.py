import pytest

from scoring.duration import estimate_syllables, expected_duration_ms


class TestEstimateSyllables:
    @pytest.mark.parametrize("text,syllables", [
        ("Hola", 2),
        ("¿Dónde está el baño?", 7),
        ("Schön", 1),
        ("beau", 1),
        ("Brr", 1),
        ("psst hmm", 2),
    ])
    def test_vowel_groups(self, text, syllables):
        assert estimate_syllables(text) == syllables


class TestExpectedDuration:
    def test_single_word(self):
        # 2 syllables at 3.5 per second plus a one second buffer
        assert expected_duration_ms("Hola") == pytest.approx(1571.43, abs=0.01)

    def test_longer_phrase(self):
        assert expected_duration_ms("¿Dónde está el baño?") == pytest.approx(3000.0)

    def test_no_vowels_falls_back_to_word_count(self):
        assert expected_duration_ms("psst hmm") == pytest.approx(2 / 3.5 * 1000 + 1000)
