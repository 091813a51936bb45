import re

from config import Config

_VOWEL_GROUPS = re.compile(r"[aeiouáéíóúàèìòùâêîôûäëïöü]+")


def estimate_syllables(text: str) -> int:
    """Approximate syllable count from vowel groups."""
    vowel_groups = _VOWEL_GROUPS.findall(text.lower())
    if vowel_groups:
        return len(vowel_groups)
    return max(1, len(text.split()))


def expected_duration_ms(phrase_text: str) -> float:
    # Learner speaking rate plus a fixed buffer for natural pauses
    syllable_count = estimate_syllables(phrase_text)
    return (syllable_count / Config.SYLLABLES_PER_SECOND) * 1000 + Config.DURATION_BUFFER_MS
