import re
from rapidfuzz.distance import Levenshtein

from config import Config

# Sound classes, applied in order. Deliberately lossy: only ever a fallback.
PHONETIC_RULES = [
    # Voiced/unvoiced consonant pairs and similar sounding consonants
    (r"[bp]", "p"),
    (r"[dt]", "t"),
    (r"[kg]", "k"),
    (r"[sz]", "s"),
    (r"[lr]", "r"),
    (r"[mn]", "n"),
    # Vowel simplification
    (r"[aáàâä]", "a"),
    (r"[eéèêë]", "e"),
    (r"[iíìîï]", "i"),
    (r"[oóòôö]", "o"),
    (r"[uúùûü]", "u"),
    # Doubled letters
    (r"(.)\1+", r"\1"),
]

_COMPILED_RULES = [(re.compile(pattern), replacement) for pattern, replacement in PHONETIC_RULES]


def to_phonetic_pattern(word: str) -> str:
    pattern = word.lower()
    for rule, replacement in _COMPILED_RULES:
        pattern = rule.sub(replacement, pattern)
    return pattern


def phonetic_similarity(word1: str, word2: str) -> float:
    """Similarity of two words by sound class, never above 0.9."""
    phonetic1 = to_phonetic_pattern(word1)
    phonetic2 = to_phonetic_pattern(word2)

    if phonetic1 == phonetic2:
        return Config.PHONETIC_EXACT_SIMILARITY if phonetic1 else 0.0

    max_length = max(len(phonetic1), len(phonetic2))
    distance = Levenshtein.distance(phonetic1, phonetic2)
    return max(0.0, (max_length - distance) / max_length * Config.PHONETIC_SCALE)
