from rapidfuzz.distance import Levenshtein

from config import Config
from scoring.normalizer import normalize_for_pronunciation
from scoring.phonetics import phonetic_similarity

# Known speech recognition confusions and fast-speech contractions.
# Pairs match in either order, after pronunciation normalization.
SUBSTITUTION_PAIRS = [
    # Spanish
    ("bano", "vano"), ("bano", "baho"), ("bano", "pano"), ("bano", "albano"), ("bano", "abano"),
    ("donde", "onde"), ("donde", "don"),
    ("el", "al"), ("baño", "bano"),
    # Common confusions
    ("la", "ya"), ("de", "del"), ("en", "an"),
    # Contractions
    ("para", "pa"), ("porque", "por"), ("esta", "ta"),
]

_SUBSTITUTIONS = {
    frozenset(normalize_for_pronunciation(word) for word in pair) for pair in SUBSTITUTION_PAIRS
}

# (max word length, minimum similarity, boost), first matching tier applies
LENGTH_BOOSTS = [
    (3, 0.3, 0.4),
    (5, 0.4, 0.3),
    (None, 0.5, 0.2),
]


def substitution_similarity(word1: str, word2: str) -> float:
    if frozenset((word1, word2)) in _SUBSTITUTIONS:
        return Config.SUBSTITUTION_SIMILARITY
    return 0.0


def edit_similarity(word1: str, word2: str) -> float:
    """Levenshtein similarity with extra forgiveness for short words."""
    max_length = max(len(word1), len(word2))
    if max_length == 0:
        return 1.0

    distance = Levenshtein.distance(word1, word2)
    similarity = (max_length - distance) / max_length

    for length_limit, minimum, boost in LENGTH_BOOSTS:
        if (length_limit is None or max_length <= length_limit) and similarity >= minimum:
            return min(1.0, similarity + boost)
    return similarity


def word_similarity(word1: str, word2: str) -> float:
    """Score how closely a spoken word matches an expected word, 0 to 1.

    Rules are tried from strictest to most forgiving:
    exact match, equal after pronunciation normalization, containment
    (fast speech truncation), known recognizer substitutions, and finally
    boosted edit distance or phonetic similarity, whichever is higher.
    """
    if word1 == word2:
        return 1.0

    normalized1 = normalize_for_pronunciation(word1)
    normalized2 = normalize_for_pronunciation(word2)

    if normalized1 == normalized2:
        return 1.0

    if normalized1 and normalized2 and (normalized1 in normalized2 or normalized2 in normalized1):
        return Config.CONTAINMENT_SIMILARITY

    substitution = substitution_similarity(normalized1, normalized2)
    if substitution > 0:
        return substitution

    similarity = edit_similarity(normalized1, normalized2)
    return max(similarity, phonetic_similarity(normalized1, normalized2))
