import re
from typing import List

# Applied in order; later rules see the output of earlier ones.
PRONUNCIATION_RULES = [
    # Spanish accented vowels and letters
    (r"[áà]", "a"),
    (r"[éè]", "e"),
    (r"[íì]", "i"),
    (r"[óò]", "o"),
    (r"[úù]", "u"),
    (r"ñ", "n"),
    # Common speech recognition confusions
    (r"[bv]", "b"),  # b/v confusion in Spanish
    (r"ll", "y"),
    (r"rr", "r"),
    (r"h", ""),  # silent h
    # French
    (r"ç", "c"),
    (r"[âä]", "a"),
    (r"[êë]", "e"),
    (r"[îï]", "i"),
    (r"[ôö]", "o"),
    (r"[ûü]", "u"),
    # German
    (r"ß", "ss"),
]

_COMPILED_RULES = [(re.compile(pattern), replacement) for pattern, replacement in PRONUNCIATION_RULES]


def normalize(text: str) -> str:
    """Canonical form of a phrase or transcript used for word comparison."""
    text = text.lower()
    text = re.sub(r"[¿¡]", "", text)
    text = re.sub(r"[.,!?;:]", "", text)
    text = re.sub(r"\s+", " ", text)
    return text.strip()


def normalize_for_pronunciation(word: str) -> str:
    """Fold spelling differences that the recognizer or learner cannot hear."""
    word = word.lower()
    for pattern, replacement in _COMPILED_RULES:
        word = pattern.sub(replacement, word)
    return word


def split_words(text: str) -> List[str]:
    return [word for word in normalize(text).split(" ") if word]
