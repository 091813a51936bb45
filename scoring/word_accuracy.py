from typing import List, Tuple

from config import Config
from models import WordAccuracyFeedback, WordAccuracyResult, WordMatch, WordStatus
from scoring.messages import feedback_message
from scoring.normalizer import split_words
from scoring.rounding import round_half_up
from scoring.similarity import word_similarity


def best_match(expected_word: str, spoken_words: List[str]) -> Tuple[str, float]:
    """Spoken word most similar to the expected word; earliest wins ties."""
    best_word, best_score = "", 0.0
    for spoken_word in spoken_words:
        similarity = word_similarity(expected_word, spoken_word)
        if similarity > best_score:
            best_word, best_score = spoken_word, similarity
    return best_word, best_score


def classify_match(expected_word: str, matched_word: str, similarity: float) -> Tuple[WordMatch, float]:
    """Band a similarity into a WordMatch and the credit it earns."""
    if similarity >= Config.CORRECT_THRESHOLD:
        status, credit = WordStatus.CORRECT, 1.0
    elif similarity >= Config.PARTIAL_THRESHOLD:
        status, credit = WordStatus.PARTIAL, Config.PARTIAL_CREDIT
    elif similarity >= Config.MINIMAL_THRESHOLD:
        status, credit = WordStatus.INCORRECT, Config.MINIMAL_CREDIT
    else:
        status, credit = WordStatus.MISSING, 0.0
        matched_word = ""

    match = WordMatch(
        expected_word=expected_word,
        matched_word=matched_word,
        similarity=min(1.0, max(0.0, similarity)),
        status=status,
    )
    return match, credit


def extra_word_penalty(extra_words: int) -> int:
    # Past two extra words, every extra word costs the heavy rate
    if extra_words > 2:
        return extra_words * Config.EXTRA_WORD_HEAVY_PENALTY
    return extra_words * Config.EXTRA_WORD_PENALTY


def is_unrelated_speech(matches: List[WordMatch]) -> bool:
    """True when nothing the learner said resembles the expected phrase."""
    if all(match.status == WordStatus.MISSING for match in matches):
        return True

    # Short-word forgiveness lets unrelated speech pick up stray partial
    # matches, so also require a correct word or broad partial coverage.
    if any(match.status == WordStatus.CORRECT for match in matches):
        return False
    partial = sum(1 for match in matches if match.status == WordStatus.PARTIAL)
    return partial / len(matches) < Config.UNRELATED_SPEECH_MIN_MATCH_SHARE


def word_feedback_tag(correct_count: int, total_expected: int) -> WordAccuracyFeedback:
    if total_expected == 0:
        return WordAccuracyFeedback.EXCELLENT

    percentage = round_half_up(correct_count / total_expected * 100)
    if percentage >= 90:
        return WordAccuracyFeedback.EXCELLENT
    elif percentage >= 75:
        return WordAccuracyFeedback.GOOD
    elif percentage >= 60:
        return WordAccuracyFeedback.GETTING_BETTER
    return WordAccuracyFeedback.KEEP_PRACTICING


def score_word_accuracy(expected_phrase: str, spoken_transcript: str) -> WordAccuracyResult:
    """Score which expected words the learner actually said.

    Every expected word is matched greedily and independently against the
    best spoken word, so two expected words may claim the same spoken word.
    The result is the authority score: a zero here zeroes everything else.
    """
    expected_words = split_words(expected_phrase)
    spoken_words = split_words(spoken_transcript)
    extra_words = max(0, len(spoken_words) - len(expected_words))

    if not expected_words:
        tag = word_feedback_tag(0, 0)
        return WordAccuracyResult(
            score=100,
            correct_count=0,
            total_expected=0,
            extra_word_count=extra_words,
            matches=[],
            feedback_tag=tag,
            feedback=feedback_message(tag),
        )

    matches = []
    credits = 0.0
    for expected_word in expected_words:
        matched_word, similarity = best_match(expected_word, spoken_words)
        match, credit = classify_match(expected_word, matched_word, similarity)
        matches.append(match)
        credits += credit

    correct_count = sum(1 for match in matches if match.status == WordStatus.CORRECT)

    if is_unrelated_speech(matches):
        tag = WordAccuracyFeedback.TRY_TARGET_PHRASE
        return WordAccuracyResult(
            score=0,
            correct_count=correct_count,
            total_expected=len(expected_words),
            extra_word_count=extra_words,
            matches=matches,
            hard_zero=True,
            feedback_tag=tag,
            feedback=feedback_message(tag),
        )

    score = round_half_up(credits / len(expected_words) * 100)
    score = max(0, score - extra_word_penalty(extra_words))

    # Encourage reasonable attempts
    if score >= 70:
        score = min(100, score + Config.HIGH_SCORE_BOOST)
    elif score >= 50:
        score = min(100, score + Config.MEDIUM_SCORE_BOOST)

    tag = word_feedback_tag(correct_count, len(expected_words))
    return WordAccuracyResult(
        score=max(0, min(100, score)),
        correct_count=correct_count,
        total_expected=len(expected_words),
        extra_word_count=extra_words,
        matches=matches,
        feedback_tag=tag,
        feedback=feedback_message(tag),
    )
