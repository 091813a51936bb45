import sys
import os
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from models import InterimEvent, SpeechSession, WordAccuracyFeedback, WordAccuracyResult
from scoring.messages import feedback_message


def make_session(start_time=0, end_time=None, interim_count=0):
    events = [
        InterimEvent(transcript=f"fragment {i}", timestamp=start_time + i * 100)
        for i in range(interim_count)
    ]
    return SpeechSession(start_time=start_time, end_time=end_time, interim_events=events)


def make_word_accuracy(score, total_expected=4):
    tag = WordAccuracyFeedback.TRY_TARGET_PHRASE if score == 0 else WordAccuracyFeedback.GOOD
    return WordAccuracyResult(
        score=score,
        correct_count=0,
        total_expected=total_expected,
        extra_word_count=0,
        matches=[],
        hard_zero=score == 0,
        feedback_tag=tag,
        feedback=feedback_message(tag),
    )


@pytest.fixture
def session_factory():
    return make_session


@pytest.fixture
def word_accuracy_factory():
    return make_word_accuracy
