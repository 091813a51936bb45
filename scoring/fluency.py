from config import Config
from models import FluencyFeedback, FluencyResult
from scoring.messages import feedback_message


def score_fluency(
    interim_event_count: int,
    actual_duration_ms: float,
    expected_duration_ms: float,
    dominated: bool = False,
) -> FluencyResult:
    """Infer continuity from how often the recognizer sent interim results."""
    if actual_duration_ms > 0:
        words_per_second = interim_event_count / (actual_duration_ms / 1000)
    else:
        words_per_second = 0.0

    if interim_event_count < Config.MIN_INTERIM_EVENTS:
        # Very few interim results: either very fast or very hesitant speech
        if actual_duration_ms < expected_duration_ms * Config.FAST_SHORT_ATTEMPT_RATIO:
            score, tag = 85, FluencyFeedback.GOOD_SPEED_WORK_ON_CLARITY
        else:
            score, tag = 70, FluencyFeedback.SPEAK_MORE_CONTINUOUSLY
    elif words_per_second > Config.FAST_EVENTS_PER_SECOND:
        score, tag = 75, FluencyFeedback.SLIGHTLY_TOO_FAST
    elif words_per_second < Config.SLOW_EVENTS_PER_SECOND:
        score, tag = 65, FluencyFeedback.TOO_MANY_PAUSES
    else:
        score, tag = 100, FluencyFeedback.SMOOTH

    if dominated:
        score, tag = 0, FluencyFeedback.FOCUS_ON_CORRECT_WORDS

    return FluencyResult(
        score=score,
        words_per_second=round(words_per_second, 1),
        feedback_tag=tag,
        feedback=feedback_message(tag),
    )
