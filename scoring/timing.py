from config import Config
from models import TimingFeedback, TimingResult
from scoring.messages import feedback_message
from scoring.rounding import round_half_up


def score_timing(actual_duration_ms: float, expected_duration_ms: float, dominated: bool = False) -> TimingResult:
    """Score pacing from the ratio of actual to expected speaking time.

    When ``dominated`` is set (word accuracy scored zero) the pace is still
    measured but the score is forced to zero.
    """
    if expected_duration_ms <= 0:
        raise ValueError("Expected duration must be positive")

    ratio = actual_duration_ms / expected_duration_ms

    if ratio < Config.TOO_FAST_RATIO:
        score = max(60, 100 - (Config.TOO_FAST_RATIO - ratio) * 200)
        tag = TimingFeedback.TOO_FAST
    elif ratio > Config.TOO_SLOW_RATIO:
        score = max(60, 100 - (ratio - Config.TOO_SLOW_RATIO) * 150)
        tag = TimingFeedback.TOO_SLOW
    elif ratio > Config.SLIGHTLY_SLOW_RATIO:
        score = max(80, 100 - (ratio - Config.SLIGHTLY_SLOW_RATIO) * 80)
        tag = TimingFeedback.SLIGHTLY_SLOW
    else:
        score = 100
        tag = TimingFeedback.GOOD_PACE

    if dominated:
        score = 0
        tag = TimingFeedback.TRY_TARGET_PHRASE

    return TimingResult(
        score=round_half_up(score),
        actual_duration_ms=round_half_up(actual_duration_ms),
        expected_duration_ms=round_half_up(expected_duration_ms),
        ratio=ratio,
        feedback_tag=tag,
        feedback=feedback_message(tag),
    )
