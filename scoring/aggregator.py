from config import Config
from models import FluencyResult, OverallFeedback, TimingResult, WordAccuracyResult
from scoring.rounding import round_half_up

OVERALL_BANDS = [
    (95, OverallFeedback.OUTSTANDING),
    (85, OverallFeedback.EXCELLENT),
    (75, OverallFeedback.GREAT),
    (65, OverallFeedback.GOOD),
    (50, OverallFeedback.NICE_TRY),
]


def aggregate(word_accuracy: WordAccuracyResult, timing: TimingResult, fluency: FluencyResult) -> int:
    """Combine sub-scores; timing and fluency never rescue wrong words."""
    if word_accuracy.dominates:
        return 0

    overall = round_half_up(
        word_accuracy.score * Config.WORD_ACCURACY_WEIGHT
        + timing.score * Config.TIMING_WEIGHT
        + fluency.score * Config.FLUENCY_WEIGHT
    )
    return max(0, min(100, overall))


def overall_feedback(score: int) -> OverallFeedback:
    for minimum, tag in OVERALL_BANDS:
        if score >= minimum:
            return tag
    return OverallFeedback.KEEP_PRACTICING
