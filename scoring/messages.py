from models import (
    FluencyFeedback,
    OverallFeedback,
    TimingFeedback,
    WordAccuracyFeedback,
)

# Keyed by enum class first: str enums with equal values compare equal.
FEEDBACK_MESSAGES = {
    WordAccuracyFeedback: {
        WordAccuracyFeedback.EXCELLENT: "Excellent word accuracy!",
        WordAccuracyFeedback.GOOD: "Good pronunciation, keep practicing!",
        WordAccuracyFeedback.GETTING_BETTER: "Getting better, focus on unclear words",
        WordAccuracyFeedback.KEEP_PRACTICING: "Keep practicing, you're improving!",
        WordAccuracyFeedback.TRY_TARGET_PHRASE: "Try saying the phrase in the target language",
    },
    TimingFeedback: {
        TimingFeedback.GOOD_PACE: "Great speaking pace!",
        TimingFeedback.TOO_FAST: "Try speaking a bit slower for clearer pronunciation",
        TimingFeedback.TOO_SLOW: "Try to speak more fluently with fewer pauses",
        TimingFeedback.SLIGHTLY_SLOW: "Good pace, try to be a bit more natural",
        TimingFeedback.TRY_TARGET_PHRASE: "Please try the target phrase",
    },
    FluencyFeedback: {
        FluencyFeedback.SMOOTH: "Smooth and fluent delivery!",
        FluencyFeedback.GOOD_SPEED_WORK_ON_CLARITY: "Good speed, work on clarity",
        FluencyFeedback.SPEAK_MORE_CONTINUOUSLY: "Try to speak more continuously",
        FluencyFeedback.SLIGHTLY_TOO_FAST: "Good fluency, try speaking slightly slower",
        FluencyFeedback.TOO_MANY_PAUSES: "Work on speaking more fluently with fewer pauses",
        FluencyFeedback.FOCUS_ON_CORRECT_WORDS: "Focus on saying the correct words",
    },
    OverallFeedback: {
        OverallFeedback.OUTSTANDING: "Outstanding! Your pronunciation is excellent!",
        OverallFeedback.EXCELLENT: "Excellent work! You're speaking very well!",
        OverallFeedback.GREAT: "Great job! Keep up the good practice!",
        OverallFeedback.GOOD: "Good effort! You're making solid progress!",
        OverallFeedback.NICE_TRY: "Nice try! Focus on the areas that need work!",
        OverallFeedback.KEEP_PRACTICING: "Keep practicing! Every attempt helps you improve!",
    },
}


def feedback_message(tag) -> str:
    """Learner-facing text for any feedback tag."""
    return FEEDBACK_MESSAGES[type(tag)][tag]
