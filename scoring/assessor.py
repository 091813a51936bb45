import logging
from typing import Optional

from models import AssessmentReport, SpeechSession
from scoring.aggregator import aggregate, overall_feedback
from scoring.duration import expected_duration_ms as estimate_duration_ms
from scoring.fluency import score_fluency
from scoring.messages import feedback_message
from scoring.rounding import round_half_up
from scoring.timing import score_timing
from scoring.word_accuracy import score_word_accuracy


class PronunciationAssessor:
    def assess(
        self,
        expected_phrase: str,
        transcript: str,
        session: SpeechSession,
        expected_duration_ms: Optional[float] = None,
    ) -> AssessmentReport:
        """Score a finished attempt at a phrase.

        Word accuracy runs first; when it is zero, timing and fluency are
        overridden to zero and so is the overall score.
        """
        if expected_duration_ms is None:
            expected_duration_ms = estimate_duration_ms(expected_phrase)
        actual_duration_ms = session.actual_duration_ms

        word_accuracy = score_word_accuracy(expected_phrase, transcript)
        dominated = word_accuracy.dominates

        timing = score_timing(actual_duration_ms, expected_duration_ms, dominated=dominated)
        fluency = score_fluency(
            len(session.interim_events),
            actual_duration_ms,
            expected_duration_ms,
            dominated=dominated,
        )

        overall = aggregate(word_accuracy, timing, fluency)
        overall_tag = overall_feedback(overall)

        logging.info(
            f"Assessed attempt: words={word_accuracy.score} timing={timing.score} "
            f"fluency={fluency.score} overall={overall} "
            f"({word_accuracy.correct_count}/{word_accuracy.total_expected} correct, "
            f"{actual_duration_ms}ms of {round_half_up(expected_duration_ms)}ms)"
        )

        return AssessmentReport(
            word_accuracy=word_accuracy,
            timing=timing,
            fluency=fluency,
            overall=overall,
            overall_feedback_tag=overall_tag,
            overall_feedback=feedback_message(overall_tag),
        )
