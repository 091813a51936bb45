import logging
from typing import Optional
import google.generativeai as genai

from config import Config
from models import AssessmentReport, WordStatus

FALLBACK_COACHING = "Could not generate detailed coaching at this moment. Please try again later."


class FeedbackGenerator:
    def __init__(self, api_key: Optional[str] = None, model_name: Optional[str] = None):
        self.api_key = api_key if api_key is not None else Config.GEMINI_API_KEY
        self.model = None
        if self.api_key:
            genai.configure(api_key=self.api_key)
            self.model = genai.GenerativeModel(model_name or Config.GEMINI_MODEL)

    @property
    def enabled(self) -> bool:
        return self.model is not None

    def generate_coaching(self, expected_phrase: str, transcript: str, report: AssessmentReport) -> Optional[str]:
        """Short coaching paragraph from Gemini, or None when not configured"""
        if not self.enabled:
            return None

        prompt = self._build_prompt(expected_phrase, transcript, report)
        try:
            response = self.model.generate_content(prompt)
            return response.text
        except Exception as e:
            logging.error(f"Error generating coaching with Gemini API: {e}. Overall score: {report.overall}")
            return FALLBACK_COACHING

    def _build_prompt(self, expected_phrase: str, transcript: str, report: AssessmentReport) -> str:
        word_accuracy = report.word_accuracy
        problem_words = [
            f"{match.expected_word} (heard: {match.matched_word or 'nothing'})"
            for match in word_accuracy.matches
            if match.status != WordStatus.CORRECT
        ]

        return f"""
        Generate short, constructive and encouraging coaching for a language learner who
        practised saying a phrase out loud. The learner's speech was transcribed automatically,
        so small recognition errors are expected.

        **Target phrase:** {expected_phrase}
        **What was recognised:** {transcript or '(nothing)'}

        **Word Accuracy:** {word_accuracy.score}/100
        - Correct words: {word_accuracy.correct_count} of {word_accuracy.total_expected}
        - Words to work on: {', '.join(problem_words) or 'None'}
        - Extra words: {word_accuracy.extra_word_count}

        **Timing:** {report.timing.score}/100
        - Spoke for {report.timing.actual_duration_ms} ms, expected about {report.timing.expected_duration_ms} ms

        **Fluency:** {report.fluency.score}/100

        **Overall:** {report.overall}/100

        **Instructions:**
        1. Start with a positive encouraging statement.
        2. If words need work, name them and give one pronunciation tip.
        3. Comment on pace only if timing or fluency is below 80.
        4. Keep it to 2-4 sentences.
        """
