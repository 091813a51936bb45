import pytest

from models import FluencyFeedback, OverallFeedback, TimingFeedback
from scoring.assessor import PronunciationAssessor


@pytest.fixture
def assessor():
    return PronunciationAssessor()


class TestPronunciationAssessor:
    def test_good_attempt(self, assessor, session_factory):
        # 7 syllables -> 3000ms expected; 6 interim events in 3s is smooth
        session = session_factory(start_time=0, end_time=3000, interim_count=6)

        report = assessor.assess("¿Dónde está el baño?", "donde esta el bano", session)

        assert report.word_accuracy.score == 100
        assert report.timing.score == 100
        assert report.fluency.score == 100
        assert report.overall == 100
        assert report.overall_feedback_tag == OverallFeedback.OUTSTANDING

    def test_unrelated_speech_zeroes_everything(self, assessor, session_factory):
        session = session_factory(start_time=0, end_time=2500, interim_count=5)

        report = assessor.assess("Hola, ¿cómo estás?", "the weather is nice today", session)

        assert report.word_accuracy.score == 0
        assert report.timing.score == 0
        assert report.timing.feedback_tag == TimingFeedback.TRY_TARGET_PHRASE
        assert report.fluency.score == 0
        assert report.fluency.feedback_tag == FluencyFeedback.FOCUS_ON_CORRECT_WORDS
        assert report.overall == 0

    def test_empty_transcript_zeroes_everything(self, assessor, session_factory):
        session = session_factory(start_time=0, end_time=1500)

        report = assessor.assess("Hola", "", session)

        assert report.overall == 0
        assert report.timing.score == 0
        assert report.fluency.score == 0

    def test_uses_duration_estimated_at_start(self, assessor, session_factory):
        session = session_factory(start_time=0, end_time=1600)

        report = assessor.assess("Hola", "hola", session, expected_duration_ms=4000)

        assert report.timing.expected_duration_ms == 4000
        assert report.timing.feedback_tag == TimingFeedback.TOO_FAST

    def test_requires_finalized_session(self, assessor, session_factory):
        with pytest.raises(ValueError):
            assessor.assess("Hola", "hola", session_factory(start_time=0))

    def test_report_is_json_serializable(self, assessor, session_factory):
        session = session_factory(start_time=0, end_time=1600, interim_count=2)

        data = assessor.assess("Hola", "hola", session).model_dump(mode="json")

        assert data["word_accuracy"]["matches"][0]["status"] == "correct"
        assert data["timing"]["feedback_tag"] == "good_pace"
        assert isinstance(data["overall"], int)
