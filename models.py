from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class Phrase(FrozenModel):
    id: int
    text: Dict[str, str]
    translations: Dict[str, str] = {}

    def text_for(self, language: str) -> str:
        """Expected phrase in the given language; KeyError when missing."""
        return self.text[language]


class InterimEvent(FrozenModel):
    transcript: str
    timestamp: int


class SpeechSession(FrozenModel):
    start_time: int
    end_time: Optional[int] = None
    interim_events: List[InterimEvent] = []

    @property
    def actual_duration_ms(self) -> int:
        if self.end_time is None:
            raise ValueError("Speech session has not been finalized")
        return max(0, self.end_time - self.start_time)


class WordStatus(str, Enum):
    CORRECT = "correct"
    PARTIAL = "partial"
    INCORRECT = "incorrect"
    MISSING = "missing"


class WordAccuracyFeedback(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    GETTING_BETTER = "getting_better"
    KEEP_PRACTICING = "keep_practicing"
    TRY_TARGET_PHRASE = "try_target_phrase"


class TimingFeedback(str, Enum):
    GOOD_PACE = "good_pace"
    TOO_FAST = "too_fast"
    TOO_SLOW = "too_slow"
    SLIGHTLY_SLOW = "slightly_slow"
    TRY_TARGET_PHRASE = "try_target_phrase"


class FluencyFeedback(str, Enum):
    SMOOTH = "smooth"
    GOOD_SPEED_WORK_ON_CLARITY = "good_speed_work_on_clarity"
    SPEAK_MORE_CONTINUOUSLY = "speak_more_continuously"
    SLIGHTLY_TOO_FAST = "slightly_too_fast"
    TOO_MANY_PAUSES = "too_many_pauses"
    FOCUS_ON_CORRECT_WORDS = "focus_on_correct_words"


class OverallFeedback(str, Enum):
    OUTSTANDING = "outstanding"
    EXCELLENT = "excellent"
    GREAT = "great"
    GOOD = "good"
    NICE_TRY = "nice_try"
    KEEP_PRACTICING = "keep_practicing"


class WordMatch(FrozenModel):
    expected_word: str
    matched_word: str = ""
    similarity: float = Field(ge=0.0, le=1.0)
    status: WordStatus


class WordAccuracyResult(FrozenModel):
    score: int = Field(ge=0, le=100)
    correct_count: int
    total_expected: int
    extra_word_count: int = Field(ge=0)
    matches: List[WordMatch]
    hard_zero: bool = False
    feedback_tag: WordAccuracyFeedback
    feedback: str

    @property
    def dominates(self) -> bool:
        # A zero word score zeroes timing, fluency and the overall score
        return self.score == 0


class TimingResult(FrozenModel):
    score: int = Field(ge=0, le=100)
    actual_duration_ms: int
    expected_duration_ms: int
    ratio: float
    feedback_tag: TimingFeedback
    feedback: str


class FluencyResult(FrozenModel):
    score: int = Field(ge=0, le=100)
    words_per_second: float
    feedback_tag: FluencyFeedback
    feedback: str


class AssessmentReport(FrozenModel):
    word_accuracy: WordAccuracyResult
    timing: TimingResult
    fluency: FluencyResult
    overall: int = Field(ge=0, le=100)
    overall_feedback_tag: OverallFeedback
    overall_feedback: str


# Request / response bodies

class PhraseSelection(BaseModel):
    expected_phrase: Optional[str] = None
    phrase: Optional[Phrase] = None
    language: Optional[str] = None


class AssessmentRequest(PhraseSelection):
    transcript: str
    session: SpeechSession
    include_coaching: bool = False


class AssessmentResponse(BaseModel):
    transcript: str
    report: AssessmentReport
    coaching: Optional[str] = None


class DurationRequest(BaseModel):
    phrase_text: str


class DurationResponse(BaseModel):
    syllable_count: int
    expected_duration_ms: float


class SessionStartRequest(PhraseSelection):
    client_id: Optional[str] = None
    started_at: Optional[int] = None


class SessionResponse(BaseModel):
    session_id: str
    expected_phrase: str
    language: Optional[str] = None
    started_at: int
    expected_duration_ms: float
    interim_event_count: int = 0
    state: str


class InterimRequest(BaseModel):
    transcript: str
    timestamp: Optional[int] = None


class FinalRequest(BaseModel):
    transcript: str
    timestamp: Optional[int] = None
    include_coaching: bool = False


class CaptureErrorRequest(BaseModel):
    error: Optional[str] = None


class CaptureErrorResponse(BaseModel):
    session_id: str
    error: Optional[str] = None
    message: str
