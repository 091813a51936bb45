import uuid
import logging
from fastapi import FastAPI, HTTPException
from celery import Celery

from config import Config
from models import (
    AssessmentRequest,
    AssessmentResponse,
    CaptureErrorRequest,
    CaptureErrorResponse,
    DurationRequest,
    DurationResponse,
    FinalRequest,
    InterimRequest,
    PhraseSelection,
    SessionResponse,
    SessionStartRequest,
)
from scoring.assessor import PronunciationAssessor
from scoring.duration import estimate_syllables, expected_duration_ms
from scoring.feedback_generator import FeedbackGenerator
from scoring.session import (
    RecordingSession,
    SessionNotFoundError,
    SessionStateError,
    SessionStore,
    describe_capture_error,
)

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

app = FastAPI(title="Pronunciation Assessment Service", version="1.0.0")

# Initialize Celery
celery_app = Celery(
    "pronunciation_assessment",
    broker=Config.CELERY_BROKER_URL,
    backend=Config.CELERY_RESULT_BACKEND
)

# Initialize services
assessor = PronunciationAssessor()
feedback_generator = FeedbackGenerator()
session_store = SessionStore()


def resolve_expected_phrase(selection: PhraseSelection) -> str:
    """Expected phrase text from either a literal string or a phrase record."""
    if selection.expected_phrase is not None:
        return selection.expected_phrase
    if selection.phrase is None:
        raise HTTPException(status_code=400, detail="Provide expected_phrase or phrase with language")
    if not selection.language:
        raise HTTPException(status_code=400, detail="language is required with phrase")
    if selection.language not in Config.LANGUAGES:
        raise HTTPException(
            status_code=400,
            detail=f"Unsupported language. Allowed: {sorted(Config.LANGUAGES)}"
        )
    try:
        return selection.phrase.text_for(selection.language)
    except KeyError:
        raise HTTPException(
            status_code=400,
            detail=f"Phrase {selection.phrase.id} has no text for language '{selection.language}'"
        )


def session_response(session: RecordingSession) -> SessionResponse:
    return SessionResponse(
        session_id=session.session_id,
        expected_phrase=session.expected_phrase,
        language=session.language,
        started_at=session.started_at,
        expected_duration_ms=session.expected_duration_ms,
        interim_event_count=len(session.interim_events),
        state=session.state,
    )


def build_response(expected_phrase: str, transcript: str, report, include_coaching: bool) -> AssessmentResponse:
    coaching = None
    if include_coaching:
        coaching = feedback_generator.generate_coaching(expected_phrase, transcript, report)
    return AssessmentResponse(transcript=transcript, report=report, coaching=coaching)


@celery_app.task(name="assess_attempt_task")
def assess_attempt_task(payload: dict) -> dict:
    """
    Celery task scoring one finished attempt.
    This runs in a separate worker process.
    """
    request_id = str(uuid.uuid4())[:8]
    request = AssessmentRequest.model_validate(payload)
    expected_phrase = resolve_expected_phrase(request)
    logging.info(f"[{request_id}] Starting background assessment for phrase: {expected_phrase!r}")

    try:
        report = assessor.assess(expected_phrase, request.transcript, request.session)
        response = build_response(expected_phrase, request.transcript, report, request.include_coaching)
        logging.info(f"[{request_id}] Finished background assessment, overall={report.overall}")
        return response.model_dump(mode="json")
    except Exception as e:
        logging.error(f"[{request_id}] Background assessment error: {str(e)}")
        raise


@app.post("/assess", response_model=AssessmentResponse)
def assess(request: AssessmentRequest):
    """
    Scores a finished attempt: expected phrase, final transcript and session timing.
    """
    request_id = str(uuid.uuid4())[:8]
    expected_phrase = resolve_expected_phrase(request)
    logging.info(f"[{request_id}] Assessing attempt at phrase: {expected_phrase!r}")
    try:
        report = assessor.assess(expected_phrase, request.transcript, request.session)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logging.error(f"[{request_id}] Error assessing attempt: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Failed to assess attempt: {str(e)}")
    return build_response(expected_phrase, request.transcript, report, request.include_coaching)


@app.post("/assess/async", response_model=dict)
def assess_async(request: AssessmentRequest):
    """
    Enqueues scoring as a background task and returns a task ID.
    """
    request_id = str(uuid.uuid4())[:8]
    expected_phrase = resolve_expected_phrase(request)
    payload = request.model_copy(update={"expected_phrase": expected_phrase}).model_dump(mode="json")
    try:
        task = assess_attempt_task.delay(payload)
    except Exception as e:
        logging.error(f"[{request_id}] Error enqueuing task: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Failed to start processing: {str(e)}")

    logging.info(f"[{request_id}] Enqueued task {task.id}")
    return {"message": "Processing started", "task_id": task.id}


@app.get("/status/{task_id}", response_model=dict)
def get_task_status(task_id: str):
    """
    Check the status of a background assessment task.
    """
    task = celery_app.AsyncResult(task_id)

    if task.state == "PENDING":
        response = {
            "status": "PENDING",
            "message": "Task is pending or not found"
        }
    elif task.state == "SUCCESS":
        response = {
            "status": "SUCCESS",
            "result": task.result
        }
    elif task.state == "FAILURE":
        response = {
            "status": "FAILURE",
            "message": str(task.info),  # task.info contains the exception
            "traceback": task.traceback
        }
    else:
        response = {
            "status": task.state,
            "message": "Task is in progress"
        }
    return response


@app.post("/expected-duration", response_model=DurationResponse)
def get_expected_duration(request: DurationRequest):
    return DurationResponse(
        syllable_count=estimate_syllables(request.phrase_text),
        expected_duration_ms=expected_duration_ms(request.phrase_text),
    )


@app.post("/sessions", response_model=SessionResponse)
def start_session(request: SessionStartRequest):
    """
    Starts a recording attempt; any attempt in flight for the same client is discarded.
    """
    expected_phrase = resolve_expected_phrase(request)
    session = session_store.start(
        expected_phrase,
        language=request.language,
        started_at=request.started_at,
        client_id=request.client_id,
    )
    return session_response(session)


@app.post("/sessions/{session_id}/interim", response_model=SessionResponse)
def add_interim_result(session_id: str, request: InterimRequest):
    try:
        session = session_store.add_interim(session_id, request.transcript, request.timestamp)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except SessionStateError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return session_response(session)


@app.post("/sessions/{session_id}/final", response_model=AssessmentResponse)
def finalize_session(session_id: str, request: FinalRequest):
    """
    Closes a recording attempt with the recognizer's final transcript and scores it.
    """
    request_id = str(uuid.uuid4())[:8]
    try:
        session = session_store.finalize(session_id, request.transcript, request.timestamp)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except SessionStateError as e:
        raise HTTPException(status_code=409, detail=str(e))

    try:
        report = assessor.assess(
            session.expected_phrase,
            request.transcript,
            session.snapshot(),
            expected_duration_ms=session.expected_duration_ms,
        )
    except Exception as e:
        logging.error(f"[{request_id}] Error assessing session {session_id}: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Failed to assess attempt: {str(e)}")
    return build_response(session.expected_phrase, request.transcript, report, request.include_coaching)


@app.post("/sessions/{session_id}/error", response_model=CaptureErrorResponse)
def report_capture_error(session_id: str, request: CaptureErrorRequest):
    """
    Recognizer failed; the attempt is discarded and the error explained.
    """
    try:
        session_store.cancel(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    message = describe_capture_error(request.error)
    logging.warning(f"Session {session_id} ended with capture error: {request.error}")
    return CaptureErrorResponse(session_id=session_id, error=request.error, message=message)


@app.delete("/sessions/{session_id}", response_model=SessionResponse)
def cancel_session(session_id: str):
    try:
        session = session_store.cancel(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return session_response(session)


@app.get("/languages")
def list_languages():
    return {"languages": Config.LANGUAGES}


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "message": "Pronunciation Assessment Service is running",
        "coaching_enabled": feedback_generator.enabled,
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
