import logging
import threading
import time
import uuid
from typing import Dict, List, Optional

from models import InterimEvent, SpeechSession
from scoring.duration import expected_duration_ms

RECORDING = "recording"
FINALIZED = "finalized"
CANCELLED = "cancelled"

CAPTURE_ERROR_MESSAGES = {
    "no-speech": "No speech detected. Please try speaking clearly.",
    "audio-capture": "Microphone access denied or not available.",
    "not-allowed": "Microphone permission denied. Please enable microphone access.",
    "network": "Network error. Please check your connection.",
}


class SessionStateError(Exception):
    pass


class SessionNotFoundError(SessionStateError):
    pass


def now_ms() -> int:
    return int(time.time() * 1000)


def describe_capture_error(error: Optional[str]) -> str:
    """Learner-facing message for a speech recognition error code."""
    detail = CAPTURE_ERROR_MESSAGES.get(error, error or "Unknown error occurred.")
    return f"Speech recognition error: {detail}"


class RecordingSession:
    """One recording attempt, fed by recognizer events.

    The expected duration is estimated once, when recording starts. The
    session can be finalized or cancelled exactly once.
    """

    def __init__(self, expected_phrase: str, language: Optional[str] = None,
                 started_at: Optional[int] = None, client_id: Optional[str] = None):
        self.session_id = str(uuid.uuid4())
        self.expected_phrase = expected_phrase
        self.language = language
        self.client_id = client_id
        self.started_at = started_at if started_at is not None else now_ms()
        self.expected_duration_ms = expected_duration_ms(expected_phrase)
        self.interim_events: List[InterimEvent] = []
        self.ended_at: Optional[int] = None
        self.transcript: Optional[str] = None
        self.state = RECORDING

    def _ensure_recording(self):
        if self.state != RECORDING:
            raise SessionStateError(f"Session {self.session_id} is {self.state}")

    def add_interim(self, transcript: str, timestamp: Optional[int] = None) -> InterimEvent:
        self._ensure_recording()
        event = InterimEvent(transcript=transcript, timestamp=timestamp if timestamp is not None else now_ms())
        self.interim_events.append(event)
        return event

    def finalize(self, transcript: str, timestamp: Optional[int] = None) -> SpeechSession:
        """Close the session and return the snapshot handed to the assessor."""
        self._ensure_recording()
        self.ended_at = timestamp if timestamp is not None else now_ms()
        self.transcript = transcript
        self.state = FINALIZED
        return self.snapshot()

    def cancel(self):
        self._ensure_recording()
        self.state = CANCELLED
        self.interim_events = []

    def snapshot(self) -> SpeechSession:
        return SpeechSession(
            start_time=self.started_at,
            end_time=self.ended_at,
            interim_events=list(self.interim_events),
        )


class SessionStore:
    """In-flight recording sessions, safe to use from the request threadpool."""

    def __init__(self):
        self._lock = threading.Lock()
        self._sessions: Dict[str, RecordingSession] = {}
        self._by_client: Dict[str, str] = {}

    def __len__(self):
        return len(self._sessions)

    def start(self, expected_phrase: str, language: Optional[str] = None,
              started_at: Optional[int] = None, client_id: Optional[str] = None) -> RecordingSession:
        session = RecordingSession(expected_phrase, language, started_at, client_id)
        with self._lock:
            # A client records one phrase at a time; switching phrase or
            # language discards whatever was in flight.
            if client_id is not None and client_id in self._by_client:
                previous = self._sessions.pop(self._by_client[client_id], None)
                if previous is not None:
                    previous.cancel()
                    logging.info(f"Cancelled session {previous.session_id} superseded for client {client_id}")
                self._by_client.pop(client_id)
            self._sessions[session.session_id] = session
            if client_id is not None:
                self._by_client[client_id] = session.session_id
        logging.info(f"Started session {session.session_id} ({session.expected_duration_ms:.0f}ms expected)")
        return session

    def get(self, session_id: str) -> RecordingSession:
        with self._lock:
            return self._get(session_id)

    def _get(self, session_id: str) -> RecordingSession:
        session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(f"Session {session_id} not found")
        return session

    def add_interim(self, session_id: str, transcript: str, timestamp: Optional[int] = None) -> RecordingSession:
        with self._lock:
            session = self._get(session_id)
            session.add_interim(transcript, timestamp)
            return session

    def finalize(self, session_id: str, transcript: str, timestamp: Optional[int] = None) -> RecordingSession:
        """Finalize and remove a session; a second call raises SessionNotFoundError."""
        with self._lock:
            session = self._get(session_id)
            session.finalize(transcript, timestamp)
            self._remove(session)
        logging.info(f"Finalized session {session_id} with {len(session.interim_events)} interim events")
        return session

    def cancel(self, session_id: str) -> RecordingSession:
        with self._lock:
            session = self._get(session_id)
            session.cancel()
            self._remove(session)
        logging.info(f"Cancelled session {session_id}")
        return session

    def _remove(self, session: RecordingSession):
        self._sessions.pop(session.session_id, None)
        if session.client_id is not None and self._by_client.get(session.client_id) == session.session_id:
            self._by_client.pop(session.client_id)
