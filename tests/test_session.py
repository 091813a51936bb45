import pytest

from scoring.session import (
    CANCELLED,
    FINALIZED,
    RECORDING,
    RecordingSession,
    SessionNotFoundError,
    SessionStateError,
    SessionStore,
    describe_capture_error,
)


class TestRecordingSession:
    def test_estimates_duration_at_start(self):
        session = RecordingSession("Hola", language="spanish", started_at=1000)

        assert session.state == RECORDING
        assert session.expected_duration_ms == pytest.approx(1571.43, abs=0.01)

    def test_finalize_returns_snapshot(self):
        session = RecordingSession("Hola", started_at=1000)
        session.add_interim("ho", 1200)
        session.add_interim("hola", 1400)

        snapshot = session.finalize("hola", 2600)

        assert session.state == FINALIZED
        assert snapshot.start_time == 1000
        assert snapshot.end_time == 2600
        assert snapshot.actual_duration_ms == 1600
        assert [event.transcript for event in snapshot.interim_events] == ["ho", "hola"]

    def test_finalizes_only_once(self):
        session = RecordingSession("Hola", started_at=0)
        session.finalize("hola", 1000)

        with pytest.raises(SessionStateError):
            session.finalize("hola", 1200)
        with pytest.raises(SessionStateError):
            session.add_interim("ho", 1300)
        with pytest.raises(SessionStateError):
            session.cancel()

    def test_cancel_discards_events(self):
        session = RecordingSession("Hola", started_at=0)
        session.add_interim("ho", 100)

        session.cancel()

        assert session.state == CANCELLED
        assert session.interim_events == []
        with pytest.raises(SessionStateError):
            session.finalize("hola", 1000)


class TestSessionStore:
    @pytest.fixture
    def store(self):
        return SessionStore()

    def test_finalize_removes_session(self, store):
        session = store.start("Hola", started_at=0)
        store.add_interim(session.session_id, "ho", 200)

        finalized = store.finalize(session.session_id, "hola", 1500)

        assert finalized.snapshot().actual_duration_ms == 1500
        assert len(store) == 0
        with pytest.raises(SessionNotFoundError):
            store.finalize(session.session_id, "hola", 1600)

    def test_unknown_session(self, store):
        with pytest.raises(SessionNotFoundError):
            store.get("missing")
        with pytest.raises(SessionNotFoundError):
            store.add_interim("missing", "ho")

    def test_new_session_for_client_cancels_previous(self, store):
        first = store.start("Hola", client_id="learner-1")
        second = store.start("Gracias", client_id="learner-1")

        assert first.state == CANCELLED
        assert second.state == RECORDING
        assert len(store) == 1
        with pytest.raises(SessionNotFoundError):
            store.get(first.session_id)

    def test_clients_are_independent(self, store):
        first = store.start("Hola", client_id="learner-1")
        store.start("Hola", client_id="learner-2")

        assert first.state == RECORDING
        assert len(store) == 2

    def test_cancel(self, store):
        session = store.start("Hola", client_id="learner-1")

        store.cancel(session.session_id)

        assert session.state == CANCELLED
        assert len(store) == 0
        # the client can start again without cancelling anything
        assert store.start("Hola", client_id="learner-1").state == RECORDING


class TestDescribeCaptureError:
    @pytest.mark.parametrize("error,fragment", [
        ("no-speech", "No speech detected"),
        ("audio-capture", "Microphone access denied"),
        ("not-allowed", "Microphone permission denied"),
        ("network", "Network error"),
        ("aborted", "aborted"),
        (None, "Unknown error occurred."),
    ])
    def test_messages(self, error, fragment):
        message = describe_capture_error(error)

        assert message.startswith("Speech recognition error: ")
        assert fragment in message
