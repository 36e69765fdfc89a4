# api/session.py
from __future__ import annotations

import uuid

from fastapi import APIRouter

from models.api_models import SessionResponse
from session.context import event_timestamp, generate_session_id
from utils.logging import log_event

router = APIRouter()


@router.post("/session", response_model=SessionResponse)
def start_session():
    """
    Issue a session id for a kiosk that has none yet. Later requests send it
    back in meta.session_id.
    """
    trace_id = uuid.uuid4().hex[:12]
    session_id = generate_session_id()
    started_at = event_timestamp().isoformat(timespec="seconds")

    log_event(trace_id, "session_started", {"session_id": session_id})
    return SessionResponse(session_id=session_id, started_at=started_at)
