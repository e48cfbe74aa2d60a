"""
agent_inbox.inbox

Interrupt capability resolution, edit reconciliation and run resumption.
"""

from .assembler import (
    assemble_resume_payload,
    build_chat_response,
    select_response,
    to_human_response,
)
from .baseline import BaselineSnapshot, have_args_changed, stringify_arg_value
from .classifier import INVALID_ASSISTANT_ID_MARKER, ErrorClassifier
from .notices import LoggingNotifier, Notice, Notifier, RecordingNotifier
from .reconciliation import EditReconciliationEngine
from .resolver import ResolvedResponses, default_submit_type, resolve_responses
from .session import InterruptSession, build_resume_payload
from .state import InterruptState, SubmissionState, SubmissionStatus

__all__ = [
    # Resolver
    "ResolvedResponses",
    "resolve_responses",
    "default_submit_type",
    # Reconciliation
    "BaselineSnapshot",
    "EditReconciliationEngine",
    "have_args_changed",
    "stringify_arg_value",
    # Assembler
    "assemble_resume_payload",
    "build_chat_response",
    "select_response",
    "to_human_response",
    # Session and state
    "InterruptSession",
    "InterruptState",
    "SubmissionState",
    "SubmissionStatus",
    "build_resume_payload",
    # Notices and classification
    "ErrorClassifier",
    "INVALID_ASSISTANT_ID_MARKER",
    "LoggingNotifier",
    "Notice",
    "Notifier",
    "RecordingNotifier",
]
