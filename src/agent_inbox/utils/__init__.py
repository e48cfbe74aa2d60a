"""
agent_inbox.utils

Utility modules for the agent inbox.
"""

from .exceptions import (
    AgentInboxError,
    ArgumentArityError,
    ConfigurationError,
    EmptyResponseSetError,
    InboxInputError,
    InvalidInterruptError,
    NoResponseFoundError,
    ResponseNotAllowedError,
    ResumeTransportError,
    SubmissionInProgressError,
)

__all__ = [
    "AgentInboxError",
    "ArgumentArityError",
    "ConfigurationError",
    "EmptyResponseSetError",
    "InboxInputError",
    "InvalidInterruptError",
    "NoResponseFoundError",
    "ResponseNotAllowedError",
    "ResumeTransportError",
    "SubmissionInProgressError",
]
