"""
agent_inbox.inbox.classifier

Error Classifier

Maps a failed resume call to the notice shown to the user. Classification is
a substring match on the error message; transports give no structured error
codes, so callers must not expect richer typing than the two categories here.
"""

from typing import Optional

from agent_inbox.inbox.notices import Notice, error_notice
from agent_inbox.sentry import get_logger

logger = get_logger(__name__)

INVALID_ASSISTANT_ID_MARKER = "Invalid assistant ID"

INVALID_ASSISTANT_ID_TITLE = "Error: Invalid assistant ID"
INVALID_ASSISTANT_ID_DESCRIPTION = (
    "The provided assistant ID was not found in this graph. "
    "Please update the assistant ID in the settings and try again."
)
GENERIC_FAILURE_DESCRIPTION = "Failed to submit response."


def error_message(error: BaseException) -> str:
    """Best-effort message text of an exception."""
    message = getattr(error, "message", None)
    if isinstance(message, str) and message:
        return message
    return str(error)


class ErrorClassifier:
    """Classifies resume failures into an actionable or a generic notice."""

    def __init__(self, marker: str = INVALID_ASSISTANT_ID_MARKER) -> None:
        self.marker = marker

    def is_invalid_assistant(self, error: BaseException) -> bool:
        return self.marker in error_message(error)

    def classify(self, error: BaseException, fallback: Optional[str] = None) -> Notice:
        """
        Return the notice for a failed resume call.

        Args:
            error: The exception raised by the transport
            fallback: Description for the generic notice, defaults to
                      "Failed to submit response."
        """
        if self.is_invalid_assistant(error):
            return error_notice(INVALID_ASSISTANT_ID_DESCRIPTION, title=INVALID_ASSISTANT_ID_TITLE)

        logger.debug(
            "[classifier] Unclassified resume failure (%s): %s",
            type(error).__name__,
            error_message(error),
        )
        return error_notice(fallback or GENERIC_FAILURE_DESCRIPTION)
