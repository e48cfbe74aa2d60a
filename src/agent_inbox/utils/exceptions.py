"""Custom exceptions for the agent inbox."""

from typing import Any, Dict, Optional


class AgentInboxError(Exception):
    """Base exception for agent inbox errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}


class InvalidInterruptError(AgentInboxError):
    """Interrupt value is not a well-formed human interrupt."""

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message, "INVALID_INTERRUPT", context)


class InboxInputError(AgentInboxError):
    """User input that cannot be applied; the operation is aborted."""

    def __init__(
        self,
        message: str,
        error_code: str = "INPUT_ERROR",
        context: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message, error_code, context)


class ArgumentArityError(InboxInputError):
    """Keys and values of an argument change do not line up."""

    def __init__(
        self,
        message: str = "Argument keys and values must both be lists of equal length or both be single values",
        context: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message, "ARGUMENT_ARITY", context)


class EmptyResponseSetError(InboxInputError):
    """There are no responses to submit."""

    def __init__(
        self,
        message: str = "Please enter a response.",
        context: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message, "EMPTY_RESPONSE_SET", context)


class NoResponseFoundError(InboxInputError):
    """No assembled response matches the selected submit type."""

    def __init__(
        self,
        submit_type: Optional[str],
        context: Optional[Dict[str, Any]] = None
    ) -> None:
        context = context or {}
        context["submit_type"] = submit_type
        super().__init__("No response found.", "NO_RESPONSE_FOUND", context)


class ResponseNotAllowedError(InboxInputError):
    """The interrupt does not offer the requested response kind."""

    def __init__(
        self,
        response_type: str,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ) -> None:
        context = context or {}
        context["response_type"] = response_type
        super().__init__(
            message or f"The selected thread does not support '{response_type}' responses.",
            "RESPONSE_NOT_ALLOWED",
            context,
        )


class SubmissionInProgressError(AgentInboxError):
    """A resume call for this interrupt is already in flight."""

    def __init__(
        self,
        message: str = "A response is already being submitted for this interrupt",
        context: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message, "SUBMISSION_IN_PROGRESS", context)


class ResumeTransportError(AgentInboxError):
    """The underlying run rejected or failed the resume call."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None
    ) -> None:
        context = context or {}
        if status_code:
            context["status_code"] = status_code
        self.status_code = status_code
        super().__init__(message, "RESUME_FAILED", context)


class ConfigurationError(AgentInboxError):
    """Configuration related errors."""

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message, "CONFIG_ERROR", context)
