"""
agent_inbox.types.human_interrupt

Human Interrupt Schema Models

This module defines the wire shapes exchanged with a paused agent run. A run
that needs a human decision pauses with a ``HumanInterrupt`` describing the
proposed action and which response kinds it will accept; the inbox answers by
resuming the run with a list of ``HumanResponse`` entries.

The schema supports four types of human responses:
- accept: Approve the proposed action as-is
- edit: Modify the action arguments before execution
- ignore: Skip the action entirely
- response: Provide textual feedback to the agent

Key Features:
- Agent Inbox compatible wire format
- Schema detection for raw interrupt values read from a run
- Validation of untrusted interrupt payloads with pydantic
- Preset capability configurations for common cases
"""

from typing import Any, Dict, List, Literal, Optional, Union

from langgraph.types import Interrupt
from pydantic import TypeAdapter, ValidationError
from typing_extensions import NotRequired, TypedDict

from agent_inbox.utils.exceptions import InvalidInterruptError


JSONValue = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]

SubmitType = Literal["accept", "edit", "response", "ignore"]


class HumanInterruptConfig(TypedDict):
    """
    Which response kinds the paused run will accept.

    The flags are fixed for the lifetime of one interrupt.

    Attributes:
        allow_ignore: Whether the human can skip/ignore the action
        allow_respond: Whether the human can provide textual feedback
        allow_edit: Whether the human can modify the action arguments
        allow_accept: Whether the human can approve the action as-is
    """
    allow_ignore: bool
    allow_respond: bool
    allow_edit: bool
    allow_accept: bool


class ActionRequest(TypedDict):
    """
    The action (typically a tool call) awaiting review.

    Attributes:
        action: The name of the action/tool to be executed
        args: Argument values currently proposed by the run
    """
    action: str
    args: Dict[str, Any]


class HumanInterrupt(TypedDict):
    """
    The paused-run descriptor presented to the human.

    Attributes:
        action_request: The action requiring human review
        config: Capability flags for allowed response types
        description: Optional markdown description providing context
    """
    action_request: ActionRequest
    config: HumanInterruptConfig
    description: NotRequired[Optional[str]]


class HumanResponse(TypedDict):
    """
    One entry of the resume payload sent back to the run.

    Attributes:
        type: The type of response chosen by the human
        args: Response data, varies by type:
            - accept: ActionRequest (original) or None for a standalone accept
            - edit: ActionRequest (with modified args)
            - response: str (textual feedback)
            - ignore: None
    """
    type: SubmitType
    args: Union[None, str, ActionRequest]


# Default configurations for common use cases
DEFAULT_FULL_CONFIG: HumanInterruptConfig = {
    "allow_ignore": True,
    "allow_respond": True,
    "allow_edit": True,
    "allow_accept": True,
}

DEFAULT_APPROVE_ONLY_CONFIG: HumanInterruptConfig = {
    "allow_ignore": True,
    "allow_respond": False,
    "allow_edit": False,
    "allow_accept": True,
}

DEFAULT_EDIT_CONFIG: HumanInterruptConfig = {
    "allow_ignore": True,
    "allow_respond": True,
    "allow_edit": True,
    "allow_accept": False,
}


_INTERRUPT_ADAPTER = TypeAdapter(HumanInterrupt)


def _unwrap_interrupt_value(value: Any) -> Any:
    """Peel the LangGraph envelope and the single-item list convention."""
    if isinstance(value, Interrupt):
        value = value.value
    if isinstance(value, list):
        if not value:
            return None
        value = value[0]
        if isinstance(value, Interrupt):
            value = value.value
    return value


def is_human_interrupt_schema(value: Any) -> bool:
    """
    Check whether a raw interrupt value is an inbox-compatible human interrupt.

    Runs expose the interrupt value either directly or wrapped in a list whose
    first element is the request. Only the structural markers are checked here;
    use ``parse_interrupt`` to validate the full shape.

    Examples:
        >>> is_human_interrupt_schema([{"action_request": {"action": "x", "args": {}}, "config": {}}])
        True
        >>> is_human_interrupt_schema({"question": "continue?"})
        False
    """
    candidate = _unwrap_interrupt_value(value)
    if not isinstance(candidate, dict):
        return False

    action_request = candidate.get("action_request")
    return (
        isinstance(action_request, dict)
        and "action" in action_request
        and isinstance(candidate.get("config"), dict)
    )


def parse_interrupt(value: Any) -> HumanInterrupt:
    """
    Validate a raw interrupt value and return it as a ``HumanInterrupt``.

    Raises:
        InvalidInterruptError: If the value is not a well-formed human interrupt
    """
    candidate = _unwrap_interrupt_value(value)
    if not is_human_interrupt_schema(candidate):
        raise InvalidInterruptError(
            "Interrupt value is not an agent inbox interrupt",
            context={"value_type": type(candidate).__name__},
        )

    try:
        return _INTERRUPT_ADAPTER.validate_python(candidate)
    except ValidationError as e:
        raise InvalidInterruptError(
            f"Malformed agent inbox interrupt: {e.error_count()} validation error(s)",
            context={"errors": e.errors(include_url=False)},
        ) from e


def create_action_interrupt(
    action: str,
    args: Optional[Dict[str, Any]] = None,
    config: Optional[HumanInterruptConfig] = None,
    description: Optional[str] = None,
) -> HumanInterrupt:
    """
    Build a human interrupt for an action awaiting review.

    Args:
        action: Name of the proposed action
        args: Proposed argument values
        config: Capability flags, defaults to ``DEFAULT_FULL_CONFIG``
        description: Optional markdown shown to the reviewer

    Returns:
        HumanInterrupt: Structured interrupt data ready to pass to interrupt()
    """
    return {
        "action_request": {"action": action, "args": dict(args or {})},
        "config": dict(config or DEFAULT_FULL_CONFIG),
        "description": description,
    }
