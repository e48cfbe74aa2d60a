"""
agent_inbox.types.responses

Response variants offered for an open interrupt.

Each variant is one legal way for the human to answer. Variants are immutable;
edits produce a new instance through ``dataclasses.replace``.
"""

from dataclasses import dataclass
from typing import Literal, Optional, Union

from agent_inbox.types.human_interrupt import ActionRequest


@dataclass(frozen=True)
class AcceptResponse:
    """Approve the proposed action unchanged."""

    type: Literal["accept"] = "accept"
    args: None = None


@dataclass(frozen=True)
class EditResponse:
    """
    Edit the proposed action's arguments.

    Attributes:
        args: Current action request, including any edited argument values
        original: Action request as offered by the run, never modified
        accept_allowed: Whether submitting this variant unmodified counts as accept
        edits_made: Whether ``args`` currently differs from the baseline
    """

    args: ActionRequest
    original: ActionRequest
    accept_allowed: bool = False
    edits_made: bool = False
    type: Literal["edit"] = "edit"


@dataclass(frozen=True)
class RespondResponse:
    """Free-text answer, possibly empty."""

    args: str = ""
    type: Literal["response"] = "response"

    @property
    def has_content(self) -> bool:
        return bool(self.args.strip())


@dataclass(frozen=True)
class IgnoreResponse:
    """Dismiss the action."""

    type: Literal["ignore"] = "ignore"
    args: None = None


ResponseVariant = Union[AcceptResponse, EditResponse, RespondResponse, IgnoreResponse]


def find_response(responses, response_type: str) -> Optional[ResponseVariant]:
    """Return the variant of ``response_type`` or None."""
    return next((r for r in responses if r.type == response_type), None)
