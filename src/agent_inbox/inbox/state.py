"""Mutable per-interrupt state shared by the reconciliation engine and the session."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from agent_inbox.inbox.baseline import BaselineSnapshot
from agent_inbox.types.human_interrupt import SubmitType
from agent_inbox.types.responses import (
    EditResponse,
    RespondResponse,
    ResponseVariant,
    find_response,
)
from agent_inbox.utils.exceptions import ResponseNotAllowedError


class SubmissionStatus(str, Enum):
    """Resume state machine status."""

    IDLE = "idle"
    SUBMITTING = "submitting"
    STREAMING = "streaming"
    FINISHED = "finished"
    FAILED = "failed"


class SubmissionState(BaseModel):
    """Snapshot of submission state for the rendering layer."""

    status: SubmissionStatus = Field(default=SubmissionStatus.IDLE)
    loading: bool = Field(default=False, description="A resume call is in flight")
    streaming: bool = Field(default=False, description="The run is streaming its continuation")
    stream_finished: bool = Field(default=False, description="The last resume call completed without error")
    selected_submit_type: Optional[SubmitType] = Field(default=None)
    has_edited: bool = Field(default=False)
    has_added_response: bool = Field(default=False)
    accept_allowed: bool = Field(default=False)
    supports_multiple_methods: bool = Field(default=False)


@dataclass
class InterruptState:
    """
    Live state of one open interrupt.

    Attributes:
        responses: Current response variants, at most one per kind
        baseline: Original stringified argument values for edit detection
        selected_submit_type: Response kind that submit() will send
        accept_allowed: Whether accept is available, standalone or via edit
        has_edited: Whether the edit variant differs from the baseline
        has_added_response: Whether the free-text response is non-blank
    """

    responses: List[ResponseVariant] = field(default_factory=list)
    baseline: BaselineSnapshot = field(default_factory=BaselineSnapshot)
    selected_submit_type: Optional[SubmitType] = None
    accept_allowed: bool = False
    has_edited: bool = False
    has_added_response: bool = False

    @property
    def edit_response(self) -> EditResponse:
        response = find_response(self.responses, "edit")
        if response is None:
            raise ResponseNotAllowedError("edit", "This interrupt does not allow editing.")
        return response

    @property
    def respond_response(self) -> RespondResponse:
        response = find_response(self.responses, "response")
        if response is None:
            raise ResponseNotAllowedError("response", "This interrupt does not accept a response.")
        return response

    @property
    def supports_multiple_methods(self) -> bool:
        return len([r for r in self.responses if r.type in ("edit", "accept", "response")]) > 1

    def replace_response(self, updated: ResponseVariant) -> None:
        """Swap in ``updated`` for the variant of the same kind, producing a new list."""
        self.responses = [updated if r.type == updated.type else r for r in self.responses]
