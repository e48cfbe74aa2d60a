"""
agent_inbox.inbox.resolver

Response Capability Resolver

Turns an interrupt's capability flags into the ordered list of response
variants a human may use, plus the submit type selected by default.

Ordering follows the flags: edit, response, ignore, then a standalone accept
when no edit variant already carries accept. The default submit type is
chosen by priority accept > response > edit; ignore is never a default, it is
always an explicit user action.
"""

from dataclasses import dataclass
from typing import List, Optional

from agent_inbox.inbox.baseline import BaselineSnapshot
from agent_inbox.sentry import get_logger
from agent_inbox.types.human_interrupt import HumanInterrupt, SubmitType
from agent_inbox.types.responses import (
    AcceptResponse,
    EditResponse,
    IgnoreResponse,
    RespondResponse,
    ResponseVariant,
    find_response,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class ResolvedResponses:
    """
    Resolver output consumed by the rendering layer.

    Attributes:
        variants: Legal response variants in display order
        default_submit_type: Submit type selected before any user action
        accept_allowed: Whether accept is representable, standalone or via edit
    """

    variants: List[ResponseVariant]
    default_submit_type: Optional[SubmitType]
    accept_allowed: bool

    @property
    def can_submit(self) -> bool:
        """False when every capability flag is off and nothing can be sent."""
        return bool(self.variants)


def _build_edit_response(interrupt: HumanInterrupt, baseline: BaselineSnapshot) -> EditResponse:
    action_request = interrupt["action_request"]
    baseline.record_all(action_request["args"])

    # The current args start as a copy so later merges never touch the original
    current = {"action": action_request["action"], "args": dict(action_request["args"])}
    return EditResponse(
        args=current,
        original=action_request,
        accept_allowed=bool(interrupt["config"]["allow_accept"]),
        edits_made=False,
    )


def default_submit_type(responses: List[ResponseVariant]) -> Optional[SubmitType]:
    """Priority accept > response > edit; None when none of them exists."""
    has_accept = any(
        r.type == "accept" or (isinstance(r, EditResponse) and r.accept_allowed)
        for r in responses
    )
    if has_accept:
        return "accept"
    if find_response(responses, "response") is not None:
        return "response"
    if find_response(responses, "edit") is not None:
        return "edit"
    return None


def resolve_responses(interrupt: HumanInterrupt, baseline: BaselineSnapshot) -> ResolvedResponses:
    """
    Resolve the legal response variants for an interrupt.

    Args:
        interrupt: The paused-run descriptor
        baseline: Snapshot that receives the original argument values when
                  editing is allowed. Keys already present are not overwritten.

    Returns:
        ResolvedResponses: Variants, default submit type and accept availability

    Examples:
        >>> from agent_inbox.types import create_action_interrupt, DEFAULT_APPROVE_ONLY_CONFIG
        >>> resolved = resolve_responses(
        ...     create_action_interrupt("send_email", {"to": "a@b.c"}, DEFAULT_APPROVE_ONLY_CONFIG),
        ...     BaselineSnapshot(),
        ... )
        >>> [r.type for r in resolved.variants], resolved.default_submit_type
        (['ignore', 'accept'], 'accept')
    """
    config = interrupt["config"]
    responses: List[ResponseVariant] = []

    if config["allow_edit"]:
        responses.append(_build_edit_response(interrupt, baseline))

    if config["allow_respond"]:
        responses.append(RespondResponse(args=""))

    if config["allow_ignore"]:
        responses.append(IgnoreResponse())

    accept_via_edit = any(isinstance(r, EditResponse) and r.accept_allowed for r in responses)
    if config["allow_accept"] and not accept_via_edit:
        responses.append(AcceptResponse())

    if config["allow_ignore"] and find_response(responses, "ignore") is None:
        responses.append(IgnoreResponse())

    submit_type = default_submit_type(responses)

    if not responses:
        logger.info(
            "[resolver] Interrupt for action %s allows no responses",
            interrupt["action_request"]["action"],
        )

    return ResolvedResponses(
        variants=responses,
        default_submit_type=submit_type,
        accept_allowed=submit_type == "accept",
    )
