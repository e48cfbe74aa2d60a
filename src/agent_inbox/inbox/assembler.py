"""
agent_inbox.inbox.assembler

Submission Assembler

Flattens the live response variants into the resume payload a paused run
expects. The payload is a list of ``{"type": ..., "args": ...}`` entries and is
the only bit-exact contract with the run.

Transform rules:
- untouched edit with accept allowed -> accept carrying the original action request
- edited edit, or edit without accept -> edit carrying the current action request
- blank response -> dropped
- response with text -> response carrying the text
- accept / ignore -> their type with null args
"""

from typing import Iterable, List, Optional

from agent_inbox.types.human_interrupt import HumanResponse, SubmitType
from agent_inbox.types.responses import EditResponse, RespondResponse, ResponseVariant
from agent_inbox.utils.exceptions import NoResponseFoundError


def to_human_response(response: ResponseVariant) -> Optional[HumanResponse]:
    """Convert one variant to its wire entry, or None if it must not be sent."""
    if isinstance(response, EditResponse):
        if response.accept_allowed and not response.edits_made:
            return {"type": "accept", "args": response.original}
        return {"type": "edit", "args": response.args}

    if isinstance(response, RespondResponse):
        # An unanswered optional response is never sent
        if not response.has_content:
            return None
        return {"type": "response", "args": response.args}

    return {"type": response.type, "args": None}


def assemble_resume_payload(responses: Iterable[ResponseVariant]) -> List[HumanResponse]:
    """Flatten variants into wire entries, dropping blank responses."""
    payload: List[HumanResponse] = []
    for response in responses:
        entry = to_human_response(response)
        if entry is not None:
            payload.append(entry)
    return payload


def select_response(
    payload: List[HumanResponse],
    submit_type: Optional[SubmitType],
) -> HumanResponse:
    """
    Pick the entry to send for the selected submit type.

    Raises:
        NoResponseFoundError: If no entry has the selected type
    """
    entry = next((r for r in payload if r["type"] == submit_type), None)
    if entry is None:
        raise NoResponseFoundError(
            submit_type,
            context={"available": [r["type"] for r in payload]},
        )
    return entry


def build_chat_response(text: str) -> List[HumanResponse]:
    """
    Build the resume payload for an interrupt answered from the chat input.

    Raises:
        NoResponseFoundError: If the text is blank
    """
    stripped = text.strip()
    if not stripped:
        raise NoResponseFoundError("response", context={"reason": "blank chat input"})
    return [{"type": "response", "args": stripped}]
