"""
agent_inbox.types

Wire schema and response variant types.
"""

from .human_interrupt import (
    DEFAULT_APPROVE_ONLY_CONFIG,
    DEFAULT_EDIT_CONFIG,
    DEFAULT_FULL_CONFIG,
    ActionRequest,
    HumanInterrupt,
    HumanInterruptConfig,
    HumanResponse,
    JSONValue,
    SubmitType,
    create_action_interrupt,
    is_human_interrupt_schema,
    parse_interrupt,
)
from .responses import (
    AcceptResponse,
    EditResponse,
    IgnoreResponse,
    RespondResponse,
    ResponseVariant,
    find_response,
)

__all__ = [
    # Wire schema
    "ActionRequest",
    "HumanInterrupt",
    "HumanInterruptConfig",
    "HumanResponse",
    "JSONValue",
    "SubmitType",
    "DEFAULT_FULL_CONFIG",
    "DEFAULT_APPROVE_ONLY_CONFIG",
    "DEFAULT_EDIT_CONFIG",
    "create_action_interrupt",
    "is_human_interrupt_schema",
    "parse_interrupt",
    # Response variants
    "AcceptResponse",
    "EditResponse",
    "IgnoreResponse",
    "RespondResponse",
    "ResponseVariant",
    "find_response",
]
