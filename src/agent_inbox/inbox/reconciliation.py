"""
agent_inbox.inbox.reconciliation

Edit Reconciliation Engine

Keeps the selected submit type consistent with whether the human actually
changed anything. Argument edits are compared against the baseline snapshot;
an edit that has been reverted to its original values is treated as accept
again when accept is allowed.

The selected type always follows the most recent user action: an argument
edit can only move the selection to edit (or back to accept/response), and a
response text change can only move it to response (or back). There is no
priority recomputation over all variants.
"""

from dataclasses import replace
from typing import Any, List, Sequence, Tuple, Union

from agent_inbox.inbox.state import InterruptState
from agent_inbox.sentry import get_logger
from agent_inbox.types.responses import EditResponse, RespondResponse
from agent_inbox.utils.exceptions import ArgumentArityError

logger = get_logger(__name__)

KeyOrKeys = Union[str, Sequence[str]]
ValueOrValues = Union[Any, Sequence[Any]]


def _is_batch(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def normalize_change(key: KeyOrKeys, value: ValueOrValues) -> Tuple[List[str], List[Any]]:
    """
    Normalise a single or batched change into parallel key/value lists.

    Raises:
        ArgumentArityError: If a batch is mixed with a scalar, or the batches
                            have different lengths
    """
    if _is_batch(key) != _is_batch(value):
        raise ArgumentArityError(
            context={"key_type": type(key).__name__, "value_type": type(value).__name__}
        )

    if not _is_batch(key):
        return [key], [value]

    if len(key) != len(value):
        raise ArgumentArityError(
            "Argument keys and values must have the same length",
            context={"keys": len(key), "values": len(value)},
        )
    return list(key), list(value)


class EditReconciliationEngine:
    """
    Applies user edits to an interrupt's state.

    The engine owns no state of its own; it mutates the ``InterruptState`` it
    was given by replacing variants, never by mutating them in place.
    """

    def __init__(self, state: InterruptState) -> None:
        self.state = state

    def on_argument_change(self, key: KeyOrKeys, value: ValueOrValues) -> EditResponse:
        """
        Merge an argument change into the edit variant.

        Accepts either a single ``(key, value)`` pair or parallel lists of keys
        and values for batched edits such as a reset.

        Returns:
            EditResponse: The updated edit variant

        Raises:
            ArgumentArityError: On mismatched key/value arity; state is untouched
            ResponseNotAllowedError: If the interrupt does not allow editing
        """
        keys, values = normalize_change(key, value)
        edit = self.state.edit_response

        updated_args = {**edit.args["args"], **dict(zip(keys, values))}
        edits_made = bool(self.state.baseline.changed_keys(updated_args))

        updated = replace(
            edit,
            args={"action": edit.args["action"], "args": updated_args},
            edits_made=edits_made,
        )
        self.state.replace_response(updated)
        self.state.has_edited = edits_made

        if edits_made:
            self.state.selected_submit_type = "edit"
        elif self.state.accept_allowed:
            self.state.selected_submit_type = "accept"
        elif self.state.has_added_response:
            self.state.selected_submit_type = "response"

        logger.debug(
            "[reconciliation] Applied change to %s, edits_made=%s, selected=%s",
            keys,
            edits_made,
            self.state.selected_submit_type,
        )
        return updated

    def reset(self) -> EditResponse:
        """
        Restore every edited argument to its original value in one batch.

        Arguments that were added during editing and have no baseline are
        dropped. Always leaves ``edits_made`` false.
        """
        edit = self.state.edit_response
        baseline = self.state.baseline
        current_args = edit.args["args"]

        if any(key not in baseline for key in current_args):
            kept = {k: v for k, v in current_args.items() if k in baseline}
            edit = replace(edit, args={"action": edit.args["action"], "args": kept})
            self.state.replace_response(edit)

        # Original typed values, not their stringified baseline copies
        original_args = edit.original["args"]
        edited_keys = baseline.changed_keys(edit.args["args"])
        return self.on_argument_change(edited_keys, [original_args[k] for k in edited_keys])

    def on_response_text_change(self, text: str) -> RespondResponse:
        """
        Store the free-text response and update the selection.

        Blank text falls back to edit when edits are pending, else to accept
        when it is allowed, else leaves nothing selected.

        Raises:
            ResponseNotAllowedError: If the interrupt does not accept a response
        """
        response = self.state.respond_response
        updated = replace(response, args=text)
        self.state.replace_response(updated)

        has_content = updated.has_content
        self.state.has_added_response = has_content

        if has_content:
            self.state.selected_submit_type = "response"
        elif self.state.has_edited:
            self.state.selected_submit_type = "edit"
        elif self.state.accept_allowed:
            self.state.selected_submit_type = "accept"
        else:
            self.state.selected_submit_type = None

        return updated
