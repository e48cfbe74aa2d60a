"""Tests for edit reconciliation against the baseline snapshot."""

import pytest

from agent_inbox.inbox import EditReconciliationEngine, InterruptState, resolve_responses
from agent_inbox.inbox.reconciliation import normalize_change
from agent_inbox.types import find_response
from agent_inbox.utils.exceptions import ArgumentArityError, ResponseNotAllowedError


def build_engine(interrupt) -> EditReconciliationEngine:
    state = InterruptState()
    resolved = resolve_responses(interrupt, state.baseline)
    state.responses = list(resolved.variants)
    state.selected_submit_type = resolved.default_submit_type
    state.accept_allowed = resolved.accept_allowed
    return EditReconciliationEngine(state)


# ============================================================================
# Argument edits
# ============================================================================


def test_real_edit_selects_edit(make_interrupt):
    engine = build_engine(make_interrupt(allow_accept=True, allow_edit=True, allow_ignore=True))

    edit = engine.on_argument_change("city", "LA")

    assert edit.edits_made is True
    assert edit.args == {"action": "book_trip", "args": {"city": "LA"}}
    assert engine.state.has_edited is True
    assert engine.state.selected_submit_type == "edit"


def test_reverting_edit_selects_accept_again(make_interrupt):
    engine = build_engine(make_interrupt(allow_accept=True, allow_edit=True, allow_ignore=True))

    engine.on_argument_change("city", "LA")
    edit = engine.on_argument_change("city", "NYC")

    assert edit.edits_made is False
    assert engine.state.has_edited is False
    assert engine.state.selected_submit_type == "accept"


def test_reverting_edit_without_accept_falls_back_to_response(make_interrupt):
    engine = build_engine(make_interrupt(allow_edit=True, allow_respond=True))

    engine.on_response_text_change("please double check")
    engine.on_argument_change("city", "LA")
    assert engine.state.selected_submit_type == "edit"

    engine.on_argument_change("city", "NYC")

    assert engine.state.selected_submit_type == "response"


def test_reverting_one_key_while_another_differs_is_still_an_edit(make_interrupt):
    engine = build_engine(make_interrupt({"city": "NYC", "nights": 3}, allow_accept=True, allow_edit=True))

    engine.on_argument_change("city", "LA")
    engine.on_argument_change("nights", "4")
    edit = engine.on_argument_change("city", "NYC")

    assert edit.edits_made is True
    assert engine.state.selected_submit_type == "edit"


def test_string_input_matching_stringified_baseline_is_not_an_edit(make_interrupt):
    engine = build_engine(make_interrupt({"nights": 3, "tags": ["a"]}, allow_accept=True, allow_edit=True))

    edit = engine.on_argument_change(["nights", "tags"], ["3", '["a"]'])

    assert edit.edits_made is False


def test_batched_change_applies_all_keys(make_interrupt):
    engine = build_engine(make_interrupt({"city": "NYC", "nights": 3}, allow_edit=True))

    edit = engine.on_argument_change(["city", "nights"], ["LA", 5])

    assert edit.args["args"] == {"city": "LA", "nights": 5}


def test_updates_are_immutable(make_interrupt):
    interrupt = make_interrupt(allow_accept=True, allow_edit=True)
    engine = build_engine(interrupt)
    before = engine.state.edit_response
    responses_before = engine.state.responses

    after = engine.on_argument_change("city", "LA")

    assert before.args["args"] == {"city": "NYC"}
    assert after is not before
    assert responses_before[0] is before
    assert engine.state.responses is not responses_before
    assert interrupt["action_request"]["args"] == {"city": "NYC"}


@pytest.mark.parametrize(
    "key,value",
    [
        ("city", ["LA"]),
        (["city"], "LA"),
        (["city", "nights"], ["LA"]),
    ],
)
def test_mismatched_arity_is_rejected_without_mutation(make_interrupt, key, value):
    engine = build_engine(make_interrupt(allow_accept=True, allow_edit=True))
    responses_before = engine.state.responses

    with pytest.raises(ArgumentArityError):
        engine.on_argument_change(key, value)

    assert engine.state.responses is responses_before
    assert engine.state.selected_submit_type == "accept"


def test_normalize_change_accepts_tuples():
    assert normalize_change(("a", "b"), (1, 2)) == (["a", "b"], [1, 2])


def test_edit_without_edit_capability(make_interrupt):
    engine = build_engine(make_interrupt(allow_accept=True))

    with pytest.raises(ResponseNotAllowedError):
        engine.on_argument_change("city", "LA")


# ============================================================================
# Reset
# ============================================================================


def test_reset_after_many_edits_clears_edits(make_interrupt):
    engine = build_engine(
        make_interrupt({"city": "NYC", "nights": 3, "extras": {"wifi": True}}, allow_accept=True, allow_edit=True)
    )

    engine.on_argument_change("city", "LA")
    engine.on_argument_change("city", "SF")
    engine.on_argument_change(["nights", "extras"], ["7", '{"wifi":false}'])
    engine.on_argument_change("promo", "SPRING")

    edit = engine.reset()

    assert edit.edits_made is False
    assert engine.state.has_edited is False
    assert engine.state.selected_submit_type == "accept"
    assert "promo" not in edit.args["args"]
    assert edit.args["args"]["city"] == "NYC"


def test_reset_restores_original_typed_values(make_interrupt):
    original_args = {"nights": 3, "extras": {"wifi": True}, "tags": ["beach"]}
    engine = build_engine(make_interrupt(dict(original_args), allow_edit=True))

    engine.on_argument_change(["nights", "extras", "tags"], [5, {"wifi": False}, []])
    edit = engine.reset()

    assert edit.args["args"] == original_args
    assert isinstance(edit.args["args"]["nights"], int)
    assert edit.edits_made is False
    assert engine.state.has_edited is False


def test_reset_without_edits_is_harmless(make_interrupt):
    engine = build_engine(make_interrupt(allow_accept=True, allow_edit=True))

    edit = engine.reset()

    assert edit.edits_made is False
    assert edit.args["args"] == {"city": "NYC"}


# ============================================================================
# Response text
# ============================================================================


def test_response_text_selects_response(make_interrupt):
    engine = build_engine(make_interrupt(allow_accept=True, allow_edit=True, allow_respond=True))

    engine.on_response_text_change("Use the cheaper hotel")

    assert engine.state.has_added_response is True
    assert engine.state.selected_submit_type == "response"
    assert find_response(engine.state.responses, "response").args == "Use the cheaper hotel"


def test_clearing_response_falls_back_to_pending_edit(make_interrupt):
    engine = build_engine(make_interrupt(allow_accept=True, allow_edit=True, allow_respond=True))

    engine.on_argument_change("city", "LA")
    engine.on_response_text_change("hmm")
    engine.on_response_text_change("   ")

    assert engine.state.has_added_response is False
    assert engine.state.selected_submit_type == "edit"


def test_clearing_response_falls_back_to_accept(make_interrupt):
    engine = build_engine(make_interrupt(allow_accept=True, allow_respond=True))

    engine.on_response_text_change("hmm")
    engine.on_response_text_change("")

    assert engine.state.selected_submit_type == "accept"


def test_clearing_only_response_leaves_nothing_selected(make_interrupt):
    engine = build_engine(make_interrupt(allow_respond=True))
    assert engine.state.selected_submit_type == "response"

    engine.on_response_text_change("hello")
    engine.on_response_text_change("")

    assert engine.state.selected_submit_type is None


def test_latest_action_wins_when_edit_and_response_coexist(make_interrupt):
    engine = build_engine(make_interrupt(allow_edit=True, allow_respond=True))

    engine.on_response_text_change("context for the agent")
    engine.on_argument_change("city", "LA")
    assert engine.state.selected_submit_type == "edit"

    engine.on_response_text_change("more context")
    assert engine.state.selected_submit_type == "response"


def test_response_without_respond_capability(make_interrupt):
    engine = build_engine(make_interrupt(allow_accept=True))

    with pytest.raises(ResponseNotAllowedError):
        engine.on_response_text_change("hi")
