"""Tests for resume payload assembly."""

import json
from dataclasses import replace

import pytest

from agent_inbox.inbox import (
    BaselineSnapshot,
    assemble_resume_payload,
    build_chat_response,
    resolve_responses,
    select_response,
)
from agent_inbox.types import (
    AcceptResponse,
    EditResponse,
    IgnoreResponse,
    RespondResponse,
)
from agent_inbox.utils.exceptions import NoResponseFoundError


ORIGINAL = {"action": "book_trip", "args": {"city": "NYC", "nights": 3}}


def test_untouched_edit_with_accept_collapses_to_accept():
    edit = EditResponse(args={"action": "book_trip", "args": {"city": "NYC", "nights": 3}}, original=ORIGINAL, accept_allowed=True)

    payload = assemble_resume_payload([edit])

    assert payload == [{"type": "accept", "args": ORIGINAL}]
    assert payload[0]["args"] is ORIGINAL


def test_edited_edit_sends_current_request():
    current = {"action": "book_trip", "args": {"city": "LA", "nights": 3}}
    edit = EditResponse(args=current, original=ORIGINAL, accept_allowed=True, edits_made=True)

    assert assemble_resume_payload([edit]) == [{"type": "edit", "args": current}]


def test_edit_without_accept_is_always_an_edit():
    edit = EditResponse(args=ORIGINAL, original=ORIGINAL, accept_allowed=False)

    assert assemble_resume_payload([edit]) == [{"type": "edit", "args": ORIGINAL}]


@pytest.mark.parametrize("text", ["", "   ", "\n"])
def test_blank_response_is_dropped(text):
    payload = assemble_resume_payload([RespondResponse(args=text), IgnoreResponse()])

    assert payload == [{"type": "ignore", "args": None}]


def test_response_text_is_sent():
    assert assemble_resume_payload([RespondResponse(args="Try Boston")]) == [
        {"type": "response", "args": "Try Boston"}
    ]


def test_accept_and_ignore_have_null_args():
    assert assemble_resume_payload([AcceptResponse(), IgnoreResponse()]) == [
        {"type": "accept", "args": None},
        {"type": "ignore", "args": None},
    ]


def test_resolved_untouched_edit_round_trips_original_request(make_interrupt):
    interrupt = make_interrupt(
        {"city": "NYC", "guests": [{"name": "ann"}], "nights": 3},
        allow_accept=True,
        allow_edit=True,
        allow_respond=True,
        allow_ignore=True,
    )
    original_json = json.dumps(interrupt["action_request"])

    resolved = resolve_responses(interrupt, BaselineSnapshot())
    payload = assemble_resume_payload(resolved.variants)
    entry = select_response(payload, resolved.default_submit_type)

    assert entry["type"] == "accept"
    assert json.dumps(entry["args"]) == original_json
    assert all(r["type"] != "response" for r in payload)


def test_select_picks_matching_entry():
    payload = [{"type": "edit", "args": ORIGINAL}, {"type": "ignore", "args": None}]

    assert select_response(payload, "ignore") == {"type": "ignore", "args": None}


@pytest.mark.parametrize("submit_type", ["response", None])
def test_select_without_match_raises(submit_type):
    payload = assemble_resume_payload([RespondResponse(args=""), AcceptResponse()])

    with pytest.raises(NoResponseFoundError) as exc_info:
        select_response(payload, submit_type)

    assert exc_info.value.message == "No response found."
    assert exc_info.value.context["available"] == ["accept"]


def test_assembler_does_not_mutate_variants():
    edit = EditResponse(args=ORIGINAL, original=ORIGINAL, accept_allowed=True)
    edited = replace(edit, edits_made=True)

    assemble_resume_payload([edited])

    assert edited.edits_made is True
    assert edit.edits_made is False


def test_chat_response_is_trimmed():
    assert build_chat_response("  go ahead \n") == [{"type": "response", "args": "go ahead"}]


def test_blank_chat_response_is_rejected():
    with pytest.raises(NoResponseFoundError):
        build_chat_response("   ")
