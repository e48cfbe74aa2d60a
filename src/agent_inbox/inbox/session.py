"""
agent_inbox.inbox.session

Interrupt Session

One ``InterruptSession`` exists per open interrupt. It owns the interrupt's
baseline snapshot and response variants, routes user edits through the
reconciliation engine, and drives the resume state machine:

    IDLE -> SUBMITTING -> (STREAMING -> FINISHED) | FAILED

A failed attempt keeps the variants and baseline so the user can retry; the
next interaction moves the session from FAILED back to IDLE. A successful
resume closes the session, after which every interaction is refused with an
"already answered" notice. Only one resume call may be in flight per session;
a second submit raises ``SubmissionInProgressError`` immediately.

Usage Example:
    ```python
    session = InterruptSession.from_interrupt_value(
        interrupt_value,
        LangGraphResumeClient(thread_id, assistant_id="agent"),
        notifier=my_notifier,
    )
    session.on_argument_change("city", "LA")
    await session.submit()
    ```
"""

import asyncio
from typing import Any, Awaitable, Callable, List, Optional

from agent_inbox.inbox.assembler import (
    assemble_resume_payload,
    build_chat_response,
    select_response,
    to_human_response,
)
from agent_inbox.inbox.baseline import BaselineSnapshot
from agent_inbox.inbox.classifier import ErrorClassifier
from agent_inbox.inbox.notices import (
    LoggingNotifier,
    Notice,
    Notifier,
    error_notice,
    success_notice,
)
from agent_inbox.inbox.reconciliation import EditReconciliationEngine, KeyOrKeys, ValueOrValues
from agent_inbox.inbox.resolver import ResolvedResponses, resolve_responses
from agent_inbox.inbox.state import InterruptState, SubmissionState, SubmissionStatus
from agent_inbox.sentry import get_logger
from agent_inbox.services.resume import ResumeTransport
from agent_inbox.types.human_interrupt import (
    HumanInterrupt,
    HumanResponse,
    SubmitType,
    parse_interrupt,
)
from agent_inbox.types.responses import ResponseVariant, find_response
from agent_inbox.utils.exceptions import (
    EmptyResponseSetError,
    InboxInputError,
    ResponseNotAllowedError,
    SubmissionInProgressError,
)

logger = get_logger(__name__)

# Entry types whose resume produces a token stream from the run
STREAMING_RESPONSE_TYPES = ("response", "edit", "accept")

SUBMITTED_MESSAGE = "Response submitted successfully."
IGNORE_NOT_SUPPORTED_MESSAGE = "The selected thread does not support ignoring."
RESOLVE_FAILED_MESSAGE = "Failed to mark thread as resolved."
ALREADY_ANSWERED_MESSAGE = "This interrupt has already been answered."


class InterruptSession:
    """Owns the state of one open interrupt and resumes its run."""

    def __init__(
        self,
        interrupt: HumanInterrupt,
        transport: ResumeTransport,
        *,
        notifier: Optional[Notifier] = None,
        classifier: Optional[ErrorClassifier] = None,
    ):
        self.interrupt = interrupt
        self.transport = transport
        self.notifier = notifier or LoggingNotifier()
        self.classifier = classifier or ErrorClassifier()

        self.state = InterruptState()
        self.resolved: ResolvedResponses = resolve_responses(interrupt, self.state.baseline)
        self.state.responses = list(self.resolved.variants)
        self.state.selected_submit_type = self.resolved.default_submit_type
        self.state.accept_allowed = self.resolved.accept_allowed

        self.engine = EditReconciliationEngine(self.state)

        self.status = SubmissionStatus.IDLE
        self.loading = False
        self.streaming = False
        self.stream_finished = False
        self.closed = False
        self._in_flight = False

    @classmethod
    def from_interrupt_value(
        cls,
        value: Any,
        transport: ResumeTransport,
        **kwargs: Any,
    ) -> "InterruptSession":
        """Build a session from a raw interrupt value read from a paused run."""
        return cls(parse_interrupt(value), transport, **kwargs)

    # State accessors

    @property
    def responses(self) -> List[ResponseVariant]:
        return self.state.responses

    @property
    def baseline(self) -> BaselineSnapshot:
        return self.state.baseline

    @property
    def selected_submit_type(self) -> Optional[SubmitType]:
        return self.state.selected_submit_type

    @property
    def has_edited(self) -> bool:
        return self.state.has_edited

    @property
    def has_added_response(self) -> bool:
        return self.state.has_added_response

    @property
    def accept_allowed(self) -> bool:
        return self.state.accept_allowed

    @property
    def supports_multiple_methods(self) -> bool:
        return self.state.supports_multiple_methods

    @property
    def can_submit(self) -> bool:
        return (
            not self._in_flight
            and not self.closed
            and self.resolved.can_submit
            and self.state.selected_submit_type is not None
        )

    def snapshot(self) -> SubmissionState:
        return SubmissionState(
            status=self.status,
            loading=self.loading,
            streaming=self.streaming,
            stream_finished=self.stream_finished,
            selected_submit_type=self.state.selected_submit_type,
            has_edited=self.state.has_edited,
            has_added_response=self.state.has_added_response,
            accept_allowed=self.state.accept_allowed,
            supports_multiple_methods=self.state.supports_multiple_methods,
        )

    # User interaction

    def _begin_interaction(self) -> bool:
        """False, after notifying the user, once the interrupt has been answered or closed."""
        if self._in_flight:
            raise SubmissionInProgressError(
                context={"action": self.interrupt["action_request"]["action"]}
            )
        if self.closed:
            self.notifier.notify(error_notice(ALREADY_ANSWERED_MESSAGE))
            return False
        if self.status == SubmissionStatus.FAILED:
            self.status = SubmissionStatus.IDLE
        return True

    def _reject_input(self, error: InboxInputError) -> None:
        logger.warning("[session] %s (%s)", error.message, error.error_code, extra={"context": error.context})
        self.notifier.notify(error_notice(error.message))

    def select_submit_type(self, submit_type: SubmitType) -> bool:
        """Explicitly select the response kind to submit; False once the interrupt is answered."""
        if not self._begin_interaction():
            return False
        if find_response(self.state.responses, submit_type) is None and not (
            submit_type == "accept" and self.state.accept_allowed
        ):
            raise ResponseNotAllowedError(submit_type)
        self.state.selected_submit_type = submit_type
        return True

    def on_argument_change(self, key: KeyOrKeys, value: ValueOrValues) -> bool:
        """
        Apply an argument edit.

        Returns:
            bool: False if the edit was rejected; the user has been notified
        """
        if not self._begin_interaction():
            return False
        try:
            self.engine.on_argument_change(key, value)
        except InboxInputError as e:
            self._reject_input(e)
            return False
        return True

    def reset_edits(self) -> bool:
        """Restore all edited arguments to their original values."""
        if not self._begin_interaction():
            return False
        try:
            self.engine.reset()
        except InboxInputError as e:
            self._reject_input(e)
            return False
        return True

    def on_response_text_change(self, text: str) -> bool:
        """Update the free-text response."""
        if not self._begin_interaction():
            return False
        try:
            self.engine.on_response_text_change(text)
        except InboxInputError as e:
            self._reject_input(e)
            return False
        return True

    # Submission

    async def submit(self) -> bool:
        """
        Send the selected response to the paused run.

        Returns:
            bool: True if the run was resumed

        Raises:
            SubmissionInProgressError: If a resume call is already in flight
        """
        if not self._begin_interaction():
            return False

        if not self.state.responses:
            self._reject_input(EmptyResponseSetError())
            return False

        payload = assemble_resume_payload(self.state.responses)
        try:
            entry = select_response(payload, self.state.selected_submit_type)
        except InboxInputError as e:
            self._reject_input(e)
            return False

        return await self._run(
            lambda: self.transport.resume([entry]),
            streams=entry["type"] in STREAMING_RESPONSE_TYPES,
            success=success_notice(SUBMITTED_MESSAGE),
        )

    async def ignore(self) -> bool:
        """Dismiss the interrupt regardless of the selected submit type."""
        if not self._begin_interaction():
            return False

        ignore = find_response(self.state.responses, "ignore")
        if ignore is None:
            self._reject_input(ResponseNotAllowedError("ignore", IGNORE_NOT_SUPPORTED_MESSAGE))
            return False

        entry = to_human_response(ignore)
        return await self._run(
            lambda: self.transport.resume([entry]),
            streams=False,
            success=Notice(kind="success", title="Successfully ignored thread", description=""),
        )

    async def reply(self, text: str) -> bool:
        """Answer the interrupt with a chat message instead of the inbox form."""
        if not self._begin_interaction():
            return False

        try:
            if find_response(self.state.responses, "response") is None:
                raise ResponseNotAllowedError("response", "This interrupt does not accept a response.")
            payload = build_chat_response(text)
        except InboxInputError as e:
            self._reject_input(e)
            return False

        return await self._run(
            lambda: self.transport.resume(payload),
            streams=True,
            success=success_notice(SUBMITTED_MESSAGE),
        )

    async def mark_resolved(self) -> bool:
        """End the run without answering the interrupt."""
        if not self._begin_interaction():
            return False

        return await self._run(
            self.transport.resolve,
            streams=False,
            success=Notice(kind="success", title="Success", description="Marked thread as resolved.", duration_ms=3000),
            failure_description=RESOLVE_FAILED_MESSAGE,
        )

    async def _run(
        self,
        call: Callable[[], Awaitable[Any]],
        *,
        streams: bool,
        success: Notice,
        failure_description: Optional[str] = None,
    ) -> bool:
        self._in_flight = True
        self.status = SubmissionStatus.SUBMITTING
        self.loading = True

        # Baseline tracking starts clean for the next interrupt; restored if this attempt fails
        previous_baseline = self.state.baseline
        self.state.baseline = BaselineSnapshot()

        if streams:
            self.status = SubmissionStatus.STREAMING
            self.streaming = True
            self.stream_finished = False

        try:
            await call()
        except asyncio.CancelledError:
            logger.warning("[session] Resume call cancelled by the transport")
            self._settle_failure(previous_baseline)
            raise
        except Exception as e:
            logger.error("[session] Error sending human response: %s", e, exc_info=True)
            self._settle_failure(previous_baseline)
            self.notifier.notify(self.classifier.classify(e, fallback=failure_description))
            return False
        finally:
            self._in_flight = False

        self.streaming = False
        self.stream_finished = streams
        self.loading = False
        self.status = SubmissionStatus.FINISHED if streams else SubmissionStatus.IDLE
        self.closed = True

        logger.info(
            "[session] Resumed run for action %s",
            self.interrupt["action_request"]["action"],
        )
        self.notifier.notify(success)
        return True

    def _settle_failure(self, previous_baseline: BaselineSnapshot) -> None:
        self.state.baseline = previous_baseline
        self.streaming = False
        self.stream_finished = False
        self.loading = False
        self.status = SubmissionStatus.FAILED

    def close(self) -> None:
        """Discard the baseline once the interrupt is no longer shown."""
        self.state.baseline.clear()
        self.closed = True


def build_resume_payload(session: InterruptSession) -> List[HumanResponse]:
    """The payload ``submit()`` would send right now, without sending it."""
    payload = assemble_resume_payload(session.responses)
    return [select_response(payload, session.selected_submit_type)]
