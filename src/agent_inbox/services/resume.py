"""
agent_inbox.services.resume

Resume Transports

A transport continues a paused run with the human's decision. The inbox core
only depends on the ``ResumeTransport`` protocol; two implementations are
provided:

- ``LangGraphResumeClient`` talks to a LangGraph deployment over HTTP and
  creates a run on the paused thread with ``command.resume`` set to the payload.
- ``GraphResumeTransport`` resumes an in-process compiled LangGraph graph with
  ``Command(resume=...)``.

Transports raise on failure. Timeouts and cancellation belong to the
transport; the inbox adds neither.
"""

from typing import Any, Dict, List, Optional, Protocol

import httpx
from langgraph.graph import END
from langgraph.types import Command

from agent_inbox import config
from agent_inbox.sentry import get_logger
from agent_inbox.types.human_interrupt import HumanResponse
from agent_inbox.utils.exceptions import ConfigurationError, ResumeTransportError

logger = get_logger(__name__)


class ResumeTransport(Protocol):
    """Resumption primitive of a paused run."""

    async def resume(self, payload: List[HumanResponse]) -> Any:
        """Continue the run with ``payload`` as the interrupt's return value."""
        ...

    async def resolve(self) -> Any:
        """End the run without answering the interrupt."""
        ...


def _error_detail(response: httpx.Response) -> str:
    """Extract the server's error text so callers can classify it."""
    try:
        body = response.json()
    except ValueError:
        return response.text

    if isinstance(body, dict):
        detail = body.get("detail") or body.get("message") or body.get("error")
        if detail:
            return detail if isinstance(detail, str) else str(detail)
    return response.text


class LangGraphResumeClient:
    """
    Resume transport for runs hosted on a LangGraph deployment.

    Example:
        ```python
        client = LangGraphResumeClient(
            thread_id="5f0c...",
            assistant_id="agent",
            api_url="http://localhost:2024",
        )
        await client.resume([{"type": "accept", "args": None}])
        ```
    """

    def __init__(
        self,
        thread_id: str,
        *,
        assistant_id: Optional[str] = None,
        api_url: Optional[str] = None,
        api_key: Optional[str] = None,
        user_token: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            thread_id: Thread holding the paused run
            assistant_id: Assistant that continues the run, defaults to
                          AGENT_INBOX_ASSISTANT_ID
            api_url: Deployment URL, defaults to LANGGRAPH_API_URL
            api_key: LangSmith API key used when no user token is given
            user_token: User access token, preferred over the API key
            timeout: Request timeout in seconds, defaults to AGENT_INBOX_RESUME_TIMEOUT
            transport: Optional httpx transport, mainly for tests
        """
        self.thread_id = thread_id
        self.assistant_id = assistant_id or config.ASSISTANT_ID
        self.api_url = api_url or config.LANGGRAPH_API_URL
        self.api_key = api_key if api_key is not None else config.LANGSMITH_API_KEY
        self.user_token = user_token
        self.timeout = timeout if timeout is not None else config.RESUME_TIMEOUT
        self._transport = transport

        if not self.api_url:
            raise ConfigurationError("LangGraph API URL not configured")
        if not self.assistant_id:
            raise ConfigurationError(
                "Assistant ID not configured",
                context={"setting": "AGENT_INBOX_ASSISTANT_ID"},
            )

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}

        # Prefer user token when provided; otherwise fall back to the API key
        if self.user_token:
            headers["Authorization"] = f"Bearer {self.user_token}"
            headers["x-supabase-access-token"] = self.user_token
        elif self.api_key:
            headers["x-auth-scheme"] = "langsmith"
            headers["x-api-key"] = self.api_key
        return headers

    async def _create_run(self, command: Dict[str, Any]) -> Any:
        url = f"{self.api_url.rstrip('/')}/threads/{self.thread_id}/runs/wait"
        body = {"assistant_id": self.assistant_id, "command": command}

        logger.debug("[resume] POST %s command=%s", url, list(command.keys()))

        async with httpx.AsyncClient(transport=self._transport, timeout=self.timeout) as client:
            try:
                response = await client.post(url, json=body, headers=self._headers())
            except httpx.HTTPError as e:
                logger.error("[resume] Request to %s failed: %s", url, e)
                raise ResumeTransportError(
                    f"LangGraph API request failed: {e}",
                    context={"thread_id": self.thread_id},
                ) from e

        if response.is_error:
            detail = _error_detail(response)
            logger.error(
                "[resume] Run on thread %s rejected with status %s: %s",
                self.thread_id,
                response.status_code,
                detail,
            )
            raise ResumeTransportError(
                f"LangGraph API request failed ({response.status_code}): {detail}",
                status_code=response.status_code,
                context={"thread_id": self.thread_id},
            )

        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            logger.warning("[resume] Could not parse JSON response from %s", url)
            return None

    async def resume(self, payload: List[HumanResponse]) -> Any:
        return await self._create_run({"resume": payload})

    async def resolve(self) -> Any:
        return await self._create_run({"goto": END})


class GraphResumeTransport:
    """
    Resume transport for a compiled LangGraph graph running in this process.

    Args:
        graph: Compiled graph with a checkpointer
        config: Runnable config identifying the paused thread, e.g.
                ``{"configurable": {"thread_id": "..."}}``
    """

    def __init__(self, graph: Any, config: Dict[str, Any]):
        self.graph = graph
        self.config = config

    async def resume(self, payload: List[HumanResponse]) -> Any:
        logger.info(
            "[resume] Resuming in-process graph with %s",
            [entry["type"] for entry in payload],
        )
        return await self.graph.ainvoke(Command(resume=payload), self.config)

    async def resolve(self) -> Any:
        logger.info("[resume] Ending in-process graph run")
        return await self.graph.ainvoke(Command(goto=END), self.config)
