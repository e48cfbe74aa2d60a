"""
Single Sentry integration surface for the agent inbox.
Call init_sentry() once from the host process. Use get_logger(__name__) elsewhere.
"""


from .sentry import init_sentry

# Initialise Sentry once when the agent_inbox package is imported by the host
try:
    init_sentry()
except Exception:
    # Never break app startup due to Sentry init
    pass

from .inbox import InterruptSession, ResolvedResponses, resolve_responses  # noqa: E402
from .services import GraphResumeTransport, LangGraphResumeClient  # noqa: E402

__all__ = [
    "init_sentry",
    "InterruptSession",
    "ResolvedResponses",
    "resolve_responses",
    "GraphResumeTransport",
    "LangGraphResumeClient",
]
