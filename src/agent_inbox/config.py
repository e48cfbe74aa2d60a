import logging

from starlette.config import Config

env = Config()
logger = logging.getLogger(__name__)

# LangGraph deployment hosting the paused runs
LANGGRAPH_API_URL = env("LANGGRAPH_API_URL", cast=str, default="http://localhost:2024")
LANGSMITH_API_KEY = env("LANGSMITH_API_KEY", cast=str, default="")

# Assistant used when resuming a run; the server rejects unknown IDs
ASSISTANT_ID = env("AGENT_INBOX_ASSISTANT_ID", cast=str, default="")

# Seconds before the resume transport gives up on the remote call
RESUME_TIMEOUT = env("AGENT_INBOX_RESUME_TIMEOUT", cast=float, default=30.0)

# How long user-facing notices stay visible
NOTICE_DURATION_MS = env("AGENT_INBOX_NOTICE_DURATION_MS", cast=int, default=5000)

if not ASSISTANT_ID:
    logger.debug("AGENT_INBOX_ASSISTANT_ID not set, resume clients must be given an assistant_id")
