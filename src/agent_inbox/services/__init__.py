from .resume import GraphResumeTransport, LangGraphResumeClient, ResumeTransport

__all__ = [
    "GraphResumeTransport",
    "LangGraphResumeClient",
    "ResumeTransport",
]
