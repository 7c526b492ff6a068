"""
Orchestration services for a chat turn.

These services handle deterministic application logic: choosing a
collaborator and recording what it did.
"""

from .tool_router import ToolRouter
from .chat_orchestrator import ChatOrchestrator

__all__ = ["ToolRouter", "ChatOrchestrator"]
