"""API routes."""

from .chat import create_chat_router

__all__ = ["create_chat_router"]
