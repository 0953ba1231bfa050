"""
Chat message DTO.

A `Message` is immutable once built. ``role`` defaults to ``"user"``;
``content`` is optional because streamed deltas frequently carry only a role
announcement or nothing at all.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class Message(BaseModel):
    """A single chat turn as sent to and received from the chat endpoint."""

    model_config = ConfigDict(frozen=True)

    role: str = "user"
    content: Optional[str] = None


__all__ = ["Message"]
