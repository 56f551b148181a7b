# Typed dataclasses shared across the generate package.

from __future__ import annotations
from dataclasses import dataclass
from typing import Literal, Protocol, List

USER_ROLE = "user"
MODEL_ROLE = "model"


@dataclass(frozen=True)
class Message:
    """Single chat turn as the caller sees it: user or assistant."""
    role: str
    content: str


@dataclass(frozen=True)
class NormalizedMessage:
    """Chat turn in the provider's shape: user or model."""
    role: Literal["user", "model"]
    content: str


@dataclass
class ModelParams:
    """Generation parameters per chat session."""
    max_output_tokens: int = 200


class ChatReply(Protocol):
    text: str


class ChatSession(Protocol):
    async def send(self, text: str) -> ChatReply: ...


class ModelClient(Protocol):
    model: str

    async def open_session(self, history: List[NormalizedMessage], params: ModelParams) -> ChatSession: ...
