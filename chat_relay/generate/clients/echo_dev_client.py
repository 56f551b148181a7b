# Dummy model client for local dev and testing without API calls.

from dataclasses import dataclass
from typing import List, Optional
from ..types import ModelParams, NormalizedMessage


@dataclass
class EchoReply:
    text: str


class EchoSession:
    def __init__(self, history: List[NormalizedMessage], params: ModelParams):
        self.history = history
        self.params = params

    async def send(self, text: str) -> EchoReply:
        return EchoReply(text=f"[ECHO RESPONSE]\n{text or '(no user input)'}")


class EchoDevClient:
    def __init__(self):
        self.model = "echo-dev"
        # most recent session only, for inspection in dev/tests
        self.last_session: Optional[EchoSession] = None

    async def open_session(self, history: List[NormalizedMessage], params: ModelParams) -> EchoSession:
        session = EchoSession(history, params)
        self.last_session = session
        return session
