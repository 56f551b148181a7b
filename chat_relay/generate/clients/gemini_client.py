# Gemini chat client built on the google-genai SDK.
# Exposes open_session(history, params) -> GeminiSession for ResponseGenerator.

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, List, Optional

from google import genai
from google.genai import types

from ..types import ModelParams, NormalizedMessage

DEFAULT_MODEL = "gemini-2.5-flash"


@dataclass
class GeminiReply:
    text: str


class GeminiSession:
    def __init__(self, chat: Any):
        self.chat = chat

    async def send(self, text: str) -> GeminiReply:
        resp = await self.chat.send_message(text)
        return GeminiReply(text=resp.text or "")


class GeminiChatClient:
    def __init__(self, api_key: Optional[str], model: str = DEFAULT_MODEL):
        if not api_key:
            raise RuntimeError("GEMINI_API_KEY not set")
        self.model = model
        self.client = genai.Client(api_key=api_key)

    async def open_session(self, history: List[NormalizedMessage], params: ModelParams) -> GeminiSession:
        contents = [
            types.Content(role=m.role, parts=[types.Part(text=m.content)])
            for m in history
        ]
        chat = self.client.aio.chats.create(
            model=self.model,
            history=contents,
            config=types.GenerateContentConfig(max_output_tokens=params.max_output_tokens),
        )
        return GeminiSession(chat)
