# ResponseGenerator: forwards history + a new message to the injected model
# client, retrying rate-limit / unavailable failures with exponential backoff.

from __future__ import annotations
import asyncio
import logging
from pathlib import Path
from typing import Any, Awaitable, Callable, Dict, Optional, Sequence

import yaml

from .errors import HIGH_TRAFFIC_MESSAGE, SYSTEM_ERROR_MESSAGE, describe, transient_status
from .history import HistoryItem, normalize_history
from .types import ModelClient, ModelParams

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "config.yaml"

MAX_RETRIES = 3
BASE_DELAY_MS = 2000
MAX_OUTPUT_TOKENS = 200


class ResponseGenerator:
    def __init__(
        self,
        model_client: ModelClient,
        *,
        max_retries: Optional[int] = None,
        base_delay_ms: Optional[int] = None,
        max_output_tokens: Optional[int] = None,
        config_path: Optional[Path] = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ):
        self.model_client = model_client
        self.config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self.cfg = self._load_config()
        self.max_retries = int(max_retries if max_retries is not None else self.cfg.get("max_retries", MAX_RETRIES))
        if self.max_retries < 0:
            raise ValueError(f"max_retries must be >= 0, got {self.max_retries}")
        self.base_delay_ms = int(base_delay_ms if base_delay_ms is not None else self.cfg.get("base_delay_ms", BASE_DELAY_MS))
        self.max_output_tokens = int(
            max_output_tokens if max_output_tokens is not None else self.cfg.get("max_output_tokens", MAX_OUTPUT_TOKENS)
        )
        self._sleep = sleep

    def _load_config(self) -> Dict[str, Any]:
        if not self.config_path.exists():
            return {}
        with open(self.config_path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    @property
    def total_attempts(self) -> int:
        return self.max_retries + 1

    def backoff_ms(self, attempt: int) -> int:
        """Delay after the given failed attempt (1-based): 2s, 4s, 8s with defaults."""
        return self.base_delay_ms * 2 ** (attempt - 1)

    async def generate(self, history: Sequence[HistoryItem], new_message: str) -> str:
        """Return the model's reply, or a user-facing fallback string. Never raises."""
        try:
            normalized = normalize_history(history)
        except Exception:
            logger.exception("Could not normalize chat history")
            return SYSTEM_ERROR_MESSAGE

        params = ModelParams(max_output_tokens=self.max_output_tokens)

        for attempt in range(1, self.total_attempts + 1):
            try:
                session = await self.model_client.open_session(normalized, params)
                response = await session.send(new_message)
                return response.text
            except Exception as e:
                logger.error("Gemini AI Error (Attempt %d/%d): %s", attempt, self.total_attempts, describe(e))

                try:
                    status = transient_status(e)
                except Exception:
                    status = None
                if status is None:
                    return SYSTEM_ERROR_MESSAGE
                if attempt > self.max_retries:
                    return HIGH_TRAFFIC_MESSAGE

                wait_ms = self.backoff_ms(attempt)
                logger.info("Gemini returned %d. Retrying in %dms...", status, wait_ms)
                await self._sleep(wait_ms / 1000)

        return HIGH_TRAFFIC_MESSAGE
