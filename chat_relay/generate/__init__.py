# Generator package

# Makes generate/ importable and exposes key interfaces.

from .generator import ResponseGenerator
from .history import normalize_history
from .errors import HIGH_TRAFFIC_MESSAGE, SYSTEM_ERROR_MESSAGE, is_transient
from .types import Message, NormalizedMessage, ModelParams
from .clients.echo_dev_client import EchoDevClient

__all__ = [
    "ResponseGenerator",
    "normalize_history",
    "is_transient",
    "HIGH_TRAFFIC_MESSAGE",
    "SYSTEM_ERROR_MESSAGE",
    "Message",
    "NormalizedMessage",
    "ModelParams",
    "EchoDevClient",
]
