from __future__ import annotations
from typing import Any, List, Mapping, Sequence, Tuple, Union

from .types import Message, NormalizedMessage, USER_ROLE, MODEL_ROLE

HistoryItem = Union[Message, Mapping[str, Any]]


def _role_and_content(item: HistoryItem) -> Tuple[str, str]:
    if isinstance(item, Mapping):
        return str(item["role"]), str(item["content"])
    return item.role, item.content


def normalize_history(history: Sequence[HistoryItem]) -> List[NormalizedMessage]:
    """Drop everything before the first user turn and relabel the rest.

    Gemini rejects a chat whose first turn is not user-authored, so leading
    assistant turns are discarded. Non-user roles become "model".
    """
    turns = [_role_and_content(item) for item in history]
    first_user = next((i for i, (role, _) in enumerate(turns) if role == USER_ROLE), None)
    if first_user is None:
        return []

    return [
        NormalizedMessage(role=USER_ROLE if role == USER_ROLE else MODEL_ROLE, content=content)
        for role, content in turns[first_user:]
    ]
