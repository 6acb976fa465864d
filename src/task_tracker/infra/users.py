from __future__ import annotations
from typing import Iterable, Set


class StaticUserDirectory:
    def __init__(self, active_ids: Iterable[int] = ()):
        self._active: Set[int] = set(active_ids)

    def is_active(self, user_id: int) -> bool:
        return user_id in self._active

    def activate(self, user_id: int) -> None:
        self._active.add(user_id)

    def deactivate(self, user_id: int) -> None:
        self._active.discard(user_id)
