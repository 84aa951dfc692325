"""Cross-module type aliases."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, TypeAlias

Task: TypeAlias = Callable[[], None]


class Hasher(Protocol):
    """Streaming hash object as returned by the ``hashlib`` constructors."""

    def update(self, data: bytes, /) -> None: ...

    def hexdigest(self) -> str: ...
