from __future__ import annotations

from typing import Optional, Protocol


class KeyValueStorage(Protocol):
    """Medium holding one string blob per key (local-storage semantics).

    Implementations raise ``StorageUnavailableError`` when the medium cannot
    be reached; callers decide how to degrade.
    """

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def remove(self, key: str) -> None:
        ...
