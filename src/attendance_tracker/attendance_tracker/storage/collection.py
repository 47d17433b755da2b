from __future__ import annotations

import json
import logging
from typing import Callable, Generic, List, Mapping, Optional, Tuple, TypeVar

from ..core.exceptions import StorageUnavailableError
from .base import KeyValueStorage

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Collection(Generic[T]):
    """One persisted table: a full JSON array stored under a single key.

    Reads and writes always cover the whole collection. When the medium is
    missing or unreachable, reads return an empty list and writes are
    skipped; neither raises.

    Items that cannot be decoded are left out of reads, and while the stored
    blob holds any such item writes are refused so it is never overwritten.
    """

    def __init__(
        self,
        storage: Optional[KeyValueStorage],
        key: str,
        *,
        decode: Callable[[Mapping], T],
        encode: Callable[[T], dict],
        default_factory: Optional[Callable[[], List[T]]] = None,
    ):
        self._storage = storage
        self._key = key
        self._decode = decode
        self._encode = encode
        self._default_factory = default_factory

    @property
    def key(self) -> str:
        return self._key

    def _decode_blob(self, raw: str) -> Tuple[List[T], int]:
        """Decoded items plus the number of entries that had to be skipped."""
        try:
            items = json.loads(raw)
        except ValueError as e:
            logger.warning("Unreadable %s collection: %s", self._key, e)
            return [], 1
        if not isinstance(items, list):
            logger.warning("Unreadable %s collection: expected a JSON array", self._key)
            return [], 1

        out: List[T] = []
        bad = 0
        for i, item in enumerate(items):
            try:
                out.append(self._decode(item))
            except (ValueError, KeyError, TypeError) as e:
                logger.warning("Skipping unreadable %s entry %d: %s", self._key, i, e)
                bad += 1
        return out, bad

    def load(self) -> List[T]:
        if self._storage is None:
            return []
        try:
            raw = self._storage.get(self._key)
        except StorageUnavailableError as e:
            logger.warning("Storage unavailable while reading %s: %s", self._key, e)
            return []

        if raw is None:
            return list(self._default_factory()) if self._default_factory else []
        items, _ = self._decode_blob(raw)
        return items

    def save(self, items: List[T]) -> None:
        if self._storage is None:
            logger.debug("No storage configured; skipping write of %s", self._key)
            return
        payload = json.dumps([self._encode(item) for item in items], ensure_ascii=False)
        try:
            raw = self._storage.get(self._key)
            if raw is not None and self._decode_blob(raw)[1]:
                logger.warning("Refusing to overwrite %s: stored collection has unreadable entries", self._key)
                return
            self._storage.set(self._key, payload)
        except StorageUnavailableError as e:
            logger.warning("Storage unavailable while writing %s: %s", self._key, e)

    def clear(self) -> None:
        if self._storage is None:
            return
        try:
            self._storage.remove(self._key)
        except StorageUnavailableError as e:
            logger.warning("Storage unavailable while clearing %s: %s", self._key, e)
