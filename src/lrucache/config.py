# SPDX-License-Identifier: MIT
# Copyright (c) 2026 LlamaIndex Inc.

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping

from .cache import EvictionCallback, LRUCache
from .errors import InvalidCapacityError

CAPACITY_ENV_VAR = "LRUCACHE_CAPACITY"
DEFAULT_CAPACITY = 128


@dataclass(frozen=True)
class CacheConfig:
    """Settings used to build an :class:`LRUCache`."""

    capacity: int = DEFAULT_CAPACITY

    def __post_init__(self) -> None:
        if isinstance(self.capacity, bool) or not isinstance(self.capacity, int):
            raise TypeError(
                f"Capacity must be an int, got {type(self.capacity).__name__}"
            )
        if self.capacity < 1:
            raise InvalidCapacityError(self.capacity)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> CacheConfig:
        """Read the capacity from ``LRUCACHE_CAPACITY``, falling back to the default."""
        env = os.environ if environ is None else environ
        raw = env.get(CAPACITY_ENV_VAR)
        if raw is None or not raw.strip():
            return cls()
        try:
            capacity = int(raw)
        except ValueError as exc:
            raise InvalidCapacityError(raw) from exc
        return cls(capacity=capacity)

    def build(
        self, on_evict: EvictionCallback[Any, Any] | None = None
    ) -> LRUCache[Any, Any]:
        return LRUCache(self.capacity, on_evict=on_evict)
