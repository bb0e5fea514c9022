# SPDX-License-Identifier: MIT
# Copyright (c) 2026 LlamaIndex Inc.

from __future__ import annotations

from typing import Any


class LRUCacheError(Exception):
    """Base class for errors raised by the lrucache package."""


class InvalidCapacityError(LRUCacheError, ValueError):
    """Raised when a cache is constructed with a capacity below one."""

    def __init__(self, capacity: Any) -> None:
        self.capacity = capacity
        super().__init__(f"Capacity must be a positive integer, got {capacity!r}")
