# SPDX-License-Identifier: MIT
# Copyright (c) 2026 LlamaIndex Inc.

from __future__ import annotations

from .cache import Cache, CacheStats, LRUCache
from .config import CacheConfig
from .errors import InvalidCapacityError, LRUCacheError

__all__ = [
    "Cache",
    "CacheConfig",
    "CacheStats",
    "InvalidCapacityError",
    "LRUCache",
    "LRUCacheError",
    "main",
]


def main() -> None:
    """Console script entry point."""
    from .cli import cli

    cli()
