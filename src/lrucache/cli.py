# SPDX-License-Identifier: MIT
# Copyright (c) 2026 LlamaIndex Inc.
"""CLI entry point for lrucache."""

from __future__ import annotations

import logging
from typing import Optional

import click

from .config import CAPACITY_ENV_VAR, DEFAULT_CAPACITY, CacheConfig
from .errors import InvalidCapacityError

_VALUELESS_OPS = {"size", "len", "keys", "stats"}
_KEYED_OPS = {"get", "del"}

Operation = tuple[str, Optional[str], Optional[str]]


def _parse_op(token: str) -> Operation:
    """Split ``set:KEY=VALUE``, ``get:KEY``, ``del:KEY`` or a bare op name."""
    if token in _VALUELESS_OPS:
        return token, None, None

    name, sep, rest = token.partition(":")
    if not sep or not rest:
        raise click.BadParameter(f"Unrecognized operation {token!r}")
    if name == "set":
        key, eq, value = rest.partition("=")
        if not eq or not key:
            raise click.BadParameter(f"Expected set:KEY=VALUE, got {token!r}")
        return name, key, value
    if name in _KEYED_OPS:
        return name, rest, None
    raise click.BadParameter(f"Unrecognized operation {token!r}")


@click.group()
def cli() -> None:
    """Inspect the behaviour of a fixed-capacity LRU cache."""


@cli.command("run")
@click.option(
    "--capacity",
    "-c",
    type=int,
    envvar=CAPACITY_ENV_VAR,
    default=DEFAULT_CAPACITY,
    show_default=True,
    help="Maximum number of entries held by the cache.",
)
@click.option("--verbose", "-v", is_flag=True, help="Log cache internals to stderr.")
@click.argument("operations", nargs=-1)
def run(capacity: int, verbose: bool, operations: tuple[str, ...]) -> None:
    """Replay OPERATIONS against a fresh cache and print each result.

    Operations are set:KEY=VALUE, get:KEY, del:KEY, size, len, keys and stats.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    parsed = [_parse_op(token) for token in operations]
    try:
        config = CacheConfig(capacity=capacity)
    except InvalidCapacityError as exc:
        raise click.ClickException(str(exc)) from exc

    cache = config.build(
        on_evict=lambda key, _value: click.echo(f"evicted {key}")
    )
    for name, key, value in parsed:
        if name == "set":
            cache.set(key, value)
        elif name == "get":
            hit, found = cache.get(key)
            click.echo(hit if found else "<miss>")
        elif name == "del":
            cache.delete(key)
        elif name == "size":
            click.echo(str(cache.size()))
        elif name == "len":
            click.echo(str(len(cache)))
        elif name == "keys":
            click.echo(" ".join(cache.keys()))
        elif name == "stats":
            click.echo(cache.stats().model_dump_json())
