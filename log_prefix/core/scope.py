#  Copyright © 2025 Dr.-Ing. Paul Wilhelm <paul@wilhelm.dev>
#  This file is part of Log Prefix. See LICENSE for details.

import inspect
import logging
from contextlib import contextmanager
from contextvars import ContextVar
from functools import wraps
from typing import Any, AsyncGenerator, Awaitable, Callable, Generator, Iterator, Optional, TypeVar

from log_prefix.config.PrefixSettings import PrefixSettings
from log_prefix.core.LogSink import LogSink, LoggerSink
from log_prefix.core.PrefixScope import PrefixScope

T = TypeVar("T")

# Active frame of the current thread or asyncio task.
_active_scope: ContextVar[Optional[PrefixScope]] = ContextVar("log_prefix_active_scope", default=None)


def current_scope() -> Optional[PrefixScope]:
    """
    Get the active frame.
    :return: Active frame, or None outside of any scope.
    """
    return _active_scope.get()


def current_prefix() -> str:
    """
    Get the active accumulated prefix.
    :return: Prefix, or empty string outside of any scope.
    """
    scope = _active_scope.get()
    return scope.prefix if scope is not None else ""


def default_scope() -> PrefixScope:
    """
    Root frame used when nothing is active: the root standard library logger.
    :return: Root frame.
    """
    return PrefixScope.root(LoggerSink(logging.getLogger()))


@contextmanager
def _activated(scope: Optional[PrefixScope]) -> Iterator[Optional[PrefixScope]]:
    token = _active_scope.set(scope)
    try:
        yield scope
    finally:
        _active_scope.reset(token)


@contextmanager
def run_logging(backend: LogSink, settings: Optional[PrefixSettings] = None) -> Iterator[PrefixScope]:
    """
    Log to `backend` for the extent of the block, starting with an empty prefix.
    :param backend: Log sink.
    :param settings: Segment format for every scope entered inside the block.
    :return: Root frame.
    """
    with _activated(PrefixScope.root(backend, settings)) as scope:
        yield scope


def _entered(label: str, backend: Optional[LogSink] = None) -> PrefixScope:
    parent = _active_scope.get()
    if parent is None:
        parent = PrefixScope.root(backend) if backend is not None else default_scope()
    return parent.enter(label)


@contextmanager
def prefixed(label: str, backend: Optional[LogSink] = None) -> Iterator[PrefixScope]:
    """
    Prefix every log record emitted inside the block with `[label] `, after any enclosing prefixes.
    Inside a generator, a `yield` within the block hands the prefix to the consumer until the next step;
    decorate generator functions with `with_prefix` instead.
    :param label: Label.
    :param backend: Log sink to start from when no scope is active (default: root logger).
    :return: New frame.
    """
    with _activated(_entered(label, backend)) as scope:
        yield scope


def prefix_logs(label: str, block: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """
    Run `block` with `[label] ` prepended to every log record it emits.
    :param label: Label.
    :param block: Callable to run.
    :param args: Positional arguments for `block`.
    :param kwargs: Keyword arguments for `block`.
    :return: Result of `block`.
    """
    with prefixed(label):
        return block(*args, **kwargs)


async def aprefix_logs(label: str, block: Callable[..., Awaitable[T]], *args: Any, **kwargs: Any) -> T:
    """
    Await `block` with `[label] ` prepended to every log record it emits.
    Tasks spawned inside the block inherit the prefix.
    :param label: Label.
    :param block: Coroutine function to await.
    :param args: Positional arguments for `block`.
    :param kwargs: Keyword arguments for `block`.
    :return: Result of `block`.
    """
    with prefixed(label):
        return await block(*args, **kwargs)


def _drive_generator(scope: PrefixScope, gen: Generator) -> Generator:
    """
    Step `gen` with `scope` active, restoring the consumer's scope at every yield.
    """
    value = None
    error = None
    while True:
        try:
            with _activated(scope):
                item = gen.throw(error) if error is not None else gen.send(value)
        except StopIteration as stop:
            return stop.value
        value = None
        error = None
        try:
            value = yield item
        except GeneratorExit:
            with _activated(scope):
                gen.close()
            raise
        except BaseException as e:
            error = e


async def _drive_async_generator(scope: PrefixScope, agen: AsyncGenerator) -> AsyncGenerator:
    value = None
    error = None
    while True:
        try:
            with _activated(scope):
                if error is not None:
                    item = await agen.athrow(error)
                else:
                    item = await agen.asend(value)
        except StopAsyncIteration:
            return
        value = None
        error = None
        try:
            value = yield item
        except GeneratorExit:
            with _activated(scope):
                await agen.aclose()
            raise
        except BaseException as e:
            error = e


def with_prefix(label: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """
    Decorator to run a function, coroutine function or (async) generator function under `[label] `.
    Generators enter the scope when created and hold it only while they run, so the consumer
    never sees the prefix between steps.
    :param label: Label.
    """
    def decorator(func):
        if inspect.isasyncgenfunction(func):
            @wraps(func)
            def async_gen_wrapper(*args, **kwargs):
                return _drive_async_generator(_entered(label), func(*args, **kwargs))
            return async_gen_wrapper

        if inspect.isgeneratorfunction(func):
            @wraps(func)
            def gen_wrapper(*args, **kwargs):
                return _drive_generator(_entered(label), func(*args, **kwargs))
            return gen_wrapper

        if inspect.iscoroutinefunction(func):
            @wraps(func)
            async def async_wrapper(*args, **kwargs):
                return await aprefix_logs(label, func, *args, **kwargs)
            return async_wrapper

        @wraps(func)
        def wrapper(*args, **kwargs):
            return prefix_logs(label, func, *args, **kwargs)
        return wrapper
    return decorator


def bind_scope(func: Callable[..., T]) -> Callable[..., T]:
    """
    Capture the active frame now and run `func` under it later, from any thread.
    Worker threads do not inherit the caller's context, so wrap callables before
    handing them to an executor or `threading.Thread`.
    :param func: Callable.
    :return: Wrapped callable.
    """
    scope = _active_scope.get()

    @wraps(func)
    def wrapper(*args, **kwargs):
        with _activated(scope):
            return func(*args, **kwargs)
    return wrapper
