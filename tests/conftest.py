# topmark:header:start
#
#   project      : Tidings
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the Tidings test suite.

This file sets up shared fixtures and the logging configuration for test runs.

Notes:
    Tests should not touch the process-wide default pipeline unless they
    restore it; the `restore_default_pipeline` fixture does this automatically.
    Prefer building a private `MessagePipeline` with fixed ``stdout``/``stderr``
    streams (see the `pipeline` fixture) so output can be asserted directly.
"""

from __future__ import annotations

import io
from collections.abc import Callable, Iterator
from typing import Any, TypeVar, cast

import pytest

from tidings.catalog import register_builtin_messages
from tidings.config import logging
from tidings.config.color import ColorMode
from tidings.config.model import PipelineConfig
from tidings.pipeline.coordinator import MessagePipeline
from tidings.pipeline.default import set_pipeline
from tidings.registry.renderers import RendererRegistry

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


def fixture(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.fixture`."""
    return as_typed_mark(pytest.fixture(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_tidings_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Also drops color-forcing variables so color auto-detection is predictable.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("TIDINGS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


@pytest.fixture(autouse=True)
def restore_default_pipeline() -> Iterator[None]:
    """Reset the process-wide default pipeline around every test."""
    previous = set_pipeline(None)
    try:
        yield
    finally:
        set_pipeline(previous)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


class Streams:
    """Pair of in-memory streams standing in for stdout and stderr."""

    def __init__(self) -> None:
        self.out = io.StringIO()
        self.err = io.StringIO()

    @property
    def stdout(self) -> str:
        return self.out.getvalue()

    @property
    def stderr(self) -> str:
        return self.err.getvalue()


@pytest.fixture
def streams() -> Streams:
    """Return fresh in-memory stdout/stderr streams."""
    return Streams()


def make_pipeline(
    streams: Streams,
    *,
    config: PipelineConfig | None = None,
    builtin: bool = False,
    **kwargs: Any,
) -> MessagePipeline:
    """Return a private pipeline writing to ``streams`` without color.

    Args:
        streams (Streams): Destination streams.
        config (PipelineConfig | None): Optional settings; color defaults to never.
        builtin (bool): Register the built-in catalog.
        **kwargs (Any): Extra `MessagePipeline` keyword arguments.

    Returns:
        MessagePipeline: The new pipeline.
    """
    renderers: RendererRegistry | None = kwargs.pop("renderers", None)
    if renderers is None:
        renderers = RendererRegistry()
    if builtin:
        register_builtin_messages(renderers)
    return MessagePipeline(
        renderers=renderers,
        config=config if config is not None else PipelineConfig(color_mode=ColorMode.NEVER),
        stdout=streams.out,
        stderr=streams.err,
        **kwargs,
    )


@pytest.fixture
def pipeline(streams: Streams) -> MessagePipeline:
    """Return a private pipeline (empty registry) writing to `streams`."""
    return make_pipeline(streams)
