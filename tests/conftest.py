"""
Pytest configuration and fixtures for omnithreads tests.

Shared test fixtures for thread summary compute node tests.
"""

from uuid import UUID

import pytest

from omnithreads.nodes.node_thread_summary_compute.models import (
    ModelEvent,
    ModelExceptionGroup,
    ModelExceptionValue,
    ModelFrame,
    ModelStacktrace,
    ModelThread,
)

# =========================================================================
# Basic Sample Data Fixtures
# =========================================================================


@pytest.fixture
def correlation_id() -> UUID:
    """Provide a valid UUID test correlation ID for distributed tracing."""
    return UUID("550e8400-e29b-41d4-a716-446655440000")


@pytest.fixture
def worker_stacktrace() -> ModelStacktrace:
    """Processed trace whose innermost frame is an application helper."""
    return ModelStacktrace(
        frames=[
            ModelFrame(function="main"),
            ModelFrame(function="helper", filename="/app/src/worker.py"),
        ]
    )


@pytest.fixture
def raw_worker_stacktrace() -> ModelStacktrace:
    """Unprocessed counterpart of worker_stacktrace."""
    return ModelStacktrace(
        frames=[
            ModelFrame(package="/usr/lib/libc.so"),
            ModelFrame(package="/opt/app/bin/worker", filename="worker.c"),
        ]
    )


@pytest.fixture
def crashed_event(
    worker_stacktrace: ModelStacktrace,
    raw_worker_stacktrace: ModelStacktrace,
) -> ModelEvent:
    """Event with a crashed thread correlated to an exception and an idle thread."""
    exception_trace = ModelStacktrace(
        frames=[
            ModelFrame(function="run", filename="/app/src/main.py", in_app=True),
            ModelFrame(function="raise_error", filename="/app/src/errors.py", in_app=True),
            ModelFrame(function="__call__", module="lib.wrapper", in_app=False),
        ]
    )
    return ModelEvent(
        event_id="evt-001",
        exception=ModelExceptionGroup(
            values=[
                ModelExceptionValue(
                    type="ValueError",
                    value="bad input",
                    thread_id=2,
                    stacktrace=exception_trace,
                ),
            ]
        ),
        threads=[
            ModelThread(
                id=1,
                name="main",
                current=True,
                stacktrace=worker_stacktrace,
                raw_stacktrace=raw_worker_stacktrace,
            ),
            ModelThread(id=2, name="worker-1", crashed=True),
            ModelThread(id=3),
        ],
    )
