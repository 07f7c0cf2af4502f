# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Stack trace selection for a thread: pure functions, no I/O.

Precedence (first match wins):
    1. Thread-correlated exception value (LAST match in the group):
       raw_stacktrace if prefer_raw and present, else stacktrace.
       The result may be None. Thread-level traces are NOT consulted once
       a correlated exception value exists.
    2. thread.raw_stacktrace if prefer_raw and present.
    3. thread.stacktrace if present.
    4. None.

Public API:
    locate_thread_exception           : Exception group of the event, if any.
    find_last_thread_exception_value  : Last value correlated to the thread.
    select_thread_stacktrace          : Apply the precedence above.
"""

from __future__ import annotations

import logging

from omnithreads.nodes.node_thread_summary_compute.models.model_event import (
    ModelEvent,
    ModelExceptionGroup,
    ModelExceptionValue,
    ModelStacktrace,
    ModelThread,
)

logger = logging.getLogger(__name__)


def locate_thread_exception(
    thread: ModelThread,
    event: ModelEvent,
) -> ModelExceptionGroup | None:
    """Return the exception group to search for the thread, if the event has one.

    An event holds at most one exception group, so this is an accessor.
    Correlation by thread ID happens in find_last_thread_exception_value.

    Args:
        thread: Thread being summarized.
        event: Event the thread belongs to.

    Returns:
        The event's exception group, or None.
    """
    return event.exception


def find_last_thread_exception_value(
    thread: ModelThread,
    group: ModelExceptionGroup,
) -> ModelExceptionValue | None:
    """Return the last exception value whose thread_id equals thread.id.

    Scans the values from the end so the last match in event order wins.

    Args:
        thread: Thread being summarized.
        group: Exception group to search.

    Returns:
        The last correlated value, or None if no value matches.
    """
    matches = [value for value in group.values if value.thread_id == thread.id]
    if not matches:
        return None
    if len(matches) > 1:
        logger.warning(
            "Exception group has %d values for thread %d; using the last one",
            len(matches),
            thread.id,
        )
    return matches[-1]


def select_thread_stacktrace(
    thread: ModelThread,
    event: ModelEvent,
    prefer_raw: bool,
) -> ModelStacktrace | None:
    """Pick the stack trace that describes the thread.

    Args:
        thread: Thread being summarized.
        event: Event the thread belongs to.
        prefer_raw: Prefer unprocessed traces over processed ones.

    Returns:
        The selected stack trace, or None when nothing applies.
    """
    group = locate_thread_exception(thread, event)
    if group is not None:
        value = find_last_thread_exception_value(thread, group)
        if value is not None:
            if prefer_raw and value.raw_stacktrace is not None:
                logger.debug("Thread %d: exception raw_stacktrace", thread.id)
                return value.raw_stacktrace
            # No fallback to thread traces, even when this is None
            logger.debug(
                "Thread %d: exception stacktrace (present=%s)",
                thread.id,
                value.stacktrace is not None,
            )
            return value.stacktrace

    if prefer_raw and thread.raw_stacktrace is not None:
        logger.debug("Thread %d: thread raw_stacktrace", thread.id)
        return thread.raw_stacktrace

    if thread.stacktrace is not None:
        logger.debug("Thread %d: thread stacktrace", thread.id)
        return thread.stacktrace

    logger.debug("Thread %d: no stack trace available", thread.id)
    return None


__all__ = [
    "find_last_thread_exception_value",
    "locate_thread_exception",
    "select_thread_stacktrace",
]
