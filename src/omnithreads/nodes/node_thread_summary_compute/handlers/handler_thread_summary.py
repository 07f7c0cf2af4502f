# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Pure compute handlers for thread summarization.

All functions are pure (no I/O, no side effects) and safe to call
concurrently. Failure is modelled as absence: a thread without a usable
trace gets the sentinel label and no filename. Nothing here raises for
well-typed input.

Pipeline:
    select_thread_stacktrace -> find_relevant_frame -> label/filename

Label precedence (first non-empty wins):
    function -> trim_package(package) -> module -> "<unknown>"

Public API:
    summarize_thread               : ThreadInfo for one thread.
    find_best_thread               : Crashed, then current, then first thread.
    summarize_event_threads        : Selector options for every thread.
    handle_thread_summary_compute  : Node entry point.
"""

from __future__ import annotations

import logging

from omnithreads.nodes.node_thread_summary_compute.handlers.handler_relevant_frame import (
    find_relevant_frame,
)
from omnithreads.nodes.node_thread_summary_compute.handlers.handler_stacktrace import (
    select_thread_stacktrace,
)
from omnithreads.nodes.node_thread_summary_compute.handlers.handler_trim import (
    trim_filename,
    trim_package,
)
from omnithreads.nodes.node_thread_summary_compute.models.model_event import (
    ModelEvent,
    ModelFrame,
    ModelThread,
)
from omnithreads.nodes.node_thread_summary_compute.models.model_summary_config import (
    ModelThreadSummaryConfig,
)
from omnithreads.nodes.node_thread_summary_compute.models.model_thread_summary import (
    NOT_FOUND_FRAME,
    ModelThreadInfo,
    ModelThreadOption,
    ModelThreadSummaryInput,
    ModelThreadSummaryOutput,
)

logger = logging.getLogger(__name__)


def _frame_label(frame: ModelFrame) -> str:
    """Resolve the display label of a frame, falling back to the sentinel."""
    candidates: list[str | None] = [
        frame.function,
        trim_package(frame.package) if frame.package is not None else None,
        frame.module,
    ]
    for candidate in candidates:
        if candidate:
            return candidate
    return NOT_FOUND_FRAME


def summarize_thread(
    thread: ModelThread,
    event: ModelEvent,
    prefer_raw: bool,
) -> ModelThreadInfo:
    """Derive the display label and filename for a thread.

    Args:
        thread: Thread to summarize.
        event: Event the thread belongs to.
        prefer_raw: Prefer unprocessed traces over processed ones.

    Returns:
        Frozen ModelThreadInfo. The label is never empty; filename is None
        when the relevant frame has none.
    """
    stacktrace = select_thread_stacktrace(thread, event, prefer_raw)
    if stacktrace is None or not stacktrace.frames:
        logger.debug("Thread %d: no frames, using sentinel label", thread.id)
        return ModelThreadInfo(label=NOT_FOUND_FRAME)

    frame = find_relevant_frame(stacktrace)

    filename: str | None = None
    if frame.filename is not None:
        filename = trim_filename(frame.filename) or None

    return ModelThreadInfo(label=_frame_label(frame), filename=filename)


def find_best_thread(event: ModelEvent) -> ModelThread | None:
    """Return the thread to show first: crashed, then current, then first."""
    for thread in event.threads:
        if thread.crashed:
            return thread
    for thread in event.threads:
        if thread.current:
            return thread
    return event.threads[0] if event.threads else None


def summarize_event_threads(
    event: ModelEvent,
    prefer_raw: bool,
) -> list[ModelThreadOption]:
    """Summarize every thread of the event, preserving event order."""
    options: list[ModelThreadOption] = []
    for thread in event.threads:
        info = summarize_thread(thread, event, prefer_raw)
        options.append(
            ModelThreadOption(
                thread_id=thread.id,
                name=thread.name,
                crashed=thread.crashed,
                current=thread.current,
                label=info.label,
                filename=info.filename,
            )
        )
    return options


def handle_thread_summary_compute(
    input_data: ModelThreadSummaryInput,
    config: ModelThreadSummaryConfig,
) -> ModelThreadSummaryOutput:
    """Summarize the requested (or best) thread of an event.

    Args:
        input_data: Frozen request with the event and optional thread selection.
        config: Node configuration supplying the default raw preference.

    Returns:
        Frozen ModelThreadSummaryOutput. An unknown thread_id, or an event
        without threads, yields selected_thread_id=None and the sentinel label.
    """
    event = input_data.event
    prefer_raw = (
        input_data.prefer_raw
        if input_data.prefer_raw is not None
        else config.prefer_raw_stacktrace
    )

    if input_data.thread_id is not None:
        thread = next(
            (t for t in event.threads if t.id == input_data.thread_id), None
        )
        if thread is None:
            logger.debug(
                "Thread %d not found in event %s",
                input_data.thread_id,
                event.event_id,
            )
    else:
        thread = find_best_thread(event)

    options = summarize_event_threads(event, prefer_raw)
    selected = (
        next((o for o in options if o.thread_id == thread.id), None)
        if thread is not None
        else None
    )
    thread_info = (
        ModelThreadInfo(label=selected.label, filename=selected.filename)
        if selected is not None
        else ModelThreadInfo(label=NOT_FOUND_FRAME)
    )

    return ModelThreadSummaryOutput(
        selected_thread_id=selected.thread_id if selected is not None else None,
        thread_info=thread_info,
        options=options,
        prefer_raw=prefer_raw,
        correlation_id=input_data.correlation_id,
    )


__all__ = [
    "find_best_thread",
    "handle_thread_summary_compute",
    "summarize_event_threads",
    "summarize_thread",
]
