# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""OmniThreads - ONEX-compliant crash-thread summarization.

This package turns the threads of an error event into short display
summaries: a label taken from the most relevant stack frame and the
trimmed source filename of that frame.

Quick Start:
    >>> from omnithreads import ModelEvent, ModelThread, summarize_thread
    >>> thread = ModelThread(id=1)
    >>> summarize_thread(thread, ModelEvent(threads=[thread]), prefer_raw=False).label
    '<unknown>'
"""

from omnithreads.nodes.node_thread_summary_compute.handlers import (
    ThreadSummaryValidationError,
    find_best_thread,
    summarize_event_threads,
    summarize_thread,
)
from omnithreads.nodes.node_thread_summary_compute.models import (
    NOT_FOUND_FRAME,
    ModelEvent,
    ModelExceptionGroup,
    ModelExceptionValue,
    ModelFrame,
    ModelStacktrace,
    ModelThread,
    ModelThreadInfo,
)

__version__ = "0.1.0"

__all__ = [
    # Constants
    "NOT_FOUND_FRAME",
    # Types
    "ModelEvent",
    "ModelExceptionGroup",
    "ModelExceptionValue",
    "ModelFrame",
    "ModelStacktrace",
    "ModelThread",
    "ModelThreadInfo",
    # Exceptions
    "ThreadSummaryValidationError",
    # Main API
    "find_best_thread",
    "summarize_event_threads",
    "summarize_thread",
]
