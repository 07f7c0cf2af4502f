# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Thread Summary Compute Handlers.

Pure handler functions that turn an error event's threads into short
display summaries. Nodes delegate to these side-effect-free functions.

Pipeline Flow:
    1. Exception lookup (locate_thread_exception)
    2. Trace selection (select_thread_stacktrace)
    3. Frame ranking (find_relevant_frame)
    4. Label/filename derivation (summarize_thread)

Usage:
    from omnithreads.nodes.node_thread_summary_compute.handlers import (
        summarize_thread,
    )

    info = summarize_thread(thread, event, prefer_raw=False)
    info.label, info.filename
"""

from omnithreads.nodes.node_thread_summary_compute.handlers.exceptions import (
    ThreadSummaryValidationError,
)
from omnithreads.nodes.node_thread_summary_compute.handlers.handler_relevant_frame import (
    find_relevant_frame,
)
from omnithreads.nodes.node_thread_summary_compute.handlers.handler_stacktrace import (
    find_last_thread_exception_value,
    locate_thread_exception,
    select_thread_stacktrace,
)
from omnithreads.nodes.node_thread_summary_compute.handlers.handler_thread_summary import (
    find_best_thread,
    handle_thread_summary_compute,
    summarize_event_threads,
    summarize_thread,
)
from omnithreads.nodes.node_thread_summary_compute.handlers.handler_trim import (
    trim_filename,
    trim_package,
)

__all__ = [
    "ThreadSummaryValidationError",
    "find_best_thread",
    "find_last_thread_exception_value",
    "find_relevant_frame",
    "handle_thread_summary_compute",
    "locate_thread_exception",
    "select_thread_stacktrace",
    "summarize_event_threads",
    "summarize_thread",
    "trim_filename",
    "trim_package",
]
