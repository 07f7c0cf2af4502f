# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Relevant frame selection: pure functions, no I/O.

Frames are ordered oldest call first, so scans run from the end and the
innermost candidate wins every tie.

RANKING (first rule with a hit wins):
    1. Trace has no system frames -> innermost frame
    2. Innermost frame with in_app=True
    3. Innermost frame with any identifying attribute
       (function, package, module or filename)
    4. Innermost frame

Total over non-empty traces: one of the frames is always returned.
"""

from __future__ import annotations

import logging

from omnithreads.nodes.node_thread_summary_compute.handlers.exceptions import (
    ThreadSummaryValidationError,
)
from omnithreads.nodes.node_thread_summary_compute.models.model_event import (
    ModelFrame,
    ModelStacktrace,
)

logger = logging.getLogger(__name__)


def find_relevant_frame(stacktrace: ModelStacktrace) -> ModelFrame:
    """Return the frame that best describes where the thread was.

    Args:
        stacktrace: Non-empty stack trace, innermost frame last.

    Returns:
        A frame taken from stacktrace.frames.

    Raises:
        ThreadSummaryValidationError: If the trace has no frames.
    """
    frames = stacktrace.frames
    if not frames:
        raise ThreadSummaryValidationError(
            "Cannot pick a relevant frame from an empty stack trace"
        )

    innermost = frames[-1]
    if not stacktrace.has_system_frames:
        logger.debug("Relevant frame: innermost (no system frames)")
        return innermost

    for frame in reversed(frames):
        if frame.in_app is True:
            logger.debug("Relevant frame: innermost in-app frame")
            return frame

    for frame in reversed(frames):
        if frame.is_identifiable:
            logger.debug("Relevant frame: innermost identifiable frame")
            return frame

    logger.debug("Relevant frame: innermost (no identifiable frames)")
    return innermost


__all__ = ["find_relevant_frame"]
