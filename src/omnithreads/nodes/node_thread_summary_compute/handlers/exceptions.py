# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Exceptions for thread summary handlers.

Summarization itself never raises: missing traces, empty traces and
unidentifiable frames all resolve to absent fields or the sentinel label.
The only raised error guards a violated precondition of a lower-level
handler called directly.

Error Codes:
    - THREADSUM_001: Input validation failed (non-recoverable)
"""

from __future__ import annotations


class ThreadSummaryValidationError(Exception):
    """Raised when a handler receives input outside its domain.

    Error code: THREADSUM_001 - Input validation failed (non-recoverable).

    Example:
        >>> find_relevant_frame(ModelStacktrace(frames=[]))
        ThreadSummaryValidationError: Cannot pick a relevant frame from an empty stack trace
    """

    pass


__all__ = ["ThreadSummaryValidationError"]
