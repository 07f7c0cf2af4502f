# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Models for the thread summary compute node.

Exports:
    ModelEvent, ModelThread, ModelExceptionGroup, ModelExceptionValue,
    ModelStacktrace, ModelFrame: Frozen event records (input data).
    ModelThreadInfo: Frozen label/filename summary of one thread.
    ModelThreadOption: Frozen per-thread entry for a thread selector.
    ModelThreadSummaryInput / ModelThreadSummaryOutput: Node contract.
    ModelThreadSummaryConfig: Frozen node configuration.
    ThreadSummarySettings: Pydantic Settings for environment-driven configuration.
    NOT_FOUND_FRAME: Sentinel label.
"""

from omnithreads.nodes.node_thread_summary_compute.models.model_event import (
    ModelEvent,
    ModelExceptionGroup,
    ModelExceptionValue,
    ModelFrame,
    ModelStacktrace,
    ModelThread,
)
from omnithreads.nodes.node_thread_summary_compute.models.model_summary_config import (
    ModelThreadSummaryConfig,
    ThreadSummarySettings,
)
from omnithreads.nodes.node_thread_summary_compute.models.model_thread_summary import (
    NOT_FOUND_FRAME,
    ModelThreadInfo,
    ModelThreadOption,
    ModelThreadSummaryInput,
    ModelThreadSummaryOutput,
)

__all__ = [
    "NOT_FOUND_FRAME",
    "ModelEvent",
    "ModelExceptionGroup",
    "ModelExceptionValue",
    "ModelFrame",
    "ModelStacktrace",
    "ModelThread",
    "ModelThreadInfo",
    "ModelThreadOption",
    "ModelThreadSummaryConfig",
    "ModelThreadSummaryInput",
    "ModelThreadSummaryOutput",
    "ThreadSummarySettings",
]
