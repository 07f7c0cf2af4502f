# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Frozen input/output models for the thread summary compute node.

Input:  ModelThreadSummaryInput : event plus optional thread selection
Output: ModelThreadSummaryOutput: summary of the selected thread and
        one option entry per thread of the event
"""

from __future__ import annotations

from typing import Final
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from omnithreads.nodes.node_thread_summary_compute.models.model_event import (
    ModelEvent,
)

NOT_FOUND_FRAME: Final[str] = "<unknown>"
"""Sentinel label used when no frame attribute can be resolved."""


class ModelThreadInfo(BaseModel):
    """Display summary of a single thread.

    Attributes:
        label: Function, trimmed package, module or the sentinel label.
            Never empty.
        filename: Trimmed filename of the relevant frame. None when absent,
            never an empty placeholder.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    label: str = Field(default=NOT_FOUND_FRAME, description="Display label")
    filename: str | None = Field(default=None, description="Trimmed filename")


class ModelThreadOption(BaseModel):
    """Summary of one thread as listed in a thread selector."""

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    thread_id: int = Field(..., description="Thread identifier")
    name: str | None = Field(default=None, description="Thread name")
    crashed: bool = Field(default=False, description="Thread raised the error")
    current: bool = Field(default=False, description="Thread was running")
    label: str = Field(default=NOT_FOUND_FRAME, description="Display label")
    filename: str | None = Field(default=None, description="Trimmed filename")

    @property
    def title(self) -> str:
        """Thread heading, e.g. ``#3: worker`` or ``#3``."""
        if self.name is not None:
            return f"#{self.thread_id}: {self.name}"
        return f"#{self.thread_id}"


class ModelThreadSummaryInput(BaseModel):
    """Input for the thread summary compute node.

    Attributes:
        event: The error event to summarize.
        thread_id: Thread to summarize. When None, the best thread is used
            (crashed, then current, then first).
        prefer_raw: Prefer unprocessed traces. When None, the node's
            configured default applies.
        correlation_id: Correlation ID for distributed tracing.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    event: ModelEvent = Field(..., description="Event to summarize")
    thread_id: int | None = Field(default=None, description="Thread to summarize")
    prefer_raw: bool | None = Field(
        default=None, description="Prefer unprocessed stack traces"
    )
    correlation_id: UUID | None = Field(
        default=None, description="Correlation ID for distributed tracing"
    )


class ModelThreadSummaryOutput(BaseModel):
    """Output of the thread summary compute node.

    Attributes:
        selected_thread_id: Thread that was summarized, or None when the
            event has no matching thread.
        thread_info: Summary of the selected thread (sentinel when none).
        options: One entry per event thread, in event order.
        prefer_raw: The raw/processed preference actually applied.
        correlation_id: Echoed from the input.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    selected_thread_id: int | None = Field(
        default=None, description="Thread that was summarized"
    )
    thread_info: ModelThreadInfo = Field(
        default_factory=ModelThreadInfo, description="Summary of the thread"
    )
    options: list[ModelThreadOption] = Field(
        default_factory=list, description="One summary per event thread"
    )
    prefer_raw: bool = Field(..., description="Applied raw/processed preference")
    correlation_id: UUID | None = Field(
        default=None, description="Correlation ID for distributed tracing"
    )


__all__ = [
    "NOT_FOUND_FRAME",
    "ModelThreadInfo",
    "ModelThreadOption",
    "ModelThreadSummaryInput",
    "ModelThreadSummaryOutput",
]
