# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Frozen event records consumed by the thread summary compute node.

These records arrive fully typed from upstream event ingestion. The node
never parses wire payloads itself.

Schema Rules:
    - frozen=True (events are immutable once ingested)
    - extra="forbid" (reject unknown fields)
    - from_attributes=True (pytest-xdist worker compatibility)
    - Optional string fields use None for "absent"; an empty string is a
      present value and is never coerced to absent.

Frame ordering:
    ModelStacktrace.frames is ordered oldest call first, so the innermost
    (most recent) frame is the LAST element.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelFrame(BaseModel):
    """One call-site entry in a stack trace.

    Attributes:
        filename: Source file path of the call site.
        function: Symbol name of the called function.
        package: Library or binary identifier (may be a full path).
        module: Logical module path.
        in_app: True when the frame belongs to application code, False for
            library/runtime code, None when unclassified.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    filename: str | None = Field(default=None, description="Source file path")
    function: str | None = Field(default=None, description="Function symbol name")
    package: str | None = Field(
        default=None, description="Library or binary identifier"
    )
    module: str | None = Field(default=None, description="Logical module path")
    in_app: bool | None = Field(
        default=None, description="Whether the frame is application code"
    )

    @property
    def is_identifiable(self) -> bool:
        """True when at least one identifying attribute is present."""
        return any(
            value is not None
            for value in (self.function, self.package, self.module, self.filename)
        )


class ModelStacktrace(BaseModel):
    """Ordered call-frame sequence, innermost frame last.

    Attributes:
        frames: Frames in call order (oldest first).
        has_system_frames: False when no frame was classified as library or
            runtime code, i.e. every frame is application code.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    frames: list[ModelFrame] = Field(
        default_factory=list, description="Frames, oldest call first"
    )
    has_system_frames: bool = Field(
        default=True,
        description="Whether any frame is library/runtime code",
    )


class ModelThread(BaseModel):
    """One execution thread captured at the time of an error event.

    Attributes:
        id: Thread identifier, unique within the event.
        name: Optional thread name.
        crashed: True for the thread that raised the error.
        current: True for the thread that was running when captured.
        stacktrace: Processed (symbolicated) stack trace.
        raw_stacktrace: Unprocessed stack trace as captured.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    id: int = Field(..., description="Thread identifier, unique within the event")
    name: str | None = Field(default=None, description="Thread name")
    crashed: bool = Field(default=False, description="Thread raised the error")
    current: bool = Field(default=False, description="Thread was running")
    stacktrace: ModelStacktrace | None = Field(
        default=None, description="Processed stack trace"
    )
    raw_stacktrace: ModelStacktrace | None = Field(
        default=None, description="Unprocessed stack trace"
    )


class ModelExceptionValue(BaseModel):
    """A raised error, optionally correlated to the thread that raised it."""

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    type: str | None = Field(default=None, description="Exception type name")
    value: str | None = Field(default=None, description="Exception message")
    thread_id: int | None = Field(
        default=None, description="ID of the thread that raised the exception"
    )
    stacktrace: ModelStacktrace | None = Field(
        default=None, description="Processed stack trace"
    )
    raw_stacktrace: ModelStacktrace | None = Field(
        default=None, description="Unprocessed stack trace"
    )


class ModelExceptionGroup(BaseModel):
    """Ordered container of exception values for one event."""

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    values: list[ModelExceptionValue] = Field(
        default_factory=list, description="Exception values in event order"
    )


class ModelEvent(BaseModel):
    """One error occurrence with its exception group and captured threads."""

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    event_id: str | None = Field(default=None, description="Upstream event ID")
    exception: ModelExceptionGroup | None = Field(
        default=None, description="Exception group, if the event has one"
    )
    threads: list[ModelThread] = Field(
        default_factory=list, description="Captured threads in event order"
    )


__all__ = [
    "ModelEvent",
    "ModelExceptionGroup",
    "ModelExceptionValue",
    "ModelFrame",
    "ModelStacktrace",
    "ModelThread",
]
