# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Thread summary configuration.

Only the default raw/processed trace preference is configurable. The
sentinel label and the selection precedence are fixed.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ModelThreadSummaryConfig(BaseModel):
    """Frozen configuration passed to the node at construction.

    Attributes:
        prefer_raw_stacktrace: Default for requests that leave prefer_raw unset.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    prefer_raw_stacktrace: bool = Field(
        default=False,
        description="Prefer unprocessed stack traces when the request does not say",
    )


class ThreadSummarySettings(BaseSettings):
    """Pydantic Settings for thread summarization, loaded from environment.

    Environment variables:
        THREAD_SUMMARY_PREFER_RAW_STACKTRACE: bool (default false)
    """

    model_config = SettingsConfigDict(
        env_prefix="THREAD_SUMMARY_",
        extra="ignore",
    )

    prefer_raw_stacktrace: bool = Field(
        default=False,
        description="Prefer unprocessed stack traces by default",
    )

    def to_config(self) -> ModelThreadSummaryConfig:
        """Convert settings to a frozen ModelThreadSummaryConfig instance."""
        return ModelThreadSummaryConfig(
            prefer_raw_stacktrace=self.prefer_raw_stacktrace,
        )


__all__ = [
    "ModelThreadSummaryConfig",
    "ThreadSummarySettings",
]
