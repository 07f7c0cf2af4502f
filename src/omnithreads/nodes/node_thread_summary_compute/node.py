# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Thread Summary Compute Node: thin shell delegating to handler.

Summarizes the threads of an error event into short display labels
(function, package or module of the most relevant frame) plus a trimmed
source filename. Used by thread lists and selectors.

Summarization is total: it never raises for well-typed input.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from omnibase_core.nodes.node_compute import NodeCompute

from omnithreads.nodes.node_thread_summary_compute.handlers import (
    handle_thread_summary_compute,
)
from omnithreads.nodes.node_thread_summary_compute.models import (
    ModelThreadSummaryConfig,
    ModelThreadSummaryInput,
    ModelThreadSummaryOutput,
    ThreadSummarySettings,
)

if TYPE_CHECKING:
    from omnibase_core.models.container.model_onex_container import ModelONEXContainer


class NodeThreadSummaryCompute(
    NodeCompute[ModelThreadSummaryInput, ModelThreadSummaryOutput]
):
    """Pure compute node for crash-thread summarization.

    The default raw/processed trace preference is loaded from environment
    via ThreadSummarySettings.

    This node is a thin shell following the ONEX declarative pattern.
    All computation logic is delegated to the handler function.
    """

    def __init__(self, container: ModelONEXContainer) -> None:
        """Initialise with the trace preference from environment.

        Args:
            container: ONEX container with node configuration.
        """
        super().__init__(container)
        settings = ThreadSummarySettings()
        self._summary_config: ModelThreadSummaryConfig = settings.to_config()

    @property
    def summary_config(self) -> ModelThreadSummaryConfig:
        """Thread summary configuration in effect for this node."""
        return self._summary_config

    async def compute(
        self, input_data: ModelThreadSummaryInput
    ) -> ModelThreadSummaryOutput:
        """Summarize threads by delegating to handler function."""
        return handle_thread_summary_compute(input_data, self._summary_config)


__all__ = ["NodeThreadSummaryCompute"]
