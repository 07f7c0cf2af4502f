# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Thread Summary Compute Node."""

from omnithreads.nodes.node_thread_summary_compute.node import (
    NodeThreadSummaryCompute,
)

__all__ = ["NodeThreadSummaryCompute"]
