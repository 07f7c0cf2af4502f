"""ONEX Thread Nodes.

This module provides lazy imports to allow individual nodes to be imported
without loading all dependencies. Use explicit imports from submodules for
production use.

Example:
    # Recommended - direct import from specific node:
    from omnithreads.nodes.node_thread_summary_compute.node import NodeThreadSummaryCompute

    # For convenience imports (loads dependencies):
    from omnithreads.nodes import NodeThreadSummaryCompute
"""

from typing import TYPE_CHECKING

# Lazy imports for runtime - only loaded when accessed
_lazy_imports = {
    "NodeThreadSummaryCompute": "omnithreads.nodes.node_thread_summary_compute",
}

__all__ = [
    "NodeThreadSummaryCompute",
]


def __getattr__(name: str):
    """Lazy import for module attributes."""
    if name in _lazy_imports:
        import importlib

        module = importlib.import_module(_lazy_imports[name])
        return getattr(module, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


# Type checking imports for IDE support
if TYPE_CHECKING:
    from omnithreads.nodes.node_thread_summary_compute import NodeThreadSummaryCompute
