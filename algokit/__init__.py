"""Classic algorithms and small data structures: sorting, searching, arrays,
numbers, text, trees, queues, graphs, billing and employee records."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "benchmark",
    "billing",
    "bst",
    "buffer",
    "circular",
    "deque",
    "employees",
    "graphs",
    "numeric",
    "searching",
    "sorting",
    "text",
]