"""Classic search, graph, puzzle and sorting algorithms with command-line front ends."""

__version__ = "0.1.0"

__all__ = [
    "chatbot",
    "mst",
    "nqueens",
    "puzzle",
    "shortest_path",
    "sorting",
    "traversal",
]