"""Core data structures: priority queue, graph representations, interop."""
