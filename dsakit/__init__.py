"""Classic data structures and algorithms in plain Python."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "graphs",
    "hashmap",
    "optimization",
    "parking",
    "searching",
    "segment_tree",
    "sorting",
    "subsequences",
    "tasks",
    "trees",
    "windows",
]