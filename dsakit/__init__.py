"""Classic data structures and algorithms in plain Python."""

__version__ = "0.1.0"

__all__ = [
    "searching",
    "sorting",
    "array_problems",
    "expressions",
    "structures",
    "hashing",
    "linked_lists",
    "binary_tree",
    "trie",
    "graphs",
    "disjoint_set",
    "spanning_tree",
]