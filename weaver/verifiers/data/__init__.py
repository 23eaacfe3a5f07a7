from .dictionary import (
    Dictionary,
    load_dictionary,
    wildcard_patterns,
    build_pattern_index,
    WILDCARD,
)

__all__ = [
    "Dictionary",
    "load_dictionary",
    "wildcard_patterns",
    "build_pattern_index",
    "WILDCARD",
]
