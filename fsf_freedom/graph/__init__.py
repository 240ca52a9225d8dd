# ==============================================
# GRAPH: Parsed document as a triple index
# ==============================================
#
# Modules:
# --------
# - index.py → Triple, TripleIndex, RdflibTripleIndex,
#              MemoryTripleIndex, parse_document
#
# ==============================================

from .index import (
    MemoryTripleIndex,
    RdflibTripleIndex,
    Triple,
    TripleIndex,
    is_literal,
    node_value,
    parse_document,
)

__all__ = [
    "MemoryTripleIndex",
    "RdflibTripleIndex",
    "Triple",
    "TripleIndex",
    "is_literal",
    "node_value",
    "parse_document",
]
