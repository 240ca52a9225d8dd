# ==============================================
# Triple Index
# ==============================================
#
# PURPOSE:
#   The only view of the parsed document the extractor needs:
#   "give me the triples matching (subject?, predicate, object?)".
#
# WHY THIS FILE EXISTS:
#   Keeping the extractor behind TripleIndex means it can run
#   against fixture triples without parsing a real document,
#   and the parsing engine (rdflib) stays in one place.
#
# CLASSES:
# --------
# - Triple (NamedTuple)           → (subject, predicate, object)
# - TripleIndex (Protocol)        → triples(), has_predicate(), __len__
# - RdflibTripleIndex             → wraps an rdflib.Graph
# - MemoryTripleIndex             → ordered list of triples
#
# FUNCTION:
# ---------
# - parse_document(data: bytes, format="json-ld") -> RdflibTripleIndex
#     Raises MalformedDocument if the bytes are not a graph.
#
# ==============================================

import logging
from typing import Iterable, Iterator, List, NamedTuple, Optional, Protocol

from rdflib import Graph
from rdflib.term import Literal, Node

from fsf_freedom.errors import MalformedDocument


logger = logging.getLogger(__name__)


class Triple(NamedTuple):
    subject: Node
    predicate: Node
    object: Node


class TripleIndex(Protocol):
    """Read-only pattern matching over a set of triples."""

    def triples(
        self,
        subject: Optional[Node] = None,
        predicate: Optional[Node] = None,
        obj: Optional[Node] = None
    ) -> Iterator[Triple]:
        """Yield triples matching the pattern. None matches anything."""
        ...

    def has_predicate(self, predicate: Node) -> bool:
        ...

    def __len__(self) -> int:
        ...


def is_literal(node: Node) -> bool:
    return isinstance(node, Literal)


def node_value(node: Node) -> str:
    """
    String value of a node.

    Literals give their lexical form, IRIs their full IRI and blank
    nodes their local id.
    """
    return str(node)


class RdflibTripleIndex:
    """TripleIndex backed by an rdflib Graph."""

    def __init__(self, graph: Graph):
        self._graph = graph

    def triples(
        self,
        subject: Optional[Node] = None,
        predicate: Optional[Node] = None,
        obj: Optional[Node] = None
    ) -> Iterator[Triple]:
        for s, p, o in self._graph.triples((subject, predicate, obj)):
            yield Triple(s, p, o)

    def has_predicate(self, predicate: Node) -> bool:
        return next(iter(self._graph.triples((None, predicate, None))), None) is not None

    def __len__(self) -> int:
        return len(self._graph)


class MemoryTripleIndex:
    """
    TripleIndex over an in-memory list.

    Enumeration order is insertion order, which makes results that
    depend on document order reproducible.
    """

    def __init__(self, triples: Iterable = ()):
        self._triples: List[Triple] = [Triple(*t) for t in triples]

    def add(self, subject: Node, predicate: Node, obj: Node) -> None:
        self._triples.append(Triple(subject, predicate, obj))

    def triples(
        self,
        subject: Optional[Node] = None,
        predicate: Optional[Node] = None,
        obj: Optional[Node] = None
    ) -> Iterator[Triple]:
        for triple in self._triples:
            if subject is not None and triple.subject != subject:
                continue
            if predicate is not None and triple.predicate != predicate:
                continue
            if obj is not None and triple.object != obj:
                continue
            yield triple

    def has_predicate(self, predicate: Node) -> bool:
        return any(t.predicate == predicate for t in self._triples)

    def __len__(self) -> int:
        return len(self._triples)


def parse_document(data: bytes, format: str = "json-ld") -> RdflibTripleIndex:
    """
    Parse document bytes into a triple index.

    Args:
        data: Raw document bytes (UTF-8)
        format: rdflib serialization name

    Returns:
        RdflibTripleIndex over the parsed graph

    Raises:
        MalformedDocument: If the bytes are not UTF-8, cannot be parsed
                           in the given format, or contain no triples
    """
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedDocument(f"Document is not valid UTF-8: {e}") from e

    graph = Graph()
    try:
        graph.parse(data=text, format=format)
    except Exception as e:
        # rdflib surfaces parse errors with many unrelated exception types
        raise MalformedDocument(f"Error parsing FSF license data as {format}: {e}") from e

    if len(graph) == 0:
        raise MalformedDocument(f"Document parsed as {format} but contains no triples")

    logger.debug("Parsed %d triples from %d bytes", len(graph), len(data))
    return RdflibTripleIndex(graph)
