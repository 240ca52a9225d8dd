# ==============================================
# FactExtractor
# ==============================================
#
# PURPOSE:
#   Walk the parsed FSF document and produce the
#   ClassificationTable (license identifier → free / non-free).
#
# CLASS: FactExtractor
# --------------------
#   Stateless: takes a TripleIndex in, produces a table out.
#
#   Constructor:
#   ------------
#   - __init__(namespace: str = SCHEMA_ORG_NAMESPACE)
#
#   Methods:
#   --------
#   - extract(index: TripleIndex) -> ClassificationTable
#       STEP 1: every (?entity, schema:keywords, ?kw) triple
#       STEP 2: literal kw "libre"    → entity is FREE
#               literal kw "non-free" → entity is NON_FREE
#               anything else         → ignored
#       STEP 3: every (entity, schema:identifier, ?id) triple
#               → table[str(id)] = classification
#       Same identifier under several entities: last write wins.
#
#   - identifiers_of(index, entity) -> list[str]
#       Every identifier value of an entity, unfiltered.
#
# NOTES:
# ------
#   The FSF data does not separate SPDX identifiers from the
#   other identifier schemes, so every identifier of a
#   classified entity is accepted.
#
# ==============================================

import logging
from typing import List

from rdflib import URIRef
from rdflib.term import Node

from fsf_freedom.errors import SchemaMismatch
from fsf_freedom.graph.index import TripleIndex, is_literal, node_value
from .freedom import LicenseFreedom
from .table import ClassificationTable, ClassificationTableBuilder


logger = logging.getLogger(__name__)

SCHEMA_ORG_NAMESPACE = "https://schema.org/"
PROPERTY_KEYWORDS = "keywords"
PROPERTY_IDENTIFIER = "identifier"


class FactExtractor:
    """
    Extracts FSF freedom classifications from a triple index.
    """

    def __init__(self, namespace: str = SCHEMA_ORG_NAMESPACE):
        self.keywords_predicate = URIRef(namespace + PROPERTY_KEYWORDS)
        self.identifier_predicate = URIRef(namespace + PROPERTY_IDENTIFIER)

    def _check_schema(self, index: TripleIndex) -> None:
        # A document with classified entities but no identifiers is valid
        # and yields an empty table
        if not index.has_predicate(self.keywords_predicate):
            raise SchemaMismatch(
                f"Property {self.keywords_predicate} not found in FSF license data"
            )

    def identifiers_of(self, index: TripleIndex, entity: Node) -> List[str]:
        """
        Collect all identifiers attached to an entity.

        Args:
            index: Parsed document
            entity: Subject node of a classified license

        Returns:
            Identifier strings in enumeration order
        """
        return [
            node_value(triple.object)
            for triple in index.triples(entity, self.identifier_predicate, None)
            if triple.object is not None
        ]

    def extract(self, index: TripleIndex) -> ClassificationTable:
        """
        Build the classification table from the parsed document.

        Args:
            index: Parsed document

        Returns:
            Read-only ClassificationTable

        Raises:
            SchemaMismatch: If the schema.org keywords property never
                            occurs in the document
        """
        self._check_schema(index)

        builder = ClassificationTableBuilder()
        classified_entities = 0
        for triple in index.triples(None, self.keywords_predicate, None):
            if not is_literal(triple.object):
                continue
            freedom = LicenseFreedom.from_keyword(node_value(triple.object))
            if freedom is None:
                continue

            classified_entities += 1
            is_libre = freedom.as_optional_bool()
            identifiers = self.identifiers_of(index, triple.subject)
            if not identifiers:
                logger.debug("Entity %s is %s but has no identifiers", triple.subject, freedom.value)
            for license_id in identifiers:
                builder.record(license_id, is_libre)

        table = builder.build()
        counts = table.summary()
        logger.info(
            "Extracted %d license identifiers from %d classified entities (%d free, %d non-free)",
            counts["total"], classified_entities, counts["free"], counts["non_free"]
        )
        return table
