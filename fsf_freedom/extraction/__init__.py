# ==============================================
# EXTRACTION: Graph → ClassificationTable
# ==============================================
#
# Modules:
# --------
# - freedom.py   → LicenseFreedom tri-state enum and FSF tokens
# - table.py     → ClassificationTable and its builder
# - extractor.py → FactExtractor (the pattern queries)
#
# ==============================================

from .extractor import FactExtractor, SCHEMA_ORG_NAMESPACE
from .freedom import FREE_TOKEN, NON_FREE_TOKEN, LicenseFreedom
from .table import ClassificationTable, ClassificationTableBuilder

__all__ = [
    "ClassificationTable",
    "ClassificationTableBuilder",
    "FactExtractor",
    "FREE_TOKEN",
    "LicenseFreedom",
    "NON_FREE_TOKEN",
    "SCHEMA_ORG_NAMESPACE",
]
