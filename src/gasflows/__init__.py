"""GasFlows core package."""

from gasflows.catalog import DEFAULT_CATALOG, ChemicalCatalog
from gasflows.gas import Gas
from gasflows.models import Chemical
from gasflows.report import format_characteristics, show_characteristics

__all__ = [
    "DEFAULT_CATALOG",
    "ChemicalCatalog",
    "Chemical",
    "Gas",
    "format_characteristics",
    "show_characteristics",
]
