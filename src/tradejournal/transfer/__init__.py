"""JSON import/export utilities."""

from tradejournal.transfer.importer import JsonImporter
from tradejournal.transfer.exporter import JsonExporter
from tradejournal.transfer.fields import FlexibleInt, FlexibleNumber

__all__ = [
    "JsonImporter",
    "JsonExporter",
    "FlexibleInt",
    "FlexibleNumber",
]
