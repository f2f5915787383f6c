"""
Import pipeline components: parse, map, merge, export.
"""

from .tabular import ParsedTable, parse_table
from .mapper import RecordMapper
from .merger import ImportMerger, natural_key
from .exporter import DashboardExporter, create_dashboard_json

__all__ = [
    "ParsedTable",
    "parse_table",
    "RecordMapper",
    "ImportMerger",
    "natural_key",
    "DashboardExporter",
    "create_dashboard_json"
]
