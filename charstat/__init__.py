"""
charstat: character, Unicode category and script frequency reports.
"""

__version__ = "0.1.0"

from .config import ReportOptions
from .decoder import iter_code_points
from .tally import tally, tally_stream, total
from .aggregate import category_totals, script_totals
from .tables import ClassificationTable, build_table, get_table, long_name
from .report import (
    character_report,
    category_report,
    script_report,
    write_reports,
)

__all__ = [
    # Config
    'ReportOptions',
    # Decoding & tally
    'iter_code_points',
    'tally',
    'tally_stream',
    'total',
    # Aggregation
    'category_totals',
    'script_totals',
    # Tables
    'ClassificationTable',
    'build_table',
    'get_table',
    'long_name',
    # Reports
    'character_report',
    'category_report',
    'script_report',
    'write_reports',
]
