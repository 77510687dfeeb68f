"""
Plain-text renderers for the three report sections.

Each ``*_report`` function returns the rows of one section without a header,
sorted deterministically, so any subset can be rendered on its own.
``write_reports`` prints the sections an options object enables.
"""

from collections import Counter
from typing import List, TextIO

from . import config
from .aggregate import category_totals, script_totals
from .tables import get_table, long_name

# ===============================================
# ROW RENDERERS
# ===============================================


def format_char_row(cp: int, count: int, tag: str, printable: bool, utf8: bool = False) -> str:
    glyph = chr(cp) if printable else config.PLACEHOLDER
    detail = f"{tag:<{config.CATEGORY_CODE_WIDTH}} U+{cp:04X} 0x{cp:x}"
    if utf8:
        detail += "".join(f" 0x{b:x}" for b in chr(cp).encode("utf-8"))
    return f"{glyph} ({detail}) {count}"


def character_report(counts: Counter, utf8: bool = False, table=None) -> List[str]:
    """One row per distinct code point, ascending by code point."""
    table = table or get_table()
    rows = []
    for cp in sorted(counts):
        rows.append(format_char_row(
            cp,
            counts[cp],
            table.display_category(cp),
            table.is_printable(cp),
            utf8=utf8,
        ))
    return rows


def category_report(totals: Counter, long_names: bool = True) -> List[str]:
    """One row per category with a non-zero total, sorted by code."""
    rows = []
    for code in sorted(totals):
        count = totals[code]
        if count <= 0:
            continue
        if long_names:
            rows.append(f"{code:<{config.CATEGORY_CODE_WIDTH}} "
                        f"{long_name(code):<{config.CATEGORY_NAME_WIDTH}} {count}")
        else:
            rows.append(f"{code:<{config.CATEGORY_CODE_WIDTH}} {count}")
    return rows


def script_report(totals: Counter) -> List[str]:
    """One row per script with a non-zero total, sorted by name."""
    return [f"{name:<{config.SCRIPT_NAME_WIDTH}} {totals[name]}"
            for name in sorted(totals) if totals[name] > 0]


# ===============================================
# SECTION WRITERS
# ===============================================

def _write_section(out: TextIO, header, rows: List[str]):
    if header:
        print(header, file=out)
    for row in rows:
        print(row, file=out)


def write_characters(out: TextIO, counts: Counter, utf8: bool = False, header: bool = False, table=None):
    _write_section(out, config.CHARS_HEADER if header else None,
                   character_report(counts, utf8=utf8, table=table))


def write_categories(out: TextIO, counts: Counter, long_names: bool = True, table=None):
    _write_section(out, config.CATEGORIES_HEADER,
                   category_report(category_totals(counts, table), long_names=long_names))


def write_scripts(out: TextIO, counts: Counter, table=None):
    _write_section(out, config.SCRIPTS_HEADER, script_report(script_totals(counts, table)))


def write_reports(out: TextIO, counts: Counter, options: config.ReportOptions, table=None):
    """Print every enabled section: characters, then categories, then scripts."""
    table = table or get_table()
    if options.chars:
        # A lone character listing stays header-free.
        write_characters(out, counts, utf8=options.utf8,
                         header=options.section_count() > 1, table=table)
    if options.cats:
        write_categories(out, counts, long_names=options.long_names, table=table)
    if options.scripts:
        write_scripts(out, counts, table=table)
