"""
Runtime configuration for charstat: column widths, section headers and the
report toggles selected by the caller.
"""

# ==========================================
# GLOBAL CONFIG
# ==========================================

# Bytes pulled from the input per read() call.
READ_CHUNK_SIZE = 64 * 1024

# Shown instead of glyphs that would corrupt terminal output (controls, marks).
PLACEHOLDER = " "

# --- COLUMN WIDTHS ---
CATEGORY_CODE_WIDTH = 2
CATEGORY_NAME_WIDTH = 21
SCRIPT_NAME_WIDTH = 24

# --- SECTION HEADERS ---
CHARS_HEADER = "// Characters"
CATEGORIES_HEADER = "// Categories"
SCRIPTS_HEADER = "// Scripts"


class ReportOptions:
    """Which report sections to render and how."""

    def __init__(self, chars: bool = True, cats: bool = False, scripts: bool = False,
                 utf8: bool = False, long_names: bool = True):
        self.chars = chars
        self.cats = cats
        self.scripts = scripts
        self.utf8 = utf8
        self.long_names = long_names

    @classmethod
    def from_args(cls, args):
        return cls(
            chars=not args.no_chars,
            cats=args.cats,
            scripts=args.scripts,
            utf8=args.utf8,
            long_names=not args.short,
        )

    def section_count(self) -> int:
        return sum((self.chars, self.cats, self.scripts))

    def __repr__(self):
        return (f"ReportOptions(chars={self.chars}, cats={self.cats}, scripts={self.scripts}, "
                f"utf8={self.utf8}, long_names={self.long_names})")
