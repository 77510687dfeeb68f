"""
The classification table: which general categories and which scripts a code
point belongs to.

Membership is answered by the Unicode property database bundled with the
``regex`` library. Each named category or script is one compiled property
pattern, and a code point is tested against every pattern in turn. The table
is built once per process by :func:`get_table` and never mutated afterwards.
"""

import logging

import regex

logger = logging.getLogger(__name__)

# ===============================================
# CATEGORY DEFINITIONS
# ===============================================

# Umbrella classes are named categories in their own right. "C" leaves out
# Cn: unassigned code points belong to no category at all.
CATEGORY_PATTERNS = {
    # Other
    "C": r"[\p{gc=Cc}\p{gc=Cf}\p{gc=Co}\p{gc=Cs}]",
    "Cc": r"\p{gc=Cc}", "Cf": r"\p{gc=Cf}", "Co": r"\p{gc=Co}", "Cs": r"\p{gc=Cs}",
    # Letters
    "L": r"\p{gc=L}",
    "Ll": r"\p{gc=Ll}", "Lm": r"\p{gc=Lm}", "Lo": r"\p{gc=Lo}", "Lt": r"\p{gc=Lt}", "Lu": r"\p{gc=Lu}",
    # Marks
    "M": r"\p{gc=M}",
    "Mc": r"\p{gc=Mc}", "Me": r"\p{gc=Me}", "Mn": r"\p{gc=Mn}",
    # Numbers
    "N": r"\p{gc=N}",
    "Nd": r"\p{gc=Nd}", "Nl": r"\p{gc=Nl}", "No": r"\p{gc=No}",
    # Punctuation
    "P": r"\p{gc=P}",
    "Pc": r"\p{gc=Pc}", "Pd": r"\p{gc=Pd}", "Pe": r"\p{gc=Pe}", "Pf": r"\p{gc=Pf}",
    "Pi": r"\p{gc=Pi}", "Po": r"\p{gc=Po}", "Ps": r"\p{gc=Ps}",
    # Symbols
    "S": r"\p{gc=S}",
    "Sc": r"\p{gc=Sc}", "Sk": r"\p{gc=Sk}", "Sm": r"\p{gc=Sm}", "So": r"\p{gc=So}",
    # Separators
    "Z": r"\p{gc=Z}",
    "Zl": r"\p{gc=Zl}", "Zp": r"\p{gc=Zp}", "Zs": r"\p{gc=Zs}",
}

LONG_NAMES = {
    "C": "Other",
    "Cc": "Other, control",
    "Cf": "Other, format",
    "Co": "Other, private use",
    "Cs": "Other, surrogate",
    "L": "Letter",
    "Ll": "Letter, lowercase",
    "Lm": "Letter, modifier",
    "Lo": "Letter, other",
    "Lt": "Letter, titlecase",
    "Lu": "Letter, uppercase",
    "M": "Mark",
    "Mc": "Mark, spacing combining",
    "Me": "Mark, enclosing",
    "Mn": "Mark, nonspacing",
    "N": "Number",
    "Nd": "Number, decimal digit",
    "Nl": "Number, letter",
    "No": "Number, other",
    "P": "Punctuation",
    "Pc": "Punctuation, connector",
    "Pd": "Punctuation, dash",
    "Pe": "Punctuation, close",
    "Pf": "Punctuation, final quote",
    "Pi": "Punctuation, initial quote",
    "Po": "Punctuation, other",
    "Ps": "Punctuation, open",
    "S": "Symbol",
    "Sc": "Symbol, currency",
    "Sk": "Symbol, modifier",
    "Sm": "Symbol, math",
    "So": "Symbol, other",
    "Z": "Separator",
    "Zl": "Separator, line",
    "Zp": "Separator, paragraph",
    "Zs": "Separator, space",
}

# Umbrella classes whose members render as themselves in the character report.
PRINTABLE_CLASSES = ("L", "N", "P", "S")

# ===============================================
# SCRIPT DEFINITIONS
# ===============================================

# Script property values as of Unicode 15.0, minus "Unknown".
SCRIPT_NAMES = (
    "Adlam", "Ahom", "Anatolian_Hieroglyphs", "Arabic", "Armenian", "Avestan",
    "Balinese", "Bamum", "Bassa_Vah", "Batak", "Bengali", "Bhaiksuki", "Bopomofo",
    "Brahmi", "Braille", "Buginese", "Buhid", "Canadian_Aboriginal", "Carian",
    "Caucasian_Albanian", "Chakma", "Cham", "Cherokee", "Chorasmian", "Common",
    "Coptic", "Cuneiform", "Cypriot", "Cypro_Minoan", "Cyrillic", "Deseret",
    "Devanagari", "Dives_Akuru", "Dogra", "Duployan", "Egyptian_Hieroglyphs",
    "Elbasan", "Elymaic", "Ethiopic", "Georgian", "Glagolitic", "Gothic", "Grantha",
    "Greek", "Gujarati", "Gunjala_Gondi", "Gurmukhi", "Han", "Hangul",
    "Hanifi_Rohingya", "Hanunoo", "Hatran", "Hebrew", "Hiragana", "Imperial_Aramaic",
    "Inherited", "Inscriptional_Pahlavi", "Inscriptional_Parthian", "Javanese",
    "Kaithi", "Kannada", "Katakana", "Kawi", "Kayah_Li", "Kharoshthi",
    "Khitan_Small_Script", "Khmer", "Khojki", "Khudawadi", "Lao", "Latin", "Lepcha",
    "Limbu", "Linear_A", "Linear_B", "Lisu", "Lycian", "Lydian", "Mahajani",
    "Makasar", "Malayalam", "Mandaic", "Manichaean", "Marchen", "Masaram_Gondi",
    "Medefaidrin", "Meetei_Mayek", "Mende_Kikakui", "Meroitic_Cursive",
    "Meroitic_Hieroglyphs", "Miao", "Modi", "Mongolian", "Mro", "Multani", "Myanmar",
    "Nabataean", "Nag_Mundari", "Nandinagari", "New_Tai_Lue", "Newa", "Nko", "Nushu",
    "Nyiakeng_Puachue_Hmong", "Ogham", "Ol_Chiki", "Old_Hungarian", "Old_Italic",
    "Old_North_Arabian", "Old_Permic", "Old_Persian", "Old_Sogdian",
    "Old_South_Arabian", "Old_Turkic", "Old_Uyghur", "Oriya", "Osage", "Osmanya",
    "Pahawh_Hmong", "Palmyrene", "Pau_Cin_Hau", "Phags_Pa", "Phoenician",
    "Psalter_Pahlavi", "Rejang", "Runic", "Samaritan", "Saurashtra", "Sharada",
    "Shavian", "Siddham", "SignWriting", "Sinhala", "Sogdian", "Sora_Sompeng",
    "Soyombo", "Sundanese", "Syloti_Nagri", "Syriac", "Tagalog", "Tagbanwa",
    "Tai_Le", "Tai_Tham", "Tai_Viet", "Takri", "Tamil", "Tangsa", "Tangut", "Telugu",
    "Thaana", "Thai", "Tibetan", "Tifinagh", "Tirhuta", "Toto", "Ugaritic", "Vai",
    "Vithkuqi", "Wancho", "Warang_Citi", "Yezidi", "Yi", "Zanabazar_Square",
)


def long_name(code: str) -> str:
    """Human readable name of a category code, or "" for unknown codes."""
    return LONG_NAMES.get(code, "")


# ===============================================
# THE TABLE
# ===============================================

class ClassificationTable:
    """
    Read-only mapping from code point to category and script memberships.

    ``categories`` and ``scripts`` map each name to a compiled property
    pattern; both are kept in sorted name order so membership tuples come out
    sorted.
    """

    def __init__(self, categories: dict, scripts: dict):
        self.categories = categories
        self.scripts = scripts

    def categories_of(self, cp: int) -> tuple:
        """All category codes the code point belongs to, umbrella classes included."""
        char = chr(cp)
        return tuple(code for code, pattern in self.categories.items() if pattern.fullmatch(char))

    def scripts_of(self, cp: int) -> tuple:
        char = chr(cp)
        return tuple(name for name, pattern in self.scripts.items() if pattern.fullmatch(char))

    def display_category(self, cp: int) -> str:
        """
        The most specific category code for a code point: the longest matching
        code, first in sort order among equals. Empty when nothing matches
        (unassigned code points).
        """
        best = ""
        for code in self.categories_of(cp):
            if len(code) > len(best):
                best = code
        return best

    def is_printable(self, cp: int) -> bool:
        """Letters, numbers, punctuation, symbols and the ASCII space. Marks are excluded."""
        if cp == 0x20:
            return True
        return any(code in PRINTABLE_CLASSES for code in self.categories_of(cp))


def _compile_patterns(sources: dict) -> dict:
    compiled = {}
    for name in sorted(sources):
        try:
            compiled[name] = regex.compile(sources[name])
        except regex.error as e:
            # Older regex releases predate some of the newer scripts.
            logger.debug("Skipping %s: %s", name, e)
    return compiled


def build_table() -> ClassificationTable:
    """Compile every category and script pattern into a fresh table."""
    categories = _compile_patterns(CATEGORY_PATTERNS)
    scripts = _compile_patterns({name: r"\p{Script=%s}" % name for name in SCRIPT_NAMES})
    logger.info("Built classification table: %d categories, %d scripts", len(categories), len(scripts))
    return ClassificationTable(categories, scripts)


_TABLE = None


def get_table() -> ClassificationTable:
    """The process-wide table, built on first use."""
    global _TABLE
    if _TABLE is None:
        _TABLE = build_table()
    return _TABLE
