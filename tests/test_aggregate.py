"""Tests for charstat/aggregate.py"""

from collections import Counter

from charstat.aggregate import category_totals, script_totals
from charstat.tally import tally, tally_stream, total


def cps(text):
    return [ord(c) for c in text]


class TestCategoryTotals:

    def test_digits_count_in_umbrella_and_subclass(self, table):
        totals = category_totals(tally(cps("123")), table)
        assert totals == Counter({"N": 3, "Nd": 3})

    def test_non_exclusive_sum_exceeds_character_count(self, table):
        counts = tally(cps("Hello, World!"))
        totals = category_totals(counts, table)
        assert sum(totals.values()) > total(counts)

    def test_umbrella_at_least_subclass(self, table, utf8_stream):
        counts = tally_stream(utf8_stream("Aa1½ ,-(«»€+\t\u0301"))
        totals = category_totals(counts, table)
        for code, count in totals.items():
            if len(code) == 2:
                assert totals[code[0]] >= count

    def test_count_weighted_not_distinct(self, table):
        totals = category_totals(Counter({ord("a"): 5, ord("B"): 2}), table)
        assert totals["L"] == 7
        assert totals["Ll"] == 5
        assert totals["Lu"] == 2

    def test_empty(self, table):
        assert category_totals(Counter(), table) == Counter()

    def test_defaults_to_process_table(self):
        assert category_totals(tally(cps("x"))) == Counter({"L": 1, "Ll": 1})


class TestScriptTotals:

    def test_digits_are_common(self, table):
        assert script_totals(tally(cps("123")), table) == Counter({"Common": 3})

    def test_mixed_scripts(self, table):
        totals = script_totals(tally(cps("AbЖ 中")), table)
        assert totals == Counter({"Latin": 2, "Cyrillic": 1, "Common": 1, "Han": 1})

    def test_unassigned_is_not_counted(self, table):
        assert script_totals(Counter({0x0378: 4}), table) == Counter()
