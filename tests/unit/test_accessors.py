import plistlib
import sys
import unittest
from datetime import datetime
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "scheme"))

from itermcolors_scheme.accessors import (
    expect_dictionary,
    expect_real,
    expect_string,
    get_required,
    value_kind,
)
from itermcolors_scheme.errors import InvalidType, MissingKey


class ValueKindTests(unittest.TestCase):
    def test_plist_leaf_kinds(self):
        cases = [
            ([], "Array"),
            ({}, "Dictionary"),
            (True, "Boolean"),
            (b"\x00", "Data"),
            (bytearray(b"\x00"), "Data"),
            (datetime(2020, 1, 1), "Date"),
            (3, "Integer"),
            (0.25, "Real"),
            ("sRGB", "String"),
            (plistlib.UID(7), "Uid"),
        ]
        for value, expected in cases:
            with self.subTest(value=value):
                self.assertEqual(value_kind(value), expected)

    def test_bool_is_not_integer(self):
        self.assertEqual(value_kind(False), "Boolean")

    def test_unclassified_value_is_unknown(self):
        self.assertEqual(value_kind(None), "(unknown)")
        self.assertEqual(value_kind(object()), "(unknown)")


class RequiredLookupTests(unittest.TestCase):
    def test_present_key(self):
        self.assertEqual(get_required({"Color Space": "sRGB"}, "Color Space"), "sRGB")

    def test_missing_key_names_the_key(self):
        with self.assertRaises(MissingKey) as ctx:
            get_required({}, "Red Component")
        self.assertEqual(ctx.exception.key, "Red Component")
        self.assertEqual(str(ctx.exception), "Dictionary did not contain key: Red Component")


class ExpectTypeTests(unittest.TestCase):
    def test_expect_string(self):
        self.assertEqual(expect_string("sRGB"), "sRGB")
        with self.assertRaises(InvalidType) as ctx:
            expect_string(1.0)
        self.assertEqual(ctx.exception, InvalidType("String", "Real"))

    def test_expect_real_rejects_integer_and_bool(self):
        self.assertEqual(expect_real(0.5), 0.5)
        with self.assertRaises(InvalidType) as ctx:
            expect_real(1)
        self.assertEqual(ctx.exception, InvalidType("Real", "Integer"))
        with self.assertRaises(InvalidType) as ctx:
            expect_real(True)
        self.assertEqual(ctx.exception, InvalidType("Real", "Boolean"))

    def test_expect_dictionary(self):
        d = {"a": 1}
        self.assertIs(expect_dictionary(d), d)
        with self.assertRaises(InvalidType) as ctx:
            expect_dictionary(["not", "a", "dict"])
        self.assertEqual(ctx.exception.expected, "Dictionary")
        self.assertEqual(ctx.exception.actual, "Array")

    def test_unknown_kind_does_not_crash(self):
        with self.assertRaises(InvalidType) as ctx:
            expect_string(None)
        self.assertEqual(ctx.exception.actual, "(unknown)")
        self.assertEqual(
            str(ctx.exception),
            "Expected value of type String, but found value of type (unknown)",
        )


if __name__ == "__main__":
    unittest.main()
