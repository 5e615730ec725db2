"""Unit tests for the constant table."""

import unittest

from scicalc_pkg.constants import CONSTANT_TABLE, ConstantDefinition, expand


class TestConstantTable(unittest.TestCase):
    """Test constant lookups and definitions."""

    def test_fixed_entries(self):
        self.assertEqual(expand("K"), "9 * 10^9")
        self.assertEqual(expand("h"), "6.626 * 10^-34")
        self.assertEqual(expand("c"), "3 * 10^8")

    def test_pi_is_precise_decimal(self):
        self.assertTrue(expand("π").startswith("3.14159265358979"))
        self.assertGreaterEqual(len(expand("π")), 18)

    def test_table_order(self):
        self.assertEqual([d.symbol for d in CONSTANT_TABLE], ["π", "K", "h", "c"])

    def test_unknown_symbol(self):
        with self.assertRaises(KeyError):
            expand("x")

    def test_definition_is_frozen(self):
        definition = ConstantDefinition("g", "9.81")
        with self.assertRaises(AttributeError):
            definition.symbol = "G"

    def test_rejects_clashing_symbols(self):
        for symbol in ("1", "+", "(", ")", "^", "√"):
            with self.assertRaises(ValueError):
                ConstantDefinition(symbol, "1")

    def test_rejects_multi_character_symbol(self):
        with self.assertRaises(ValueError):
            ConstantDefinition("pi", "3.14")


if __name__ == "__main__":
    unittest.main()
