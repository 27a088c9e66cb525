import unittest
from tax_estimator.parsing import parse_lenient_number

class TestLenientNumberParsing(unittest.TestCase):

    def test_plain_numbers(self):
        self.assertEqual(parse_lenient_number("5000"), 5000.0)
        self.assertEqual(parse_lenient_number("1234.50"), 1234.5)
        self.assertEqual(parse_lenient_number("-300"), -300.0)
        self.assertEqual(parse_lenient_number(".5"), 0.5)
        self.assertEqual(parse_lenient_number("5."), 5.0)

    def test_strips_non_numeric_characters(self):
        self.assertEqual(parse_lenient_number("R$ 1,234.50"), 1234.5)
        self.assertEqual(parse_lenient_number("  42 "), 42.0)
        self.assertEqual(parse_lenient_number("$-12"), -12.0)
        # Separators are dropped, not interpreted
        self.assertEqual(parse_lenient_number("5.000"), 5.0)
        self.assertEqual(parse_lenient_number("1e5"), 15.0)

    def test_unparseable_text_is_zero(self):
        for text in ["", "abc", "1.2.3", "-", ".", "--5", "5-", "R$"]:
            self.assertEqual(parse_lenient_number(text), 0.0, text)

    def test_none_is_zero(self):
        self.assertEqual(parse_lenient_number(None), 0.0)

    def test_numbers_pass_through(self):
        self.assertEqual(parse_lenient_number(42), 42.0)
        self.assertEqual(parse_lenient_number(3.25), 3.25)
        self.assertEqual(parse_lenient_number(-1.5), -1.5)

    def test_non_finite_is_zero(self):
        self.assertEqual(parse_lenient_number(float("inf")), 0.0)
        self.assertEqual(parse_lenient_number(float("nan")), 0.0)
        self.assertEqual(parse_lenient_number("9" * 400), 0.0)
        self.assertEqual(parse_lenient_number(10 ** 400), 0.0)

    def test_booleans_are_text(self):
        self.assertEqual(parse_lenient_number(True), 0.0)

if __name__ == "__main__":
    unittest.main()
