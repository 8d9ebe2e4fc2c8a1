import unittest

from sexpr.runtime.value import Boolean, Float, Integer, NONE, NoneValue


class ValueTestCase(unittest.TestCase):

    def test_str(self):
        cases = {
            Integer(42): "42",
            Integer(-7): "-7",
            Float(1.5): "1.5",
            Float(3.0): "3",
            Float(0.1): "0.1",
            Boolean(True): "true",
            Boolean(False): "false",
            NONE: "()",
        }
        for case, expected in cases.items():
            self.assertEqual(expected, str(case), repr(case))

    def test_equality(self):
        self.assertEqual(NoneValue(), NONE)
        self.assertNotEqual(Integer(1), Float(1.0))
        self.assertNotEqual(Integer(1), Boolean(True))


if __name__ == '__main__':
    unittest.main()
