import unittest

from sexpr.lang.error import ErrorHandler, EvalError, ParseError
from sexpr.lang.session import Session
from sexpr.runtime.value import Integer, NONE


class SessionTestCase(unittest.TestCase):

    def setUp(self):
        self.handler = ErrorHandler(fatal=False, color=False)
        self.sess = Session(self.handler)

    def test_bindings_persist_across_lines(self):
        self.assertEqual(NONE, self.sess.run("(let x 5)", 1))
        self.assertEqual(Integer(5), self.sess.run("x", 2))
        self.assertEqual(NONE, self.sess.run("(let x 10)", 3))
        self.assertEqual(Integer(10), self.sess.run("x", 4))
        self.assertEqual({"x": Integer(10)}, dict(self.sess.environment))

    def test_environment_is_read_only(self):
        with self.assertRaises(TypeError):
            self.sess.environment["x"] = Integer(1)

    def test_failed_line_stays_registered(self):
        self.assertRaises(EvalError, self.sess.run, "(+ 1 foo)", 1)
        self.assertEqual(("(+ 1 foo)", 1), self.handler.traceback[Session.SH_FILE])

        self.assertEqual(Integer(3), self.sess.run("(+ 1 2)", 2))
        self.assertEqual((None, None), self.handler.traceback[Session.SH_FILE])

    def test_failed_line_does_not_bind(self):
        self.assertRaises(ParseError, self.sess.run, "(let x (+ 1 2)", 1)
        self.assertRaises(EvalError, self.sess.run, "(let y (/ 1 0))", 2)
        self.assertEqual({}, dict(self.sess.environment))

    def test_empty_line(self):
        self.assertEqual(NONE, self.sess.run("", 1))


if __name__ == '__main__':
    unittest.main()
