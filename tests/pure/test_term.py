import unittest

from tuber.pure.term import Abstraction, Application, LambdaTerm, Symbol, Variable


class LambdaTermTestCase(unittest.TestCase):

    def test_of(self):
        self.assertEqual(Symbol("a"), LambdaTerm.of(":a"))
        self.assertEqual(Variable("a"), LambdaTerm.of("a"))
        self.assertRaises(ValueError, LambdaTerm.of, "")

    def test_call(self):
        self.assertEqual(Application(Application(Variable("s"), Symbol("a")), Variable("b")),
                         Variable("s")(":a")("b"))

    def test_str(self):
        cases = {
            "`ab": Variable("a")("b"),
            "`X Y": Variable("X")("Y"),
            "`:A B": Symbol("A")("B"),
            "`A:B": Variable("A")(":B"),
            "^x.`x:a": Abstraction("x", Variable("x")(":a")),
            "``si`kx": Variable("s")("i")(Variable("k")("x")),
            "^X0.`X0 X": Abstraction("X0", Variable("X0")("X")),
        }
        for result, term in cases.items():
            self.assertEqual(result, str(term), repr(term))


class FreeVarsTestCase(unittest.TestCase):

    def test_free_vars(self):
        x, y = Variable("x"), Variable("y")
        cases = [
            (x, {"x"}),
            (Symbol("x"), set()),
            (x(y), {"x", "y"}),
            (Abstraction("x", x(y)), {"y"}),
            (Abstraction("x", Abstraction("y", x(y))), set()),
            (Abstraction("x", x)(x), {"x"}),
        ]
        for term, result in cases:
            self.assertEqual(result, {name.label for name in term.free_vars()}, term)


class SubstituteTestCase(unittest.TestCase):

    def test_variable(self):
        self.assertEqual(Symbol("a"), Variable("x").substitute("x", Symbol("a")))
        self.assertEqual(Variable("y"), Variable("y").substitute("x", Symbol("a")))
        self.assertEqual(Symbol("x"), Symbol("x").substitute("x", Symbol("a")))

    def test_application(self):
        term = Variable("x")(Variable("y"))(Variable("x"))
        self.assertEqual(Symbol("a")(Variable("y"))(Symbol("a")), term.substitute("x", Symbol("a")))

    def test_absent(self):
        cases = [
            Abstraction("y", Variable("y")(Variable("z"))),
            Symbol("x"),
            Abstraction("x", Variable("x")),
            Abstraction("y", Abstraction("x", Variable("x")(Variable("y")))),
        ]
        for term in cases:
            self.assertEqual(term, term.substitute("x", Variable("y")), term)

    def test_shadowing(self):
        term = Abstraction("x", Variable("x"))
        self.assertEqual(term, term.substitute("x", Symbol("a")))

        term = Variable("x")(Abstraction("x", Variable("x")))
        self.assertEqual(Symbol("a")(Abstraction("x", Variable("x"))), term.substitute("x", Symbol("a")))

    def test_no_capture(self):
        # ^y.`xy [x := y] must not become ^y.`yy
        term = Abstraction("y", Variable("x")(Variable("y")))
        self.assertEqual(Abstraction("Y", Variable("y")(Variable("Y"))), term.substitute("x", Variable("y")))

        # the fresh name must avoid names already used below
        term = Abstraction("y", Abstraction("Y", Variable("x")(Variable("y")(Variable("Y")))))
        result = Abstraction("Y0", Abstraction("Y", Variable("y")(Variable("Y0")(Variable("Y")))))
        self.assertEqual(result, term.substitute("x", Variable("y")))

    def test_original_untouched(self):
        term = Abstraction("y", Variable("x")(Variable("y")))
        term.substitute("x", Variable("y"))
        self.assertEqual(Abstraction("y", Variable("x")(Variable("y"))), term)


class UnlambdaTestCase(unittest.TestCase):

    def test_unlambda(self):
        x, y = Variable("x"), Variable("y")
        cases = [
            (Abstraction("x", x), "i"),
            (Abstraction("x", Symbol("a")), "`k:a"),
            (Abstraction("x", y), "`ky"),
            (Abstraction("x", Abstraction("y", x)), "k"),
            (Abstraction("x", x(Symbol("a"))), "``si`k:a"),
            (Abstraction("x", Variable("f")(x)), "f"),
            (Abstraction("x", Abstraction("y", y(x))), "``s``s`ks`kik"),
            (Symbol("a")(Abstraction("x", x)), "`:ai"),
            (Abstraction("k", Abstraction("x", Variable("k"))), "k"),
            (Abstraction("i", Variable("i")), "i"),
        ]
        for term, result in cases:
            self.assertEqual(result, str(term.unlambda()), term)

    def test_no_abstraction_left(self):
        def has_abstraction(term):
            if isinstance(term, Abstraction):
                return True
            if isinstance(term, Application):
                return has_abstraction(term.lhs) or has_abstraction(term.rhs)
            return False

        x, y, z = Variable("x"), Variable("y"), Variable("z")
        term = Abstraction("x", Abstraction("y", Abstraction("z", x(z)(y(z)))))
        self.assertFalse(has_abstraction(term.unlambda()))


if __name__ == '__main__':
    unittest.main()
