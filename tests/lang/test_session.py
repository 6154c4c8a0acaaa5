import io
import unittest
from unittest.mock import patch

from tuber.lang.command import Delete, Eval, EvalHead, EvalLast, EvalTail, Global, Info, Unlambda
from tuber.lang.config import DisplayStyle
from tuber.lang.error import ErrorHandler
from tuber.lang.history import Logger
from tuber.lang.lexical import parse_command, parse_term
from tuber.lang.prelude import default_context
from tuber.lang.session import Session
from tuber.pure.context import Context
from tuber.pure.identifier import Identifier

OMEGA = "`^x.`xx^x.`xx"


def make_session(context=None, **kwargs):
    if context is None:
        context = Context.builtins()
    return Session(context, ErrorHandler(fatal=False), **kwargs)


class SessionTestCase(unittest.TestCase):

    def test_update_info(self):
        sess = make_session()
        self.assertEqual([], sess.execute(parse_command("``Kxy = x")))
        self.assertEqual(["``Kxy = x"], sess.execute(Info(Identifier("K"))))

        sess.execute(parse_command("``Kxy = y"))
        self.assertEqual(["``Kxy = y"], sess.execute(Info(Identifier("K"))))

    def test_delete(self):
        sess = make_session()
        self.assertEqual([], sess.execute(Delete(Identifier("i"))))
        self.assertNotIn("i", sess.context)

        with patch("sys.stdout", new_callable=io.StringIO) as stdout:
            self.assertEqual([], sess.execute(Delete(Identifier("i"))))
        self.assertIn("is not defined", stdout.getvalue())

    def test_info_undefined(self):
        sess = make_session()
        with patch("sys.stdout", new_callable=io.StringIO) as stdout:
            self.assertEqual([], sess.execute(Info(Identifier("NOPE"))))
        self.assertIn("is not defined", stdout.getvalue())

    def test_global(self):
        self.assertEqual(["`ix = x", "``kxy = x", "```sxyz = ``xz`yz"], make_session().execute(Global()))

    def test_eval(self):
        sess = make_session()
        self.assertEqual(["→ ``k:a`k:a", "→ :a"], sess.execute(Eval(parse_term("```skk:a"))))
        self.assertEqual([], sess.execute(Eval(parse_term(":a"))))

    def test_eval_limit(self):
        sess = make_session(step_limit=3)
        with patch("sys.stdout", new_callable=io.StringIO) as stdout:
            lines = sess.execute(Eval(parse_term(OMEGA)))
        self.assertEqual([f"→ {OMEGA}"] * 3, lines)
        self.assertIn("stopped after", stdout.getvalue())

    def test_eval_limit_exact(self):
        # reaching the normal form on the very last allowed step is not a cut
        sess = make_session(step_limit=2)
        with patch("sys.stdout", new_callable=io.StringIO) as stdout:
            lines = sess.execute(Eval(parse_term("```skk:a")))
        self.assertEqual(["→ ``k:a`k:a", "→ :a"], lines)
        self.assertEqual("", stdout.getvalue())

    def test_eval_head(self):
        sess = make_session()
        self.assertEqual(["→ ``k:a`k:a"], sess.execute(EvalHead(1, parse_term("```skk:a"))))
        self.assertEqual(["→ ``k:a`k:a", "→ :a"], sess.execute(EvalHead(10, parse_term("```skk:a"))))

        sess = make_session(step_limit=2)
        with patch("sys.stdout", new_callable=io.StringIO):
            self.assertEqual(2, len(sess.execute(EvalHead(10, parse_term(OMEGA)))))

    def test_eval_tail(self):
        sess = make_session()
        self.assertEqual(["```skk:a", "→ ...", "→ :a"], sess.execute(EvalTail(1, parse_term("```skk:a"))))
        self.assertEqual(["```skk:a", "→ ``k:a`k:a", "→ :a"], sess.execute(EvalTail(5, parse_term("```skk:a"))))

        sess = make_session(step_limit=4)
        with patch("sys.stdout", new_callable=io.StringIO) as stdout:
            lines = sess.execute(EvalTail(2, parse_term(OMEGA)))
        self.assertEqual([OMEGA, "→ ...", f"→ {OMEGA}", f"→ {OMEGA}"], lines)
        self.assertIn("stopped after", stdout.getvalue())

    def test_eval_last(self):
        sess = make_session()
        self.assertEqual(["```skk:a", "→ ...", "→ :a"], sess.execute(EvalLast(parse_term("```skk:a"))))
        self.assertEqual([":a"], sess.execute(EvalLast(parse_term(":a"))))

        sess = make_session(step_limit=5)
        with patch("sys.stdout", new_callable=io.StringIO) as stdout:
            lines = sess.execute(EvalLast(parse_term(OMEGA)))
        self.assertEqual([OMEGA, "→ ...", f"→ {OMEGA}"], lines)
        self.assertIn("stopped after", stdout.getvalue())

    def test_eval_last_number(self):
        sess = make_session(default_context())
        lines = sess.execute(EvalLast(parse_term("`i^f.^x.`f`f`fx")))
        self.assertEqual(["`i^f.^x.`f`f`fx", "→ ...", "→ ^f.^x.`f`f`fx", "== 3"], lines)
        self.assertEqual(["3"], sess.execute(EvalLast(parse_term("3"))))

    def test_unlambda(self):
        sess = make_session()
        self.assertEqual(["^x.^y.x", "== k"], sess.execute(Unlambda(parse_term("^x.^y.x"))))

    def test_ecmascript_style(self):
        sess = make_session(style=DisplayStyle.ECMASCRIPT)
        self.assertEqual(["→ k(:a, k(:a))", "→ :a"], sess.execute(parse_command("s(k, k, :a)")))
        self.assertEqual(["k(x, y) = x"], sess.execute(parse_command("? k")))
        self.assertEqual(["x => x", "== i"], sess.execute(parse_command("?? x => x")))

    def test_run(self):
        sess = make_session()
        with patch("sys.stdout", new_callable=io.StringIO) as stdout:
            sess.run(Eval(parse_term("`i:a")))
        self.assertEqual("→ :a\n", stdout.getvalue())

    def test_interpret(self):
        log = io.StringIO()
        sess = make_session(logger=Logger(log))

        with patch("sys.stdout", new_callable=io.StringIO) as stdout:
            sess.interpret("f(x) = x")
            sess.interpret("`f:a")
        self.assertEqual("→ :a\n", stdout.getvalue())
        self.assertEqual("`fx = x\n`f:a\n", log.getvalue())

    def test_invalid_limit(self):
        self.assertRaises(ValueError, make_session, step_limit=0)


if __name__ == '__main__':
    unittest.main()
