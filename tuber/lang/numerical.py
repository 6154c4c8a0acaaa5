"""Natural numbers encoded as Church numerals. Arithmetic on them lives in the prelude (ADD, MUL, PRED...) and is written
in plain lambda calculus, thus keeping everything as pure as possible.

Source: https://en.wikipedia.org/wiki/Church_encoding#Calculation_with_Church_numerals
"""

from tuber.lang.error import GenericException
from tuber.pure.term import Abstraction, Application, Variable


def cnumber(num):
    """Returns num in lambda calculus (cnum = Church numeral): ^f.^x.`f`f...x"""
    if isinstance(num, bool) or not isinstance(num, int) or num < 0:
        raise GenericException("expected natural number, got '{}'", str(num), diagnosis=False)

    f = Variable("f")
    body = Variable("x")
    for __ in range(num):
        body = Application(f, body)

    return Abstraction("f", Abstraction("x", body))


def number(cnum):
    """Returns the int encoded by cnum. If cnum isn't literally a Church numeral, returns None."""
    if not isinstance(cnum, Abstraction) or not isinstance(cnum.body, Abstraction):
        return None

    f, x = Variable(cnum.param), Variable(cnum.body.param)
    if f == x:
        return None

    num = 0
    nth_body = cnum.body.body
    while isinstance(nth_body, Application):
        if nth_body.lhs != f:
            return None
        nth_body = nth_body.rhs
        num += 1

    return num if nth_body == x else None
