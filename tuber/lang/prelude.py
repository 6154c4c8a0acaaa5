"""Default context: the s, k and i builtins plus booleans, pairs, fixed-point combinators and Church arithmetic. Written
in Lazy_K style and parsed when the context is built.

Source: https://en.wikipedia.org/wiki/Church_encoding
"""

from tuber.lang.command import Update
from tuber.lang.error import GenericException
from tuber.lang.lexical import LazyKGrammar, parse_command
from tuber.lang.numerical import cnumber
from tuber.pure.context import Context
from tuber.pure.function import Function

DEFINITIONS = [
    # booleans
    "TRUE = ^x.^y.x",
    "FALSE = ^x.^y.y",
    "```IF PRED THEN ELSE = ``PRED THEN ELSE",
    "`NOT x = ``x FALSE TRUE",
    "``AND x y = ``x y FALSE",
    "``OR x y = ``x TRUE y",
    "``XOR x y = ``x `NOT y y",

    # pairs and lists
    "``CONS x y = ^f.``f x y",
    "`CAR x = `x TRUE",
    "`CDR x = `x FALSE",
    "NIL = FALSE",
    "`IS_NIL x = ``x ^h.^t.^d.FALSE TRUE",

    # fixed points
    "`Y f = `^x.`f`xx ^x.`f`xx",
    "`Z f = `^x.`f^y.``xxy ^x.`f^y.``xxy",

    # arithmetic
    "`IS_ZERO n = ``n ^_.FALSE TRUE",
    "`SUCC n = ^f.^x.`f``n f x",
    "``ADD m n = ^f.^x.``m f ``n f x",
    "``MUL m n = ^f.`m `n f",
    "``POW m n = `n m",
    "`PRED n = ^f.^x.```n ^g.^h.`h`g f ^u.x ^u.u",
    "``SUB m n = ``n PRED m",
    "``GTE m n = `IS_ZERO ``SUB n m",
    "``LTE m n = `IS_ZERO ``SUB m n",
    "``EQ m n = ``AND ``GTE m n ``LTE m n",
]

NUMERALS = range(11)


def define_all(context, lines):
    """Parses each Lazy_K definition in lines into context."""
    for line in lines:
        cmd = parse_command(line, [LazyKGrammar])
        if not isinstance(cmd, Update):
            raise GenericException("default definition '{}' does not define a function", line, internal=True)
        context.define(cmd.func)
    return context


def default_context():
    context = define_all(Context.builtins(), DEFINITIONS)

    for num in NUMERALS:
        context.define(Function(str(num), [], cnumber(num)))

    return context
