"""Printing of terms, functions and commands in either surface syntax. Lazy_K style is the native str() of the pure
objects; ECMAScript style is built here.
"""

from tuber.lang.command import Delete, Eval, EvalHead, EvalLast, EvalTail, Global, Info, Unlambda, Update
from tuber.lang.config import DisplayStyle
from tuber.pure.term import Abstraction, Application, Symbol, Variable


def ecmascript_term(term):
    """x(y, z), (x, y) => x, :a"""
    if isinstance(term, Variable):
        return term.name.label

    elif isinstance(term, Symbol):
        return f":{term.name.label}"

    elif isinstance(term, Application):
        args = []
        while isinstance(term, Application):
            args.insert(0, ecmascript_term(term.rhs))
            term = term.lhs

        callee = ecmascript_term(term)
        if isinstance(term, Abstraction):
            callee = f"({callee})"
        return f"{callee}({', '.join(args)})"

    params = []
    while isinstance(term, Abstraction):
        params.append(term.param.label)
        term = term.body

    if len(params) == 1:
        return f"{params[0]} => {ecmascript_term(term)}"
    return f"({', '.join(params)}) => {ecmascript_term(term)}"


def ecmascript_function(func):
    """f(x, y) = body, or NAME = body for functions without parameters."""
    if func.arity == 0:
        return f"{func.name} = {ecmascript_term(func.body)}"
    return f"{func.name}({', '.join(param.label for param in func.params)}) = {ecmascript_term(func.body)}"


def term(value, style=DisplayStyle.LAZY_K):
    if style is DisplayStyle.ECMASCRIPT:
        return ecmascript_term(value)
    return str(value)


def function(func, style=DisplayStyle.LAZY_K):
    if style is DisplayStyle.ECMASCRIPT:
        return ecmascript_function(func)
    return str(func)


def command(cmd, style=DisplayStyle.LAZY_K):
    """Text that parses back into cmd."""
    if isinstance(cmd, Delete):
        return f"{cmd.name} = {cmd.name}"
    elif isinstance(cmd, Update):
        return function(cmd.func, style)
    elif isinstance(cmd, Eval):
        return term(cmd.term, style)
    elif isinstance(cmd, EvalLast):
        return f"! {term(cmd.term, style)}"
    elif isinstance(cmd, EvalHead):
        return f"!{cmd.count} {term(cmd.term, style)}"
    elif isinstance(cmd, EvalTail):
        return f"!-{cmd.count} {term(cmd.term, style)}"
    elif isinstance(cmd, Info):
        return f"? {cmd.name}"
    elif isinstance(cmd, Global):
        return "?"
    elif isinstance(cmd, Unlambda):
        return f"?? {term(cmd.term, style)}"
    raise TypeError(f"not a command: {cmd!r}")
