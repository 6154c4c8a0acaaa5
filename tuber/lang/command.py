"""Statements of the tuber language, as produced by lang.lexical and consumed by lang.session."""

from dataclasses import dataclass

from tuber.pure.function import Function
from tuber.pure.identifier import Identifier
from tuber.pure.term import LambdaTerm


class Command:
    """Superclass of every statement."""


@dataclass(frozen=True)
class Delete(Command):
    """f = f: removes f from the context."""
    name: Identifier


@dataclass(frozen=True)
class Update(Command):
    """``fxy = body: defines f, replacing any previous definition."""
    func: Function


@dataclass(frozen=True)
class Eval(Command):
    """expr: shows every reduction step."""
    term: LambdaTerm


@dataclass(frozen=True)
class EvalLast(Command):
    """! expr: shows the last reduction step only."""
    term: LambdaTerm


@dataclass(frozen=True)
class EvalHead(Command):
    """!N expr: shows the first N reduction steps."""
    count: int
    term: LambdaTerm


@dataclass(frozen=True)
class EvalTail(Command):
    """!-N expr: shows the last N reduction steps."""
    count: int
    term: LambdaTerm


@dataclass(frozen=True)
class Info(Command):
    """? f: shows the definition of f."""
    name: Identifier


@dataclass(frozen=True)
class Global(Command):
    """?: shows every definition."""


@dataclass(frozen=True)
class Unlambda(Command):
    """?? expr: shows expr rewritten without abstractions."""
    term: LambdaTerm
