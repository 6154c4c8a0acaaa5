"""Namespace of named functions available to a reduction."""

from tuber.pure.function import Function
from tuber.pure.identifier import Identifier
from tuber.pure.term import Variable


class Context:
    """Mapping of Identifier: Function. Entries are only ever replaced or removed as a whole."""

    def __init__(self):
        self._functions = {}

    @classmethod
    def from_functions(cls, functions):
        context = cls()
        for func in functions:
            context.define(func)
        return context

    @classmethod
    def builtins(cls):
        """Context holding the s, k and i combinators."""
        x, y, z = Variable("x"), Variable("y"), Variable("z")
        return cls.from_functions([
            Function("i", ["x"], x),
            Function("k", ["x", "y"], x),
            Function("s", ["x", "y", "z"], x(z)(y(z))),
        ])

    def define(self, func):
        """Adds func, replacing any function with the same name."""
        self._functions[func.name] = func

    def delete(self, name):
        """Removes name. Returns whether or not it was defined."""
        return self._functions.pop(Identifier(name), None) is not None

    def get(self, name):
        return self._functions.get(Identifier(name))

    def arity(self, name):
        func = self.get(name)
        return None if func is None else func.arity

    def __contains__(self, name):
        return Identifier(name) in self._functions

    def __len__(self):
        return len(self._functions)

    def __iter__(self):
        """Functions sorted by name."""
        return iter(sorted(self._functions.values(), key=lambda func: func.name.label))

    def __eq__(self, other):
        return isinstance(other, Context) and other._functions == self._functions

    def __repr__(self):
        return f"Context({len(self)} functions)"

    def __str__(self):
        return "\n".join(str(func) for func in self)
