"""Named functions: closed, curried combinators of a fixed arity (0 or more)."""

from tuber.lang.error import GenericException
from tuber.pure.identifier import Identifier
from tuber.pure.term import join_tokens


class Function:
    """A named term with an ordered list of parameters. Similar to a chain of abstractions, except that a Function
    consumes all of its arguments at once and may take none at all.
    """
    __slots__ = ("name", "params", "body")

    def __init__(self, name, params, body):
        self.name = Identifier(name)
        self.params = tuple(Identifier(param) for param in params)
        self.body = body

        seen = set()
        for param in self.params:
            if param in seen:
                raise GenericException("malformed definition of '{}': parameter '{}' is repeated",
                                       (self.name, param), diagnosis=False)
            seen.add(param)

    @property
    def arity(self):
        return len(self.params)

    def apply(self, args):
        """Substitutes args for params, one parameter at a time in declared order."""
        args = list(args)
        if len(args) != self.arity:
            raise ValueError(f"{self.name} takes {self.arity} argument(s), got {len(args)}")

        body = self.body
        params = list(self.params)

        # a later parameter must not pick up a free variable of an earlier argument, e.g. ``kyz
        arg_vars = set().union(*(arg.free_vars() for arg in args))
        taken = arg_vars | body.names() | set(params)
        for idx, param in enumerate(params):
            if param in arg_vars:
                params[idx] = param.fresh_name(taken)
                taken.add(params[idx])
                body = body.rename(param, params[idx])

        for param, arg in zip(params, args):
            body = body.substitute(param, arg)
        return body

    def __eq__(self, other):
        return (isinstance(other, Function) and other.name == self.name and other.params == self.params
                and other.body == self.body)

    def __hash__(self):
        return hash((self.name, self.params, self.body))

    def __repr__(self):
        params = ", ".join(f"'{param}'" for param in self.params)
        return f"Function('{self.name}', [{params}], {self.body!r})"

    def __str__(self):
        """Lazy_K style definition, e.g. ``kxy = x"""
        lhs = join_tokens([self.name.label] + [param.label for param in self.params])
        return f"{'`' * self.arity}{lhs} = {self.body}"
