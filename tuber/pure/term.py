"""Pure lambda calculus terms, extended with opaque symbols.

```
<term> ::= <identifier>            ; "variable"
                                   ; - free (resolved through a Context) or bound by an enclosing abstraction
         | ":" <identifier>        ; "symbol"
                                   ; - inert constant, never resolved and never reduced
         | "`" <term> <term>       ; "application"
         | "^" <identifier> "." <term>
                                   ; "abstraction"
                                   ; - one parameter per abstraction, currying is explicit
```

The notation above (Lazy_K style) is also what str() produces. Terms are immutable: substitution, renaming and bracket
abstraction always build new trees and never touch the original one.

Sources: https://en.wikipedia.org/wiki/Lambda_calculus#Capture-avoiding_substitutions,
         https://en.wikipedia.org/wiki/Combinatory_logic#Completeness_of_the_S-K_basis
"""

from abc import ABC, abstractmethod

from tuber.pure.identifier import Identifier

COMBINATORS = frozenset([Identifier("s"), Identifier("k"), Identifier("i")])


class LambdaTerm(ABC):
    """Superclass of the four term variants."""
    __slots__ = ()

    @staticmethod
    def of(label):
        """Builds a Symbol if label starts with ':', else a Variable."""
        if not label:
            raise ValueError("label cannot be empty")
        if label.startswith(":"):
            return Symbol(label[1:])
        return Variable(label)

    def __call__(self, arg):
        """`self arg"""
        if isinstance(arg, str):
            arg = LambdaTerm.of(arg)
        return Application(self, arg)

    @abstractmethod
    def free_vars(self):
        """Set of Identifiers that occur free in this term. Symbols are not variables and never count."""

    @abstractmethod
    def names(self):
        """Set of every Identifier used as a variable or as a bound parameter anywhere in this term."""

    def substitute(self, param, arg):
        """Returns self with every free occurrence of param replaced by arg. Bound parameters that would capture a free
        variable of arg are renamed on the way down (α-conversion).
        """
        return self._substitute(Identifier(param), arg, arg.free_vars(), set())

    @abstractmethod
    def _substitute(self, param, arg, free_vars, bound_vars):
        """Recursive step of substitute. free_vars are the free variables of arg, bound_vars the parameters bound on
        the path from the root of the substitution to self. Siblings must not share bound_vars.
        """

    @abstractmethod
    def rename(self, old, new):
        """Returns self with every free occurrence of the variable old renamed to new."""

    def arity(self, context):
        """Number of arguments this term consumes before it reduces, or None if it never reduces as a head."""
        return None

    def apply(self, context, args):
        """Reduces self applied to exactly arity(context) args. Returns None if self is not applicable."""
        return None

    @abstractmethod
    def unlambda(self):
        """Equivalent term without abstractions, over the combinators s, k and i."""

    @abstractmethod
    def _bracket(self, param):
        """Eliminates param from self, giving a combinator term T such that `T param reduces like self."""

    @abstractmethod
    def tokens(self):
        """Lazy_K style tokens of self, in print order."""

    def __str__(self):
        return join_tokens(self.tokens())


class Variable(LambdaTerm):
    """Name that is either bound by an enclosing abstraction or looked up in a Context."""
    __slots__ = ("name",)

    def __init__(self, name):
        self.name = Identifier(name)

    def free_vars(self):
        return {self.name}

    def names(self):
        return {self.name}

    def _substitute(self, param, arg, free_vars, bound_vars):
        if self.name == param:
            return arg
        return self

    def rename(self, old, new):
        if self.name == Identifier(old):
            return Variable(new)
        return self

    def arity(self, context):
        return context.arity(self.name)

    def apply(self, context, args):
        func = context.get(self.name)
        if func is None:
            return None
        return func.apply(args)

    def unlambda(self):
        return self

    def _bracket(self, param):
        if self.name == param:
            return Variable("i")
        return Application(Variable("k"), self)

    def tokens(self):
        return [self.name.label]

    def __eq__(self, other):
        return isinstance(other, Variable) and other.name == self.name

    def __hash__(self):
        return hash(("Variable", self.name))

    def __repr__(self):
        return f"Variable('{self.name}')"


class Symbol(LambdaTerm):
    """Opaque constant. Carried through every reduction unchanged."""
    __slots__ = ("name",)

    def __init__(self, name):
        self.name = Identifier(name)

    def free_vars(self):
        return set()

    def names(self):
        return set()

    def _substitute(self, param, arg, free_vars, bound_vars):
        return self

    def rename(self, old, new):
        return self

    def unlambda(self):
        return self

    def _bracket(self, param):
        # a symbol is a constant: wrap it in k like any other term that does not mention param
        return Application(Variable("k"), self)

    def tokens(self):
        return [f":{self.name.label}"]

    def __eq__(self, other):
        return isinstance(other, Symbol) and other.name == self.name

    def __hash__(self):
        return hash(("Symbol", self.name))

    def __repr__(self):
        return f"Symbol('{self.name}')"


class Application(LambdaTerm):
    """Application of lhs to rhs."""
    __slots__ = ("lhs", "rhs")

    def __init__(self, lhs, rhs):
        self.lhs = lhs
        self.rhs = rhs

    def free_vars(self):
        return self.lhs.free_vars() | self.rhs.free_vars()

    def names(self):
        return self.lhs.names() | self.rhs.names()

    def _substitute(self, param, arg, free_vars, bound_vars):
        return Application(
            self.lhs._substitute(param, arg, free_vars, set(bound_vars)),
            self.rhs._substitute(param, arg, free_vars, set(bound_vars))
        )

    def rename(self, old, new):
        return Application(self.lhs.rename(old, new), self.rhs.rename(old, new))

    def unlambda(self):
        return Application(self.lhs.unlambda(), self.rhs.unlambda())

    def _bracket(self, param):
        if self.rhs == Variable(param) and param not in self.lhs.free_vars():
            return self.lhs.unlambda()  # η: ^x.`Mx == M
        return Application(Application(Variable("s"), self.lhs._bracket(param)), self.rhs._bracket(param))

    def tokens(self):
        return ["`"] + self.lhs.tokens() + self.rhs.tokens()

    def __eq__(self, other):
        return isinstance(other, Application) and other.lhs == self.lhs and other.rhs == self.rhs

    def __hash__(self):
        return hash(("Application", self.lhs, self.rhs))

    def __repr__(self):
        return f"Application({self.lhs!r}, {self.rhs!r})"


class Abstraction(LambdaTerm):
    """Single parameter λ-abstraction."""
    __slots__ = ("param", "body")

    def __init__(self, param, body):
        self.param = Identifier(param)
        self.body = body

    def free_vars(self):
        return self.body.free_vars() - {self.param}

    def names(self):
        return self.body.names() | {self.param}

    def _substitute(self, param, arg, free_vars, bound_vars):
        if self.param == param or param not in self.body.free_vars():
            return self  # nothing free to replace below

        if self.param in free_vars:
            new_param = self.param.fresh_name(bound_vars | free_vars | self.body.names())
            bound_vars.add(new_param)
            body = self.body.rename(self.param, new_param)
            return Abstraction(new_param, body._substitute(param, arg, free_vars, bound_vars))

        bound_vars.add(self.param)
        return Abstraction(self.param, self.body._substitute(param, arg, free_vars, bound_vars))

    def rename(self, old, new):
        if self.param == Identifier(old):
            return self  # old is bound here, so it has no free occurrence below
        return Abstraction(self.param, self.body.rename(old, new))

    def arity(self, context):
        return 1

    def apply(self, context, args):
        arg, = args
        return self.body.substitute(self.param, arg)

    def unlambda(self):
        safe = self._clear_of_combinators()
        return safe.body._bracket(safe.param)

    def _bracket(self, param):
        # innermost parameter first, then the one being eliminated
        safe = self._clear_of_combinators()
        return safe.body._bracket(safe.param)._bracket(param)

    def _clear_of_combinators(self):
        """self, α-renamed if its parameter is s, k or i. Bracket abstraction inserts those combinators into the body,
        where they must not be mistaken for the parameter.
        """
        if self.param not in COMBINATORS:
            return self
        new_param = self.param.fresh_name(self.body.names() | COMBINATORS)
        return Abstraction(new_param, self.body.rename(self.param, new_param))

    def tokens(self):
        return ["^", self.param.label, "."] + self.body.tokens()

    def __eq__(self, other):
        return isinstance(other, Abstraction) and other.param == self.param and other.body == self.body

    def __hash__(self):
        return hash(("Abstraction", self.param, self.body))

    def __repr__(self):
        return f"Abstraction('{self.param}', {self.body!r})"


def is_long_token(token):
    """Whether token is a variable or symbol whose label is a long identifier."""
    label = token[1:] if token.startswith(":") else token
    return Identifier(label).is_long


def join_tokens(tokens):
    """Concatenates Lazy_K tokens, separating two adjacent long identifiers by a space so they do not merge."""
    result = ""
    prev = None
    for token in tokens:
        if prev is not None and is_long_token(prev) and is_long_token(token) and not token.startswith(":"):
            result += " "
        result += token
        prev = token
    return result
