"""Lexical analysis for the tuber language: recursive descent parsing of a single line into a Command. Two surface
syntaxes are understood for terms, and they share the command grammar.

Identifiers are either a single lowercase letter or a run of digits, uppercase letters and underscores, so `ab` is two
identifiers while `AB` is one. Symbols are identifiers prefixed with ':'.

Lazy_K style terms:

```
<term>   ::= "`" <term> <term>              ; application, prefix notation: ``abc = ((a b) c)
           | "^" <ident> "." <term>         ; abstraction
           | ":" <ident>                    ; symbol
           | <ident>                        ; variable
<lhs>    ::= "`" <lhs> <ident> | <ident>    ; ``fxy defines f with parameters x and y
```

ECMAScript style terms:

```
<term>   ::= <callee> <args>+               ; application: f(a, b)(c) = (((f a) b) c)
           | <params> "=>" <term>           ; abstraction, the body extends as far as possible
           | "(" <term> ")" | ":" <ident> | <ident>
<callee> ::= "(" <term> ")" | ":" <ident> | <ident>
<args>   ::= "(" <term> ("," <term>)* ")"
<params> ::= <ident> | "(" <ident> ("," <ident>)* ")"
<lhs>    ::= <ident> | <ident> "(" <ident> ("," <ident>)* ")"
```

Commands:

```
<command> ::= <lhs> "=" <term>              ; define (or delete, if written f = f)
            | "!" <digits> <term>           ; first N steps
            | "!-" <digits> <term>          ; last N steps
            | "!" <term>                    ; last step
            | "??" <term>                   ; bracket abstraction
            | "?" <ident>                   ; show one definition
            | "?"                           ; show every definition
            | <term>                        ; every step
```
"""

from abc import ABC, abstractmethod

from tuber.lang.command import Delete, Eval, EvalHead, EvalLast, EvalTail, Global, Info, Unlambda, Update
from tuber.lang.error import GenericException
from tuber.pure.function import Function
from tuber.pure.identifier import Identifier
from tuber.pure.term import Abstraction, Application, Symbol, Variable


class ParseFailure(Exception):
    """Raised by a grammar rule that does not match. Caught by Grammar.attempt, which backtracks."""

    def __init__(self, pos, expected):
        super().__init__(f"expected {expected} at {pos}")
        self.pos = pos
        self.expected = expected


class Grammar(ABC):
    """Superclass of both surface syntaxes. Holds the scanning helpers and the command grammar; subclasses define how
    terms and definition left-hand sides are written.
    """
    name = None

    def __init__(self, text):
        self.text = text
        self.pos = 0

    @abstractmethod
    def term(self):
        """Parses a term at self.pos."""

    @abstractmethod
    def lhs(self):
        """Parses the left-hand side of a definition. Returns (name, [params])."""

    # ------------------------------------------------------------------------------------------------------------ #

    def fail(self, expected):
        raise ParseFailure(self.pos, expected)

    def spaces(self):
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1

    def peek(self):
        """Next non-space character, or '' at the end of the text."""
        self.spaces()
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def expect(self, token):
        self.spaces()
        if not self.text.startswith(token, self.pos):
            self.fail(f"'{token}'")
        self.pos += len(token)

    def end(self):
        self.spaces()
        if self.pos != len(self.text):
            self.fail("end of line")

    def attempt(self, *rules):
        """Returns the result of the first rule that matches, restoring self.pos after each failed one. If none match,
        re-raises the failure that got furthest into the text.
        """
        start = self.pos
        furthest = None
        for rule in rules:
            try:
                return rule()
            except ParseFailure as failure:
                if furthest is None or failure.pos > furthest.pos:
                    furthest = failure
                self.pos = start
        raise furthest

    def identifier(self):
        char = self.peek()
        if "a" <= char <= "z":
            self.pos += 1
            return Identifier(char)

        start = self.pos
        while self.pos < len(self.text) and Identifier(self.text[self.pos]).is_long:
            self.pos += 1
        if self.pos == start:
            self.fail("identifier")
        return Identifier(self.text[start:self.pos])

    def digits(self):
        start = self.pos
        while self.pos < len(self.text) and self.text[self.pos].isdigit():
            self.pos += 1
        if self.pos == start:
            self.fail("number")
        return int(self.text[start:self.pos])

    def symbol(self):
        self.expect(":")
        return Symbol(self.identifier())

    def variable(self):
        return Variable(self.identifier())

    def separated(self, rule):
        """'(' rule (',' rule)* ')'"""
        self.expect("(")
        items = [rule()]
        while self.peek() == ",":
            self.pos += 1
            items.append(rule())
        self.expect(")")
        return items

    # ------------------------------------------------------------------------------------------------------------ #

    def command(self):
        return self.attempt(
            self.update,
            self.eval_tail,
            self.eval_head,
            self.eval_last,
            self.unlambda,
            self.info,
            self.global_,
            self.eval
        )

    def whole_term(self):
        term = self.term()
        self.end()
        return term

    def update(self):
        name, params = self.lhs()
        self.expect("=")
        body = self.term()
        self.end()

        if not params and body == Variable(name):
            return Delete(name)
        return Update(Function(name, params, body))

    def eval(self):
        term = self.term()
        self.end()
        return Eval(term)

    def eval_last(self):
        self.expect("!")
        term = self.term()
        self.end()
        return EvalLast(term)

    def eval_head(self):
        self.expect("!")
        count = self.digits()
        term = self.term()
        self.end()
        return EvalHead(count, term)

    def eval_tail(self):
        self.expect("!-")
        count = self.digits()
        term = self.term()
        self.end()
        return EvalTail(count, term)

    def unlambda(self):
        self.expect("??")
        term = self.term()
        self.end()
        return Unlambda(term)

    def info(self):
        self.expect("?")
        name = self.identifier()
        self.end()
        return Info(name)

    def global_(self):
        self.expect("?")
        self.end()
        return Global()


class LazyKGrammar(Grammar):
    name = "Lazy_K"

    def term(self):
        char = self.peek()
        if char == "`":
            self.pos += 1
            lhs = self.term()
            return Application(lhs, self.term())
        elif char == "^":
            self.pos += 1
            param = self.identifier()
            self.expect(".")
            return Abstraction(param, self.term())
        elif char == ":":
            return self.symbol()
        return self.variable()

    def lhs(self):
        if self.peek() == "`":
            self.pos += 1
            name, params = self.lhs()
            return name, params + [self.identifier()]
        return self.identifier(), []


class ECMAScriptGrammar(Grammar):
    name = "ECMAScript"

    def term(self):
        return self.attempt(self.application, self.abstraction, self.parenthesized, self.symbol, self.variable)

    def parenthesized(self):
        self.expect("(")
        term = self.term()
        self.expect(")")
        return term

    def callee(self):
        return self.attempt(self.parenthesized, self.symbol, self.variable)

    def application(self):
        term = self.callee()
        if self.peek() != "(":
            self.fail("'('")

        while self.peek() == "(":
            for arg in self.separated(self.term):
                term = Application(term, arg)
        return term

    def abstraction(self):
        params = self.attempt(lambda: self.separated(self.identifier), lambda: [self.identifier()])
        self.expect("=>")
        body = self.term()
        for param in reversed(params):
            body = Abstraction(param, body)
        return body

    def lhs(self):
        name = self.identifier()
        if self.peek() == "(":
            return name, self.separated(self.identifier)
        return name, []


GRAMMARS = [LazyKGrammar, ECMAScriptGrammar]


def parse(text, rule, grammars=None):
    """Runs rule (a Grammar method name) over the whole of text with each grammar in turn and returns the first
    result. Raises a GenericException pointing at the furthest position any grammar reached.
    """
    furthest = None
    for grammar_cls in grammars or GRAMMARS:
        grammar = grammar_cls(text)
        try:
            return getattr(grammar, rule)()
        except ParseFailure as failure:
            if furthest is None or failure.pos > furthest.pos:
                furthest = failure

    pos = min(furthest.pos, max(len(text) - 1, 0))
    raise GenericException("'{}' is not valid tuber grammar (expected {})", (text, furthest.expected),
                           start=pos, end=pos + 1)


def parse_command(text, grammars=None):
    """Parses one line into a Command. Lazy_K style is tried before ECMAScript style."""
    if not text.strip():
        raise GenericException("command cannot be empty", diagnosis=False)
    return parse(text, "command", grammars)


def parse_term(text, grammars=None):
    """Parses a whole line as a single term."""
    return parse(text, "whole_term", grammars)
