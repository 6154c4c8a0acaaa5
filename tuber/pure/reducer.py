"""Incremental normal-order (leftmost outermost) reduction.

A NormalOrderReducer flattens the left spine of its term into a head and a stack of arguments, each argument being
itself a NormalOrderReducer. Every call to next() fires exactly one reduction somewhere in the term and returns the
whole term afterwards:

    1. LEFT_TREE: if the head consumes n arguments and at least n are on the stack, apply it (a head taking no arguments
       needs at least one applied to it). This is always the outermost redex, so it is tried first, and again after each
       application.
    2. RIGHT_TREE(n): otherwise the head is stuck. Advance the n-th argument (left to right) by one step, moving on to
       the (n + 1)-th argument once the n-th one is in normal form.
    3. DONE: no argument can be reduced either, the term is in normal form.

Since each step is a single application, the sequence of steps can be cut at any length, which is what keeps
diverging terms usable.

Source: https://en.wikipedia.org/wiki/Lambda_calculus#Reduction_strategies
"""

from enum import Enum

from tuber.pure.term import Application


class Step(Enum):
    LEFT_TREE = "left tree"
    RIGHT_TREE = "right tree"
    DONE = "done"


class NormalOrderReducer:
    """Iterator over the reduction steps of term in context. context must not change while the reducer is in use."""

    def __init__(self, term, context):
        self.head = term
        self.context = context

        self.stack = []  # argument reducers, outermost (rightmost) argument at the bottom
        self.step = Step.LEFT_TREE
        self.position = 0  # argument examined in RIGHT_TREE, counted from the left

        self._peeked = None

    @property
    def current(self):
        """The whole term in its current, possibly partially reduced, state."""
        term = self.head
        for arg in reversed(self.stack):
            term = Application(term, arg.current)
        return term

    def __iter__(self):
        return self

    def __next__(self):
        term = self._advance()
        if term is None:
            raise StopIteration
        return term

    def eval_last(self, limit):
        """Advances up to limit steps. Returns (last term produced or None, whether or not the limit was reached
        before a normal form). The flag is exact: one step is peeked ahead and handed out by the next call to next().
        """
        if limit < 1:
            raise ValueError(f"limit must be positive, got {limit}")

        last = None
        for __ in range(limit):
            term = self._advance()
            if term is None:
                return last, False
            last = term

        peeked = self._advance()
        if peeked is None:
            return last, False

        self._peeked = peeked
        return last, True

    def _advance(self):
        if self._peeked is not None:
            term, self._peeked = self._peeked, None
            return term

        if self.step is Step.LEFT_TREE:
            term = self._left_tree()
            if term is not None:
                return term
        if self.step is Step.RIGHT_TREE:
            return self._right_tree()
        return None

    def _left_tree(self):
        """Applies the head if it has enough arguments, otherwise switches to RIGHT_TREE and returns None."""
        while isinstance(self.head, Application):
            self.stack.append(NormalOrderReducer(self.head.rhs, self.context))
            self.head = self.head.lhs

        arity = self.head.arity(self.context)
        # a function without parameters only fires once something is applied to it
        if arity is not None and (arity > 0 or self.stack) and len(self.stack) >= arity:
            split = len(self.stack) - arity
            args = [arg.current for arg in reversed(self.stack[split:])]

            result = self.head.apply(self.context, args)
            if result is not None:
                del self.stack[split:]
                self.head = result
                return self.current

        self.step = Step.RIGHT_TREE
        self.position = 0
        return None

    def _right_tree(self):
        """Advances the leftmost argument that is not yet in normal form."""
        while self.position < len(self.stack):
            arg = self.stack[len(self.stack) - 1 - self.position]
            if arg._advance() is not None:
                return self.current
            self.position += 1

        self.step = Step.DONE
        return None

    def __repr__(self):
        return f"NormalOrderReducer({self.current!r}, step={self.step.name})"
