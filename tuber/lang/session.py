"""Session control for the tuber language. A Session owns the context of named functions and executes one command at a
time against it, either printing the results (run) or handing them back as lines (execute).
"""

from collections import deque
from itertools import islice

from tuber.lang import display
from tuber.lang.command import Delete, Eval, EvalHead, EvalLast, EvalTail, Global, Info, Unlambda, Update
from tuber.lang.config import DEFAULT_STEP_LIMIT, DisplayStyle
from tuber.lang.lexical import parse_command
from tuber.lang.numerical import number
from tuber.pure.reducer import NormalOrderReducer


class Session:
    """Governs a tuber session, with control over the scope of named functions."""
    SH_FILE = "<in>"  # command-line interpreter filename

    def __init__(self, context, error_handler, style=DisplayStyle.LAZY_K, step_limit=DEFAULT_STEP_LIMIT, logger=None):
        if step_limit < 1:
            raise ValueError(f"step limit must be positive, got {step_limit}")

        self.context = context
        self.error_handler = error_handler
        self.style = style
        self.step_limit = step_limit
        self.logger = logger  # receives every command that parsed successfully

    def interpret(self, line):
        """Parses line, logs the command and runs it."""
        command = parse_command(line)
        if self.logger is not None:
            self.logger.push(command)
        self.run(command)

    def run(self, command):
        """Executes command, printing each line of output as soon as it is known."""
        for line in self._lines(command):
            print(line)

    def execute(self, command):
        """Executes command and returns its output as a list of lines. Warnings are still printed."""
        return list(self._lines(command))

    # ---------------------------------------------------------------------------------------------------------------- #

    def _term(self, term):
        return display.term(term, self.style)

    def _warn_limit(self):
        self.error_handler.warn("stopped after {} steps, may not be finished", str(self.step_limit), diagnosis=False)

    def _lines(self, command):
        if isinstance(command, Update):
            self.context.define(command.func)

        elif isinstance(command, Delete):
            if not self.context.delete(command.name):
                self.error_handler.warn("'{}' is not defined", str(command.name), diagnosis=False)

        elif isinstance(command, Eval):
            yield from self._head(command.term, self.step_limit)

        elif isinstance(command, EvalHead):
            yield from self._head(command.term, command.count)

        elif isinstance(command, EvalTail):
            yield from self._tail(command.term, command.count)

        elif isinstance(command, EvalLast):
            yield from self._last(command.term)

        elif isinstance(command, Info):
            func = self.context.get(command.name)
            if func is None:
                self.error_handler.warn("'{}' is not defined", str(command.name), diagnosis=False)
            else:
                yield display.function(func, self.style)

        elif isinstance(command, Global):
            for func in self.context:
                yield display.function(func, self.style)

        elif isinstance(command, Unlambda):
            yield self._term(command.term)
            yield f"== {self._term(command.term.unlambda())}"

        else:
            raise TypeError(f"not a command: {command!r}")

    def _head(self, term, count):
        """First count steps, never more than step_limit."""
        reducer = NormalOrderReducer(term, self.context)
        for step in islice(reducer, min(count, self.step_limit)):
            yield f"→ {self._term(step)}"

        if count >= self.step_limit and next(reducer, None) is not None:
            self._warn_limit()

    def _tail(self, term, count):
        """Last count steps among the first step_limit ones."""
        yield self._term(term)

        reducer = NormalOrderReducer(term, self.context)
        tail = deque(maxlen=count)
        total = 0
        for step in islice(reducer, self.step_limit):
            tail.append(step)
            total += 1

        if total > len(tail):
            yield "→ ..."
        for step in tail:
            yield f"→ {self._term(step)}"

        if total == self.step_limit and next(reducer, None) is not None:
            self._warn_limit()

    def _last(self, term):
        yield self._term(term)

        last, truncated = NormalOrderReducer(term, self.context).eval_last(self.step_limit)
        if last is not None:
            yield "→ ..."
            yield f"→ {self._term(last)}"

            num = number(last)
            if num is not None:
                yield f"== {num}"

        if truncated:
            self._warn_limit()
