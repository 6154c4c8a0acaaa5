"""Command history. Every command that parses is appended, in Lazy_K style, to the newest *.txt file of the history
directory; on startup the definitions recorded there are replayed so that a context survives between runs.
"""

import glob
import os
from datetime import datetime, timezone

from tuber.lang import display
from tuber.lang.command import Delete, Update
from tuber.lang.config import DisplayStyle
from tuber.lang.error import GenericException
from tuber.lang.lexical import parse_command


def history_file(directory):
    """Returns the path of the newest history file in directory, creating the directory and an empty file if there
    is none. Names are UTC timestamps, so the newest file is also the greatest name.
    """
    existing = glob.glob(os.path.join(glob.escape(directory), "*.txt"))
    if existing:
        return max(existing)

    try:
        os.makedirs(directory, exist_ok=True)
        path = os.path.join(directory, datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S%fZ") + ".txt")
        open(path, "a").close()
    except OSError:
        raise GenericException("history file could not be created in '{}'", directory, diagnosis=False)

    return path


def rebuild_context(lines, context, error_handler, path="<history>"):
    """Replays the definitions and deletions in lines on top of context, which is modified in place and returned.
    Other commands are ignored. Lines that do not parse are skipped with a warning.
    """
    error_handler.register_file(path)

    for line_num, line in enumerate(lines, start=1):
        line = line.rstrip("\n")
        if not line.strip():
            continue

        error_handler.register_line(path, line, line_num)
        try:
            command = parse_command(line)
        except GenericException:
            error_handler.warn("skipped unreadable history line '{}'", line, diagnosis=False)
            command = None
        error_handler.remove_line(path)

        if isinstance(command, Update):
            context.define(command.func)
        elif isinstance(command, Delete):
            context.delete(command.name)

    return context


class Logger:
    """Appends commands to a text stream, one per line."""

    def __init__(self, file):
        self.file = file

    def push(self, command):
        self.file.write(display.command(command, DisplayStyle.LAZY_K) + "\n")
        self.file.flush()
