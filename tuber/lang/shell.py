"""Handles interactive mode for the tuber interpreter. Uses cmd as backend."""

import cmd

from tuber.lang.session import Session


class Shell(cmd.Cmd):
    """Lambda calculus evaluation shell."""
    intro = "tuber :: step-by-step lambda calculus\nType 'help' for more information."
    prompt = "> "

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess
        self.sess.error_handler.fatal = False
        self.sess.error_handler.register_file(Session.SH_FILE)

        self.line_num = 0

    def default(self, line):
        """Executes arbitrary tuber command."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            self.line_num += 1
            self.sess.error_handler.register_line(Session.SH_FILE, line, self.line_num)
            self.sess.interpret(line)
            self.sess.error_handler.remove_line(Session.SH_FILE)

    def onecmd(self, line):
        """Sends '?' and '!' commands to default instead of cmd's help and shell hooks."""
        if line.lstrip().startswith(("?", "!")):
            return self.default(line)
        return super().onecmd(line)

    def do_help(self, arg):
        """Prints a short introduction to the syntax instead of per-command docs."""
        print("Welcome to tuber!\n\n"
              "Terms are written in Lazy_K style (`fx, ^x.x, :a) or ECMAScript style \n"
              "(f(x), x => x, :a). Try defining 'K' with '``Kxy = x', then evaluate \n"
              "'``K:a:b' to watch it reduce to ':a'.\n\n"
              "  expr       show every step      ! expr     show the last step\n"
              "  !N expr    show the first N     !-N expr   show the last N\n"
              "  ? name     show a definition    ?          show every definition\n"
              "  ?? expr    rewrite as s/k/i     f = f      delete f")

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return ""

    def do_EOF(self, arg):
        """Exits interpreter."""
        print()
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True
