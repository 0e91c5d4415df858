"""Handles interactive/command-line mode for the loxite interpreter. Uses cmd as backend."""

import cmd


class Shell(cmd.Cmd):
    """Loxite interpreter shell. Every line is an independent expression."""
    intro = "Loxite expression interpreter :: Python backend\nType 'help' for more information, 'exit' to quit."
    prompt = "> "

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.sess = sess

    def default(self, line):
        """Evaluates arbitrary loxite expression."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            self.sess.reset()
            self.sess.run(line)

            while self.sess.results:
                print(self.sess.pop(), file=self.stdout)

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        print("Welcome to the loxite interpreter!\n\n"
              "Type an expression and press enter to evaluate it. Numbers, strings, true,\n"
              "false and nil can be combined with arithmetic (+ - * /), comparison\n"
              "(< <= > >=), equality (== !=), negation (- !) and parentheses.\n\n"
              "Try '(1 + 2) * 3', '\"lox\" + \"ite\"' or '!nil == true'.", file=self.stdout)

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return ""

    def do_EOF(self, arg):
        """Exits interpreter."""
        print(file=self.stdout)
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True
