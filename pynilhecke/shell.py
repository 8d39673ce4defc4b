"""
Interactive shell for PyNilHecke.

Commands:

    print   read a polynomial and print it
    add     read p1 and p2 and print their sum
    mul     read p1 and p2 and print their product
    p       read an operator word (e.g. "s1 d3") and a polynomial, apply
            the operators right to left
    schud   read a rank n and a seed polynomial, print the closure
    help    list the commands
    quit    leave the shell (also "bye" or an empty line)
"""

import sys
from typing import Callable, Optional, TextIO

from pynilhecke import __version__
from pynilhecke.operators import apply_word
from pynilhecke.parser import parse_polynomial
from pynilhecke.schubert import schubert_polynomials
from pynilhecke.utils import InvalidStrand, NilHeckeError, ParseError, check_rank

try:
    import readline  # noqa: F401  (line editing and history for input())
except ImportError:
    pass

QUIT_COMMANDS = ("", "quit", "bye")


class NilHeckeShell:
    """Prompt loop dispatching the shell commands."""

    def __init__(self,
                 input_fn: Callable[[str], str] = input,
                 out: Optional[TextIO] = None,
                 err: Optional[TextIO] = None,
                 verbose: bool = False):
        self.input_fn = input_fn
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr
        self.verbose = verbose
        self.commands = {
            "print": self.do_print,
            "add": self.do_add,
            "mul": self.do_mul,
            "p": self.do_p,
            "schud": self.do_schud,
            "help": self.do_help,
        }

    def prompt(self, text: str) -> str:
        return self.input_fn(f"{text} ").strip()

    def write(self, line: str = "") -> None:
        print(line, file=self.out)

    def run(self) -> int:
        """Run until a quit command or end of input."""
        self.write(f"This is NILHECKE version {__version__}.")
        while True:
            self.write()
            try:
                command = self.prompt("function:")
            except EOFError:
                break
            if command in QUIT_COMMANDS:
                break
            handler = self.commands.get(command)
            if handler is None:
                self.write("unknown function")
                continue
            try:
                handler()
            except EOFError:
                break
            except NilHeckeError as e:
                self.report(e)
        self.write("Bye!")
        return 0

    def report(self, error: Exception) -> None:
        print(f"error: {error}", file=self.err)
        cause = error.__cause__
        while cause is not None:
            print(f"caused by: {cause}", file=self.err)
            cause = cause.__cause__

    def do_print(self) -> None:
        self.write(str(parse_polynomial(self.prompt("polynomial:"))))

    def do_add(self) -> None:
        p1 = parse_polynomial(self.prompt("p1:"))
        p2 = parse_polynomial(self.prompt("p2:"))
        self.write(f"{p1} + {p2} = {p1 + p2}")

    def do_mul(self) -> None:
        p1 = parse_polynomial(self.prompt("p1:"))
        p2 = parse_polynomial(self.prompt("p2:"))
        self.write(f"{p1} * {p2} = {p1 * p2}")

    def do_p(self) -> None:
        word = self.prompt("operators:")
        poly = parse_polynomial(self.prompt("poly:"))
        self.write(f"result: {apply_word(poly, word)}")

    def do_schud(self) -> None:
        text = self.prompt("n:")
        try:
            n = int(text)
        except ValueError as e:
            raise InvalidStrand(f"invalid number: {text!r}") from e
        check_rank(n)
        seed = parse_polynomial(self.prompt("seed:"))
        rounds = self.prompt("rounds (empty for seed degree):")
        degree = None
        if rounds:
            try:
                degree = int(rounds)
            except ValueError as e:
                raise ParseError(f"invalid number of rounds: {rounds!r}") from e
        result = schubert_polynomials(n, seed, degree=degree, verbose=self.verbose)
        self.write(f"schubert polynomials ({result.degree} rounds):")
        for poly in result:
            self.write(str(poly))

    def do_help(self) -> None:
        self.write(__doc__.split("Commands:", 1)[1].rstrip())


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    return NilHeckeShell(verbose="--verbose" in argv or "-v" in argv).run()


if __name__ == "__main__":
    sys.exit(main())
