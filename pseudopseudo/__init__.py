"""The main entry point to the pseudopseudo package.

Pseudopseudo
    Converts Pseudopseudocode from a list of lines or a file into Python
"""
import sys
from typing import Iterable, List, MutableMapping
from typing import Callable as function

# Log errors to pseudopseudo.log
import logging
logging.basicConfig(
    filename='pseudopseudo.log',
    filemode='w',
    format='%(name)s - %(levelname)s - %(message)s',
)

from pseudopseudo import builtin, lang
import pseudopseudo.system as system

from pseudopseudo.lang import Result
from pseudopseudo.transpiler import transpile



__version__ = '1.0.0'
VERSION = f"Pseudopseudo {__version__}"
HELP = """usage: pseudopseudo [option] infile outfile
Options and arguments:
-h      : print this help message and exit (also --help)
infile  : Pseudopseudocode read from text file
outfile : Python code written to file
""".strip()

logger = logging.getLogger(__name__)


def logException(msg="Unexpected error has occurred") -> None:
    """Helper function that logs unexpected (Python) exceptions.
    If logException is invoked, it means Pseudopseudo has encountered
    an error it should not have.
    """
    # https://docs.python.org/3/library/logging.html#logging.Logger.exception
    logging.exception(msg)
    print("Pseudopseudo ERROR: " + msg)
    print("The details of this error have been logged in pseudopseudo.log.")

def report(lines: List[str], err: builtin.TranspileError) -> None:
    """Prints the offending line, if any, and the error message."""
    errType = type(err).__name__ + ':'
    if err.line:
        print(lang.Line(err.line, lines[err.line - 1]))
    print(errType, err.msg())


class Pseudopseudo:
    """A Pseudopseudocode to Python transpiler.

    Pseudopseudo wraps the transpiler with file handling:
    1. Reading
       The source file is read into a list of lines.
    2. Converting
       Each line is mapped to a line of Python by its keyword, and
       indented according to the enclosing blocks.
    3. Writing
       The generated code, or the error report if conversion failed, is
       written to the destination file.
    """

    def __init__(self) -> None:
        self.handlers: MutableMapping[str, function] = {
            'read': system.readLines,
            'write': system.writeCode,
        }

    def registerHandlers(self, **kwargs: function) -> None:
        """Pseudopseudo may register custom handlers e.g. for testing
        purposes. Handlers are registered using a str key.

        The following handlers are currently supported:
        - read(srcfile) -> lines
        - write(dstfile, code)
        """
        for key, handler in kwargs.items():
            if key not in self.handlers:
                raise KeyError(f"Invalid handler key {repr(key)}")
            self.handlers[key] = handler

    def convert(self, lines: Iterable[str]) -> Result:
        """Converts lines of Pseudopseudocode."""
        lines = list(lines)
        try:
            return transpile(lines)
        except Exception:
            logException()
            return {'lines': lines, 'code': None, 'error': None}

    def convertFile(self, srcfile: str) -> Result:
        """Converts code from the file with the provided srcfile path."""
        return self.convert(self.handlers['read'](srcfile))

    def compileFile(self, srcfile: str, dstfile: str) -> Result:
        """Converts code from srcfile and writes it to dstfile.
        If conversion fails, the error report is written instead.
        """
        result = self.convertFile(srcfile)
        if result['error']:
            self.handlers['write'](dstfile, result['error'].report())
        elif result['code'] is not None:
            self.handlers['write'](dstfile, result['code'])
        return result



# Error codes
# https://gist.github.com/bojanrajkovic/831993

def main():
    """This is the entry point which shell scripts should invoke."""
    args = sys.argv[1:]

    # Argument handling
    if args and args[0] in ('-h', '--help'):
        print(HELP)
        sys.exit(0)
    for arg in args:
        if arg.startswith('-'):
            print(f"Unknown option: {arg}")
            print("Try `pseudopseudo -h' for more information.")
            sys.exit(64)  # command line usage error
    if len(args) != 2:
        print(HELP)
        sys.exit(64)  # command line usage error

    srcfile, dstfile = args
    print(f"Input file: {srcfile}")
    print(f"Output file: {dstfile}")
    pseudo = Pseudopseudo()
    try:
        result = pseudo.compileFile(srcfile, dstfile)
    except OSError as error:
        logger.error("Could not convert %r to %r: %s", srcfile, dstfile, error)
        print(error)
        print("DONE!")
        sys.exit(74)  # input/output error
    if result['error']:
        report(result['lines'], result['error'])
    print("DONE!")

    # Error handling
    if result['error']:
        sys.exit(65)  # data format error
    elif result['code'] is None:
        sys.exit(70)  # internal software error
    sys.exit(0)
