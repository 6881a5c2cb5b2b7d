"""Keywords, indentation, and errors supported in Pseudopseudocode.
"""

from typing import Optional

from . import lang



# Errors

class TranspileError(Exception):
    """Base exception class for all Pseudopseudo errors."""

    def __init__(self, msg: str, line: Optional[int] = None) -> None:
        super().__init__(msg)
        self.line = line

    def msg(self) -> str:
        return self.args[0]

    def report(self) -> str:
        """Returns the message in the format written to output files"""
        return f"ERROR: {self.msg().upper()}"

class UnrecognizedLine(TranspileError):
    """Raised for a line that matches no keyword."""

    def __init__(self, line: int) -> None:
        super().__init__(f"failed to process line {line}", line)

class UnexpectedClose(TranspileError):
    """Raised when a close keyword takes the indent level below 0."""

    def __init__(self, line: int) -> None:
        super().__init__(f"unexpected close at line {line}", line)

class IndentationMismatch(TranspileError):
    """Raised when blocks are still open after the last line."""

    def __init__(self) -> None:
        super().__init__("indentation mismatch")



# Indentation

INDENT = ' ' * 4



# Keywords
# Checked in order; the first match wins.
# Templates are formatted with the text after the keyword.

KEYWORDS = [
    lang.Keyword('FUNC ', 'PREFIX', "def {0}:", 1),
    lang.Keyword('ENDFUNC', 'EXACT', "", -1),
    # No trailing space: RETURN alone is a valid statement
    lang.Keyword('RETURN', 'PREFIX', "return {0}", 0),
    lang.Keyword('IF ', 'PREFIX', "if ({0}):", 1),
    lang.Keyword('ENDIF', 'EXACT', "", -1),
    lang.Keyword('WHILE ', 'PREFIX', "while ({0}):", 1),
    lang.Keyword('ENDWHILE', 'EXACT', "", -1),
    lang.Keyword('SET ', 'PREFIX', "{0}", 0),
    lang.Keyword('PRINT ', 'PREFIX', 'print({0}, end="")', 0),
    lang.Keyword('GETSTRING ', 'PREFIX', "{0} = input()", 0),
    lang.Keyword('CASTASNUM ', 'PREFIX', "{0} = float({0})", 0),
    # Comments are the same in both languages
    lang.Keyword('#', 'PREFIX', "#{0}", 0),
    lang.Keyword('', 'EXACT', "", 0),
]
