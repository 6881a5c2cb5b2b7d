"""lang.py
This module defines the entities and types used by Pseudopseudo.

Keyword
    A row of the keyword table, with its output template

Line
    A line of Pseudopseudocode and its line number

Result
    The outcome of a conversion
"""
from dataclasses import dataclass
from typing import (
    get_args,
    List,
    Literal as LiteralType,
    Optional,
    TypedDict,
)

Match = LiteralType["PREFIX", "EXACT"]
MATCHES = get_args(Match)



@dataclass(frozen=True)
class Keyword:
    """A keyword recognised at the start of a line.

    Arguments/Attributes
    --------------------
    - word: str
        The keyword text, including any required trailing space
    - match: Match
        PREFIX keywords match the start of a line, EXACT keywords the
        whole line
    - template: str
        Format string for the output line; {0} is replaced by the text
        after the keyword
    - delta: int
        Change in indentation level caused by the keyword
    """
    word: str
    match: Match
    template: str
    delta: int

    def __post_init__(self) -> None:
        if self.match not in MATCHES:
            raise ValueError(f"Invalid match mode {self.match!r}")

    def matches(self, code: str) -> bool:
        if self.match == "EXACT":
            return code == self.word
        return code.startswith(self.word)

    def after(self, code: str) -> str:
        """Returns everything in code after the keyword."""
        return code[len(self.word):]

    def emit(self, code: str) -> str:
        return self.template.format(self.after(code))


@dataclass(eq=False, frozen=True)
class Line:
    """A line of source, with its 1-based line number for error
    reporting.
    """
    __slots__ = ("lineNum", "src")
    lineNum: int
    src: str

    @property
    def code(self) -> str:
        """The line with leading whitespace removed."""
        return self.src.lstrip()

    def __str__(self) -> str:
        return f"[Line {self.lineNum}] {self.src}"


class Result(TypedDict):
    """The result dict returned by a conversion"""
    lines: List[str]  # list of source lines as strings
    code: Optional[str]  # Generated Python code, None on error
    error: Optional[Exception]  # TranspileError raised by the transpiler
