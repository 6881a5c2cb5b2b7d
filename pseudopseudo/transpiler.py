"""transpiler

transpile(lines: Iterable[str]) -> Result
    Converts lines of Pseudopseudocode into Python code.
"""

import logging
from typing import Iterable, List, Tuple

from . import builtin, lang

logger = logging.getLogger(__name__)



# Helper functions

def classify(line: lang.Line) -> lang.Keyword:
    """Returns the first keyword matching the line.
    Raises UnrecognizedLine if no keyword matches.
    """
    code = line.code
    for keyword in builtin.KEYWORDS:
        if keyword.matches(code):
            return keyword
    raise builtin.UnrecognizedLine(line.lineNum)

def convertLine(line: lang.Line, indentLevel: int) -> Tuple[str, int]:
    """Converts a single line.
    Returns the Python line and the indent level for the next line.
    The line is indented at the level in effect before its own keyword
    is applied.
    """
    keyword = classify(line)
    pythonLine = (builtin.INDENT * indentLevel) + keyword.emit(line.code)
    indentLevel += keyword.delta
    if indentLevel < 0:
        raise builtin.UnexpectedClose(line.lineNum)
    return pythonLine, indentLevel



# Main conversion loop

def transpile(lines: Iterable[str]) -> lang.Result:
    """Converts lines of Pseudopseudocode into Python code.

    Conversion stops at the first error; no partial code is returned.
    Errors are returned in the result, not raised.
    """
    lines = list(lines)
    result: lang.Result = {
        'lines': lines,
        'code': None,
        'error': None,
    }
    indentLevel = 0
    output: List[str] = []
    try:
        for lineNum, src in enumerate(lines, start=1):
            line = lang.Line(lineNum, src)
            pythonLine, indentLevel = convertLine(line, indentLevel)
            logger.debug("%s -> %r", line, pythonLine)
            output += [pythonLine]
        if indentLevel != 0:
            raise builtin.IndentationMismatch()
    except builtin.TranspileError as err:
        logger.info("Conversion failed: %s", err.msg())
        result['error'] = err
        return result
    result['code'] = ''.join(pythonLine + '\n' for pythonLine in output)
    return result
