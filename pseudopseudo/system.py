"""system
File handlers used by Pseudopseudo.

readLines
    Reads a text file into a list of lines.

writeCode
    Writes a string to a text file.
"""

from typing import List



def readLines(srcfile: str) -> List[str]:
    """Returns the lines of the file, without line terminators."""
    with open(srcfile, 'r') as f:
        return f.read().splitlines()

def writeCode(dstfile: str, code: str) -> None:
    """Writes code to the file, replacing its contents."""
    with open(dstfile, 'w') as f:
        f.write(code)
