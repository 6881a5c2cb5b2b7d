import unittest

import pseudopseudo
from tests import capture, source

TESTCODE = """
GETSTRING age
CASTASNUM age
IF age >= 18
    PRINT "adult"
ENDIF
"""

class HandlerTestCase(unittest.TestCase):
    def setUp(self):
        self.pseudo = pseudopseudo.Pseudopseudo()
        captureWrite, returnWritten = capture('write')
        self.pseudo.registerHandlers(
            read=source(TESTCODE),
            write=captureWrite,
        )
        self.result = self.pseudo.compileFile("age.txt", "age.py")
        self.written = returnWritten()

    def test_handlers(self):
        # Conversion should complete successfully
        self.assertIsNone(self.result['error'])

    def test_written(self):
        self.assertEqual(
            self.written,
            {
                "age.py": (
                    "age = input()\n"
                    "age = float(age)\n"
                    "if (age >= 18):\n"
                    "    print(\"adult\", end=\"\")\n"
                    "    \n"
                ),
            },
        )

    def test_invalid_handler(self):
        with self.assertRaises(KeyError):
            self.pseudo.registerHandlers(output=print)


class ErrorWriteTestCase(unittest.TestCase):
    def test_error_written(self):
        pseudo = pseudopseudo.Pseudopseudo()
        captureWrite, returnWritten = capture('write')
        pseudo.registerHandlers(
            read=source("WHILE True\nPRINT 1"),
            write=captureWrite,
        )
        result = pseudo.compileFile("loop.txt", "loop.py")
        self.assertIs(
            type(result['error']),
            pseudopseudo.builtin.IndentationMismatch,
        )
        self.assertEqual(
            returnWritten(),
            {"loop.py": "ERROR: INDENTATION MISMATCH"},
        )
