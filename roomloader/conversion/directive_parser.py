"""
Parser for spawn directives embedded in object names.

A directive object is named ``f.<call>`` where::

    call       := identifier [ '(' arglist ')' ]
    arglist    := arg { ',' arg } | empty
    arg        := quoted-string | identifier
    identifier := run of [A-Za-z0-9_-], possibly empty
    quoted     := '"' { any character except '"' } '"'

Quoted strings have no escapes.  Blanks around argument-list punctuation
are skipped; anything after the call (e.g. a ``.001`` duplicate suffix
added by the modeling tool) is ignored.
"""

from __future__ import annotations
import string
from typing import Dict, List, Tuple

from ..validation.core import MalformedCall, UnterminatedString

_IDENTIFIER_CHARS = frozenset(string.ascii_letters + string.digits + "_-")
_BLANKS = frozenset(" \t")

# Appended to the input so lookahead never runs past the buffer
_END = "\0"


class _Scanner:
    """Character cursor with one character of lookahead."""

    def __init__(self, text: str):
        self.text = text
        self._buf = text + _END
        self.pos = 0

    def head(self) -> str:
        return self._buf[self.pos]

    def at_end(self) -> bool:
        return self.head() == _END

    def accept(self, what: str) -> bool:
        if self.at_end() or self.head() != what:
            return False
        self.pos += 1
        return True

    def expect(self, what: str) -> None:
        if not self.accept(what):
            found = "end of input" if self.at_end() else repr(self.head())
            raise MalformedCall(
                f"Expected '{what}' at offset {self.pos} in '{self.text}', found {found}",
                self.text, self.pos,
            )

    def skip_blanks(self) -> None:
        while self.head() in _BLANKS:
            self.pos += 1

    def identifier(self) -> str:
        start = self.pos
        while self.head() in _IDENTIFIER_CHARS:
            self.pos += 1
        return self._buf[start:self.pos]

    def quoted(self) -> str:
        """Read up to the closing quote; the opening quote is already consumed."""
        start = self.pos
        while not self.accept('"'):
            if self.at_end():
                raise UnterminatedString(
                    f"Unterminated string starting at offset {start - 1} in '{self.text}'",
                    self.text, start - 1,
                )
            self.pos += 1
        return self._buf[start:self.pos - 1]

    def argument(self) -> str:
        if self.accept('"'):
            return self.quoted()
        return self.identifier()


def parse_call(text: str) -> List[str]:
    """
    Split a call expression into its words.

    Args:
        text: Directive text, without the ``f.`` prefix

    Returns:
        [type_name, arg0, arg1, ...]; the type name may be empty

    Raises:
        UnterminatedString: A quoted argument is never closed
        MalformedCall: A ',' or the closing ')' is missing
    """
    scanner = _Scanner(text)
    words = [scanner.identifier()]

    if scanner.accept('('):
        first = True
        scanner.skip_blanks()
        while not scanner.accept(')'):
            if not first:
                scanner.expect(',')
                scanner.skip_blanks()
            words.append(scanner.argument())
            scanner.skip_blanks()
            first = False

    return words


def parse_formula(text: str) -> Tuple[str, Dict[str, str]]:
    """
    Parse a directive into its type name and positional config.

    >>> parse_formula('teleport("room2", 3)')
    ('teleport', {'0': 'room2', '1': '3'})
    """
    words = parse_call(text)
    type_name = words[0]
    config = {str(i): value for i, value in enumerate(words[1:])}
    return type_name, config
