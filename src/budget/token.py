#!/usr/bin/env python3
from dataclasses import dataclass

from budget.token_type import TokenType


@dataclass(frozen=True)
class Token:
    """Scanner Token

    A Token is one lexeme of a Budget source, tagged with its TokenType. The
    Scanner produces these in source order, always ending with a single EOF.

    For example:
    var rent = 950;

    Scans to:
    Token(TokenType.VAR,        "var",  None,  1)
    Token(TokenType.IDENTIFIER, "rent", None,  1)
    Token(TokenType.EQUAL,      "=",    None,  1)
    Token(TokenType.NUMBER,     "950",  950.0, 1)
    Token(TokenType.SEMICOLON,  ";",    None,  1)
    Token(TokenType.EOF,        "",     None,  1)

    Args:
        type: TokenType. The kind of Token, see the TokenType enum.
        lexeme: str. Exact source text this Token was scanned from.
        literal: object. Decoded value for STRING (str) and NUMBER (float)
            Tokens, otherwise None.
        line: int. 1-based source line where this Token starts.
    """

    type: TokenType
    lexeme: str
    literal: object
    line: int

    def __str__(self) -> str:
        return self.to_string()

    def to_string(self) -> str:
        return f"{self.type.name} {self.lexeme} {self.literal}"
