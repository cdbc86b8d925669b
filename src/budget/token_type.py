#!/usr/bin/env python3
from enum import IntEnum, auto


class TokenType(IntEnum):
    """Token types

    Each TokenType names one distinctly identifiable kind of text in a Budget
    source. The set is closed: the Scanner only ever tags Tokens with one of
    these members.
    """

    # Single-character tokens.
    LEFT_PAREN = auto()  # (
    RIGHT_PAREN = auto()  # )
    LEFT_BRACE = auto()  # {
    RIGHT_BRACE = auto()  # }
    COMMA = auto()  # ,
    DOT = auto()  # .
    MINUS = auto()  # -
    PLUS = auto()  # +
    SEMICOLON = auto()  # ;
    SLASH = auto()  # /
    STAR = auto()  # *

    # One or two character tokens
    BANG = auto()  # !
    BANG_EQUAL = auto()  # !=
    EQUAL = auto()  # =
    EQUAL_EQUAL = auto()  # ==
    GREATER = auto()  # >
    GREATER_EQUAL = auto()  # >=
    LESS = auto()  # <
    LESS_EQUAL = auto()  # <=

    # Literals
    IDENTIFIER = auto()  # balance
    STRING = auto()  # "rent"
    NUMBER = auto()  # 12.50

    # Keywords
    # Budget has no "true" keyword, only "false".
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    VAR = auto()
    WHILE = auto()

    # End of file
    EOF = auto()
