#!/usr/bin/env python3
from types import MappingProxyType
from typing import List, Mapping, Optional

from budget.reporter import ErrorReporter
from budget.token import Token
from budget.token_type import TokenType

# Maps a scanned identifier that spells a reserved word to its TokenType.
# Read-only, so it can be shared by any number of Scanners.
KEYWORDS: Mapping[str, TokenType] = MappingProxyType(
    {
        "and": TokenType.AND,
        "class": TokenType.CLASS,
        "else": TokenType.ELSE,
        "false": TokenType.FALSE,
        "for": TokenType.FOR,
        "fun": TokenType.FUN,
        "if": TokenType.IF,
        "nil": TokenType.NIL,
        "or": TokenType.OR,
        "print": TokenType.PRINT,
        "return": TokenType.RETURN,
        "super": TokenType.SUPER,
        "this": TokenType.THIS,
        "var": TokenType.VAR,
        "while": TokenType.WHILE,
    }
)

# Single character lexemes which are always a Token on their own.
SINGLE_CHAR_TOKENS: Mapping[str, TokenType] = MappingProxyType(
    {
        "(": TokenType.LEFT_PAREN,
        ")": TokenType.RIGHT_PAREN,
        "{": TokenType.LEFT_BRACE,
        "}": TokenType.RIGHT_BRACE,
        ",": TokenType.COMMA,
        ".": TokenType.DOT,
        "-": TokenType.MINUS,
        "+": TokenType.PLUS,
        ";": TokenType.SEMICOLON,
        "*": TokenType.STAR,
    }
)


def scan(source: str, reporter: Optional[ErrorReporter] = None) -> List[Token]:
    """Scan a Budget source and return its Tokens.

    Args:
        source: str. The Budget source text to scan.
        reporter: Optional[ErrorReporter]. Receives any errors encountered. If
            not provided, errors are collected by a quiet reporter and dropped.

    Returns:
        tokens: List[Token]. All scanned Tokens, ending with EOF.
    """

    return Scanner(source, reporter).scan_tokens()


class Scanner:
    """Budget Scanner

    This class scans a given source text and returns a list of Tokens, to be
    used by a parser.

    To use:
    Scanner("var a = 2;").scan_tokens()
    [VAR var None,
     IDENTIFIER a None,
     EQUAL = None,
     NUMBER 2 2.0,
     SEMICOLON ; None,
     EOF  None]

    Errors never stop the scan. Unexpected characters are skipped and an
    unterminated string is dropped, each reported to the ErrorReporter, and
    the returned list always ends with an EOF Token.

    Args:
        source: str. The Budget source text to scan.
        reporter: Optional[ErrorReporter]. Receives (line, message) for each
            error. Defaults to a quiet reporter.

    Public Attributes:
        tokens: List[Token]. All scanned tokens.
        start: int. Start index in the source for the Token currently being scanned.
        current: int. The current index in the source, this will be combined with
            the start to generate the Token lexeme.
        line: int. Current line being scanned, this is incremented whenever a
            newline character is found in the source text.
        start_line: int. Line where the Token currently being scanned started.
    """

    def __init__(self, source: str, reporter: Optional[ErrorReporter] = None) -> None:
        self.source = source
        self.reporter = reporter if reporter is not None else ErrorReporter(quiet=True)
        self.tokens: List[Token] = []
        self.start = 0
        self.current = 0
        self.line = 1
        self.start_line = 1

    def scan_tokens(self) -> List[Token]:
        """Scan the source text and return all scanned Tokens.

        This method will return regardless of whether or not there were errors
        during scanning. Check the ErrorReporter for any that were reported.

        Returns:
            tokens: List[Token]. All successfully scanned Tokens.
        """

        while not self.is_at_end():
            # Move the start position up to the current index prior to scanning
            # the next token
            self.start = self.current
            self.start_line = self.line
            self.scan_token()

        self.tokens.append(Token(TokenType.EOF, "", None, self.line))
        return self.tokens

    def is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def scan_token(self) -> None:
        """Scan the next Token from the remaining text.

        Whitespace, newlines and comments are consumed without adding a Token.
        """

        c = self.advance()
        match c:
            case "(" | ")" | "{" | "}" | "," | "." | "-" | "+" | ";" | "*":
                self.add_token(SINGLE_CHAR_TOKENS[c])
            # Two character Lexemes, always prefer the longer match.
            case "!":
                self.add_token(
                    TokenType.BANG_EQUAL if self.match("=") else TokenType.BANG
                )
            case "=":
                self.add_token(
                    TokenType.EQUAL_EQUAL if self.match("=") else TokenType.EQUAL
                )
            case "<":
                self.add_token(
                    TokenType.LESS_EQUAL if self.match("=") else TokenType.LESS
                )
            case ">":
                self.add_token(
                    TokenType.GREATER_EQUAL if self.match("=") else TokenType.GREATER
                )
            # Division or Comment.
            case "/":
                if self.match("/"):
                    # A line comment runs up to the newline, which is left for
                    # the next pass so the line counter still sees it.
                    while self.peek() != "\n" and not self.is_at_end():
                        self.advance()
                elif self.match("*"):
                    self.block_comment()
                else:
                    self.add_token(TokenType.SLASH)
            case " " | "\r" | "\t":
                pass
            case "\n":
                self.line += 1
            case '"':
                self.string()
            case _:
                if self.is_digit(c):
                    self.number()
                elif self.is_alpha(c):
                    self.identifier()
                else:
                    # Skip it but keep scanning for further errors.
                    self.reporter.error(self.line, "Unexpected character.")

    def block_comment(self) -> None:
        """Consume a block comment, the opening /* has already been consumed.

        The comment ends at the first adjacent */ pair, or at the end of the
        source if it is never closed. Block comments do not nest, so a /*
        inside one is just part of the comment.
        """

        while not self.is_at_end():
            if self.peek() == "*" and self.peek_next() == "/":
                # Consume the closing */
                self.advance()
                self.advance()
                return

            if self.peek() == "\n":
                self.line += 1

            self.advance()

    def identifier(self) -> None:
        """Scan and match an identifier or reserved word.

        Examples:
        print   -> Token(TokenType.PRINT,      "print",   None, 1)
        balance -> Token(TokenType.IDENTIFIER, "balance", None, 1)
        """

        while self.is_alpha_numeric(self.peek()):
            self.advance()

        text = self.source[self.start : self.current]
        self.add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))

    def number(self) -> None:
        """Scan and match a number.

        Examples:
        4   -> Token(TokenType.NUMBER, "4",   4.0, 1)
        4.2 -> Token(TokenType.NUMBER, "4.2", 4.2, 1)
        4.  -> Token(TokenType.NUMBER, "4",   4.0, 1), then a DOT Token
        """

        while self.is_digit(self.peek()):
            self.advance()

        # Only a "." followed by a digit starts a fractional part.
        if self.peek() == "." and self.is_digit(self.peek_next()):
            self.advance()

            while self.is_digit(self.peek()):
                self.advance()

        self.add_token(TokenType.NUMBER, float(self.source[self.start : self.current]))

    def string(self) -> None:
        """Scan a Budget string.

        A string is between double quotation marks and can span lines. There
        are no escape sequences. The lexeme keeps the quotes, the literal is
        the text between them.

        Examples:
        "rent"      -> Token(TokenType.STRING, '"rent"',      "rent",      1)
        "rent\nfee" -> Token(TokenType.STRING, '"rent\nfee"', "rent\nfee", 1)
        """

        while self.peek() != '"' and not self.is_at_end():
            if self.peek() == "\n":
                self.line += 1

            self.advance()

        if self.is_at_end():
            self.reporter.error(self.line, "Unterminated string.")
            return

        # The closing "
        self.advance()

        value = self.source[self.start + 1 : self.current - 1]
        self.add_token(TokenType.STRING, value)

    def advance(self) -> str:
        """Retrieve the char at the Scanner's current position, then advance it.

        Returns:
            char: str. Character at Scanner's position prior to advancement.
        """

        current = self.source[self.current]
        self.current += 1
        return current

    def match(self, expected: str) -> bool:
        """Consume the char at the current index only if it is the expected one.

        Args:
            expected. str. Expected char.

        Returns:
            matched: bool. Whether the char matched and was consumed.
        """

        if self.is_at_end():
            return False
        if self.source[self.current] != expected:
            return False

        self.current += 1
        return True

    def peek(self) -> str:
        """Return the char at the current index without consuming it, or "\\0"."""

        if self.is_at_end():
            return "\0"

        return self.source[self.current]

    def peek_next(self) -> str:
        """Return the char at the current index + 1 without consuming it, or "\\0"."""

        if self.current + 1 >= len(self.source):
            return "\0"

        return self.source[self.current + 1]

    def is_alpha(self, c: str) -> bool:
        """Check if a given char is an ASCII letter or underscore [a-zA-Z_]"""

        return ("a" <= c <= "z") or ("A" <= c <= "Z") or c == "_"

    def is_alpha_numeric(self, c: str) -> bool:
        return self.is_alpha(c) or self.is_digit(c)

    def is_digit(self, c: str) -> bool:
        """Check if a given char is an ASCII digit [0-9]"""

        return "0" <= c <= "9"

    def add_token(self, type: TokenType, literal: object = None) -> None:
        """Add a Token for the text between the start and current indexes.

        Args:
            type: TokenType. Type of Token being added.
            literal: object. Decoded value of the lexeme if any, otherwise None.
        """

        text = self.source[self.start : self.current]
        self.tokens.append(Token(type, text, literal, self.start_line))
