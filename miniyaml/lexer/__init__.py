"""Lexer."""

from miniyaml.lexer.scanner import Scanner, ScannerCheckpoint
from miniyaml.lexer.tokens import Token, TokenKind

__all__ = [
    "Scanner",
    "ScannerCheckpoint",
    "Token",
    "TokenKind",
]
