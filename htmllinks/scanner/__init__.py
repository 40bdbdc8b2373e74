"""HTML token stream."""

from .Scanner import Scanner, create_scanner, tokenize
from .ScannerState import ScannerState
from .Token import Token
from .TokenType import TokenType

__all__ = ["Scanner", "ScannerState", "Token", "TokenType", "create_scanner", "tokenize"]
