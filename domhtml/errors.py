from enum import Enum
from typing import Optional


class ErrorType(Enum):
    """Classification of errors raised by the document helpers"""
    TRAVERSAL_STATE = "traversal_state"
    CHARSET = "charset_error"
    PARSING = "parsing_error"


class DomHtmlError(Exception):
    """Base class for all domhtml errors"""
    error_type: ErrorType = ErrorType.PARSING

    def __init__(self, message: str, error_type: Optional[ErrorType] = None):
        super().__init__(message)
        if error_type is not None:
            self.error_type = error_type


class TraversalStateError(DomHtmlError):
    """Iterator used outside of its valid states (programming error)"""
    error_type = ErrorType.TRAVERSAL_STATE


class CharsetError(DomHtmlError):
    """Charset name that the codec registry does not know"""
    error_type = ErrorType.CHARSET

    def __init__(self, charset: str):
        super().__init__(f"Unknown charset: {charset!r}")
        self.charset = charset


class ParsingError(DomHtmlError):
    """The HTML parser backend failed on the input"""
    error_type = ErrorType.PARSING
