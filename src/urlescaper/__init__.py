from urlescaper.escaper import (
    SUPPORTED_ENCODINGS,
    Escaper,
    escape_url,
    make_escaper,
    validate_encoding,
)
from urlescaper.exceptions import (
    EscapeError,
    EscaperError,
    ImmutableEncoding,
    InvalidEncoding,
)
from urlescaper.helper import EscapeUrl, RecurseMode

__all__ = [
    "EscapeUrl", "Escaper", "RecurseMode",
    "SUPPORTED_ENCODINGS", "escape_url", "make_escaper", "validate_encoding",
    "EscaperError", "EscapeError", "ImmutableEncoding", "InvalidEncoding",
]

__version__ = "1.0.0dev0"
