"""
Errors raised while reading and validating a WAVE header.
Every failure is a ParseError subclass carrying structured context.
"""

from typing import Optional


class ParseError(Exception):
    """Base class for everything parse_header() can raise."""
    kind = "parse"


class HeaderIOError(ParseError):
    """The underlying stream failed while reading the header."""
    kind = "io"

    def __init__(self, cause: OSError):
        self.cause = cause
        super().__init__(str(cause))


class ShortReadError(ParseError):
    """Stream ended before a full 44-byte header was available."""
    kind = "short_read"

    def __init__(self, actual_length: int):
        self.actual_length = actual_length
        super().__init__(
            f"WAVE header size must be 44-bytes long, but got {actual_length}."
        )


class ValidationError(ParseError):
    """A decoded header violates the canonical PCM layout."""
    kind = "validation"


class BadMagicError(ValidationError):
    """One of the fixed ASCII tags (RIFF, WAVE, fmt ) does not match."""
    kind = "bad_magic"

    # Wording per tag, matching the header table terminology
    _DESCRIPTIONS = {
        "RIFF": "header",
        "WAVE": "format",
        "fmt ": "sub chunk",
    }

    def __init__(self, field: str, found: int, expected: Optional[int] = None):
        self.field = field
        self.found = found
        self.expected = expected
        what = self._DESCRIPTIONS.get(field, "tag")
        super().__init__(f"Stream must have '{field}' {what}, but got 0x{found:x}.")


class UnexpectedFormatChunkSizeError(ValidationError):
    """The fmt sub chunk is not the 16-byte PCM variant."""
    kind = "fmt_chunk_size"

    def __init__(self, found: int):
        self.found = found
        super().__init__(f"Stream 'fmt ' sub chunk size must be 16, but got {found}.")


class UnsupportedAudioFormatError(ValidationError):
    """Audio format code is anything other than linear PCM."""
    kind = "audio_format"

    def __init__(self, found: int):
        self.found = found
        super().__init__(f"Stream audio format must be 1 (PCM), but got {found}.")
