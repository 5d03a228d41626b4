"""
Canonical PCM WAVE header parsing and validation.
"""

from wavheader.config import config, AppConfig, ServerConfig, CliConfig
from wavheader.errors import (
    ParseError,
    HeaderIOError,
    ShortReadError,
    ValidationError,
    BadMagicError,
    UnexpectedFormatChunkSizeError,
    UnsupportedAudioFormatError,
)
from wavheader.wav import (
    HEADER_SIZE,
    WaveHeader,
    parse_header,
    decode_header,
    is_valid,
    render,
    decode_u16,
    decode_u32,
    encode_u16,
    encode_u32,
    create_wav_header,
)

__all__ = [
    # Configuration
    "config",
    "AppConfig",
    "ServerConfig",
    "CliConfig",
    # Errors
    "ParseError",
    "HeaderIOError",
    "ShortReadError",
    "ValidationError",
    "BadMagicError",
    "UnexpectedFormatChunkSizeError",
    "UnsupportedAudioFormatError",
    # Header
    "HEADER_SIZE",
    "WaveHeader",
    "parse_header",
    "decode_header",
    "is_valid",
    "render",
    "decode_u16",
    "decode_u32",
    "encode_u16",
    "encode_u32",
    "create_wav_header",
]
