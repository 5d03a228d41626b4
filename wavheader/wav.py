"""
WAV header parsing utilities.
Reads, decodes, validates and renders the canonical 44-byte PCM WAVE header.

Layout (all integers little-endian, offsets from start of stream):

    Offset  Size  Field
    0       4     chunk_id         "RIFF"
    4       4     chunk_size       36 + sub_chunk2_size
    8       4     format           "WAVE"
    12      4     sub_chunk1_id    "fmt "
    16      4     sub_chunk1_size  16 for PCM
    20      2     audio_format     1 = PCM
    22      2     num_channels
    24      4     sample_rate
    28      4     byte_rate        sample_rate * num_channels * bits_per_sample/8
    32      2     block_align      num_channels * bits_per_sample/8
    34      2     bits_per_sample
    36      4     sub_chunk2_id    "data"
    40      4     sub_chunk2_size  size of the audio payload that follows
"""

import logging
import struct
from typing import BinaryIO, Dict, NamedTuple

from wavheader.errors import (
    BadMagicError,
    HeaderIOError,
    ShortReadError,
    UnexpectedFormatChunkSizeError,
    UnsupportedAudioFormatError,
    ValidationError,
)


logger = logging.getLogger(__name__)

HEADER_SIZE = 44

# Header layout: 13 unsigned fields, tags read as plain u32 values
HEADER_STRUCT = struct.Struct('<IIIIIHHIIHHII')


def decode_u32(data: bytes) -> int:
    """Decode exactly 4 little-endian bytes."""
    if len(data) != 4:
        raise ValueError(f"u32 needs 4 bytes, got {len(data)}")
    return struct.unpack('<I', data)[0]


def decode_u16(data: bytes) -> int:
    """Decode exactly 2 little-endian bytes."""
    if len(data) != 2:
        raise ValueError(f"u16 needs 2 bytes, got {len(data)}")
    return struct.unpack('<H', data)[0]


def encode_u32(value: int) -> bytes:
    return struct.pack('<I', value)


def encode_u16(value: int) -> bytes:
    return struct.pack('<H', value)


# Magic tags as they decode from the little-endian stream
RIFF_MAGIC = decode_u32(b'RIFF')   # 0x46464952
WAVE_MAGIC = decode_u32(b'WAVE')   # 0x45564157
FMT_MAGIC = decode_u32(b'fmt ')    # 0x20746d66

PCM_FMT_CHUNK_SIZE = 16
PCM_AUDIO_FORMAT = 1


class WaveHeader(NamedTuple):
    """Decoded canonical WAVE header."""
    chunk_id: int
    chunk_size: int
    format: int
    sub_chunk1_id: int
    sub_chunk1_size: int
    audio_format: int
    num_channels: int
    sample_rate: int
    byte_rate: int
    block_align: int
    bits_per_sample: int
    sub_chunk2_id: int
    sub_chunk2_size: int

    def to_dict(self) -> Dict[str, int]:
        return dict(self._asdict())

    def __str__(self) -> str:
        return render(self)


def decode_header(buf: bytes) -> WaveHeader:
    """
    Decode a 44-byte buffer into a WaveHeader without validating it.

    Args:
        buf: exactly HEADER_SIZE bytes

    Returns:
        Decoded header
    """
    if len(buf) != HEADER_SIZE:
        raise ValueError(f"header buffer must be {HEADER_SIZE} bytes, got {len(buf)}")
    return WaveHeader._make(HEADER_STRUCT.unpack(buf))


def is_valid(header: WaveHeader) -> None:
    """
    Check a decoded header against the PCM WAVE invariants.

    Conditions are checked in header order and the first failure is
    raised; later fields are not inspected once one has failed.
    sub_chunk2_id and sub_chunk2_size are not checked.

    Raises:
        BadMagicError: RIFF, WAVE or fmt tag mismatch
        UnexpectedFormatChunkSizeError: fmt chunk is not 16 bytes
        UnsupportedAudioFormatError: audio format is not PCM
    """
    if header.chunk_id != RIFF_MAGIC:
        raise BadMagicError("RIFF", header.chunk_id, RIFF_MAGIC)
    if header.format != WAVE_MAGIC:
        raise BadMagicError("WAVE", header.format, WAVE_MAGIC)
    if header.sub_chunk1_id != FMT_MAGIC:
        raise BadMagicError("fmt ", header.sub_chunk1_id, FMT_MAGIC)
    if header.sub_chunk1_size != PCM_FMT_CHUNK_SIZE:
        raise UnexpectedFormatChunkSizeError(header.sub_chunk1_size)
    if header.audio_format != PCM_AUDIO_FORMAT:
        raise UnsupportedAudioFormatError(header.audio_format)


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    """Read up to size bytes, stopping early only at end of stream."""
    buf = bytearray()
    while len(buf) < size:
        chunk = stream.read(size - len(buf))
        if not chunk:
            break
        buf += chunk
    return bytes(buf)


def parse_header(stream: BinaryIO) -> WaveHeader:
    """
    Read and validate the WAVE header at the current stream position.

    Consumes exactly HEADER_SIZE bytes; the audio payload that follows
    is left unread. The stream is never seeked or closed.

    Args:
        stream: readable binary source

    Returns:
        Validated header

    Raises:
        HeaderIOError: the read itself failed
        ShortReadError: stream ended before 44 bytes
        ValidationError: header does not describe a canonical PCM WAVE
    """
    try:
        buf = _read_exact(stream, HEADER_SIZE)
    except OSError as e:
        raise HeaderIOError(e) from e

    if len(buf) != HEADER_SIZE:
        logger.debug(f"Short header read: {len(buf)} bytes")
        raise ShortReadError(len(buf))

    header = decode_header(buf)
    logger.debug(f"Decoded header: {header!r}")

    try:
        is_valid(header)
    except ValidationError as e:
        logger.debug(f"Rejected header ({e.kind}): {e}")
        raise

    return header


def render(header: WaveHeader) -> str:
    """Format every header field for diagnostic output (tags in hex)."""
    return (
        "WaveHeader {\n"
        f"    chunk_id: 0x{header.chunk_id:x}\n"
        f"    chunk_size: {header.chunk_size}\n"
        f"    format: 0x{header.format:x}\n"
        f"    sub_chunk1_id: 0x{header.sub_chunk1_id:x}\n"
        f"    sub_chunk1_size: {header.sub_chunk1_size}\n"
        f"    audio_format: {header.audio_format}\n"
        f"    num_channels: {header.num_channels}\n"
        f"    sample_rate: {header.sample_rate}\n"
        f"    byte_rate: {header.byte_rate}\n"
        f"    block_align: {header.block_align}\n"
        f"    bits_per_sample: {header.bits_per_sample}\n"
        f"    sub_chunk2_id: 0x{header.sub_chunk2_id:x}\n"
        f"    sub_chunk2_size: {header.sub_chunk2_size}\n"
        "}"
    )


def create_wav_header(
    sample_rate: int,
    channels: int,
    bits_per_sample: int,
    data_size: int
) -> bytes:
    """
    Create a standard WAV header with known data size.

    Args:
        sample_rate: Audio sample rate in Hz
        channels: Number of audio channels
        bits_per_sample: Bits per sample (8, 16, 24, or 32)
        data_size: Size of the audio data in bytes

    Returns:
        44-byte WAV header
    """
    byte_rate = sample_rate * channels * (bits_per_sample // 8)
    block_align = channels * (bits_per_sample // 8)

    header = struct.pack(
        '<4sI4s4sIHHIIHH4sI',
        b'RIFF',
        36 + data_size,  # File size
        b'WAVE',
        b'fmt ',
        PCM_FMT_CHUNK_SIZE,
        PCM_AUDIO_FORMAT,
        channels,
        sample_rate,
        byte_rate,
        block_align,
        bits_per_sample,
        b'data',
        data_size,
    )

    return header
