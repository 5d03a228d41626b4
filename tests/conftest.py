from __future__ import annotations

import struct
import sys
from pathlib import Path

import pytest

# Flat layout: make the top-level modules importable without installing.
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))


def build_header(
    *,
    chunk_id: bytes = b"RIFF",
    chunk_size: int = 36,
    format: bytes = b"WAVE",
    sub_chunk1_id: bytes = b"fmt ",
    sub_chunk1_size: int = 16,
    audio_format: int = 1,
    num_channels: int = 2,
    sample_rate: int = 44_100,
    byte_rate: int = 176_400,
    block_align: int = 4,
    bits_per_sample: int = 16,
    sub_chunk2_id: bytes = b"data",
    sub_chunk2_size: int = 0,
) -> bytes:
    return struct.pack(
        "<4sI4s4sIHHIIHH4sI",
        chunk_id,
        chunk_size,
        format,
        sub_chunk1_id,
        sub_chunk1_size,
        audio_format,
        num_channels,
        sample_rate,
        byte_rate,
        block_align,
        bits_per_sample,
        sub_chunk2_id,
        sub_chunk2_size,
    )


@pytest.fixture
def header_bytes() -> bytes:
    return build_header()
