'''
### Sample Module

This module defines the `Sample` class, which represents one audio sample stored in an FSB5
sound bank, decoded from its packed 64-bit sample header and the metadata chunks chained after it.

Classes:
    `Sample`:
        Represents a single sample header and, once sliced, its raw payload.

Functionality:
    - Parse a sample header and its metadata chunk chain from a stream ('from_stream').
    - Resolve the sample rate from a frequency chunk or the header's frequency code.
    - Convert the sample into a nested dictionary format ('to_dict', 'to_yaml') for manifest export.

Dependencies:
    `Metadata`:
        Decodes the chunks chained after the sample header.

    `Helpers`:
        For bitfield extraction and little-endian stream reads.

    `logging`:
        Reports skipped metadata chunks of unknown type.

Intended Usage:
    Used by `FSB5.from_stream` once per sample, right after the container header. The name and
    payload are filled in later by the name table resolver and the data segment slicer.
'''

import logging

# Import child structures
from .Metadata import read_metadata_chunk

# Import helper functions
from ...Helpers import *

from ...Enums import MetadataChunkType
from ...Errors import FrequencyError, MetadataChunkTypeError

logger = logging.getLogger(__name__)

# Frequency codes 1-9 of the sample header, code 0 is invalid
FREQUENCIES: dict[int, int] = {
  1: 8000,
  2: 11000,
  3: 11025,
  4: 16000,
  5: 22050,
  6: 24000,
  7: 32000,
  8: 44100,
  9: 48000,
}

class Sample: # header size = 0x08 + chained chunks
  ''' Represents a sample header in an FSB5 sound bank '''
  def __init__(self, index: int = 0):
    self.index = index
    self.name  = str(index)

    self.frequency   = 0
    self.channels    = 1
    self.data_offset = 0
    self.samples     = 0

    # Metadata chunks keyed by chunk type
    self.metadata = {}

    # Raw payload, filled in by the data segment slicer
    self.data = None

  @classmethod
  def from_stream(cls, index: int, stream):
    self = cls(index)

    raw = read_u64(stream)

    # Unpacked bitfield
    next_chunk       = bits(raw, 0, 1)
    frequency_code   = bits(raw, 1, 4)
    self.channels    = bits(raw, 5, 1) + 1
    self.data_offset = bits(raw, 6, 28) * 16
    self.samples     = bits(raw, 34, 30)

    while next_chunk:
      raw = read_u32(stream)
      next_chunk = bits(raw, 0, 1)
      chunk_size = bits(raw, 1, 24)
      chunk_type = bits(raw, 25, 7)

      try:
        chunk = read_metadata_chunk(stream, chunk_size, chunk_type)
      except MetadataChunkTypeError as e:
        logger.warning("Sample %d: %s, skipping %d bytes", index, e, chunk_size)
        skip(stream, chunk_size)
        continue

      self.metadata[chunk_type] = chunk

    frequency_chunk = self.metadata.get(MetadataChunkType.FREQUENCY)
    if frequency_chunk is not None:
      self.frequency = frequency_chunk.frequency
    elif frequency_code in FREQUENCIES:
      self.frequency = FREQUENCIES[frequency_code]
    else:
      raise FrequencyError(frequency_code)

    return self

  @property
  def loop(self):
    chunk = self.metadata.get(MetadataChunkType.LOOP)
    return (chunk.loop_start, chunk.loop_end) if chunk is not None else None

  def to_dict(self) -> dict:
    return {
      "index": self.index,
      "name": self.name,
      "frequency": self.frequency,
      "channels": self.channels,
      "data_offset": self.data_offset,
      "samples": self.samples,
      "data_size": len(self.data) if self.data is not None else None,
      "metadata": {
        "chunk": [chunk.to_dict() for chunk in self.metadata.values()]
      }
    }

  def to_yaml(self) -> dict:
    return {
      "name": f"{self.name} [{self.index}]",
      "frequency": self.frequency,
      "channels": self.channels,
      "data offset": self.data_offset,
      "samples": self.samples,
      "data size": len(self.data) if self.data is not None else None,
      "metadata": [chunk.to_yaml() for chunk in self.metadata.values()]
    }

  def __repr__(self):
    return f"Sample(index={self.index}, name={self.name!r}, frequency={self.frequency}, channels={self.channels}, samples={self.samples})"

if __name__ == '__main__':
  pass
