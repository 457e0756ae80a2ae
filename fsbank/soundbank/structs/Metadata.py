'''
### Metadata Module

This module defines the metadata chunk classes that can be chained after an FSB5 sample header.
Each chunk is introduced by a packed 32-bit word (continuation flag, payload size, chunk type),
and its payload shape depends only on the chunk type.

Classes:
    `MetadataChunk`:
        Base class of every decoded metadata chunk.

    `ChannelsChunk`, `FrequencyChunk`, `LoopChunk`:
        Fixed-size chunks overriding or extending the sample header values.

    `OpaqueChunk`, `CommentChunk`, `XMASeekChunk`, `DSPCoefficientsChunk`, `XWMADataChunk`:
        Codec side-data stored as an opaque blob of the chunk-declared size.

    `VorbisDataChunk`:
        Vorbis side-data, a CRC32 of the setup header followed by an opaque blob.

Functions:
    `read_metadata_chunk`:
        Decodes one chunk payload from a stream given its declared size and type.

Functionality:
    - Parse a metadata chunk payload from a stream ('from_stream').
    - Convert the chunk into a nested dictionary format ('to_yaml') for manifest export.

Dependencies:
    `Helpers`:
        For little-endian stream reads.

    `Enums`:
        `MetadataChunkType`:
            Enum defining the recognized chunk types.

Intended Usage:
    Used by `Sample.from_stream` while walking a sample's chunk chain. Unrecognized chunk types
    raise `MetadataChunkTypeError` and are handled by the caller.
'''

# Import helper functions
from ...Helpers import *

# Import the chunk type enum
from ...Enums import MetadataChunkType
from ...Errors import MetadataChunkTypeError
from ...YAMLSerializer import FlowStyleList

class MetadataChunk:
  ''' Represents a single metadata chunk of a sample '''
  chunk_type: MetadataChunkType = None

  @classmethod
  def from_stream(cls, stream, chunk_size: int):
    raise NotImplementedError

  def to_yaml(self) -> dict:
    return {"type": self.chunk_type.name}

  def to_dict(self) -> dict:
    entry = {"type": self.chunk_type.name}
    for key, value in vars(self).items():
      entry[key] = value.hex() if isinstance(value, bytes) else value
    return entry

  def __eq__(self, other):
    return type(self) is type(other) and vars(self) == vars(other)

  def __repr__(self):
    fields = ', '.join(f"{key}={value!r}" for key, value in vars(self).items())
    return f"{type(self).__name__}({fields})"

class ChannelsChunk(MetadataChunk):
  chunk_type = MetadataChunkType.CHANNELS

  def __init__(self, channels: int = 0):
    self.channels = channels

  @classmethod
  def from_stream(cls, stream, chunk_size: int):
    return cls(read_u8(stream))

  def to_yaml(self) -> dict:
    return {"type": self.chunk_type.name, "channels": self.channels}

class FrequencyChunk(MetadataChunk):
  chunk_type = MetadataChunkType.FREQUENCY

  def __init__(self, frequency: int = 0):
    self.frequency = frequency

  @classmethod
  def from_stream(cls, stream, chunk_size: int):
    return cls(read_u32(stream))

  def to_yaml(self) -> dict:
    return {"type": self.chunk_type.name, "frequency": self.frequency}

class LoopChunk(MetadataChunk):
  chunk_type = MetadataChunkType.LOOP

  def __init__(self, loop_start: int = 0, loop_end: int = 0):
    self.loop_start = loop_start
    self.loop_end   = loop_end

  @classmethod
  def from_stream(cls, stream, chunk_size: int):
    loop_start = read_u32(stream)
    loop_end   = read_u32(stream)
    return cls(loop_start, loop_end)

  def to_yaml(self) -> dict:
    return {"type": self.chunk_type.name, "loop": FlowStyleList([self.loop_start, self.loop_end])}

class OpaqueChunk(MetadataChunk):
  ''' Codec side-data kept as raw bytes '''
  chunk_type = MetadataChunkType.UNK_5

  def __init__(self, data: bytes = b''):
    self.data = data

  @classmethod
  def from_stream(cls, stream, chunk_size: int):
    return cls(read_exact(stream, chunk_size))

  def to_yaml(self) -> dict:
    return {"type": self.chunk_type.name, "size": len(self.data), "data": self.data.hex()}

class CommentChunk(OpaqueChunk):
  chunk_type = MetadataChunkType.COMMENT

class XMASeekChunk(OpaqueChunk):
  chunk_type = MetadataChunkType.XMASEEK

class DSPCoefficientsChunk(OpaqueChunk):
  chunk_type = MetadataChunkType.DSPCOEFF

class XWMADataChunk(OpaqueChunk):
  chunk_type = MetadataChunkType.XWMADATA

class VorbisDataChunk(MetadataChunk):
  chunk_type = MetadataChunkType.VORBISDATA

  def __init__(self, crc32: int = 0, data: bytes = b''):
    self.crc32 = crc32
    self.data  = data

  @classmethod
  def from_stream(cls, stream, chunk_size: int):
    # The checksum is not counted in the declared chunk size
    crc32 = read_u32(stream)
    data  = read_exact(stream, chunk_size)
    return cls(crc32, data)

  def to_yaml(self) -> dict:
    return {"type": self.chunk_type.name, "crc32": self.crc32, "size": len(self.data), "data": self.data.hex()}

CHUNK_CLASSES: dict[int, type] = {
  chunk_class.chunk_type: chunk_class
  for chunk_class in (
    ChannelsChunk,
    FrequencyChunk,
    LoopChunk,
    CommentChunk,
    OpaqueChunk,
    XMASeekChunk,
    DSPCoefficientsChunk,
    XWMADataChunk,
    VorbisDataChunk
  )
}

def read_metadata_chunk(stream, chunk_size: int, chunk_type: int) -> MetadataChunk:
  chunk_class = CHUNK_CLASSES.get(chunk_type)
  if chunk_class is None:
    raise MetadataChunkTypeError(chunk_type)

  return chunk_class.from_stream(stream, chunk_size)

if __name__ == '__main__':
  pass
