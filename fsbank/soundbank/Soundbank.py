'''
Soundbank Module

This module defines classes and functionality for reading and parsing FSB5 sound banks and
rebuilding their samples into standalone audio files.

Classes:
    `FSB5Header`:
        Represents the fixed-layout header at the start of a sound bank.

    `FSB5`:
        Represents the full content of a sound bank: header, samples, names, and payloads.

Functionality:
    - Load a sound bank from a seekable stream (`from_stream`), bytes (`from_bytes`),
      or a file path (`from_file`).
    - Resolve sample names from the optional name table.
    - Slice the data segment into per-sample payloads.
    - Rebuild MPEG and PCM samples into playable files (`supports_rebuild`, `rebuild`).
    - Export the bank as nested dictionaries for XML (`to_dict`) and YAML (`to_yaml`) manifests.

Dependencies:
    `Helpers`:
        For bitfield extraction and little-endian stream reads.

    `soundbank.structs`:
        Includes the sample header and metadata chunk representations.

    `Pcm`:
        Optional WAV writer for PCM samples.

Intended Usage:
    This module is the core of the package. Every decode owns its own stream cursor and
    structures, so independent banks can be decoded from separate threads.
'''

import io
import logging

# Import Soundbank child structures
from .structs.Sample import Sample

# Import helper functions
from ..Helpers import *
from ..Enums import *
from ..Errors import (
  MagicHeaderError,
  NameTableError,
  DataOffsetError,
  MismatchedSampleError,
  RebuildFormatError
)

logger = logging.getLogger(__name__)

# PCM rebuilding is optional, it needs the WAV writer module to be importable
try:
  from . import Pcm as _pcm
except ImportError:
  _pcm = None

FSB5_MAGIC = b'FSB5'

class FSB5Header: # struct size = 0x3C, or 0x40 for version 0
  ''' Represents an FSB5 sound bank header '''
  def __init__(self):
    self.id      = FSB5_MAGIC
    self.version = 1

    self.num_samples         = 0
    self.sample_headers_size = 0
    self.name_table_size     = 0
    self.data_size           = 0
    self.mode                = SoundFormat.NONE

    self.zero  = bytes(8)
    self.hash  = bytes(16)
    self.dummy = bytes(8)

    # Only present in version 0 banks
    self.unknown = 0

    # Stream position right after the header
    self.size = 0

  @classmethod
  def from_stream(cls, stream):
    self = cls()

    self.id = read_exact(stream, 4)
    if self.id != FSB5_MAGIC:
      raise MagicHeaderError(self.id)

    (
      self.version,
      self.num_samples,
      self.sample_headers_size,
      self.name_table_size,
      self.data_size,
      mode
    ) = struct.unpack('<6I', read_exact(stream, 0x18))

    self.zero  = read_exact(stream, 8)
    self.hash  = read_exact(stream, 16)
    self.dummy = read_exact(stream, 8)

    if self.version == 0:
      self.unknown = read_u32(stream)

    self.mode = SoundFormat.from_value(mode)
    self.size = tell(stream)

    return self

  def to_dict(self) -> dict:
    return {
      "version": self.version,
      "num_samples": self.num_samples,
      "sample_headers_size": self.sample_headers_size,
      "name_table_size": self.name_table_size,
      "data_size": self.data_size,
      "mode": self.mode.name,
      "hash": self.hash.hex(),
      "size": self.size
    }

  def to_yaml(self) -> dict:
    return {
      "version": self.version,
      "mode": self.mode.name,
      "hash": self.hash.hex(),
      "header size": self.size,
      "NUM_SAMPLES": self.num_samples,
      "SAMPLE_HEADERS_SIZE": self.sample_headers_size,
      "NAME_TABLE_SIZE": self.name_table_size,
      "DATA_SIZE": self.data_size
    }

class FSB5:
  ''' Represents a binary FSB5 sound bank '''
  def __init__(self):
    self.header   = None
    self.raw_size = 0
    self.samples  = []

  @classmethod
  def from_stream(cls, stream):
    self = cls()
    self.header = FSB5Header.from_stream(stream)

    header = self.header
    self.raw_size = header.size + header.sample_headers_size + header.name_table_size + header.data_size

    logger.debug("FSB5 v%d header: %d %s samples, %d data bytes", header.version, header.num_samples, header.mode.name, header.data_size)

    # Create samples
    self.samples = []
    for i in range(header.num_samples):
      self.samples.append(Sample.from_stream(i, stream))

    if header.name_table_size > 0:
      self._read_name_table(stream)

    self._read_sample_data(stream)

    return self

  @classmethod
  def from_bytes(cls, data: bytes):
    return cls.from_stream(io.BytesIO(data))

  @classmethod
  def from_file(cls, path):
    with open(path, 'rb') as f:
      return cls.from_stream(f)

  def _read_name_table(self, stream) -> None:
    name_table_start = self.header.size + self.header.sample_headers_size
    name_table_end   = name_table_start + self.header.name_table_size
    seek(stream, name_table_start)

    name_offsets = [read_u32(stream) for _ in range(self.header.num_samples)]

    for i, sample in enumerate(self.samples):
      position = name_table_start + name_offsets[i]
      seek(stream, position)
      # Names never run past the end of the table
      raw_name = read_cstring(stream, limit=max(name_table_end - position, 0))
      try:
        sample.name = raw_name.decode('utf-8')
      except UnicodeDecodeError:
        raise NameTableError(i) from None

  def _read_sample_data(self, stream) -> None:
    header = self.header
    seek(stream, header.size + header.sample_headers_size + header.name_table_size)

    # Payloads are read in order, each one ends where the next one starts
    position = 0
    for i, sample in enumerate(self.samples):
      data_start = sample.data_offset
      if i < len(self.samples) - 1:
        data_end = self.samples[i + 1].data_offset
      else:
        data_end = header.data_size

      if data_end < data_start or data_start < position:
        raise DataOffsetError(i, data_start, data_end)

      if data_start > position:
        skip(stream, data_start - position)

      sample.data = read_exact(stream, data_end - data_start)
      position = data_end

  @property
  def file_extension(self) -> str:
    return self.header.mode.file_extension

  @property
  def supports_rebuild(self) -> bool:
    mode = self.header.mode
    if mode.pcm_width != 0:
      return pcm_rebuild_available()
    return mode.supports_rebuild

  def rebuild(self, sample: Sample) -> bytes:
    mode = self.header.mode
    if not self.supports_rebuild:
      raise RebuildFormatError(mode)

    if sample.data is None:
      raise MismatchedSampleError()

    if mode == SoundFormat.MPEG:
      return bytes(sample.data)

    return _pcm.rebuild(sample, mode.pcm_width)

  def to_dict(self) -> dict:
    return {
      "header": self.header.to_dict(),
      "samples": {
        "sample": [sample.to_dict() for sample in self.samples]
      }
    }

  def to_yaml(self) -> dict:
    return {
      "header": self.header.to_yaml(),
      "raw size": self.raw_size,
      "samples": [sample.to_yaml() for sample in self.samples]
    }

def pcm_rebuild_available() -> bool:
  return _pcm is not None

if __name__ == '__main__':
  pass
