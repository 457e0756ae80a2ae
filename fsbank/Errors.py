'''
### Errors Module

This module defines the exceptions raised while decoding FSB5 sound banks and rebuilding
their samples into standalone audio files.

Classes:
    `FSB5Error`:
        Base class for every error raised by this package.

    `MagicHeaderError`, `SoundFormatError`, `MetadataChunkTypeError`, `FrequencyError`,
    `NameTableError`, `DataOffsetError`, `StreamError`:
        Raised while decoding a sound bank.

    `MismatchedSampleError`, `RebuildFormatError`, `PCMError`:
        Raised while rebuilding a single sample.

Intended Usage:
    Catch `FSB5Error` to handle any failure from this package. None of these errors are
    retryable; the input has to be corrected first.
'''


class FSB5Error(Exception):
  ''' Base exception for all FSB5 errors '''
  def __init__(self, message: str = ""):
    self.message = message
    super().__init__(message)


class MagicHeaderError(FSB5Error):
  def __init__(self, magic: bytes):
    self.magic = bytes(magic)
    super().__init__(f"Expected magic header b'FSB5' but got {self.magic!r}")


class SoundFormatError(FSB5Error):
  def __init__(self, value: int):
    self.value = value
    super().__init__(f"Expected audio mode in the [0, 16) range but got {value}")


class MetadataChunkTypeError(FSB5Error):
  def __init__(self, chunk_type: int):
    self.chunk_type = chunk_type
    super().__init__(f"Expected metadata chunk type in the [1, 8) or [10, 12) range but got {chunk_type}")


class FrequencyError(FSB5Error):
  def __init__(self, code: int):
    self.code = code
    super().__init__(f"Frequency value {code} is not valid and no frequency metadata chunk was provided")


class NameTableError(FSB5Error):
  def __init__(self, index: int):
    self.index = index
    super().__init__(f"Non UTF-8 content in name table for sample {index}")


class DataOffsetError(FSB5Error):
  def __init__(self, index: int, start: int, end: int):
    self.index = index
    self.start = start
    self.end   = end
    super().__init__(f"Sample {index} has an invalid data range [{start}, {end})")


class StreamError(FSB5Error):
  ''' Raised when the underlying stream fails or ends before a record is complete '''
  pass


class MismatchedSampleError(FSB5Error):
  def __init__(self):
    super().__init__("Sample to rebuild did not originate from the FSB5 bank rebuilding it")


class RebuildFormatError(FSB5Error):
  def __init__(self, sound_format):
    self.sound_format = sound_format
    name = getattr(sound_format, 'name', sound_format)
    super().__init__(f"Rebuilding samples of type {name} is not supported")


class PCMError(FSB5Error):
  ''' Raised when the WAV writer rejects the sample parameters '''
  pass


if __name__ == '__main__':
  pass
