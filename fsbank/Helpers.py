'''
### Helpers Module

This module provides low-level utility functions for binary data manipulation and stream
reading, used throughout the FSB5 parsing process.

Functions:
    `bits`:
        Extracts an unsigned bitfield from an integer word.

    `read_exact`, `read_u8`, `read_u32`, `read_u64`:
        Read fixed-size little-endian values from a stream.

    `read_cstring`:
        Reads a null-terminated byte string from a stream.

    `skip`:
        Consumes and discards a number of bytes from a stream.

Dependencies:
    `struct`:
        Imported and exposed for byte-level packing and unpacking operations needed by other modules.

Intended Usage:
    This module is intended to be imported whenever a sound bank structure reads from its stream.
    Every read goes through `read_exact` so truncated input and I/O failures always surface as
    a `StreamError`.
'''

# Import struct as it is used by /soundbank
import struct as _struct

from .Errors import StreamError

''' Helper Functions '''
def bits(value: int, start: int, length: int) -> int:
  return (value >> start) & ((1 << length) - 1)

def read_exact(stream, size: int) -> bytes:
  try:
    data = stream.read(size)
  except OSError as e:
    raise StreamError(f"Failed to read {size} bytes: {e}") from e

  if len(data) != size:
    raise StreamError(f"Unexpected end of stream: wanted {size} bytes, got {len(data)}")

  return data

def read_u8(stream) -> int:
  return read_exact(stream, 1)[0]

def read_u32(stream) -> int:
  return _struct.unpack('<I', read_exact(stream, 4))[0]

def read_u64(stream) -> int:
  return _struct.unpack('<Q', read_exact(stream, 8))[0]

def read_cstring(stream, block_size: int = 64, limit: int = None) -> bytes:
  # Returns the bytes before the terminator, or everything up to EOF or `limit` bytes if none is found
  data = bytearray()
  while True:
    size = block_size if limit is None else min(block_size, limit - len(data))
    if size <= 0:
      return bytes(data)

    try:
      block = stream.read(size)
    except OSError as e:
      raise StreamError(f"Failed to read string: {e}") from e

    if not block:
      return bytes(data)

    end = block.find(b'\x00')
    if end != -1:
      data += block[:end]
      return bytes(data)

    data += block

def skip(stream, size: int) -> None:
  read_exact(stream, size)

def seek(stream, offset: int) -> None:
  try:
    stream.seek(offset)
  except OSError as e:
    raise StreamError(f"Failed to seek to {offset}: {e}") from e

def tell(stream) -> int:
  try:
    return stream.tell()
  except OSError as e:
    raise StreamError(f"Failed to query stream position: {e}") from e

# Expose struct
struct = _struct

if __name__ == '__main__':
  pass
