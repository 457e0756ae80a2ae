''' Builders for synthetic FSB5 sound banks '''

import struct

import pytest


def _pack_sample_header(frequency_code=8, stereo=False, data_offset=0, samples=0, chunks=()):
  # chunks: (chunk_type, declared_size, payload) tuples
  raw  = 1 if chunks else 0
  raw |= (frequency_code & 0xF) << 1
  raw |= (1 if stereo else 0) << 5
  raw |= ((data_offset // 16) & 0xFFFFFFF) << 6
  raw |= (samples & 0x3FFFFFFF) << 34

  packed = struct.pack('<Q', raw)
  for i, (chunk_type, chunk_size, payload) in enumerate(chunks):
    more = 1 if i < len(chunks) - 1 else 0
    packed += struct.pack('<I', more | (chunk_size << 1) | (chunk_type << 25)) + payload

  return packed


def _build_name_table(names):
  offsets = b''
  strings = b''
  base = 4 * len(names)
  for name in names:
    raw_name = name if isinstance(name, bytes) else name.encode('utf-8')
    offsets += struct.pack('<I', base + len(strings))
    strings += raw_name + b'\x00'
  return offsets + strings


def _build_fsb5(sample_headers=(), names=None, data=b'', mode=2, version=1, name_table=None):
  headers = b''.join(sample_headers)
  if name_table is None:
    name_table = _build_name_table(names) if names else b''

  bank  = b'FSB5'
  bank += struct.pack('<6I', version, len(sample_headers), len(headers), len(name_table), len(data), mode)
  bank += bytes(8) + bytes(range(16)) + bytes(8)
  if version == 0:
    bank += struct.pack('<I', 0xDEADBEEF)

  return bank + headers + name_table + data


@pytest.fixture
def pack_sample_header():
  return _pack_sample_header


@pytest.fixture
def build_name_table():
  return _build_name_table


@pytest.fixture
def build_fsb5():
  return _build_fsb5
