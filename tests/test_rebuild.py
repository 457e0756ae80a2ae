import io
import struct
import wave

import pytest

from fsbank import FSB5, Sample, SoundFormat
from fsbank.soundbank import Soundbank
from fsbank.Enums import MetadataChunkType
from fsbank.Errors import MismatchedSampleError, PCMError, RebuildFormatError


def _single_sample_bank(build_fsb5, pack_sample_header, mode, data, **sample_fields):
  return FSB5.from_bytes(build_fsb5([pack_sample_header(**sample_fields)], data=data, mode=mode))


def test_pcm16_stereo_rebuild(build_fsb5, pack_sample_header):
  payload = bytes(range(48))
  fsb = _single_sample_bank(build_fsb5, pack_sample_header, SoundFormat.PCM16, payload, frequency_code=8, stereo=True, samples=10)

  wav = fsb.rebuild(fsb.samples[0])

  assert wav[0:4] == b'RIFF'
  assert wav[8:16] == b'WAVEfmt '
  format_tag, channels, rate, byte_rate, block_align, bits_per_sample = struct.unpack('<2H2I2H', wav[20:36])
  assert (format_tag, channels, rate, bits_per_sample) == (1, 2, 44100, 16)
  assert (byte_rate, block_align) == (44100 * 4, 4)
  assert wav[36:40] == b'data'
  assert struct.unpack('<I', wav[40:44])[0] == 40
  assert wav[44:] == payload[:40]
  assert len(wav) == 84


@pytest.mark.parametrize('mode, width', [(SoundFormat.PCM8, 1), (SoundFormat.PCM32, 4)])
def test_pcm_widths(build_fsb5, pack_sample_header, mode, width):
  payload = bytes(range(64))
  fsb = _single_sample_bank(build_fsb5, pack_sample_header, mode, payload, frequency_code=1, samples=8)

  with wave.open(io.BytesIO(fsb.rebuild(fsb.samples[0])), 'rb') as wav_file:
    assert wav_file.getnchannels() == 1
    assert wav_file.getsampwidth() == width
    assert wav_file.getframerate() == 8000
    assert wav_file.getnframes() == 8
    assert wav_file.readframes(8) == payload[:8 * width]


def test_mpeg_passthrough(build_fsb5, pack_sample_header):
  payload = b'\xff\xfb\x90\x00' + bytes(range(60))
  fsb = _single_sample_bank(build_fsb5, pack_sample_header, SoundFormat.MPEG, payload, samples=1152)

  assert fsb.rebuild(fsb.samples[0]) == payload


@pytest.mark.parametrize('mode', [
  SoundFormat.NONE, SoundFormat.PCM24, SoundFormat.PCMFLOAT, SoundFormat.GCADPCM,
  SoundFormat.IMAADPCM, SoundFormat.VAG, SoundFormat.HEVAG, SoundFormat.XMA,
  SoundFormat.CELT, SoundFormat.AT9, SoundFormat.XWMA, SoundFormat.VORBIS,
])
def test_unsupported_formats(build_fsb5, pack_sample_header, mode):
  fsb = _single_sample_bank(build_fsb5, pack_sample_header, mode, bytes(16))

  with pytest.raises(RebuildFormatError) as info:
    fsb.rebuild(fsb.samples[0])

  assert info.value.sound_format is mode
  assert mode.name in str(info.value)
  # The decoded bank is untouched
  assert fsb.samples[0].data == bytes(16)


def test_sample_without_payload(build_fsb5, pack_sample_header):
  fsb = _single_sample_bank(build_fsb5, pack_sample_header, SoundFormat.PCM16, bytes(16))

  with pytest.raises(MismatchedSampleError):
    fsb.rebuild(Sample(0))


def test_invalid_pcm_frequency(build_fsb5, pack_sample_header):
  chunks = [(MetadataChunkType.FREQUENCY, 4, struct.pack('<I', 0))]
  fsb = _single_sample_bank(build_fsb5, pack_sample_header, SoundFormat.PCM16, bytes(16), samples=4, chunks=chunks)

  with pytest.raises(PCMError):
    fsb.rebuild(fsb.samples[0])


def test_format_lookups():
  assert SoundFormat.MPEG.file_extension == 'mp3'
  assert SoundFormat.VORBIS.file_extension == 'ogg'
  assert SoundFormat.PCM16.file_extension == 'wav'
  assert SoundFormat.PCM24.file_extension == 'bin'
  assert SoundFormat.XMA.file_extension == 'bin'

  supported = {mode for mode in SoundFormat if mode.supports_rebuild}
  assert supported == {SoundFormat.MPEG, SoundFormat.PCM8, SoundFormat.PCM16, SoundFormat.PCM32}


def test_pcm_rebuild_unavailable(monkeypatch, build_fsb5, pack_sample_header):
  monkeypatch.setattr(Soundbank, '_pcm', None)
  pcm = _single_sample_bank(build_fsb5, pack_sample_header, SoundFormat.PCM16, bytes(16), samples=4)
  mpeg = _single_sample_bank(build_fsb5, pack_sample_header, SoundFormat.MPEG, bytes(16))

  assert Soundbank.pcm_rebuild_available() is False
  assert pcm.supports_rebuild is False
  assert mpeg.supports_rebuild is True

  with pytest.raises(RebuildFormatError) as info:
    pcm.rebuild(pcm.samples[0])
  assert info.value.sound_format is SoundFormat.PCM16
  assert mpeg.rebuild(mpeg.samples[0]) == bytes(16)


def test_bank_rebuild_support_follows_format(build_fsb5, pack_sample_header):
  for mode in SoundFormat:
    fsb = _single_sample_bank(build_fsb5, pack_sample_header, mode, bytes(16))
    assert fsb.supports_rebuild is mode.supports_rebuild
