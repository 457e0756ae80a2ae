'''
### Pcm Module

Wraps raw PCM sample payloads in a minimal WAV container (a RIFF header, one `fmt ` chunk
and one `data` chunk) so they can be played back on their own.

Functions:
    `rebuild`:
        Builds a WAV file from a decoded sample and its PCM sample width in bytes.

Dependencies:
    `wave`:
        Writes the RIFF/WAVE header and data chunk.
'''

import io
import wave

from ..Errors import PCMError

def rebuild(sample, width: int) -> bytes:
  # Payloads are padded to 16 bytes, only whole frames are kept
  frame_size = sample.channels * width
  data = bytes(sample.data[:sample.samples * frame_size])

  buffer = io.BytesIO()
  try:
    with wave.open(buffer, 'wb') as wav_file:
      wav_file.setnchannels(sample.channels)
      wav_file.setsampwidth(width)
      wav_file.setframerate(sample.frequency)
      wav_file.writeframes(data)
  except wave.Error as e:
    raise PCMError(f"Failed to write WAV data for sample {sample.index}: {e}") from e

  return buffer.getvalue()

if __name__ == '__main__':
  pass
