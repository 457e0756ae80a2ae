'''
### Enums Module

This module defines enumerations used throughout the project to classify and interpret
constants found in FSB5 sound banks and in the exported bank manifests.

Classes:
    `XMLTags`:
        An enumeration of XML element tags used for bank manifest serialization.

    `SoundFormat`:
        Enumerates the audio codecs an FSB5 bank can declare for all of its samples.

    `MetadataChunkType`:
        Enumerates the metadata chunk types that can follow a sample header.

Functionality:
    - Provides strongly typed constants for use in parsing, validation, and serialization logic.
    - Maps each sound format to its suggested file extension and rebuild support.

Dependencies:
    `enum`:
        Used for defining enumeration types.

Intended Usage:
    This module should be imported wherever constant classification or tag identification
    is needed during binary parsing, sample rebuilding, or manifest export.
'''

from enum import Enum, IntEnum

from .Errors import SoundFormatError


class XMLTags(Enum):
    BANK     = 'bank'
    HEADER   = 'header'
    SAMPLES  = 'samples'


class SoundFormat(IntEnum):
    NONE     = 0
    PCM8     = 1
    PCM16    = 2
    PCM24    = 3
    PCM32    = 4
    PCMFLOAT = 5
    GCADPCM  = 6
    IMAADPCM = 7
    VAG      = 8
    HEVAG    = 9
    XMA      = 10
    MPEG     = 11
    CELT     = 12
    AT9      = 13
    XWMA     = 14
    VORBIS   = 15

    @classmethod
    def from_value(cls, value: int) -> 'SoundFormat':
        try:
            return cls(value)
        except ValueError:
            raise SoundFormatError(value) from None

    @property
    def file_extension(self) -> str:
        return _FILE_EXTENSIONS.get(self, 'bin')

    @property
    def pcm_width(self) -> int:
        ''' Bytes per sample for the PCM formats that can be rebuilt, 0 otherwise '''
        return _PCM_WIDTHS.get(self, 0)

    @property
    def supports_rebuild(self) -> bool:
        if self == SoundFormat.MPEG:
            return True
        return self.pcm_width != 0


_FILE_EXTENSIONS = {
    SoundFormat.MPEG:   'mp3',
    SoundFormat.VORBIS: 'ogg',
    SoundFormat.PCM8:   'wav',
    SoundFormat.PCM16:  'wav',
    SoundFormat.PCM32:  'wav',
}

_PCM_WIDTHS = {
    SoundFormat.PCM8:  1,
    SoundFormat.PCM16: 2,
    SoundFormat.PCM32: 4,
}


class MetadataChunkType(IntEnum):
    CHANNELS   = 1
    FREQUENCY  = 2
    LOOP       = 3
    COMMENT    = 4
    UNK_5      = 5
    XMASEEK    = 6
    DSPCOEFF   = 7
    XWMADATA   = 10
    VORBISDATA = 11


if __name__ == '__main__':
    pass
