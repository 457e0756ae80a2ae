'''
### fsbank Package

This package reads FSB5 (FMOD Sound Bank) files and extracts their samples.

Modules:
    `Enums`:
        Defines enumeration classes for sound formats, metadata chunk types, and XML tags.

    `Errors`:
        Defines the exceptions raised while decoding banks and rebuilding samples.

    `Helpers`:
        Provides bitfield extraction and little-endian stream reading helpers.

    `YAMLSerializer`:
        Configures PyYAML for bank manifest output.

    `soundbank.Soundbank`:
        Core classes representing the bank header and the entire bank.

    `soundbank.Pcm`:
        Wraps PCM sample payloads in a WAV container.

    `soundbank.structs.Sample`:
        Defines the `Sample` class decoded from a packed sample header.

    `soundbank.structs.Metadata`:
        Defines the metadata chunk classes chained after each sample header.

Functionality:
    - Parse FSB5 banks from any seekable byte stream.
    - Resolve sample names and slice the data segment into per-sample payloads.
    - Rebuild MPEG samples as-is and PCM samples as WAV files.
    - Export bank manifests as YAML or XML dictionaries.

Dependencies:
    `struct`:
        For byte-level unpacking.

    `wave`:
        For writing rebuilt PCM samples.

    `yaml`:
        For manifest serialization.

Intended Usage:
    Load a bank with `load(data)` or `FSB5.from_file(path)`, then call `FSB5.rebuild(sample)`
    for each sample that should be written out.
'''

from .soundbank.Soundbank import FSB5, FSB5Header
from .soundbank.structs.Sample import Sample
from .Enums import SoundFormat, MetadataChunkType
from .Errors import *

__version__ = '2026.10.18'

def load(data: bytes) -> FSB5:
  return FSB5.from_bytes(data)
