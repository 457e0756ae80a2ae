'''
### Soundbank Package

This package defines high-level classes and structures for representing and parsing FSB5
sound banks and rebuilding their samples.

Modules:
    `Soundbank`:
        Core classes representing a sound bank header (`FSB5Header`) and an entire sound
        bank (`FSB5`), including its samples, names, and raw payloads.

    `Pcm`:
        Wraps PCM sample payloads in a WAV container.

    `structs.Sample`:
        Defines the `Sample` class representing a single sample header and its payload.

    `structs.Metadata`:
        Defines the metadata chunk classes chained after each sample header.

Functionality:
    - Load an entire sound bank from a seekable stream, bytes, or a file path.
    - Rebuild MPEG and PCM samples into standalone files.
    - Export bank data to YAML and XML manifest dictionaries.

Dependencies:
    `struct`:
        For low-level binary unpacking operations.

    `Enums`:
        For representing sound formats, chunk types, and XML tag identifiers.

    `Helpers`:
        Provides bitfield extraction and stream reading utilities.

Intended Usage:
    The `soundbank` package is the core for extracting samples from FSB5 sound banks.
'''
