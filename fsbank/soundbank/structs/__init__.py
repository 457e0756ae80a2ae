'''
### Structs Package

This package defines the individual structures found after an FSB5 sound bank header.

Modules:
    `Sample`:
        Defines the `Sample` class, decoded from a packed 64-bit sample header.

    `Metadata`:
        Defines the metadata chunk classes that can be chained after a sample header.

Dependencies:
    `Enums`:
        For representing metadata chunk types.

    `Helpers`:
        For bitfield extraction and little-endian stream reads.

Intended Usage:
    Used by `FSB5` in the `Soundbank` module while decoding the sample header block.
'''
