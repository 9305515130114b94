"""
Sequence encoding for m6A feature tables.

This module provides functions for:
- Splitting equal-length DNA strings into per-position columns
- Categorical encoding over the A/T/C/G alphabet
- Joining encoded columns back into strings
"""

from m6aprediction.sequence.encoding import (
    dna_encoding,
    split_sequences,
    as_categorical,
    position_columns,
    SequenceLengthError,
    DNA_LEVELS,
    POSITION_PREFIX,
)

__all__ = [
    "dna_encoding",
    "split_sequences",
    "as_categorical",
    "position_columns",
    "SequenceLengthError",
    "DNA_LEVELS",
    "POSITION_PREFIX",
]
