"""
Sequence encoding functions for m6A feature tables.

DNA k-mers are split into one categorical column per position so that a
classifier trained on per-nucleotide factors can consume them directly.
"""

import logging
from typing import Hashable, List, Optional, Sequence

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

# Factor levels in the order the classifier was trained with
DNA_LEVELS = ["A", "T", "C", "G"]

POSITION_PREFIX = "nt_pos"


class SequenceLengthError(ValueError):
    """Raised when sequences in one batch do not share the same length."""


def position_columns(length: int, prefix: str = POSITION_PREFIX) -> List[str]:
    """Column names for a sequence of the given length (1-indexed)."""
    return [f"{prefix}{i}" for i in range(1, length + 1)]


def as_categorical(values, levels: Sequence[str]) -> pd.Categorical:
    """
    Categorical over fixed ``levels``; anything outside them becomes NaN.

    Unknown values are masked first, so pandas never sees a value that is
    not one of the categories.
    """
    values = pd.Series(values, dtype=object)
    return pd.Categorical(values.where(values.isin(levels)), categories=list(levels))


def missing_rows(dna_strings: Sequence) -> List[int]:
    """Positions of missing (None/NaN) entries."""
    return [i for i, s in enumerate(dna_strings) if s is None or (np.ndim(s) == 0 and pd.isna(s))]


def split_sequences(dna_strings: Sequence[str]) -> np.ndarray:
    """
    Split equal-length strings into a character matrix.

    Missing entries (None/NaN) become rows of empty strings so they end up
    unmapped after encoding. The length is taken from the first present
    sequence.

    Args:
        dna_strings: Sequence of DNA strings

    Returns:
        numpy array of shape (num_sequences, sequence_length) with one
        character per cell

    Raises:
        SequenceLengthError: If the present strings differ in length
    """
    dna_strings = list(dna_strings)
    if not dna_strings:
        return np.empty((0, 0), dtype="<U1")

    missing = set(missing_rows(dna_strings))
    present = [str(s) for i, s in enumerate(dna_strings) if i not in missing]
    seq_len = len(present[0]) if present else 0

    bad = [
        i for i, s in enumerate(dna_strings)
        if i not in missing and len(str(s)) != seq_len
    ]
    if bad:
        raise SequenceLengthError(
            f"Expected all sequences to have length {seq_len}; "
            f"rows {bad[:10]} differ"
        )

    rows = [[""] * seq_len if i in missing else list(str(s)) for i, s in enumerate(dna_strings)]
    return np.array(rows, dtype="<U1").reshape(len(rows), seq_len)


def dna_encoding(
    dna_strings: Sequence[str],
    prefix: str = POSITION_PREFIX,
    handle_unknown: str = "na",
    index: Optional[Sequence[Hashable]] = None,
) -> pd.DataFrame:
    """
    Encode DNA strings as per-position categorical columns.

    Args:
        dna_strings: DNA strings (e.g. 5-mers), all of the same length
        prefix: Column name prefix; columns are ``{prefix}1 .. {prefix}N``
        handle_unknown: How to handle characters outside ``DNA_LEVELS``
            and missing sequences:
            - "na": Leave the cell unmapped (NaN) (default)
            - "error": Raise ValueError
        index: Optional index for the result, e.g. the index of the
            feature table the sequences came from

    Returns:
        DataFrame of shape (num_sequences, sequence_length) where every
        column is categorical with categories ``DNA_LEVELS``

    Example:
        >>> dna_encoding(["GGACA"]).iloc[0].tolist()
        ['G', 'G', 'A', 'C', 'A']
    """
    if handle_unknown not in ("na", "error"):
        raise ValueError(f"Invalid handle_unknown mode: {handle_unknown}")

    dna_strings = list(dna_strings)
    if handle_unknown == "error":
        missing = missing_rows(dna_strings)
        if missing:
            raise ValueError(f"Missing sequence in rows {missing[:10]}")

    seq_m = split_sequences(dna_strings)
    columns = position_columns(seq_m.shape[1], prefix)

    if handle_unknown == "error" and seq_m.size:
        unknown = ~np.isin(seq_m, DNA_LEVELS)
        if unknown.any():
            row, pos = np.argwhere(unknown)[0]
            raise ValueError(
                f"Unknown nucleotide '{seq_m[row, pos]}' at position {pos + 1} "
                f"of sequence {row}"
            )

    seq_df = pd.DataFrame(seq_m, columns=columns, index=index)
    for col in columns:
        seq_df[col] = as_categorical(seq_df[col].to_numpy(), DNA_LEVELS)

    n_unmapped = int(seq_df.isna().sum().sum())
    if n_unmapped:
        logger.debug(f"{n_unmapped} nucleotide(s) outside {DNA_LEVELS} left unmapped")

    return seq_df
