"""
Reader for K-means data files.

A data file holds a point count, that many ``x y`` pairs, a centroid count,
and that many ``x y`` pairs, all separated by arbitrary whitespace::

    4
    0 0
    1 0
    0 1
    10 10
    2
    0 0
    10 10

Reading stops at the first token that is missing or does not parse. Whatever
was read up to that point is kept and nothing after it is read, so a short
point list also leaves the centroid list empty.
"""

import os
import re
from typing import IO, Iterator, List, NamedTuple, Optional, Pattern, Tuple, Union
import torch
from torch import Tensor

PathOrStream = Union[str, os.PathLike, IO[str]]


class LoadedData(NamedTuple):
    """Points and initial centroids read from a data file."""
    points: Tensor     # (n, 2)
    centroids: Tensor  # (K, 2)


# Numbers are read like C++ stream extraction: the longest numeric prefix of
# a token is taken and any rest is left for the next read. No nan, inf or
# digit separators.
_INT_RE = re.compile(r'[+-]?\d+', re.ASCII)
_FLOAT_RE = re.compile(r'[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?', re.ASCII)


class _TokenReader:
    """Pulls numbers off a token stream until the first failure."""

    def __init__(self, tokens: Iterator[str]):
        self._tokens = tokens
        self._rest: Optional[str] = None
        self.failed = False

    def _next(self, pattern: Pattern[str], convert):
        if self.failed:
            return None
        if self._rest is not None:
            token, self._rest = self._rest, None
        else:
            token = next(self._tokens, None)
        if token is None:
            self.failed = True
            return None

        match = pattern.match(token)
        if match is None:
            self.failed = True
            return None
        if match.end() < len(token):
            self._rest = token[match.end():]
        return convert(match.group())

    def read_count(self) -> Optional[int]:
        count = self._next(_INT_RE, int)
        if count is None:
            return None
        return max(count, 0)

    def read_pairs(self, count: int) -> List[Tuple[float, float]]:
        pairs = []
        for _ in range(count):
            x = self._next(_FLOAT_RE, float)
            y = self._next(_FLOAT_RE, float)
            if self.failed:
                break
            pairs.append((x, y))
        return pairs


def _tokens(stream: IO[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _to_tensor(pairs: List[Tuple[float, float]], dtype: torch.dtype) -> Tensor:
    if not pairs:
        return torch.empty((0, 2), dtype=dtype)
    return torch.tensor(pairs, dtype=dtype)


def read_data(stream: IO[str], dtype: torch.dtype = torch.float64) -> LoadedData:
    """Parse points and centroids from an open text stream.

    Args:
        stream: Text stream in the data file format
        dtype: Data type of the returned tensors

    Returns:
        LoadedData with possibly fewer pairs than the counts announce
    """
    reader = _TokenReader(_tokens(stream))

    n_points = reader.read_count()
    points = reader.read_pairs(n_points) if n_points is not None else []

    n_centroids = reader.read_count()
    centroids = reader.read_pairs(n_centroids) if n_centroids is not None else []

    return LoadedData(points=_to_tensor(points, dtype),
                      centroids=_to_tensor(centroids, dtype))


def load_data(source: PathOrStream, dtype: torch.dtype = torch.float64) -> LoadedData:
    """Read a data file from a path or an open text stream.

    Args:
        source: File path or text stream
        dtype: Data type of the returned tensors

    Returns:
        LoadedData of (n, 2) points and (K, 2) centroids
    """
    if isinstance(source, (str, os.PathLike)):
        with open(source, 'r', encoding='utf-8') as stream:
            return read_data(stream, dtype=dtype)
    return read_data(source, dtype=dtype)
