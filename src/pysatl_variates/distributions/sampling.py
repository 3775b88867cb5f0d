"""
Sampling Interfaces
===================

Protocol and array-backed implementation of sample containers returned by
sampling strategies.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterator

    from pysatl_variates.types import NumericArray


class Sample(Protocol):
    """
    Protocol for sample containers.

    Attributes
    ----------
    array : numpy.ndarray
        Array representation of the samples.
    shape : tuple[int, ...]
        Shape of the sample array.
    """

    def __len__(self) -> int: ...
    @property
    def array(self) -> NumericArray: ...
    @property
    def shape(self) -> tuple[int, ...]: ...


class ArraySample:
    """
    Array-backed sample container.

    Stores variates as a 2D array of shape ``(n_samples, n_dimensions)``;
    ``float64`` for continuous distributions and ``int64`` for discrete ones.

    Parameters
    ----------
    data : numpy.ndarray
        2D numeric array of shape ``(n, d)``.

    Raises
    ------
    ValueError
        If data is not 2D.
    """

    dimension: int
    data: NumericArray

    def __init__(self, data: NumericArray) -> None:
        if data.ndim != 2:
            raise ValueError("ArraySample expects 2D array of shape (n, d).")
        self.data = data
        self.dimension = int(data.shape[1])

    def __len__(self) -> int:
        """Return the number of samples (n)."""
        return int(self.data.shape[0])

    def __iter__(self) -> Iterator[NumericArray]:
        """Iterate over samples (rows of the array)."""
        yield from self.data

    @property
    def array(self) -> NumericArray:
        """Return the backing array."""
        return self.data

    @property
    def shape(self) -> tuple[int, ...]:
        """Return the shape of the sample array (n, d)."""
        n, d = self.data.shape
        return int(n), int(d)

    def column(self, index: int = 0) -> NumericArray:
        """Return one coordinate of every sample as a 1D array."""
        return self.data[:, index]
