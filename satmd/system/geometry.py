"""Displacements and distances between particles."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray


def displacement(
    p1: ArrayLike, p2: ArrayLike
) -> tuple[NDArray[np.floating], float]:
    """
    Compute the displacement p1 - p2 and its Euclidean norm.

    Args:
        p1: First position, shape (D,).
        p2: Second position, shape (D,).

    Returns:
        Tuple of (dr, norm) with dr[i] = p1[i] - p2[i].
    """
    dr = np.asarray(p1, dtype=np.float64) - np.asarray(p2, dtype=np.float64)
    return dr, float(np.sqrt(np.sum(dr * dr)))


def displacements(
    block: NDArray[np.floating], positions: NDArray[np.floating]
) -> tuple[NDArray[np.floating], NDArray[np.floating]]:
    """
    Compute displacements from a block of particles to every particle.

    Args:
        block: Reference positions, shape (B, D).
        positions: All positions, shape (P, D).

    Returns:
        Tuple of (dr, norm) where dr has shape (B, P, D) with
        dr[b, j] = block[b] - positions[j], and norm has shape (B, P).
    """
    dr = block[:, np.newaxis, :] - positions[np.newaxis, :, :]
    return dr, np.sqrt(np.sum(dr * dr, axis=-1))
