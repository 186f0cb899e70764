"""
Random source for the samplers.

Every sampler takes an explicit ``rng`` argument. Passing the same
:class:`numpy.random.Generator` to consecutive calls advances one stream;
passing a seed gives a reproducible fresh stream.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TypeAlias

import numpy as np

RandomSource: TypeAlias = np.random.Generator | np.random.SeedSequence | int | None
"""Anything accepted as the ``rng`` argument of a sampler."""


def resolve_rng(rng: RandomSource = None) -> np.random.Generator:
    """
    Return a generator for ``rng``.

    A :class:`numpy.random.Generator` is returned unchanged; a seed or
    ``None`` builds a new one with :func:`numpy.random.default_rng`.
    """
    return np.random.default_rng(rng)


def check_sample_size(n: int) -> int:
    """
    Validate the number of draws.

    Raises
    ------
    ValueError
        If ``n`` is negative or not an integer.
    """
    if isinstance(n, bool) or not isinstance(n, int | np.integer):
        raise ValueError(f"Sample size must be an integer, got {n!r}.")
    if n < 0:
        raise ValueError(f"Sample size must be non-negative, got {n}.")
    return int(n)


__all__ = ["RandomSource", "resolve_rng", "check_sample_size"]
