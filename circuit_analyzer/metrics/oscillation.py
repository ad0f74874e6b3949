"""Oscillation metrics over a window of powered-state snapshots."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

import numpy as np

from circuit_analyzer.config.constants import HISTORY_CAPACITY, MIN_OSCILLATION_TOGGLES
from circuit_analyzer.domain.voxel import CellKey

# Encoding for the state matrix; a missing cell is its own state.
_ABSENT = -1
_OFF = 0
_ON = 1


@dataclass(frozen=True)
class OscillationInfo:
    """Estimated toggle period (ticks) and frequency (toggles per tick) of a cell."""

    key: CellKey
    frequency: float
    period: int


def state_matrix(
    snapshots: Sequence[Mapping[CellKey, bool]],
) -> tuple[list[CellKey], np.ndarray]:
    """Stack snapshots into an (n_frames, n_keys) int8 matrix.

    Keys are the union across all snapshots in order of first appearance.
    """
    keys: dict[CellKey, int] = {}
    for snap in snapshots:
        for key in snap:
            keys.setdefault(key, len(keys))
    states = np.full((len(snapshots), len(keys)), _ABSENT, dtype=np.int8)
    for row, snap in enumerate(snapshots):
        for key, powered in snap.items():
            states[row, keys[key]] = _ON if powered else _OFF
    return list(keys), states


def toggle_counts(states: np.ndarray) -> np.ndarray:
    """Count value changes between consecutive rows, per column."""
    if states.shape[0] < 2:
        return np.zeros(states.shape[1], dtype=np.int64)
    return np.count_nonzero(np.diff(states, axis=0), axis=0)


def detect_oscillations(
    snapshots: Sequence[Mapping[CellKey, bool]],
    *,
    window: int = HISTORY_CAPACITY,
    min_toggles: int = MIN_OSCILLATION_TOGGLES,
) -> list[OscillationInfo]:
    """Report cells that toggled at least ``min_toggles`` times in the window.

    Nothing is reported until ``window`` snapshots are available. The period
    estimate ``floor(n / toggles)`` assumes evenly spaced toggles; it is a
    cheap heuristic, not spectral analysis, and is biased for irregular
    oscillators.
    """
    n_frames = len(snapshots)
    if n_frames < window:
        return []

    keys, states = state_matrix(snapshots)
    toggles = toggle_counts(states)

    out: list[OscillationInfo] = []
    for key, count in zip(keys, toggles.tolist(), strict=True):
        if count < min_toggles:
            continue
        out.append(OscillationInfo(key=key, frequency=count / n_frames, period=n_frames // count))
    return out
