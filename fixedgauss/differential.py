from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Sequence
import logging
import numpy as np
from .conventions import WAD, EPSILON
from .codec import Triple
from .errors import FixedGaussError
from .gaussian import cdf
from .oracle import PathLike, read_vectors

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class Failure:
    index: int
    triple: Triple
    expected: int
    got: Optional[int] = None
    deviation: float = float("nan")
    error: Optional[str] = None

@dataclass
class DifferentialReport:
    """
    Outcome of comparing the fixed-point cdf with reference outputs.
    Deviations are absolute, in real units (WAD difference / 1e18); entries
    whose evaluation raised are NaN and show up in ``failures`` with the
    error name.
    """
    tolerance: float
    deviations: np.ndarray = field(repr=False)
    failures: List[Failure] = field(default_factory=list)

    @property
    def size(self) -> int:
        return int(self.deviations.shape[0])

    @property
    def max_deviation(self) -> float:
        finite = self.deviations[~np.isnan(self.deviations)]
        return float(finite.max()) if finite.size else 0.0

    @property
    def mean_deviation(self) -> float:
        finite = self.deviations[~np.isnan(self.deviations)]
        return float(finite.mean()) if finite.size else 0.0

    @property
    def worst_index(self) -> Optional[int]:
        if np.all(np.isnan(self.deviations)):
            return None
        return int(np.nanargmax(self.deviations))

    @property
    def ok(self) -> bool:
        return len(self.failures) == 0

    def summary(self) -> str:
        status = "OK" if self.ok else f"{len(self.failures)} FAILED"
        return (f"{status}: {self.size} vectors, max deviation {self.max_deviation:.3e} "
                f"(index {self.worst_index}), mean {self.mean_deviation:.3e}, tolerance {self.tolerance:.1e}")

def run_differential(inputs: Sequence[Triple], expected: Sequence[int], tolerance: float = EPSILON) -> DifferentialReport:
    if len(inputs) != len(expected):
        raise ValueError(f"{len(inputs)} inputs but {len(expected)} expected outputs.")
    deviations = np.full(len(inputs), np.nan, dtype=float)
    failures = []
    for i, (triple, want) in enumerate(zip(inputs, expected)):
        try:
            got = cdf(*triple)
        except FixedGaussError as e:
            failures.append(Failure(i, tuple(triple), want, error=type(e).__name__))
            continue
        dev = abs(got - want) / WAD
        deviations[i] = dev
        if dev > tolerance:
            failures.append(Failure(i, tuple(triple), want, got=got, deviation=dev))
    report = DifferentialReport(tolerance, deviations, failures)
    logger.info("%s", report.summary())
    return report

def run_from_directory(directory: PathLike, tolerance: float = EPSILON, n: Optional[int] = None) -> DifferentialReport:
    batch = read_vectors(directory, n)
    return run_differential(batch.inputs, batch.outputs, tolerance)
