from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union
import logging
import numpy as np
from .conventions import (
    WAD, X_BOUND, LOOP_SIZE, MU_RANGE, SIGMA_MAX, SIGMA_SPAN, INPUT_FILE, OUTPUT_FILE,
)
from .codec import Triple, encode_triples, encode_outputs, decode_triples, decode_outputs
from .fixed_point import to_wad, from_wad
from .normaldist import normcdf

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# ---- single vectors ----

def generate_input(rng: np.random.Generator, mu_range: float = MU_RANGE,
                   sigma_max: float = SIGMA_MAX, span: float = SIGMA_SPAN) -> Triple:
    """
    Random (x, mu, sigma) WAD triple. x stays within span*sigma of mu: beyond
    ~8.3 sigma the CDF is 0 or 1 anyway, and those tails are left to the
    property tests.
    """
    mu = rng.random() * 2*mu_range - mu_range
    sigma = 0.0
    while to_wad(sigma) <= 0:
        sigma = rng.random() * sigma_max
    lo, hi = mu - span*sigma, mu + span*sigma
    x = rng.random() * (hi - lo) + lo
    x_max = X_BOUND / WAD
    x = min(max(x, -x_max), x_max)
    return to_wad(x), to_wad(mu), to_wad(sigma)

def expected_output(triple: Triple) -> int:
    """Reference CDF of a WAD triple, evaluated in floating point."""
    x, mu, sigma = triple
    # exact integer difference; subtracting two floats near 100 loses digits when sigma is tiny
    return to_wad(normcdf(from_wad(x - mu), 0.0, from_wad(sigma)))

# ---- batches ----

@dataclass(frozen=True)
class VectorBatch:
    inputs: Tuple[Triple, ...]
    outputs: Tuple[int, ...]

    def __post_init__(self):
        if len(self.inputs) != len(self.outputs):
            raise ValueError(f"{len(self.inputs)} inputs but {len(self.outputs)} outputs.")

    @property
    def size(self) -> int:
        return len(self.inputs)

def generate_vectors(n: int = LOOP_SIZE, seed: Optional[int] = None, **kwargs) -> VectorBatch:
    if n < 0:
        raise ValueError("Batch size must be non-negative.")
    rng = np.random.default_rng(seed)
    inputs = tuple(generate_input(rng, **kwargs) for _ in range(n))
    outputs = tuple(expected_output(tr) for tr in inputs)
    logger.debug("Generated %d vectors (seed=%s)", n, seed)
    return VectorBatch(inputs, outputs)

def write_vectors(directory: PathLike, batch: VectorBatch) -> Tuple[Path, Path]:
    d = Path(directory)
    d.mkdir(parents=True, exist_ok=True)
    input_path, output_path = d / INPUT_FILE, d / OUTPUT_FILE
    input_path.write_bytes(encode_triples(batch.inputs))
    output_path.write_bytes(encode_outputs(batch.outputs))
    logger.info("Wrote %d vectors to %s", batch.size, d)
    return input_path, output_path

def read_vectors(directory: PathLike, n: Optional[int] = None) -> VectorBatch:
    d = Path(directory)
    inputs = decode_triples((d / INPUT_FILE).read_bytes(), n)
    outputs = decode_outputs((d / OUTPUT_FILE).read_bytes(), n)
    logger.debug("Read %d vectors from %s", len(inputs), d)
    return VectorBatch(tuple(inputs), tuple(outputs))
