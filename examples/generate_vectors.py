"""
Example: generate a batch of differential test vectors.

- (x, mu, sigma) triples with mu in [-100, 100], sigma in (0, 10] and x within
  10 sigma of mu, all as WAD integers
- expected CDF values from the floating-point reference
- written as int256[3][N] ('input') and int256[N] ('output') files

Environment (optionally from .env):
    FIXEDGAUSS_LOOP_SIZE  batch size (default 100000)
    FIXEDGAUSS_DATA_DIR   output directory (default ./data)
    FIXEDGAUSS_SEED       integer seed (default: fresh entropy)
    FIXEDGAUSS_LOGLEVEL   logging level (default INFO)

Run:
    python examples/generate_vectors.py
"""
import os
import logging
from dotenv import load_dotenv

from fixedgauss import LOOP_SIZE, generate_vectors, write_vectors

load_dotenv()

logging.basicConfig(
    level=os.getenv("FIXEDGAUSS_LOGLEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)


def main():
    n = int(os.getenv("FIXEDGAUSS_LOOP_SIZE", LOOP_SIZE))
    data_dir = os.getenv("FIXEDGAUSS_DATA_DIR", "data")
    seed = os.getenv("FIXEDGAUSS_SEED")
    seed = int(seed) if seed else None

    logger.info("Generating %d vectors", n)
    batch = generate_vectors(n, seed=seed)
    input_path, output_path = write_vectors(data_dir, batch)
    logger.info("input: %s (%d bytes)", input_path, input_path.stat().st_size)
    logger.info("output: %s (%d bytes)", output_path, output_path.stat().st_size)


if __name__ == "__main__":
    main()
