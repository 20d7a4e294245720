"""
Benchmarks for the Puncturable PRF

Times PRF generation across modulus sizes and evaluation across modulus
sizes and input-domain sizes.

Usage:
    python -m pprf.benchmark --sizes 1024 2048 --punctures 32 64 --rounds 5
"""

import argparse
import json
import logging
import random
import statistics
import sys
import time
from typing import Any, Callable, Dict, List, Optional, Sequence

from .logging_config import setup_logging
from .prf import PuncturablePrf

logger = logging.getLogger(__name__)

DEFAULT_SIZES = (1024, 2048, 4096)
DEFAULT_PUNCTURES = (32, 64, 128, 256)
GENERATE_PUNCTURES = 32
SEED = 0xDEADBEEF


def _time_ms(fn: Callable[[], Any], rounds: int) -> List[float]:
    durations = []
    for _ in range(rounds):
        start = time.perf_counter()
        fn()
        durations.append((time.perf_counter() - start) * 1000)
    return durations


def _summarize(operation: str, case: str, durations: List[float]) -> Dict[str, Any]:
    return {
        "operation": operation,
        "case": case,
        "rounds": len(durations),
        "mean_ms": statistics.fmean(durations),
        "stdev_ms": statistics.pstdev(durations),
        "min_ms": min(durations),
        "max_ms": max(durations),
    }


def bench_generate(sizes: Sequence[int], rounds: int, rng: random.Random) -> List[Dict[str, Any]]:
    """Time generate() for each modulus size."""
    results = []
    for size in sizes:
        logger.info("Benchmarking generate: modulus_bits=%d", size)
        durations = _time_ms(lambda: PuncturablePrf.generate(rng, size, GENERATE_PUNCTURES), rounds)
        results.append(_summarize("generate", f"{size}", durations))
    return results


def bench_eval(
    sizes: Sequence[int],
    punctures: Sequence[int],
    rounds: int,
    rng: random.Random,
) -> List[Dict[str, Any]]:
    """Time eval(1) for each (modulus size, input count) pair."""
    results = []
    for size in sizes:
        for count in punctures:
            logger.info("Benchmarking eval: modulus_bits=%d, inputs=%d", size, count)
            prf = PuncturablePrf.generate(rng, size, count)
            durations = _time_ms(lambda: prf.eval(1), rounds)
            results.append(_summarize("eval", f"{size}/{count}", durations))
    return results


def run_benchmarks(
    sizes: Sequence[int] = DEFAULT_SIZES,
    punctures: Sequence[int] = DEFAULT_PUNCTURES,
    rounds: int = 10,
    seed: int = SEED,
) -> List[Dict[str, Any]]:
    """
    Run the generate and eval benchmarks.

    Args:
        sizes: Modulus sizes in bits
        punctures: Input-domain sizes for the eval benchmark (each >= 2)
        rounds: Timed iterations per case
        seed: Seed for the generator draw; the modulus itself is always fresh

    Returns:
        List[Dict[str, Any]]: One summary per case
    """
    if rounds <= 0:
        raise ValueError("rounds must be positive")
    if any(count < 2 for count in punctures):
        raise ValueError("eval benchmark needs at least 2 inputs per PRF")

    rng = random.Random(seed)
    return bench_generate(sizes, rounds, rng) + bench_eval(sizes, punctures, rounds, rng)


def format_report(results: List[Dict[str, Any]]) -> str:
    """Render benchmark summaries as a text table."""
    lines = [f"{'operation':<10} {'case':<12} {'mean (ms)':>12} {'stdev (ms)':>12} {'min':>10} {'max':>10}"]
    for r in results:
        lines.append(
            f"{r['operation']:<10} {r['case']:<12} {r['mean_ms']:>12.3f} {r['stdev_ms']:>12.3f} "
            f"{r['min_ms']:>10.3f} {r['max_ms']:>10.3f}"
        )
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Benchmark the RSA puncturable PRF")
    parser.add_argument("--sizes", type=int, nargs="+", default=list(DEFAULT_SIZES),
                        help="Modulus sizes in bits")
    parser.add_argument("--punctures", type=int, nargs="+", default=list(DEFAULT_PUNCTURES),
                        help="Input-domain sizes for eval")
    parser.add_argument("--rounds", type=int, default=10, help="Iterations per case")
    parser.add_argument("--format", choices=["text", "json"], default="text", dest="output_format")
    args = parser.parse_args(argv)

    # Keep stdout for the report
    setup_logging(stream=sys.stderr)
    results = run_benchmarks(args.sizes, args.punctures, args.rounds)

    if args.output_format == "json":
        print(json.dumps(results, indent=2))
    else:
        print(format_report(results))


if __name__ == "__main__":
    main()
