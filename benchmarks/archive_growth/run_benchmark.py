"""Benchmark: epsilon-box archive size and quality versus a plain Pareto archive.

Feeds many generations of ZDT solutions into an EpsilonBoxArchive (for
several epsilon values) and into an unbounded NondominatedArchive, recording
the archive sizes over time and the final hypervolume of each.

Usage:
    python benchmarks/archive_growth/run_benchmark.py
"""

import json
import logging
import sys
import time
from collections import defaultdict
from datetime import datetime, timezone
from pathlib import Path

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import numpy as np

from benchmarks.archive_growth.problems import PROBLEMS, sample_generation
from benchmarks.metrics import hypervolume
from boxfront import EpsilonBoxArchive, NondominatedArchive

# Configure logging
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


# Experiment parameters
GENERATION_SIZE = 100
N_GENERATIONS = 200
EPSILONS = [0.1, 0.05, 0.01]
N_RUNS = 5
SEEDS = list(range(N_RUNS))
REPORT_EVERY = 20


def run_once(problem_name: str, seed: int) -> list[dict]:
    """Feed one run's generations into every archive.

    Args:
        problem_name: Key into PROBLEMS.
        seed: Random seed for reproducibility.

    Returns:
        One record per archive with its size trace, final hypervolume,
        epsilon-progress counters and elapsed time.
    """
    problem = PROBLEMS[problem_name]
    rng = np.random.default_rng(seed)

    archives: dict[str, EpsilonBoxArchive | NondominatedArchive] = {
        f"epsilon={eps}": EpsilonBoxArchive(eps) for eps in EPSILONS
    }
    archives["pareto"] = NondominatedArchive()
    sizes: dict[str, list[int]] = defaultdict(list)
    elapsed: dict[str, float] = defaultdict(float)

    for gen in range(N_GENERATIONS):
        spread = max(1.0 - gen / N_GENERATIONS, 0.01)
        generation = sample_generation(problem, GENERATION_SIZE, spread, rng)
        for name, archive in archives.items():
            start = time.perf_counter()
            archive.add_all(generation)
            elapsed[name] += time.perf_counter() - start
            if (gen + 1) % REPORT_EVERY == 0:
                sizes[name].append(len(archive))

    records = []
    for name, archive in archives.items():
        record = {
            "problem": problem_name.upper(),
            "archive": name,
            "seed": seed,
            "sizes": sizes[name],
            "final_size": len(archive),
            "hypervolume": hypervolume(archive.objectives),
            "time_seconds": elapsed[name],
        }
        if isinstance(archive, EpsilonBoxArchive):
            record["improvements"] = archive.improvements
            record["dominating_improvements"] = archive.dominating_improvements
        records.append(record)
    return records


def run_benchmark() -> dict:
    """Run the full benchmark suite.

    Returns:
        Dictionary containing metadata and results.
    """
    metadata = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "parameters": {
            "generation_size": GENERATION_SIZE,
            "n_generations": N_GENERATIONS,
            "epsilons": EPSILONS,
            "n_runs": N_RUNS,
            "seeds": SEEDS,
        },
    }

    results = []
    total_runs = len(PROBLEMS) * N_RUNS
    current_run = 0
    for problem_name in PROBLEMS:
        for seed in SEEDS:
            current_run += 1
            logger.info(f"Running [{current_run}/{total_runs}]: {problem_name.upper()} (seed={seed})")
            records = run_once(problem_name, seed)
            for r in records:
                logger.info(f"  {r['archive']:<14} size={r['final_size']:>5} HV={r['hypervolume']:.4f}")
            results.extend(records)

    return {"metadata": metadata, "results": results}


def print_summary(results: dict) -> None:
    """Print mean final size and hypervolume per problem and archive.

    Args:
        results: The benchmark results dictionary.
    """
    sizes = defaultdict(lambda: defaultdict(list))
    hvs = defaultdict(lambda: defaultdict(list))
    for r in results["results"]:
        sizes[r["problem"]][r["archive"]].append(r["final_size"])
        hvs[r["problem"]][r["archive"]].append(r["hypervolume"])

    print("\n" + "=" * 72)
    print("ARCHIVE GROWTH SUMMARY")
    print("=" * 72)
    print(f"{'Problem':<10}{'Archive':<16}{'Final size':>14}{'Hypervolume':>22}")
    print("-" * 72)
    for problem in sorted(sizes):
        for archive_name in sizes[problem]:
            size = np.mean(sizes[problem][archive_name])
            hv = hvs[problem][archive_name]
            print(f"{problem:<10}{archive_name:<16}{size:>14.1f}{np.mean(hv):>14.4f} +/- {np.std(hv):.4f}")
    print()


def main() -> None:
    """Main entry point for the benchmark."""
    logger.info("Starting archive growth benchmark")
    results = run_benchmark()

    output_path = Path(__file__).parent / "results" / "archive_growth.json"
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(results, f, indent=2)
    logger.info(f"Results saved to {output_path}")

    print_summary(results)


if __name__ == "__main__":
    main()
