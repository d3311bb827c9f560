from __future__ import annotations

from typing import List, Sequence, Tuple

import multiprocessing as mp
import os
import sys

from jet_stack.env.simulator import FallSimulator, SimConfig


def simulate(pattern: str, drops: int, *, config: SimConfig | None = None) -> int:
    """Return the stack height after ``drops`` drops on a fresh well."""
    return FallSimulator(pattern, config=config).run(drops)


def _worker(args: Tuple[int, str, int, SimConfig, bool]) -> int:
    """Helper for ``simulate_parallel`` running in a separate process."""
    line, pattern, drops, config, verbose = args
    if verbose:
        print(f"[worker] pid={os.getpid()} line={line} drops={drops} starting", file=sys.stderr)
    height = simulate(pattern, drops, config=config)
    if verbose:
        print(f"[worker] pid={os.getpid()} line={line} finished height={height}", file=sys.stderr)
    return height


def simulate_parallel(
    patterns: Sequence[str],
    drops: int,
    *,
    processes: int | None = None,
    config: SimConfig | None = None,
    verbose: bool = False,
) -> List[int]:
    """Simulate every pattern in its own worker process.

    Heights are returned in the same order as ``patterns``.
    """
    if verbose:
        print(
            f"[simulate_parallel] patterns={len(patterns)} drops={drops} processes={processes}",
            file=sys.stderr,
        )
    config = config or SimConfig()
    args = [(line, pattern, drops, config, verbose) for line, pattern in enumerate(patterns)]
    ctx = mp.get_context("spawn")
    with ctx.Pool(processes) as pool:
        return pool.map(_worker, args)


def simulate_all(
    patterns: Sequence[str],
    drop_counts: Sequence[int],
    *,
    processes: int | None = 1,
    config: SimConfig | None = None,
    verbose: bool = False,
) -> List[List[int]]:
    """Return one list of heights per drop count, each in pattern order."""
    results: List[List[int]] = []
    for drops in drop_counts:
        if processes == 1:
            heights = []
            for line, pattern in enumerate(patterns):
                heights.append(_worker((line, pattern, drops, config, verbose)))
        else:
            heights = simulate_parallel(
                patterns, drops, processes=processes, config=config, verbose=verbose
            )
        if verbose:
            print(f"[runner] drops={drops} heights={heights}", file=sys.stderr)
        results.append(heights)
    return results
