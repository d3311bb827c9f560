import argparse
import sys

from jet_stack.env.simulator import FallSimulator, SimConfig
from jet_stack.simulation.runner import simulate_all
from jet_stack.utils.serialization import load_patterns, save_text

DEFAULT_DROPS = [2022, 1_000_000_000_000]


def run_queries(
    patterns: list[str],
    drop_counts: list[int],
    config: SimConfig,
    *,
    processes: int | None = 1,
    verbose: bool = False,
) -> list[int]:
    """Return every height, grouped by drop count then by input line."""
    if verbose:
        print(
            f"[run_queries] patterns={len(patterns)} drops={drop_counts} "
            f"detect_cycles={config.detect_cycles}",
            file=sys.stderr,
        )
    results = simulate_all(
        patterns, drop_counts, processes=processes, config=config, verbose=verbose
    )
    return [height for heights in results for height in heights]


def dump_wells(patterns: list[str], drops: int, config: SimConfig) -> None:
    for line, pattern in enumerate(patterns):
        sim = FallSimulator(pattern, config=config)
        sim.run(drops)
        print(f"[dump] line={line} drops={drops} height={sim.height}", file=sys.stderr)
        print(sim.render() + "\n", file=sys.stderr)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Simulate shapes falling into a jet-pushed well")
    parser.add_argument(
        "input",
        nargs="?",
        default="17.in",
        help="File or gs:// path with one jet pattern per line",
    )
    parser.add_argument(
        "--drops",
        type=int,
        nargs="+",
        default=DEFAULT_DROPS,
        help="Drop counts to report, one pass over the input each",
    )
    parser.add_argument(
        "--processes",
        type=int,
        default=1,
        help="Worker processes per pass (0 means all CPUs)",
    )
    parser.add_argument(
        "--capacity",
        type=int,
        default=SimConfig.capacity,
        help="Rows kept in the well ring buffer",
    )
    parser.add_argument(
        "--no-cycle-detection",
        action="store_true",
        help="Simulate every drop instead of skipping repeated cycles",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Optional local or gs:// path to also write the heights to",
    )
    parser.add_argument(
        "--dump",
        action="store_true",
        help="Print the final well for the first drop count to stderr",
    )
    parser.add_argument("--verbose", action="store_true", help="Print progress to stderr")
    args = parser.parse_args(argv)

    try:
        patterns = load_patterns(args.input)
    except OSError as exc:
        raise SystemExit(f"[main] could not read {args.input}: {exc}")

    config = SimConfig(capacity=args.capacity, detect_cycles=not args.no_cycle_detection)
    processes = args.processes or None
    heights = run_queries(
        patterns, args.drops, config, processes=processes, verbose=args.verbose
    )
    for height in heights:
        print(height)

    if args.output:
        save_text("".join(f"{height}\n" for height in heights), args.output)
        if args.verbose:
            print(f"[main] wrote {len(heights)} heights to {args.output}", file=sys.stderr)

    if args.dump:
        dump_wells(patterns, args.drops[0], config)


if __name__ == "__main__":
    main()
