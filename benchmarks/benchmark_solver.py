"""Benchmark the depth-first solver on the reference deals."""

import time
from kabufuda.puzzle.examples import create_layered_deal, create_sample_deal, create_stacked_deal
from kabufuda.simulation.engine import Solver, SolverConfig

DEALS = {
    "layered": create_layered_deal,
    "stacked": create_stacked_deal,
    "sample": create_sample_deal,
}


def benchmark_deal(name: str, max_seconds: float = 60.0) -> dict:
    """Solve one reference deal and report search statistics."""
    board = DEALS[name]()
    solver = Solver(SolverConfig(max_seconds=max_seconds))

    start_time = time.perf_counter()
    result = solver.solve(board)
    total_duration_s = time.perf_counter() - start_time

    return {
        "deal": name,
        "status": result.status.value,
        "moves": len(result.moves),
        "states_visited": result.states_visited,
        "states_skipped": result.states_skipped,
        "max_depth": result.max_depth,
        "total_duration_s": total_duration_s,
        "states_per_second": result.states_visited / total_duration_s if total_duration_s else 0.0,
    }


def main():
    """Run the solver benchmark."""
    print("=" * 60)
    print("KABUFUDA SOLVER BENCHMARK")
    print("=" * 60)
    print()

    # Warm-up run
    print("Warming up Python environment...")
    benchmark_deal("layered")
    print()

    results = []
    for name in DEALS:
        print(f"Solving {name} deal...")
        results.append(benchmark_deal(name))

    print()
    print("=" * 60)
    print("RESULTS")
    print("=" * 60)
    print()

    for r in results:
        print(f"{r['deal']}:")
        print(f"  Status:          {r['status']}")
        print(f"  Moves:           {r['moves']}")
        print(f"  Boards visited:  {r['states_visited']:,}")
        print(f"  Repeats skipped: {r['states_skipped']:,}")
        print(f"  Deepest path:    {r['max_depth']}")
        print(f"  Duration:        {r['total_duration_s']:.3f}s")
        print(f"  Boards/second:   {r['states_per_second']:,.0f}")
        print()


if __name__ == "__main__":
    main()
