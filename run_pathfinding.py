import csv
import time
import cProfile
import pstats
import logging
from gridpath.core.config import GridConfig
from gridpath.core.session import PathSession
from gridpath.world.grid import manhattan

# Per-selection logging is too chatty for a full sweep
logging.getLogger("PathSession").setLevel(logging.WARNING)
logging.getLogger("PathFinder").setLevel(logging.WARNING)

def run_all_targets(config=None, export_path=None):
    config = config or GridConfig()
    export_path = export_path or config.EXPORT_PATH
    session = PathSession(config)
    results = []
    start_time = time.time()

    targets = session.selectable_cells()
    print(f"Searching from {session.start} to {len(targets)} targets on a {config.ROWS}x{config.COLS} grid...")

    for target in targets:
        t0 = time.perf_counter()
        path = session.select(target.row, target.col)
        elapsed_ms = (time.perf_counter() - t0) * 1000.0

        found = session.last_result.path is not None
        results.append({
            "target_row": target.row,
            "target_col": target.col,
            "found": found,
            "path_length": len(path) if found else -1,
            "manhattan": manhattan(session.start, target),
            "expanded": session.last_result.expanded,
            "time_ms": round(elapsed_ms, 4),
        })

    end_time = time.time()
    print(f"Finished {len(results)} searches in {end_time - start_time:.4f} seconds.")

    if results:
        keys = results[0].keys()
        with open(export_path, 'w', newline='') as f:
            dict_writer = csv.DictWriter(f, fieldnames=keys)
            dict_writer.writeheader()
            dict_writer.writerows(results)
        print(f"Results exported to {export_path}")

        optimal = sum(1 for r in results if r["path_length"] == r["manhattan"])
        avg_expanded = sum(r["expanded"] for r in results) / len(results)
        avg_ms = sum(r["time_ms"] for r in results) / len(results)

        print("\n--- Summary ---")
        print(f"Optimal paths: {optimal}/{len(results)}")
        print(f"Average nodes expanded: {avg_expanded:.1f}")
        print(f"Average search time: {avg_ms:.4f} ms")

    return results

if __name__ == "__main__":
    profiler = cProfile.Profile()
    profiler.enable()

    run_all_targets()

    profiler.disable()
    stats = pstats.Stats(profiler).sort_stats('cumtime')
    stats.print_stats(20)
