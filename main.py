# main.py
import json
import sys

from pathsearch.app.build import build


def run(scenario_path: str) -> int:
    with open(scenario_path) as f:
        app = build(json.load(f))

    misses = 0
    for result in app.run_queries():
        if result.found:
            print(" -> ".join(str(n.index) for n in result.path), f"(cost {result.cost:.3f})")
        else:
            misses += 1
            print(f"no path {result.start.index} -> {result.goal.index} ({result.reason})")
    return 1 if misses else 0


if __name__ == "__main__":
    if len(sys.argv) != 2:
        sys.exit("usage: python main.py SCENARIO.json")
    sys.exit(run(sys.argv[1]))
