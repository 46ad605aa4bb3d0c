#!/usr/bin/env python3
"""Structural checks over a batch of level seeds.

  python scripts/diagnose_seeds.py 292372 730727
  python scripts/diagnose_seeds.py --range 1 200 --chance 1.0

Prints one JSON record per seed and exits 1 when any level has unreachable
rooms, broken secret passages or closed doors off the lattice.
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from typing import List

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from cryptgen.dungeon import Dungeon, DungeonConfig  # noqa: E402
from cryptgen.dungeon.analysis import analyze  # noqa: E402

DEFAULT_SEEDS = [1, 42, 31337, 292372, 730727]


def check_seed(seed: int, chance: float = 0.2) -> dict:
    d = Dungeon(DungeonConfig(secret_door_chance=chance), seed=seed)
    problems = {name: found for name, found in analyze(d.level).items() if found}
    return {
        "seed": seed,
        "rooms": d.metrics["rooms_placed"],
        "secret_passages": d.metrics["secret_passages"],
        "closed_doors": d.metrics["closed_doors"],
        "problems": problems,
    }


def main(argv: List[str]) -> int:
    p = argparse.ArgumentParser(prog="diagnose_seeds")
    p.add_argument("seeds", nargs="*", type=int)
    p.add_argument("--range", nargs=2, type=int, metavar=("FIRST", "LAST"), dest="seed_range")
    p.add_argument("--chance", type=float, default=0.2, help="secret door chance per intersection")
    args = p.parse_args(argv)

    seeds = list(args.seeds)
    if args.seed_range:
        seeds += list(range(args.seed_range[0], args.seed_range[1] + 1))
    records = [check_seed(s, args.chance) for s in seeds or DEFAULT_SEEDS]
    for rec in records:
        print(json.dumps(rec, default=list))
    failed = [r["seed"] for r in records if r["problems"]]
    if failed:
        print(f"{len(failed)} of {len(records)} seeds failed: {failed}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
