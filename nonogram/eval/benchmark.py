# -*- coding: utf-8 -*-
"""
ソルバーの処理時間を計測するモジュールです。

フィクスチャ（load_fixtures() の DataFrame）の各パズルを repeat 回ずつ解き、
パズルごとの処理時間（マイクロ秒）と結果をまとめます。
summarize() で盤面サイズごとの平均・標準偏差・最小・最大を出せます。

使い方:

    python -m nonogram.eval.benchmark data/5x5.jsonl data/10x10.jsonl --repeat 5
"""

from __future__ import annotations

import argparse
import time
from typing import Dict, List, Optional

import pandas as pd

from ..config import BENCH_DEFAULT_REPEAT
from ..csp.propagation import Board
from ..fixtures.loader import fixture_constraints, fixture_dimensions, load_fixtures
from ..logging_utils import get_logger
from .verify import verify_solution

logger = get_logger()


def run_benchmark(
    fixtures: pd.DataFrame,
    repeat: int = BENCH_DEFAULT_REPEAT,
    limit: Optional[int] = None,
) -> pd.DataFrame:
    """
    フィクスチャの各パズルを解いて処理時間を計測します。

    Parameters
    ----------
    fixtures : pandas.DataFrame
        load_fixtures() の戻り値。
    repeat : int
        1パズルあたりの計測回数。Board の構築（候補生成）も計測に含めます。
    limit : int, optional
        先頭から何パズルまで計測するか。

    Returns
    -------
    pandas.DataFrame
        name / dimensions / status / verified / matches_solution / passes /
        time_us（repeat 回の平均）/ best_us 列を持つ DataFrame。
    """
    if repeat < 1:
        raise ValueError(f"repeat must be >= 1, got {repeat}")

    rows: List[Dict] = []
    target = fixtures if limit is None else fixtures.head(limit)

    for _, fx in target.iterrows():
        constraints = fixture_constraints(fx)
        dims = fixture_dimensions(fx)

        times: List[float] = []
        result = None
        for _ in range(repeat):
            t0 = time.perf_counter()
            result = Board(constraints, dims).solve()
            times.append((time.perf_counter() - t0) * 1_000_000)

        grid = result.grid()
        rows.append(
            {
                "name": fx["name"],
                "dimensions": fx["dimensions"],
                "status": result.status,
                "verified": verify_solution(result, constraints),
                "matches_solution": result.is_solved and grid == fx["solution"],
                "passes": result.passes,
                "time_us": sum(times) / len(times),
                "best_us": min(times),
            }
        )

    return pd.DataFrame(rows)


def summarize(frame: pd.DataFrame) -> pd.DataFrame:
    """盤面サイズごとに処理時間の統計をとります。"""
    summary = frame.groupby("dimensions")["time_us"].agg(["count", "mean", "std", "min", "max"])
    summary["solved"] = frame.groupby("dimensions")["status"].apply(lambda s: int((s == "solved").sum()))
    return summary


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Nonogram propagation benchmark")
    parser.add_argument("fixtures", nargs="+", help="JSON Lines fixture files")
    parser.add_argument("--repeat", type=int, default=BENCH_DEFAULT_REPEAT)
    parser.add_argument("--limit", type=int, default=None, help="Puzzles per file")
    args = parser.parse_args(argv)

    frames = []
    for path in args.fixtures:
        fixtures = load_fixtures(path)
        logger.info("Loaded %d puzzles from %s", len(fixtures), path)
        frames.append(run_benchmark(fixtures, repeat=args.repeat, limit=args.limit))

    frame = pd.concat(frames, ignore_index=True)
    print(summarize(frame).to_string())


if __name__ == "__main__":
    main()
