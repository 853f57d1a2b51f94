#!/usr/bin/env python3
"""Quick perf benchmark for tokenizing and parsing YAML files."""

from __future__ import annotations

import argparse
import cProfile
import io
from pathlib import Path
import pstats
import statistics
import time

from tqdm import tqdm

from yamlipy import ParseMode, load_all, tokenize


def _collect_yaml_files(root: Path) -> list[Path]:
    if root.is_file():
        return [root]
    files = sorted([*root.rglob("*.yml"), *root.rglob("*.yaml")])
    return [path for path in files if path.is_file()]


def _run_once(
    sources: list[str],
    *,
    label: str,
    show_progress: bool,
    mode: ParseMode,
) -> tuple[float, int, int, int, int]:
    start = time.perf_counter()
    total_tokens = 0
    total_documents = 0
    total_errors = 0
    iterator = tqdm(sources, desc=label, unit="file") if show_progress else sources
    for text in iterator:
        lexed = tokenize(text)
        if lexed.is_ok:
            total_tokens += len(lexed.unwrap())
        try:
            parsed = load_all(text, mode=mode)
        except OverflowError:
            total_errors += 1
            continue
        if parsed.is_ok:
            total_documents += len(parsed.unwrap())
        else:
            total_errors += 1
    duration = time.perf_counter() - start
    return duration, len(sources), total_tokens, total_documents, total_errors


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark YAML tokenize/parse throughput")
    parser.add_argument("root", type=Path, help="YAML file or directory to scan recursively")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--mode",
        type=ParseMode,
        choices=list(ParseMode),
        default=ParseMode.STRICT,
        help="Parser mode (default: strict)",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Run cProfile and print top hotspots",
    )
    parser.add_argument(
        "--profile-top",
        type=int,
        default=30,
        help="Number of cProfile rows to print (default: 30)",
    )
    parser.add_argument(
        "--profile-sort",
        type=str,
        default="tottime",
        help="cProfile sort key (default: tottime, common: cumulative)",
    )
    args = parser.parse_args()

    root: Path = args.root
    if not root.exists():
        raise SystemExit(f"Invalid path: {root}")

    files = _collect_yaml_files(root)
    if not files:
        raise SystemExit(f"No .yml/.yaml files found under {root}")
    sources = [path.read_text(encoding="utf-8") for path in files]

    show_progress = not args.no_progress

    def _benchmark() -> tuple[list[float], int, int, int, int]:
        for warmup_idx in range(max(args.warmups, 0)):
            _run_once(
                sources,
                label=f"warmup {warmup_idx + 1}/{max(args.warmups, 0)}",
                show_progress=show_progress,
                mode=args.mode,
            )

        timings: list[float] = []
        files_count = tokens_count = documents_count = errors_count = 0
        for run_idx in range(max(args.runs, 1)):
            duration, files_count, tokens_count, documents_count, errors_count = _run_once(
                sources,
                label=f"run {run_idx + 1}/{max(args.runs, 1)}",
                show_progress=show_progress,
                mode=args.mode,
            )
            timings.append(duration)
        return timings, files_count, tokens_count, documents_count, errors_count

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, files_count, tokens_count, documents_count, errors_count = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        stats = pstats.Stats(profiler, stream=stream)
        stats.sort_stats(args.profile_sort).print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, files_count, tokens_count, documents_count, errors_count = _benchmark()

    mean = statistics.mean(timings)
    print(f"Dataset: {root}")
    print(f"Files: {files_count}")
    print(f"Tokens: {tokens_count}")
    print(f"Documents: {documents_count}")
    print(f"Files with errors: {errors_count}")
    print(f"Runs: {len(timings)} (warmups={max(args.warmups, 0)})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Files/s (mean):  {files_count / mean:.1f}")
    print(f"Tokens/s (mean): {tokens_count / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
