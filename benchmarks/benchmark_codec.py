#!/usr/bin/env python3
"""
Performance benchmarks comparing loosecsv against other CSV codecs.

Times both directions, parsing text into a table and rendering a table
back to text, across:
- loosecsv (this library)
- the standard library csv module
- Polars
- PyArrow

Run with: python benchmark_codec.py [--sizes SIZES] [--output FILE]
"""

import argparse
import csv
import gc
import io
import json
import random
import statistics
import string
import sys
import time
from dataclasses import asdict, dataclass

# Check for required packages
PACKAGES = {
    "loosecsv": False,
    "polars": False,
    "pyarrow": False,
}

try:
    import loosecsv

    PACKAGES["loosecsv"] = True
except ImportError:
    pass

try:
    import polars as pl

    PACKAGES["polars"] = True
except ImportError:
    pass

try:
    import pyarrow as pa
    import pyarrow.csv as pa_csv

    PACKAGES["pyarrow"] = True
except ImportError:
    pass


@dataclass
class BenchmarkResult:
    """Result from a single benchmark run."""

    library: str
    operation: str
    text_size_mb: float
    num_rows: int
    num_cols: int
    mean_time_s: float
    std_time_s: float
    min_time_s: float
    max_time_s: float
    throughput_mb_s: float


def generate_csv_text(num_rows: int, num_cols: int = 10) -> str:
    """
    Generate comma-delimited text with mixed value types.

    Every fifth column holds quoted text with an embedded comma, doubled
    quote or line break, so the quote-aware paths are exercised.

    Parameters
    ----------
    num_rows : int
        Number of data rows to generate.
    num_cols : int
        Number of columns (default 10).

    Returns
    -------
    str
    """
    random.seed(42)  # Reproducible data

    lines = [",".join(f"col_{i}" for i in range(num_cols))]
    for _ in range(num_rows):
        row = []
        for col_idx in range(num_cols):
            col_type = col_idx % 5
            if col_type == 0:
                row.append(str(random.randint(-1000000, 1000000)))
            elif col_type == 1:
                row.append(f"{random.uniform(-1000, 1000):.6f}")
            elif col_type == 2:
                row.append(random.choice(["true", "false"]))
            elif col_type == 3:
                length = random.randint(5, 20)
                row.append("".join(random.choices(string.ascii_letters, k=length)))
            else:
                word = "".join(random.choices(string.ascii_letters, k=8))
                special = random.choice([",", '""', "\n"])
                row.append(f'"{word}{special}{word}"')
        lines.append(",".join(row))
    return "\n".join(lines) + "\n"


def _time_runs(func, num_runs: int) -> list[float]:
    times = []
    for _ in range(num_runs):
        gc.collect()
        start = time.perf_counter()
        result = func()
        end = time.perf_counter()
        times.append(end - start)
        del result
    return times


def benchmark_parse(text: str, num_runs: int = 5) -> dict[str, list[float]]:
    """Benchmark parsing ``text`` with every installed library."""
    data = text.encode("utf-8")
    funcs = {
        "loosecsv": lambda: loosecsv.parse(text).num_rows,
        "csv": lambda: len(list(csv.reader(io.StringIO(text)))),
    }
    if PACKAGES["polars"]:
        funcs["polars"] = lambda: len(pl.read_csv(data))
    if PACKAGES["pyarrow"]:
        funcs["pyarrow"] = lambda: pa_csv.read_csv(
            pa.BufferReader(data),
            parse_options=pa_csv.ParseOptions(newlines_in_values=True),
        ).num_rows
    return {name: _time_runs(func, num_runs) for name, func in funcs.items()}


def _render_stdlib(table) -> str:
    out = io.StringIO()
    writer = csv.writer(out, delimiter="\t", lineterminator="\r\n")
    writer.writerow(table.column_names)
    writer.writerows(table.rows)
    return out.getvalue()


def benchmark_render(table, num_runs: int = 5) -> dict[str, list[float]]:
    """Benchmark rendering ``table`` as tab-delimited text."""
    funcs = {
        "loosecsv": lambda: loosecsv.render(table),
        "csv": lambda: _render_stdlib(table),
    }
    if PACKAGES["polars"] and PACKAGES["pyarrow"]:
        df = pl.from_arrow(table.to_arrow())
        funcs["polars"] = lambda: df.write_csv(separator="\t")
    if PACKAGES["pyarrow"]:
        arrow_table = table.to_arrow()

        def render_pyarrow():
            sink = pa.BufferOutputStream()
            pa_csv.write_csv(
                arrow_table, sink, write_options=pa_csv.WriteOptions(delimiter="\t")
            )
            return sink.getvalue()

        funcs["pyarrow"] = render_pyarrow
    return {name: _time_runs(func, num_runs) for name, func in funcs.items()}


def _summarize(
    name: str,
    operation: str,
    times: list[float],
    size_mb: float,
    num_rows: int,
    num_cols: int,
) -> BenchmarkResult:
    mean_time = statistics.mean(times)
    return BenchmarkResult(
        library=name,
        operation=operation,
        text_size_mb=size_mb,
        num_rows=num_rows,
        num_cols=num_cols,
        mean_time_s=mean_time,
        std_time_s=statistics.stdev(times) if len(times) > 1 else 0,
        min_time_s=min(times),
        max_time_s=max(times),
        throughput_mb_s=size_mb / mean_time,
    )


def run_benchmark(
    text_size_mb: float,
    num_cols: int = 10,
    num_runs: int = 5,
) -> list[BenchmarkResult]:
    """
    Run parse and render benchmarks for a specific text size.

    Parameters
    ----------
    text_size_mb : float
        Target text size in megabytes.
    num_cols : int
        Number of columns.
    num_runs : int
        Number of benchmark runs per library.

    Returns
    -------
    list[BenchmarkResult]
        Results for each library and operation.
    """
    # Rough estimate: ~10 bytes per field
    bytes_per_row = 10 * num_cols
    target_bytes = int(text_size_mb * 1024 * 1024)
    num_rows = max(1000, target_bytes // bytes_per_row)

    text = generate_csv_text(num_rows, num_cols)
    actual_size_mb = len(text.encode("utf-8")) / (1024 * 1024)
    table = loosecsv.parse(text)

    print(
        f"\nBenchmarking {actual_size_mb:.1f} MB of text "
        f"({num_rows:,} rows x {num_cols} cols)"
    )
    print("-" * 60)

    results = []
    for operation, timings in (
        ("parse", benchmark_parse(text, num_runs)),
        ("render", benchmark_render(table, num_runs)),
    ):
        for name, times in timings.items():
            result = _summarize(
                name, operation, times, actual_size_mb, num_rows, num_cols
            )
            results.append(result)
            print(
                f"{operation:7} {name:10} {result.mean_time_s:8.3f}s "
                f"(+/- {result.std_time_s:.3f}s) | {result.throughput_mb_s:8.1f} MB/s"
            )

    return results


def print_summary(all_results: list[BenchmarkResult]) -> None:
    """Print a summary table of all results."""
    print("\n" + "=" * 80)
    print("BENCHMARK SUMMARY")
    print("=" * 80)

    keys = sorted(set((r.text_size_mb, r.operation) for r in all_results))
    for size, operation in keys:
        group = [
            r for r in all_results
            if r.text_size_mb == size and r.operation == operation
        ]
        group.sort(key=lambda r: r.mean_time_s)

        print(f"\n{operation} {size:.1f} MB ({group[0].num_rows:,} rows):")
        print(f"{'Library':12} {'Time (s)':>10} {'Throughput':>12} {'Relative':>10}")
        print("-" * 48)

        fastest = group[0].mean_time_s
        for r in group:
            relative = r.mean_time_s / fastest
            print(
                f"{r.library:12} {r.mean_time_s:10.3f} "
                f"{r.throughput_mb_s:10.1f} MB/s {relative:9.2f}x"
            )


def save_results(results: list[BenchmarkResult], output_path: str) -> None:
    """Save results to JSON file."""
    data = {
        "timestamp": time.strftime("%Y-%m-%d %H:%M:%S"),
        "results": [asdict(r) for r in results],
    }
    with open(output_path, "w") as f:
        json.dump(data, f, indent=2)
    print(f"\nResults saved to {output_path}")


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Benchmark CSV codecs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--sizes",
        type=str,
        default="0.5,2,8",
        help="Comma-separated text sizes in MB (default: 0.5,2,8)",
    )
    parser.add_argument(
        "--cols",
        type=int,
        default=10,
        help="Number of columns (default: 10)",
    )
    parser.add_argument(
        "--runs",
        type=int,
        default=5,
        help="Number of runs per benchmark (default: 5)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output JSON file for results",
    )
    args = parser.parse_args()

    sizes = [float(s.strip()) for s in args.sizes.split(",")]

    print("CSV Codec Benchmark")
    print("=" * 60)
    print("\nInstalled libraries:")
    for lib, installed in PACKAGES.items():
        status = "OK" if installed else "not installed"
        print(f"  {lib}: {status}")

    if not PACKAGES["loosecsv"]:
        print("\nERROR: loosecsv must be installed to run benchmarks")
        sys.exit(1)

    all_results = []
    for size in sizes:
        all_results.extend(run_benchmark(size, num_cols=args.cols, num_runs=args.runs))

    print_summary(all_results)

    if args.output:
        save_results(all_results, args.output)


if __name__ == "__main__":
    main()
