#!/usr/bin/env python3
"""
Micro-benchmarks for ByteStream typed writes/reads + cProfile summaries.

Usage:
  python benchmarks/bench_stream.py
  python benchmarks/bench_stream.py --runs 20000 --op all --profile
"""

import argparse
import cProfile
import pstats
import time
from typing import Callable, Dict, List, Tuple

from bytestream import ByteStream, CompressionAlgorithm, Endian


def _make_ascii(length: int, seed: int) -> str:
    base = "abcdefghijklmnopqrstuvwxyz0123456789"
    return "".join(base[(seed + i) % len(base)] for i in range(length))


def _filled(writer: str, value, count: int, endian: Endian) -> ByteStream:
    stream = ByteStream(endian=endian)
    write = getattr(stream, writer)
    for _ in range(count):
        write(value)
    stream.position = 0
    return stream


def _write_case(writer: str, value, count: int, endian: Endian) -> Callable[[], None]:
    def run():
        stream = ByteStream(endian=endian)
        write = getattr(stream, writer)
        for _ in range(count):
            write(value)
    return run


def _read_case(writer: str, reader: str, value, count: int, endian: Endian) -> Callable[[], None]:
    stream = _filled(writer, value, count, endian)

    def run():
        stream.position = 0
        read = getattr(stream, reader)
        for _ in range(count):
            read()
    return run


def _compress_case(algorithm: CompressionAlgorithm, size: int) -> Callable[[], None]:
    payload = _make_ascii(size, 7).encode()

    def run():
        stream = ByteStream(payload)
        stream.compress(algorithm)
        stream.uncompress(algorithm)
    return run


def build_cases(batch: int, endian: Endian) -> Dict[str, List[Tuple[str, Callable[[], None]]]]:
    text = _make_ascii(64, 3)
    return {
        "int": [
            ("write_byte", _write_case("write_byte", 0x7F, batch, endian)),
            ("write_short", _write_case("write_short", 0x1234, batch, endian)),
            ("write_int", _write_case("write_int", 0x12345678, batch, endian)),
            ("read_byte", _read_case("write_byte", "read_byte", 0x7F, batch, endian)),
            ("read_short", _read_case("write_short", "read_short", 0x1234, batch, endian)),
            ("read_int", _read_case("write_int", "read_int", 0x12345678, batch, endian)),
        ],
        "float": [
            ("write_float", _write_case("write_float", 1.5, batch, endian)),
            ("write_double", _write_case("write_double", 1.5, batch, endian)),
            ("read_float", _read_case("write_float", "read_float", 1.5, batch, endian)),
            ("read_double", _read_case("write_double", "read_double", 1.5, batch, endian)),
        ],
        "utf": [
            ("write_utf(64)", _write_case("write_utf", text, batch, endian)),
            ("read_utf(64)", _read_case("write_utf", "read_utf", text, batch, endian)),
            ("write_utf_bytes(64)", _write_case("write_utf_bytes", text, batch, endian)),
        ],
        "compress": [
            (f"{algorithm}(64KiB)", _compress_case(algorithm, 64 * 1024))
            for algorithm in CompressionAlgorithm
        ],
    }


def time_operation(name: str, fn: Callable[[], None], runs: int, batch: int) -> None:
    start = time.perf_counter()
    for _ in range(runs):
        fn()
    elapsed = time.perf_counter() - start
    per_op = elapsed / (runs * batch) * 1e9
    print(f"{name:<24} {elapsed * 1e3:10.2f} ms  {per_op:10.1f} ns/op")


def profile_operation(name: str, fn: Callable[[], None], runs: int) -> None:
    """Profile a specific operation with detailed breakdown."""
    print(f"\n{'='*70}")
    print(f"{name} ({runs} runs)")
    print('='*70)

    profiler = cProfile.Profile()
    profiler.enable()
    for _ in range(runs):
        fn()
    profiler.disable()

    stats = pstats.Stats(profiler)
    stats.strip_dirs()
    stats.sort_stats('cumulative')
    stats.print_stats(15)


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--runs", type=int, default=200)
    parser.add_argument("--batch", type=int, default=1000, help="Operations per run")
    parser.add_argument("--op", choices=["int", "float", "utf", "compress", "all"], default="all",
                        help="Which operations to benchmark")
    parser.add_argument("--endian", choices=[e.value for e in Endian], default=Endian.BIG_ENDIAN.value)
    parser.add_argument("--profile", action="store_true", help="Print cProfile summaries as well")
    args = parser.parse_args()

    cases = build_cases(args.batch, Endian(args.endian))
    groups = list(cases) if args.op == "all" else [args.op]
    for group in groups:
        print(f"\n[{group}]")
        # compression cases run once per call, not once per batch item
        batch = 1 if group == "compress" else args.batch
        runs = max(args.runs // 20, 1) if group == "compress" else args.runs
        for name, fn in cases[group]:
            time_operation(name, fn, runs, batch)
            if args.profile:
                profile_operation(name, fn, runs)


if __name__ == "__main__":
    main()
