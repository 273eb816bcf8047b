# SPDX-FileCopyrightText: Copyright (c) 2025-2026, NVIDIA CORPORATION.
# SPDX-License-Identifier: Apache-2.0

"""Micro-benchmark timer that prints a per-case timing table.

A Benchmark holds one or more cases. Each case is warmed up for ``warmup_time`` seconds and
then measured until it ran at least ``min_num_iters`` times and for at least ``min_time``
seconds in total. A case that sets ``num_iters`` runs exactly that many measured iterations.
"""

import gc
import math
import platform
import statistics
import sys
import time
from dataclasses import dataclass

NS_TO_MS_DIVISOR = 1000000.0


@dataclass
class BenchmarkCase:
    name: str
    fn: object
    num_iters: int = 0


@dataclass
class BenchmarkResult:
    avg_ms: float
    best_rate: float
    best_ms: float
    stdev_ms: float
    iterations: int


class Benchmark:
    def __init__(self, name, values_per_iteration, min_num_iters=2, warmup_time=2.0, min_time=2.0,
                 output_per_iteration=False, output=None):
        self.name = name
        self.values_per_iteration = values_per_iteration
        self.min_num_iters = min_num_iters
        self.warmup_time = warmup_time
        self.min_time = min_time
        self.output_per_iteration = output_per_iteration
        self.output = output
        self.cases = []

    def add_case(self, name, fn, num_iters=0):
        self.cases.append(BenchmarkCase(name, fn, num_iters))

    def run(self):
        if not self.cases:
            raise ValueError("Benchmark must have at least one case")
        out = self.output or sys.stdout

        print(f"Running benchmark: {self.name}")
        results = []
        for case in self.cases:
            print(f"  Running case: {case.name}")
            results.append(self.measure(case))
        print()

        first_best_ms = results[0].best_ms
        name_len = max(40, len(self.name), *[len(case.name) for case in self.cases])
        out.write(f"{get_platform_info()}\n")
        out.write(f"{get_processor_name()}\n")
        out.write(f"{self.name + ':':<{name_len}} {'Best Time(ms)':>14} {'Avg Time(ms)':>14} {'Stdev(ms)':>11} "
                  f"{'Rate(M/s)':>12} {'Per Row(ns)':>13} {'Relative':>10}\n")
        out.write("-" * (name_len + 80) + "\n")
        for case, result in zip(self.cases, results):
            per_row_ns = 1000 / result.best_rate if result.best_rate else math.inf
            relative = first_best_ms / result.best_ms if result.best_ms else math.inf
            out.write(f"{case.name:<{name_len}} {result.best_ms:>14.0f} {result.avg_ms:>14.0f} "
                      f"{result.stdev_ms:>11.0f} {result.best_rate:>12.1f} {per_row_ns:>13.1f} "
                      f"{f'{relative:.1f}X':>10}\n")
        out.write("\n")
        return results

    def measure(self, case):
        gc.collect()
        warmup_deadline = time.perf_counter() + self.warmup_time
        while time.perf_counter() < warmup_deadline:
            case.fn(-1)

        min_iters = case.num_iters if case.num_iters != 0 else self.min_num_iters
        min_duration_ns = 0 if case.num_iters != 0 else self.min_time * 1e9
        run_times_ns = []
        i = 0
        while i < min_iters or sum(run_times_ns) < min_duration_ns:
            start_time_ns = time.perf_counter_ns()
            case.fn(i)
            run_time_ns = time.perf_counter_ns() - start_time_ns
            run_times_ns.append(run_time_ns)
            if self.output_per_iteration:
                print(f"Iteration {i} took {run_time_ns // 1000} microseconds")
            i += 1
        print(f"  Stopped after {i} iterations, {sum(run_times_ns) // 1000000} ms")

        best_ns = min(run_times_ns)
        avg_ns = statistics.mean(run_times_ns)
        stdev_ns = statistics.stdev(run_times_ns) if len(run_times_ns) > 1 else 0.0
        best_rate = self.values_per_iteration / (best_ns / 1000.0) if best_ns else 0.0
        return BenchmarkResult(
            avg_ms=avg_ns / NS_TO_MS_DIVISOR,
            best_rate=best_rate,
            best_ms=best_ns / NS_TO_MS_DIVISOR,
            stdev_ms=stdev_ns / NS_TO_MS_DIVISOR,
            iterations=i,
        )


def get_platform_info():
    return f"Python {platform.python_version()} on {platform.system()} {platform.release()}"


def get_processor_name():
    """Return the CPU model name, falling back to the platform's processor string."""
    try:
        with open("/proc/cpuinfo", "r") as f:
            for line in f:
                if "model name" in line:
                    return line.split(":")[1].strip()
    except OSError:
        pass
    return platform.processor() or "Unknown processor"
