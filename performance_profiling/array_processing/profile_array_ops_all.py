import os
import time
import traceback
import argparse

import numpy as np

from algorithms.array_processing.single_threaded import (
    none_match, some_match, all_match, copy_values, replace, find_second_max,
    rearrange, filter_values, insert_values, merge_sorted_arrays, distinct
)
from constants.params import RUNS, RANDOM_SEED
from constants.string_constants import RESULTS_BASE_PATH, ARRAY_PROCESSING_PATH, DATE_FORMAT
from utils.utils import generate_array, write_result_header


def build_operations(arr):
    """Maps each array utility to a zero-argument call over arr."""
    half = arr.size // 2
    sorted_arr = np.sort(arr)
    as_strings = [str(value) for value in arr.tolist()]
    return {
        "none_match": lambda: none_match(arr),
        "some_match": lambda: some_match(arr, lambda value: value > 0),
        "all_match": lambda: all_match(as_strings, int, lambda value: value > -1_000_000),
        "copy_values": lambda: copy_values(arr, 0, max(arr.size - 1, 0)),
        "replace": lambda: replace(arr),
        "find_second_max": lambda: find_second_max(arr),
        "rearrange": lambda: rearrange(arr),
        "filter_values": lambda: filter_values(arr),
        "insert_values": lambda: insert_values(arr, half, arr[:half]),
        "merge_sorted_arrays": lambda: merge_sorted_arrays(sorted_arr, sorted_arr),
        "distinct": lambda: distinct(arr),
    }


def profile_and_save_stats(array_length: int, total_runs: int, output_base: str = RESULTS_BASE_PATH):
    """Times every array utility on a fresh array per run; one stats file per utility."""
    print(f"\nInfo: Profiling Array Processing for length {array_length:,}. Running {total_runs} times...")

    output_dir = os.path.join(output_base, ARRAY_PROCESSING_PATH, str(array_length))
    os.makedirs(output_dir, exist_ok=True)

    op_names = list(build_operations(np.zeros(0, dtype=np.int32)))
    file_handles = {}
    timings = {name: [] for name in op_names}

    try:
        for name in op_names:
            file_handles[name] = open(os.path.join(output_dir, f'{name}_stats.txt'), 'w')
            write_result_header(file_handles[name], metric="MElements/s")

        for run_number in range(1, total_runs + 1):
            arr = generate_array(array_length, RANDOM_SEED + run_number)
            data_size_mb = arr.nbytes / (1024 ** 2)

            for name, operation in build_operations(arr).items():
                exec_time = float('inf')
                try:
                    start_time = time.perf_counter()
                    operation()
                    exec_time = time.perf_counter() - start_time

                    melements = (array_length / exec_time) / 1e6 if exec_time > 0 else 0.0
                    timestamp = time.strftime(DATE_FORMAT)
                    file_handles[name].write(
                        f"{run_number},{timestamp},{exec_time:.6f},{data_size_mb:.2f},{melements:.2f}\n")
                except Exception as e:
                    print(f"  Error during {name} profiling for run {run_number}: {e}")
                    traceback.print_exc()
                    timestamp = time.strftime(DATE_FORMAT)
                    file_handles[name].write(f"{run_number},{timestamp},inf,N/A,N/A\n")
                timings[name].append(exec_time)

            slowest = max(op_names, key=lambda op: timings[op][-1])
            print(f"  Run {run_number}/{total_runs}: slowest was {slowest} ({timings[slowest][-1]:.6f} s)")
    except IOError as e_io:
        print(f"Error writing results to {output_dir}: {e_io}")
    finally:
        for fh in file_handles.values():
            if not fh.closed:
                fh.close()

    return timings


def run_array_processing_benchmark(size: int, runs: int = RUNS, output_base: str = RESULTS_BASE_PATH):
    return profile_and_save_stats(array_length=size, total_runs=runs, output_base=output_base)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Profiler for the array processing utilities.")
    parser.add_argument("--size", type=int, default=10_000, help="Length of the generated arrays.")
    parser.add_argument("--runs", type=int, default=RUNS, help="Number of times to run each benchmark.")
    args = parser.parse_args()

    run_array_processing_benchmark(size=args.size, runs=args.runs)
    print("\nArray processing profiling complete. Results saved to respective files.")
