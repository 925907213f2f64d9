import os
import time
import argparse

from constants.params import RUNS, BIG_MATRIX_SIZE, MID_MATRIX_SIZE, SMALL_MATRIX_SIZE, \
    SMALL_ARRAY_LENGTH, MID_ARRAY_LENGTH, BIG_ARRAY_LENGTH
from constants.string_constants import RESULTS_BASE_PATH, SYSTEM_INFO_FILE
from performance_profiling.array_processing.profile_array_ops_all import run_array_processing_benchmark
from performance_profiling.matrix_multiplication.profile_matrix_mult_all import run_matrix_multiplication_benchmark
from utils.utils import get_cpu_info, get_formatted_elapsed_time, get_ram_info


def run_matrix_mult_suite(size, runs=RUNS, output_dir=RESULTS_BASE_PATH):
    print(f"--- Matrix Multiplication Suite: Size {size}, Runs {runs} ---")
    return run_matrix_multiplication_benchmark(size=size, runs=runs, output_base=output_dir)


def run_array_processing_suite(size, runs=RUNS, output_dir=RESULTS_BASE_PATH):
    print(f"--- Array Processing Suite: Length {size}, Runs {runs} ---")
    return run_array_processing_benchmark(size=size, runs=runs, output_base=output_dir)


def write_system_info(output_dir):
    file_path = os.path.join(output_dir, SYSTEM_INFO_FILE)
    os.makedirs(output_dir, exist_ok=True)
    try:
        with open(file_path, "w") as f:
            f.write(f"[System Info]\nCPU: {get_cpu_info()}\nRAM: {get_ram_info()}\n")
        print(f"System info successfully written to {file_path}")
    except IOError as e:
        print(f"Error writing system info to {file_path}: {e}")
    return file_path


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Benchmark runner for the matrix and array routines.")
    parser.add_argument("--runs", type=int, default=RUNS, help="Number of runs per configuration.")
    parser.add_argument("--skip_matrix", action="store_true", help="If set, skips the matrix multiplication suites.")
    parser.add_argument("--skip_arrays", action="store_true", help="If set, skips the array processing suites.")
    parser.add_argument("--output_dir", default=RESULTS_BASE_PATH, help="Folder the results are written to.")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    start_time = time.time()

    write_system_info(args.output_dir)
    print(f"\nInitial System Check Complete. Elapsed time: {get_formatted_elapsed_time(start_time)}")

    if not args.skip_matrix:
        for label, size in (("SMALL", SMALL_MATRIX_SIZE), ("MID", MID_MATRIX_SIZE), ("BIG", BIG_MATRIX_SIZE)):
            print(f"\nRunning {label} Matrix multiplication tests...")
            run_matrix_mult_suite(size, runs=args.runs, output_dir=args.output_dir)
            print(f"\nElapsed time: {get_formatted_elapsed_time(start_time)}")
    else:
        print("Info: Matrix multiplication suites skipped by user.")

    if not args.skip_arrays:
        for label, size in (("SMALL", SMALL_ARRAY_LENGTH), ("MID", MID_ARRAY_LENGTH), ("BIG", BIG_ARRAY_LENGTH)):
            print(f"\nRunning {label} Array processing tests...")
            run_array_processing_suite(size, runs=args.runs, output_dir=args.output_dir)
            print(f"\nElapsed time: {get_formatted_elapsed_time(start_time)}")
    else:
        print("Info: Array processing suites skipped by user.")

    print(f"\nTotal benchmarking time: {get_formatted_elapsed_time(start_time)}")


if __name__ == "__main__":
    main()
