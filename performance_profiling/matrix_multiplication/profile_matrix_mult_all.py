import os
import time
import traceback
import platform
import argparse

import psutil

from algorithms.matrix_multiplication.single_thread import multiply, validate_and_multiply
from algorithms.matrix_multiplication.validation import validate_for_multiplication
from constants.params import RUNS, RANDOM_SEED, DATA_TYPE
from constants.string_constants import RESULTS_BASE_PATH, MATRIX_MULTIPLICATION_PATH, DATE_FORMAT
from utils.utils import generate_matrices, write_result_header


def profile_and_save_stats(
        matrix_dim: int,
        total_runs: int,
        output_base: str = RESULTS_BASE_PATH
):
    """
    Times validation, bare multiplication and validate-then-multiply on fresh
    square matrices for every run and writes one stats file per step.

    Args:
        matrix_dim: Dimension of the square matrices (matrix_dim x matrix_dim).
        total_runs: Number of runs per step.
        output_base: Root folder for the results tree.

    Returns:
        Mapping of step key to the list of per-run times in seconds.
    """
    size_str = f"N{matrix_dim}"
    print(f"\nInfo: Profiling Matrix Multiplication for configuration: {size_str} ({matrix_dim}x{matrix_dim})")
    print(f"Parameters: Runs={total_runs}, Data Type={DATA_TYPE.__name__}")

    output_dir = os.path.join(output_base, MATRIX_MULTIPLICATION_PATH, str(matrix_dim))
    os.makedirs(output_dir, exist_ok=True)

    step_config = {
        "validation": {
            "file_suffix": 'validation_stats.txt',
            "func": validate_for_multiplication,
            "op_count": lambda n: 2 * n ** 2,
            "name_print": "Matrix Validation"
        },
        "single_thread": {
            "file_suffix": 'cpu_single_thread_stats.txt',
            "func": multiply,
            "op_count": lambda n: 2 * n ** 3,
            "name_print": "CPU Single-Thread MM"
        },
        "validated_single_thread": {
            "file_suffix": 'validated_single_thread_stats.txt',
            "func": validate_and_multiply,
            "op_count": lambda n: 2 * n ** 2 + 2 * n ** 3,
            "name_print": "Validated CPU Single-Thread MM"
        }
    }

    file_handles = {}
    timings = {key: [] for key in step_config}

    try:
        for key, config_item in step_config.items():
            path = os.path.join(output_dir, config_item["file_suffix"])
            file_handles[key] = open(path, 'w')
            write_result_header(file_handles[key])

        for run_number in range(1, total_runs + 1):
            print(f"  Starting Run {run_number}/{total_runs} for {size_str}...")
            A_np, B_np = generate_matrices(matrix_dim, matrix_dim, matrix_dim, RANDOM_SEED + run_number)
            data_size_mb_total = (A_np.nbytes + B_np.nbytes) / (1024 ** 2)

            for step_key, config_item in step_config.items():
                func_to_profile = config_item["func"]
                step_name_print = config_item["name_print"]
                exec_time = float('inf')

                try:
                    start_time = time.perf_counter()
                    _ = func_to_profile(A_np, B_np)
                    exec_time = time.perf_counter() - start_time

                    gops = config_item["op_count"](matrix_dim) / (exec_time * 1e9) if exec_time > 0 else 0.0

                    timestamp = time.strftime(DATE_FORMAT)
                    result_line = (f"{run_number},{timestamp},{exec_time:.6f},"
                                   f"{data_size_mb_total:.2f},{gops:.2f}\n")
                    file_handles[step_key].write(result_line)
                    print(f"      {step_name_print} Run {run_number}: {exec_time:.6f}s, GOPS: {gops:.2f}")
                except Exception as e:
                    print(f"      Error during {step_name_print} profiling for run {run_number}: {e}")
                    traceback.print_exc()
                    timestamp = time.strftime(DATE_FORMAT)
                    file_handles[step_key].write(f"{run_number},{timestamp},inf,N/A,N/A\n")
                timings[step_key].append(exec_time)
        print(f"  Finished all runs for {size_str}.")
    except IOError as e_io:
        print(f"Error writing results for {size_str}: {e_io}")
    finally:
        for fh in file_handles.values():
            if not fh.closed:
                fh.close()

    return timings


def run_matrix_multiplication_benchmark(size: int, runs: int = RUNS, output_base: str = RESULTS_BASE_PATH):
    try:
        print(f"CPU Info: {platform.processor()}")
        print(f"CPU Cores: {psutil.cpu_count(logical=False)} physical, {psutil.cpu_count(logical=True)} logical")
    except Exception as e_cpu_info:
        print(f"Could not get CPU info: {e_cpu_info}")

    # The first call pays the numba compilation cost.
    print("Info: Warming up the compiled multiplication kernel...")
    warmup_A, warmup_B = generate_matrices(2, 2, 2)
    multiply(warmup_A, warmup_B)

    return profile_and_save_stats(matrix_dim=size, total_runs=runs, output_base=output_base)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Profiler for validated matrix multiplication.")
    parser.add_argument(
        "--size",
        type=int,
        default=100,
        help="Dimension of the square matrices (e.g., 100 for 100x100)."
    )
    parser.add_argument(
        "--runs",
        type=int,
        default=RUNS,
        help="Number of times to run each benchmark."
    )

    args = parser.parse_args()

    if args.size >= 1000:
        print(f"Warning: For matrix dimension {args.size}, validation and the triple-loop product might be very slow.")

    run_matrix_multiplication_benchmark(size=args.size, runs=args.runs)
    print("\nMatrix Multiplication profiling complete. Results saved to respective files.")
