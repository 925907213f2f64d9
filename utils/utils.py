import time

import numpy as np
import cpuinfo
import psutil

from constants.params import DATA_TYPE, MAX_RANDOM_VALUE, RANDOM_SEED


def get_cpu_info():
    """Returns CPU info using py-cpuinfo."""
    try:
        cpu_info = cpuinfo.get_cpu_info()
        return cpu_info['brand_raw']
    except Exception as e:
        return f"Error: {e}"


def get_ram_info():
    """Returns RAM info using psutil."""
    try:
        ram = psutil.virtual_memory()
        return f"Total: {ram.total / (1024 ** 3):.2f} GB, Available: {ram.available / (1024 ** 3):.2f} GB"
    except Exception as e:
        return f"Error: {e}"


def write_result_header(file, metric="GOPS"):
    file.write(f"# CPU Info: {get_cpu_info()}\n")
    file.write(f"Run,Timestamp,Time(s),Data Size (MB),{metric}\n")


def generate_matrices(rows, inner, cols, seed=RANDOM_SEED):
    """
    Generates a (rows x inner) and an (inner x cols) matrix of random non-zero
    integers, so that the pair passes validate_for_multiplication.
    """
    rng = np.random.RandomState(seed)
    signs_a = rng.choice(np.array([-1, 1]), size=(rows, inner))
    signs_b = rng.choice(np.array([-1, 1]), size=(inner, cols))
    A = (rng.randint(1, MAX_RANDOM_VALUE, size=(rows, inner)) * signs_a).astype(DATA_TYPE)
    B = (rng.randint(1, MAX_RANDOM_VALUE, size=(inner, cols)) * signs_b).astype(DATA_TYPE)
    return A, B


def generate_array(length, seed=RANDOM_SEED):
    """Generates a random signed integer array centred on zero."""
    rng = np.random.RandomState(seed)
    return rng.randint(-MAX_RANDOM_VALUE, MAX_RANDOM_VALUE, size=length).astype(DATA_TYPE)


def get_formatted_elapsed_time(start_time):
    elapsed_time = time.time() - start_time
    formatted_time = time.strftime("%H:%M:%S", time.gmtime(elapsed_time))
    return formatted_time
