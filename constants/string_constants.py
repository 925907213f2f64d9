RESULTS_BASE_PATH = 'results/'
MATRIX_MULTIPLICATION_PATH = 'matrix_multiplication/'
ARRAY_PROCESSING_PATH = 'array_processing/'
SYSTEM_INFO_FILE = 'system_info.txt'
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
