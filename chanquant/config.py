from pathlib import Path

# Project roots
ROOT = Path(__file__).resolve().parents[1]
INPUTS_DIR = ROOT / "data" / "inputs"
OUTPUTS_DIR = ROOT / "data" / "outputs"

# Mode selector sentinels
# Any other integer selects logarithmic spacing with that integer as bias.
OPTIMAL_SENTINEL = 256
UNIFORM_SENTINEL = -1

# Optimal (1D Lloyd) clustering
MAX_ITERATIONS = 100
CONVERGENCE_TOLERANCE = 1e-3  # max center movement counted as "not moved"

# Logarithmic spacing: lambda = 1 + bias / LOG_BIAS_SCALE
LOG_BIAS_SCALE = 64.0

# CLI defaults
# Quality 12 -> 4 bits per channel -> 16 levels.
DEFAULT_QUALITY = 12
DEFAULT_MODE = "uniform"  # "optimal", "uniform", or an integer bias
DEFAULT_SCALE = 1.0

# JPEG/PNG default save params
DEFAULT_JPEG_QUALITY = 92
DEFAULT_OUTPUT_FORMAT = "png"  # lossless, keeps exactly K levels per channel
