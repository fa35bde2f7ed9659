import os

# Dataset source
# The embedded CSV blob in data_layer.embedded is used unless a file path is given.
# For example: export CANCER_DATA_PATH="data/EC cancer dataset for australia 1.csv"
CANCER_DATA_PATH = os.environ.get("CANCER_DATA_PATH") or None

# Dashboard defaults (override via env vars)
DEFAULT_METRIC = os.environ.get("DEFAULT_METRIC", "ASR (World)")
TREEMAP_YEAR = int(os.environ.get("TREEMAP_YEAR", "2023"))
PROJECTION_YEARS = int(os.environ.get("PROJECTION_YEARS", "5"))
BAR_TOP_N = int(os.environ.get("BAR_TOP_N", "15"))

# Logging
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
LOG_FILE = os.environ.get("LOG_FILE") or None

# Server
DASH_DEBUG = os.environ.get("DASH_DEBUG", "0").strip().lower() in {"1", "true", "yes", "on"}
DASH_PORT = int(os.environ.get("DASH_PORT", "8090"))
