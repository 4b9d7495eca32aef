# Global configuration for ShareWeave secret recovery
import os

class Config:
    # Share selection when more than k shares are supplied
    SELECTION_ORDERS = ("ascending", "declared")
    SELECTION_ORDER = os.environ.get("SHAREWEAVE_SELECTION_ORDER", "ascending")

    # Document format
    PARAMETERS_KEY = "keys"
    MIN_BASE = 2
    MAX_BASE = 36  # 0-9 then a-z

    # Loader settings
    REQUEST_TIMEOUT = 10  # seconds, for http(s) documents

    # Logging
    LOG_LEVEL = os.environ.get("SHAREWEAVE_LOG_LEVEL", "WARNING")
    LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

    # Service settings
    SERVICE_HOST = "localhost"
    SERVICE_PORT = int(os.environ.get("SHAREWEAVE_PORT", 5000))

    # Benchmark parameters
    PERFORMANCE_SAMPLES = 100
    BENCHMARK_PRIME = 2**127 - 1  # Mersenne prime
    BENCHMARK_THRESHOLDS = [2, 3, 5, 8, 13]

    @classmethod
    def service_url(cls):
        return f"http://{cls.SERVICE_HOST}:{cls.SERVICE_PORT}"
