import json
import random
import statistics
import time
from tqdm import tqdm
import config
from polynomials import random_polynomial, sample_points, share_document
from shamir import ShamirSecretRecovery
from shareweave.loader import parse_document

class PerformanceTest:
    def __init__(self, seed=2024):
        self.rng = random.Random(seed)
        self.results = {
            "rational_recover": {},
            "modular_recover": {},
            "decode": {}
        }

    def _documents(self, threshold, modulus, num_runs):
        documents = []
        for _ in range(num_runs):
            if modulus is None:
                coefficients = random_polynomial(self.rng, threshold, 0, 2**64)
            else:
                coefficients = random_polynomial(self.rng, threshold, 0, modulus - 1)
            xs = self.rng.sample(range(1, 1000), threshold)
            points = sample_points(coefficients, xs, modulus)
            documents.append((parse_document(share_document(points, threshold, modulus)), coefficients[0]))
        return documents

    def _time_recovery(self, label, modulus, num_runs):
        print(f"\n=== {label} reconstruction ===")
        for threshold in config.Config.BENCHMARK_THRESHOLDS:
            times = []
            for share_set, expected in tqdm(self._documents(threshold, modulus, num_runs), desc=f"k={threshold}"):
                shares = share_set.decode()
                recovery = ShamirSecretRecovery.from_share_set(share_set)
                start = time.perf_counter()
                secret = recovery.recover_secret(shares)
                end = time.perf_counter()
                if secret != expected:
                    raise AssertionError(f"k={threshold}: recovered {secret}, expected {expected}")
                times.append(end - start)
            self.results[f"{label}_recover"][threshold] = times
            print(f"k={threshold}: {statistics.mean(times)*1000:.3f} ms avg")

    def run_recovery_tests(self, num_runs=config.Config.PERFORMANCE_SAMPLES):
        """Compare exact-rational and modular Lagrange reconstruction"""
        self._time_recovery("rational", None, num_runs)
        self._time_recovery("modular", config.Config.BENCHMARK_PRIME, num_runs)

    def run_decode_tests(self, num_runs=config.Config.PERFORMANCE_SAMPLES):
        """Time base decoding of 127-bit share values"""
        print("\n=== Share decoding ===")
        share_sets = [s for s, _ in self._documents(8, config.Config.BENCHMARK_PRIME, num_runs)]
        times = []
        for share_set in tqdm(share_sets):
            start = time.perf_counter()
            share_set.decode()
            end = time.perf_counter()
            times.append(end - start)
        self.results["decode"][8] = times
        print(f"Decode 8 shares: {statistics.mean(times)*1000:.3f} ms avg")

    def save_results(self, filename="performance_results.json"):
        with open(filename, "w") as f:
            json.dump(self.results, f, indent=2)
        print(f"Results saved to {filename}")

if __name__ == "__main__":
    tester = PerformanceTest()
    tester.run_recovery_tests()
    tester.run_decode_tests()
    tester.save_results()
