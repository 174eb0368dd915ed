import time
import numpy as np

from celestial.constants import GRAVITATIONAL_CONSTANT, MIN_DISTANCE
from celestial.integrators import compute_accelerations


def compute_accelerations_python(positions, masses, sun_mask, g_constant=GRAVITATIONAL_CONSTANT):
    n = len(masses)
    if n == 0:
        return np.zeros((0, 2), dtype=np.float64)
    acc = np.zeros((n, 2), dtype=np.float64)
    for i in range(n):
        if sun_mask[i]:
            continue
        r_vec = positions - positions[i]
        dist = np.sqrt(np.einsum("ij,ij->i", r_vec, r_vec))
        mask = dist > 0.0
        clamped = np.maximum(dist[mask], MIN_DISTANCE)
        factors = g_constant * masses[mask] / clamped**2
        acc[i] = np.sum(r_vec[mask] / dist[mask, None] * factors[:, None], axis=0)
    return acc


if __name__ == "__main__":
    rng = np.random.default_rng(0)
    N = 1500  # >1k bodies
    positions = rng.random((N, 2)) * 800.0
    masses = rng.random(N) + 1.0
    sun_mask = np.zeros(N, dtype=bool)

    # warm up JIT
    compute_accelerations(positions, masses, sun_mask)

    t0 = time.time()
    baseline = compute_accelerations_python(positions, masses, sun_mask)
    t1 = time.time()
    accelerated = compute_accelerations(positions, masses, sun_mask)
    t2 = time.time()

    assert np.allclose(baseline, accelerated)
    print(f"NumPy loop : {t1 - t0:.3f}s")
    print(f"Compiled   : {t2 - t1:.3f}s")
    if t2 - t1 > 0:
        print(f"Speedup    : {(t1 - t0) / (t2 - t1):.1f}x")
