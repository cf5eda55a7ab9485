"""
Example 01: Impulse sweep - watch the delay glide between two lengths

Feeds a unit impulse through a MultiTapSincDelay while the blend factor
sweeps from 0 to 1, then reports where the delayed impulse lands for a
handful of fixed blend factors.

MIT License
"""

import numpy as np
from sincdelay import (
    MultiTapSincDelay,
    impulse_sweep,
    peak_lag_trajectory,
    set_global_logging,
)

BUFFER_SIZE = 4096
K = 2  # 6 taps in total
TAU1 = 100.5
TAU2 = 500.7
NUM_SAMPLES = 1000

set_global_logging(level="INFO")

print("=== sincdelay Example 01: Impulse sweep ===", flush=True)

delay = MultiTapSincDelay(BUFFER_SIZE, K, sample_rate=44100.0)
delay.set_tau1(TAU1)
delay.set_tau2(TAU2)

result = impulse_sweep(delay, NUM_SAMPLES)
active = np.flatnonzero(np.abs(result.outputs) > 1e-3)
print(f"\nNon-silent output samples during the sweep: {active.tolist()}")
for i in active:
    print(f"  Sample {i}: Output={result.outputs[i]:+.4f}, Alpha={result.alphas[i]:.3f}")

print("\nPeak response lag for fixed alpha:")
alphas = np.linspace(0.0, 1.0, 11)
for alpha, lag in zip(alphas, peak_lag_trajectory(delay, alphas, NUM_SAMPLES)):
    print(f"  alpha={alpha:.1f}  peak at sample {lag}")

print("\nDone!", flush=True)
