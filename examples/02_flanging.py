"""
Example 02: Flanging - sine-modulated glide between two short delays

Runs white noise through a MultiTapSincDelay whose blend factor follows a
slow sine LFO, mixes dry and wet 50/50, and prints the RMS level of each
quarter second.

MIT License
"""

import numpy as np
from sincdelay import MultiTapSincDelay, seconds_to_samples

SAMPLE_RATE = 44100.0
DURATION_SECONDS = 2.0
FLANGE_RATE = 0.5  # Hz

num_samples = int(DURATION_SECONDS * SAMPLE_RATE)

print("=== sincdelay Example 02: Flanging ===", flush=True)

# Glide between 1ms and 8ms
delay = MultiTapSincDelay(1024, initial_k=2, sample_rate=SAMPLE_RATE)
delay.set_tau1(float(seconds_to_samples(0.001, SAMPLE_RATE)))
delay.set_tau2(float(seconds_to_samples(0.008, SAMPLE_RATE)))

rng = np.random.default_rng(1)
dry = 0.25 * rng.standard_normal(num_samples)

t = np.arange(num_samples) / SAMPLE_RATE
lfo = 0.5 - 0.5 * np.cos(2 * np.pi * FLANGE_RATE * t)  # 0..1

wet = delay.process_block(dry, alpha=lfo)
flanged = 0.5 * dry + 0.5 * wet

block = int(0.25 * SAMPLE_RATE)
for start in range(0, num_samples, block):
    segment = flanged[start:start + block]
    rms = np.sqrt(np.mean(segment ** 2))
    print(f"  t={start / SAMPLE_RATE:4.2f}s  delay={delay.tau1 + lfo[start] * (delay.tau2 - delay.tau1):6.1f}"
          f" samples  rms={rms:.4f}")

print("\nDone!", flush=True)
