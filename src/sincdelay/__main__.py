"""
Entry point for running sincdelay as a module.

Runs an impulse through a MultiTapSincDelay while sweeping alpha from 0
to 1, printing one line per sample.

MIT License
"""

import argparse

from sincdelay import MultiTapSincDelay, impulse_sweep, __version__
from sincdelay.logger import set_global_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m sincdelay",
        description="Sweep an impulse through a multi-tap sinc delay.",
    )
    parser.add_argument("--buffer-size", type=int, default=4096, help="Delay buffer capacity in samples")
    parser.add_argument("-k", type=int, default=2, help="Number of auxiliary tap pairs")
    parser.add_argument("--tau1", type=float, default=100.5, help="Delay at alpha=0 (samples)")
    parser.add_argument("--tau2", type=float, default=500.7, help="Delay at alpha=1 (samples)")
    parser.add_argument("--sample-rate", type=float, default=44100.0)
    parser.add_argument("-n", "--num-samples", type=int, default=1000, help="Samples to process")
    parser.add_argument("--log-level", default="INFO")
    return parser


def main(argv=None):
    """Main entry point"""
    args = build_parser().parse_args(argv)

    logger = set_global_logging(level=args.log_level)
    logger.info(f"sincdelay v{__version__} starting...")

    delay = MultiTapSincDelay(args.buffer_size, args.k, args.sample_rate)
    delay.set_tau1(args.tau1)
    delay.set_tau2(args.tau2)

    print(f"Processing {args.num_samples} samples...", flush=True)
    result = impulse_sweep(delay, args.num_samples)
    for i, (x, y, alpha) in enumerate(result.rows()):
        print(f"Sample {i}: Input={x:g}, Output={y:g}, Alpha={alpha:g}")
    print("Processing finished.", flush=True)

    logger.info("Sweep completed successfully")


if __name__ == "__main__":
    main()
