"""
Command line entry point.

    racesim run       open a live window and race until ESC, q or t_max
    racesim snapshot  advance the race to --time and save one frame as an image

Both subcommands share the same race options.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import matplotlib.pyplot as plt

from racesim.analysis import format_summary, misclassified_fraction, summarize_waves
from racesim.core import MOTION_MODES, PixelBuffer, RaceConfig, Simulation
from racesim.driver import FrameDriver
from racesim.viz import DisplayError, MatplotlibSurface, plot_frame, save_figure

logger = logging.getLogger("racesim")


def _add_race_arguments(p: argparse.ArgumentParser) -> None:
    defaults = RaceConfig()
    p.add_argument("--runners", type=int, default=defaults.runner_count)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--motion", choices=MOTION_MODES, default=defaults.motion)
    p.add_argument("--width", type=int, default=defaults.width)
    p.add_argument("--height", type=int, default=defaults.height)
    p.add_argument("--radius", type=int, default=defaults.runner_radius)
    p.add_argument("--per-row", type=int, default=defaults.aligned_per_row)
    p.add_argument("--wave-gap", type=int, default=defaults.wave_gap)
    p.add_argument("--speed-mean", type=float, default=defaults.speed_mean)
    p.add_argument("--speed-std", type=float, default=defaults.speed_std)
    p.add_argument("--perception-std", type=float, default=defaults.perception_std)
    p.add_argument("--orientation-std", type=float, default=defaults.orientation_std)


def _build_run_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("run", help="Animate the race in a window")
    p.set_defaults(func=_handle_run)
    _add_race_arguments(p)
    p.add_argument("--t-max", type=float, default=RaceConfig.t_max)
    p.add_argument("--time-factor", type=float, default=RaceConfig.time_factor)


def _build_snapshot_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("snapshot", help="Render the race at one instant to an image")
    p.set_defaults(func=_handle_snapshot)
    _add_race_arguments(p)
    p.add_argument("--time", type=float, default=60.0, help="Simulation time to render")
    p.add_argument("--step", type=float, default=1.0, help="Simulated seconds per advance")
    p.add_argument("--output", type=Path, required=True)
    p.add_argument("--dpi", type=int, default=100)


def config_from_args(args: argparse.Namespace) -> RaceConfig:
    """Build a validated RaceConfig from parsed arguments."""
    overrides = dict(
        runner_count=args.runners,
        motion=args.motion,
        width=args.width,
        height=args.height,
        runner_radius=args.radius,
        aligned_per_row=args.per_row,
        wave_gap=args.wave_gap,
        speed_mean=args.speed_mean,
        speed_std=args.speed_std,
        perception_std=args.perception_std,
        orientation_std=args.orientation_std,
    )
    if hasattr(args, "t_max"):
        overrides.update(t_max=args.t_max, time_factor=args.time_factor)
    return RaceConfig(**overrides)


def _report(sim: Simulation) -> None:
    logger.info("Wave summary:\n%s", format_summary(summarize_waves(sim)))
    if sim.config.perception_std > 0:
        logger.info("Runners in the wrong wave: %.1f%%", 100 * misclassified_fraction(sim))


def _handle_run(args: argparse.Namespace) -> int:
    config = config_from_args(args)
    sim = Simulation.build(config, seed=args.seed)
    _report(sim)

    try:
        surface = MatplotlibSurface.create(config.title, config.width, config.height)
    except DisplayError as e:
        logger.error("%s", e)
        return 1

    try:
        FrameDriver(sim, surface, config).run()
    except DisplayError as e:
        logger.error("%s", e)
        return 1
    finally:
        surface.close()

    _report(sim)
    return 0


def _handle_snapshot(args: argparse.Namespace) -> int:
    config = config_from_args(args)
    sim = Simulation.build(config, seed=args.seed)

    buffer = PixelBuffer(config.width, config.height, background=config.background_color)
    sim.run_to(args.time, args.step)
    sim.rasterize(buffer)
    _report(sim)

    fig, _ = plot_frame(buffer, figsize=(config.width / args.dpi, config.height / args.dpi))
    args.output.parent.mkdir(parents=True, exist_ok=True)
    save_figure(fig, args.output, dpi=args.dpi)
    plt.close(fig)
    logger.info("Saved t=%.1fs snapshot to %s", args.time, args.output)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="racesim", description="Mass-start race simulator")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)
    _build_run_parser(sub)
    _build_snapshot_parser(sub)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        return args.func(args)
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)
        return 2


if __name__ == "__main__":
    sys.exit(main())
