"""Main entry point for simplexgen."""

import argparse
import logging
from pathlib import Path

import numpy as np

from .config import NoiseSettings, SettingsLoader
from .core.errors import NoiseError
from .textures import SimplexTextureGenerator

LOGGER = logging.getLogger(__name__)


def _parse_floats(text: str, count: tuple[int, int], what: str) -> tuple[float, ...]:
    """Parse a comma-separated list like '1.5,-2,0'."""
    try:
        values = tuple(float(v) for v in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid {what}: {text!r}") from None
    low, high = count
    if not low <= len(values) <= high:
        raise argparse.ArgumentTypeError(
            f"{what} needs {low} to {high} comma-separated numbers, got {len(values)}"
        )
    return values


def _parse_size(text: str) -> tuple[int, int]:
    """Parse a 'WxH' size string."""
    try:
        width, height = map(int, text.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid size: {text!r} (expected WxH)") from None
    return width, height


def _parse_origin(text: str) -> tuple[float, ...]:
    return _parse_floats(text, (2, 4), "origin")


def _parse_sample(text: str) -> tuple[float, ...]:
    return _parse_floats(text, (2, 4), "sample point")


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="simplexgen",
        description="Simplexgen - OpenSimplex noise sampler",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-c", "--config",
        metavar="PATH",
        help="YAML settings file; command line options override it",
    )
    parser.add_argument("--seed", type=int, help="Permutation seed (default: 0)")
    parser.add_argument(
        "-d", "--dimensions",
        type=int,
        choices=[2, 3, 4],
        help="Noise dimensionality (default: 2)",
    )
    parser.add_argument("--octaves", type=int, help="Number of fractal octaves (default: 1)")
    parser.add_argument("--lacunarity", type=float, help="Frequency multiplier per octave")
    parser.add_argument("--gain", type=float, help="Amplitude multiplier per octave")
    parser.add_argument("--frequency", type=float, help="Frequency of the first octave")
    parser.add_argument("--amplitude", type=float, help="Amplitude of the first octave")
    parser.add_argument(
        "--size",
        metavar="WxH",
        type=_parse_size,
        help="Grid size in samples (default: 256x256)",
    )
    parser.add_argument("--step", type=float, help="Distance between samples (default: 1/32)")
    parser.add_argument(
        "--origin",
        metavar="X,Y,Z,W",
        type=_parse_origin,
        help="Position of the first sample; z and w pick the slice",
    )
    parser.add_argument(
        "--sample",
        metavar="X,Y[,Z[,W]]",
        type=_parse_sample,
        help="Print the noise value at a single point and quit",
    )
    parser.add_argument(
        "-o", "--output",
        metavar="PATH",
        help="Write the grid to a .npy file or an image (e.g. noise.png)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _resolve_settings(args: argparse.Namespace) -> NoiseSettings:
    """Combine the optional settings file with command line overrides."""
    if args.config:
        settings = SettingsLoader().load_file(args.config)
    else:
        settings = NoiseSettings()

    overrides = {
        "seed": args.seed,
        "dimensions": args.dimensions,
        "octaves": args.octaves,
        "lacunarity": args.lacunarity,
        "gain": args.gain,
        "frequency": args.frequency,
        "amplitude": args.amplitude,
        "step": args.step,
    }
    for key, value in overrides.items():
        if value is not None:
            setattr(settings, key, value)
    if args.size is not None:
        settings.width, settings.height = args.size
    if args.origin is not None:
        settings.origin = args.origin + (0.0,) * (4 - len(args.origin))

    settings.validate()
    return settings


def main(argv: list[str] | None = None) -> None:
    """Run the simplexgen command line tool."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.sample is not None and args.dimensions is None and not args.config:
        args.dimensions = len(args.sample)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = _resolve_settings(args)
        generator = SimplexTextureGenerator.from_settings(settings)

        if args.sample is not None:
            if len(args.sample) != settings.dimensions:
                parser.error(
                    f"--sample needs {settings.dimensions} coordinates for "
                    f"{settings.dimensions}D noise, got {len(args.sample)}"
                )
            value = generator.noise_func()(*args.sample)
            print(f"{value:.17g}")
            return

        print("Simplexgen - OpenSimplex noise sampler")
        print("=" * 40)
        print(
            f"{settings.dimensions}D noise, seed {settings.seed}, "
            f"{settings.octaves} octave(s), {settings.width}x{settings.height} samples"
        )

        if args.output:
            output_path = Path(args.output)
            print(f"\nWriting grid to {output_path}...")
            generator.save(output_path)
            print(f"Saved grid to {output_path}")
        else:
            values = generator.generate_array()
            print(f"min:  {values.min():.6f}")
            print(f"max:  {values.max():.6f}")
            print(f"mean: {float(np.mean(values)):.6f}")
    except (NoiseError, ValueError, FileNotFoundError) as e:
        LOGGER.debug("Command failed", exc_info=True)
        parser.error(str(e))


if __name__ == "__main__":
    main()
