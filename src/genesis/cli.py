"""Command-line interface: run the world pipeline headless."""

import argparse
import logging
import time

import structlog


def configure_logging(verbose: bool = False) -> None:
    """Set up stdlib logging for the grid stages and structlog for the rest."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate an island world and simulate its settlements"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path or name of TOML config file (default: built-in defaults)",
    )
    parser.add_argument("--width", type=int, default=None, help="Map width (overrides config)")
    parser.add_argument("--height", type=int, default=None, help="Map height (overrides config)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed (overrides config)")
    parser.add_argument(
        "--island-mode",
        choices=["single", "archipelago"],
        default=None,
        help="Island shape (overrides config)",
    )
    parser.add_argument(
        "--erosion",
        type=int,
        default=None,
        metavar="PARTICLES",
        help="Apply erosion with this many droplets (0 skips erosion)",
    )
    parser.add_argument(
        "--years", type=int, default=100, help="Years to simulate (default: 100)"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    logger = structlog.get_logger()

    # Import here to avoid slow startup for --help
    from .config import GenesisConfig, WorldConfig, find_config, load_config
    from .pipeline import WorldPipeline

    if args.config:
        try:
            config_path = find_config(args.config)
        except FileNotFoundError as e:
            logger.error("config_not_found", path=args.config, error=str(e))
            raise SystemExit(1)
        config = load_config(config_path)
        logger.info("config_loaded", path=str(config_path))
    else:
        config = GenesisConfig()
        logger.info("using_default_config")

    world_updates = {
        key: value
        for key, value in (("width", args.width), ("height", args.height), ("seed", args.seed))
        if value is not None
    }
    if world_updates:
        config.world = WorldConfig.model_validate(config.world.model_dump() | world_updates)

    pipeline = WorldPipeline(config)
    start_time = time.time()

    pipeline.generate_terrain(island_mode=args.island_mode)
    if args.erosion is None or args.erosion > 0:
        pipeline.apply_erosion(particle_count=args.erosion)
    pipeline.generate_climate()
    pipeline.initialize_civilization()
    pipeline.advance_years(args.years)

    elapsed = time.time() - start_time

    print()
    print(
        f"World {config.world.width}x{config.world.height}, seed {pipeline.seed}, "
        f"year {pipeline.year} ({elapsed:.1f}s)"
    )
    print(f"Population {pipeline.total_population:,} in {len(pipeline.cities())} cities, "
          f"{len(pipeline.roads())} roads")
    for city in sorted(pipeline.cities(), key=lambda c: -c.population):
        print(
            f"  {city.name:<24} ({city.x:>3}, {city.y:>3})  "
            f"pop {city.population:>8,}  founded {city.founded_year}"
        )


if __name__ == "__main__":
    main()
