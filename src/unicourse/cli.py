"""CLI entry point for UniCourse.

Reads commands from stdin (or --input) and applies them to a registry
pre-filled with seed data. Protocol output goes to stdout, diagnostics to
stderr.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

import click

from unicourse.config import ConfigError, UniCourseConfig, find_config, load_config
from unicourse.interpreter import Interpreter
from unicourse.logging import get_logger, setup_logging
from unicourse.registry import DEFAULT_SEED, Registry, SeedError, apply_seed, load_seed_file

logger = get_logger("cli")


def build_registry(config: UniCourseConfig, seed: bool = True) -> Registry:
    """Create a registry from config and apply seed data.

    Args:
        config: Loaded configuration.
        seed: Whether to apply seed data at all.

    Returns:
        The ready registry.

    Raises:
        SeedError: If the seed file can't be loaded or applied.
    """
    registry = Registry(limits=config.limits.to_limits())
    if seed and config.seed.enabled:
        if config.seed.file is not None:
            logger.info("Loading seed data from %s", config.seed.file)
            data = load_seed_file(config.seed.file)
        else:
            data = DEFAULT_SEED
        apply_seed(registry, data)
    return registry


@click.command()
@click.version_option(package_name="unicourse")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to unicourse.yaml (auto-detected if not specified)",
)
@click.option(
    "-i",
    "--input",
    "input_file",
    type=click.File("r", errors="replace"),
    default=None,
    help="Read commands from FILE instead of stdin",
)
@click.option(
    "--no-seed",
    is_flag=True,
    help="Start with an empty registry",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable debug logging on stderr",
)
def main(
    config_path: Path | None,
    input_file: TextIO | None,
    no_seed: bool,
    verbose: bool,
) -> None:
    """University course registry - reads commands line by line.

    Commands: course, student, professor, enroll, drop, teach, exempt.
    Each is followed by its operand lines. An empty line ends the session.
    """
    try:
        if config_path is None:
            config_path = find_config()
        config = load_config(config_path).apply_env()
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    setup_logging(
        log_dir=config.logging.dir,
        level="DEBUG" if verbose else config.logging.level,
    )
    logger.debug("Configuration loaded from %s", config_path or "defaults")

    try:
        registry = build_registry(config, seed=not no_seed)
    except SeedError as e:
        click.echo(f"Seed error: {e}", err=True)
        sys.exit(1)

    # Undecodable bytes become U+FFFD and fail validation like any bad line
    stream = input_file
    if stream is None:
        stream = click.get_text_stream("stdin", errors="replace")
    result = Interpreter(registry, stream).run()
    sys.exit(result.exit_code)


if __name__ == "__main__":
    main()
