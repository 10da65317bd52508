"""
Command-line interface for rubiks.

Runs seeded scramble sessions, prints the depth-ordered drawables a renderer
would paint, and creates or validates configuration files.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

import yaml

from rubiks.core.base import FACE_ORDER
from rubiks.core.config import Config, create_default_config, load_config, validate_config
from rubiks.game import drawables, new_game, play_all, scramble
from rubiks.model.moves import format_move, parse_moves
from rubiks.runner import SessionRunner
from rubiks.utils.display import COLOR_CODES, LiveLogger, StatusDisplay


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser."""
    parser = argparse.ArgumentParser(
        description="rubiks: cube puzzle model, layer turns and perspective projection",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Scramble a cube and log every move
  rubiks scramble --config config.yaml --moves 25 --seed 7

  # Print what a renderer would paint after two turns
  rubiks render --config config.yaml --play "Z+0 X-2"

  # Create and check a configuration
  rubiks create-config --output config.yaml
  rubiks validate-config config.yaml --strict
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    scramble_parser = subparsers.add_parser("scramble", help="Run a seeded scramble session")
    scramble_parser.add_argument("--config", "-c", required=True, help="Path to configuration file")
    scramble_parser.add_argument("--moves", "-n", type=int, help="Override number of scramble moves")
    scramble_parser.add_argument("--seed", type=int, help="Override random seed")
    scramble_parser.add_argument("--output-dir", help="Override log directory")
    scramble_parser.add_argument("--verbose", "-v", action="store_true", help="Show every step")

    render_parser = subparsers.add_parser("render", help="Print depth-ordered drawables")
    render_parser.add_argument("--config", "-c", required=True, help="Path to configuration file")
    render_parser.add_argument("--play", default="", help="Moves to play first, e.g. 'Z+0 X-2'")
    render_parser.add_argument("--scramble", action="store_true",
                               help="Scramble with the configured seed and move count first")
    render_parser.add_argument("--format", choices=["table", "json"], default="table",
                               help="Output format")

    config_parser = subparsers.add_parser("create-config", help="Create default configuration file")
    config_parser.add_argument("--output", "-o", default="config.yaml", help="Output configuration file")
    config_parser.add_argument("--force", action="store_true", help="Overwrite an existing file")

    validate_parser = subparsers.add_parser("validate-config", help="Validate configuration file")
    validate_parser.add_argument("config", help="Configuration file to validate")
    validate_parser.add_argument("--strict", action="store_true", help="Treat warnings as errors")

    return parser


def _load_and_validate_config(path: str, logger: LiveLogger) -> Optional[Config]:
    """Load and validate configuration with error handling."""
    try:
        logger.log_action("Loading configuration")
        config = load_config(path)
    except FileNotFoundError:
        logger.log_error(f"Configuration file not found: {path}")
        logger.log_info("Use 'rubiks create-config' to create a default configuration")
        return None
    except (ValueError, yaml.YAMLError) as e:
        logger.log_error(f"Configuration error: {e}")
        return None

    issues = validate_config(config)
    errors = [issue for issue in issues if issue.startswith("ERROR")]
    for issue in issues:
        if issue.startswith("ERROR"):
            logger.log_error(issue.replace("ERROR: ", ""))
        else:
            logger.log_warning(issue.replace("WARNING: ", ""))
    if errors:
        return None
    logger.log_result("Configuration loaded")
    return config


def scramble_command(args) -> int:
    """Execute scramble command."""
    logger = LiveLogger(verbose=True)
    config = _load_and_validate_config(args.config, logger)
    if config is None:
        return 1

    if args.seed is not None:
        config.runner.seed = args.seed
    if args.output_dir:
        config.runner.log_dir = args.output_dir

    StatusDisplay.print_config({
        "Cube Size": config.cube.size,
        "Scramble Moves": args.moves if args.moves is not None else config.runner.scramble_moves,
        "Seed": config.runner.seed,
        "Output Directory": config.runner.log_dir,
    }, "Session Configuration")

    runner = SessionRunner(config, verbose=args.verbose)
    runner.setup()
    result = runner.run(num_moves=args.moves)

    StatusDisplay.print_section("Final Faces")
    for name, face in runner.faces().items():
        StatusDisplay.print_face(name, face)

    if result.error_message:
        logger.log_error(f"Session failed: {result.error_message}")
        return 1
    logger.log_info("Moves: " + " ".join(format_move(m) for m in result.moves))
    logger.log_result(f"Session log: {result.log_file}")
    return 0


def render_command(args) -> int:
    """Execute render command."""
    logger = LiveLogger(verbose=args.format == "table")
    config = _load_and_validate_config(args.config, logger)
    if config is None:
        return 1

    try:
        game = new_game(config)
        if args.scramble:
            game, _ = scramble(game, config.runner.scramble_moves)
        game = play_all(game, parse_moves(args.play))
        frame = drawables(game)
    except ValueError as e:
        logger.log_error(f"Failed to render: {e}")
        return 1

    if args.format == "json":
        print(json.dumps([d.to_dict() for d in frame], indent=2))
        return 0

    StatusDisplay.print_section(f"Paint order ({len(frame)} squares)")
    for i, d in enumerate(frame):
        face = f"{d.locus.axis.name}{d.locus.pole.value}{d.locus.coord}"
        side = "front" if d.facing else "back "
        print(f"  {i:3d}  depth={d.depth:7.3f}  {face:<12} {side} {COLOR_CODES[d.color]}")
    return 0


def create_config_command(args) -> int:
    """Execute create-config command."""
    logger = LiveLogger(verbose=True)

    if Path(args.output).exists() and not args.force:
        logger.log_error(f"Configuration file already exists: {args.output} (use --force)")
        return 1

    try:
        config = create_default_config(args.output)
    except OSError as e:
        logger.log_error(f"Failed to create config: {e}")
        return 1

    logger.log_result(f"Configuration created: {args.output}")
    StatusDisplay.print_config(
        {f"{section}.{k}": v for section, values in config.to_dict().items() for k, v in values.items()},
        "Configuration Summary",
    )
    logger.log_info("Next: rubiks scramble --config " + args.output)
    return 0


def validate_config_command(args) -> int:
    """Execute validate-config command."""
    logger = LiveLogger(verbose=True)
    StatusDisplay.print_header("Configuration Validation")

    try:
        config = load_config(args.config)
    except FileNotFoundError:
        logger.log_error(f"Configuration file not found: {args.config}")
        return 1
    except (ValueError, yaml.YAMLError) as e:
        logger.log_error(f"Configuration error: {e}")
        return 1

    issues = validate_config(config)
    errors = [issue for issue in issues if issue.startswith("ERROR")]
    warnings = [issue for issue in issues if not issue.startswith("ERROR")]

    if args.strict and warnings:
        errors.extend(warnings)
        warnings = []

    for warning in warnings:
        logger.log_warning(warning.replace("WARNING: ", ""))
    for error in errors:
        logger.log_error(error.replace("ERROR: ", "").replace("WARNING: ", ""))

    StatusDisplay.print_results({
        "Status": "FAILED" if errors else "PASSED",
        "Errors Found": len(errors),
        "Warnings Found": len(warnings),
        "Stickers": len(FACE_ORDER) * config.cube.size ** 2,
    }, "Validation Summary")
    return 1 if errors else 0


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    command_handlers = {
        "scramble": scramble_command,
        "render": render_command,
        "create-config": create_config_command,
        "validate-config": validate_config_command,
    }

    handler = command_handlers.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return handler(args)
    except KeyboardInterrupt:
        print("\n⚠️  Interrupted by user")
        return 1


if __name__ == "__main__":
    sys.exit(main())
