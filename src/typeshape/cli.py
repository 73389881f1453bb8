"""
Command-line interface and entry points for typeshape.

Subcommands:
    typeshape infer data.json data.d.ts [--type-name Data] [--no-export]
    typeshape run config.json
    typeshape validate config.json
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from typeshape.core.logger import configure_root_logger, get_logger
from typeshape.models.pipeline_config import PipelineConfig
from typeshape.models.render_options import RenderOptions
from typeshape.orchestrator import DeclarationOrchestrator

logger = get_logger(__name__)


def load_config(config_path: str) -> Dict[str, Any]:
    """Read a JSON or YAML config file into a plain dict."""
    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_file, "r", encoding="utf-8") as f:
        if config_file.suffix == ".json":
            return json.load(f)
        if config_file.suffix in (".yaml", ".yml"):
            try:
                import yaml
            except ImportError:
                raise ImportError(
                    "PyYAML required for YAML configs. "
                    "Install with: pip install typeshape[yaml]"
                )
            return yaml.safe_load(f)
    raise ValueError(
        f"Unsupported config format: {config_file.suffix}. "
        "Use .json or .yaml"
    )


def main(
    config_path: Optional[str] = None,
    config_dict: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Main entry point for a file-based inference run.

    Can be called with either a config file path (JSON/YAML) or a config
    dictionary.

    Returns:
        Run result with status, run_id, sample_count, declaration and sink audit

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If neither config_path nor config_dict provided

    Example:
        >>> from typeshape.cli import main
        >>> result = main(config_dict={"input_path": "in.json", "output_path": "out.d.ts"})
        >>> print(result["declaration"])
    """
    try:
        if config_dict:
            config = config_dict
            logger.info("Using provided config dictionary")
        elif config_path:
            config = load_config(config_path)
            logger.info(f"Loaded config from {config_path}")
        else:
            raise ValueError("Either config_path or config_dict must be provided")

        return DeclarationOrchestrator().run(config)

    except Exception as e:
        logger.error(f"Inference run failed: {str(e)}", exc_info=True)
        raise


def validate_config(config_path: str) -> bool:
    """
    Validate a configuration file without running inference.

    Raises:
        Exception: If configuration is invalid
    """
    try:
        logger.info(f"Validating config: {config_path}")
        PipelineConfig.model_validate(load_config(config_path))
        logger.info("Configuration is valid")
        return True
    except Exception as e:
        logger.error(f"Config validation failed: {str(e)}")
        raise


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="typeshape",
        description="Infer a TypeScript type declaration from sample JSON data",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    infer_parser = subparsers.add_parser("infer", help="Infer a declaration from a JSON array file")
    infer_parser.add_argument("input", help="Path to a JSON file holding an array of samples")
    infer_parser.add_argument("output", help="Path of the declaration file to write")
    infer_parser.add_argument("--type-name", default="Data", help="Name of the declared type")
    infer_parser.add_argument("--no-export", action="store_true", help="Omit the export keyword")
    infer_parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    run_parser = subparsers.add_parser("run", help="Run inference from a configuration file")
    run_parser.add_argument("config", help="Path to configuration file (JSON or YAML)")
    run_parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    validate_parser = subparsers.add_parser("validate", help="Validate configuration without running")
    validate_parser.add_argument("config", help="Path to configuration file (JSON or YAML)")

    return parser


def cli(argv: Optional[list] = None) -> None:
    """Console script entry point; exits 0 on success and 1 on failure."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if getattr(args, "verbose", False):
        configure_root_logger("DEBUG")

    if args.command == "infer":
        try:
            config: Dict[str, Any] = {
                "input_path": args.input,
                "output_path": args.output,
                "render": RenderOptions(type_name=args.type_name, export=not args.no_export).model_dump(),
            }
            if args.verbose:
                config["log_level"] = "DEBUG"
            main(config_dict=config)
            sys.exit(0)
        except Exception as e:
            logger.error(f"Inference failed: {e}")
            sys.exit(1)

    elif args.command == "run":
        try:
            config = load_config(args.config)
            if args.verbose:
                config["log_level"] = "DEBUG"
            main(config_dict=config)
            sys.exit(0)
        except Exception as e:
            logger.error(f"Inference failed: {e}")
            sys.exit(1)

    elif args.command == "validate":
        try:
            validate_config(args.config)
            sys.exit(0)
        except Exception as e:
            logger.error(f"Validation failed: {e}")
            sys.exit(1)

    else:
        parser.print_help()
        sys.exit(0)


if __name__ == "__main__":
    cli()
