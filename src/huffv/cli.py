"""Command line interface.

Usage:
    huffv verification_key.json                     # print the verifier to stdout
    huffv verification_key.json -o Verifier.huff    # save the verifier to a file
    huffv verification_key.json -c huffv.toml       # read options from a configuration file

The configuration file is a TOML document with a `[huffv]` table:

    [huffv]
    template = "MyTemplate.huff"
    output = "Verifier.huff"
    strict = true
"""

import argparse
import json
import logging
import sys
import tomllib
from pathlib import Path

from huffv import __version__
from huffv.errors import ConfigurationError, HuffvError
from huffv.types.verification_key import load_verification_key
from huffv.verifier import generate_verifier

logger = logging.getLogger(__name__)

CONFIG_KEYS = {"template": str, "output": str, "strict": bool}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="huffv",
        description="Generate a Huff Groth16 verifier contract from a snarkjs verification key.",
    )
    parser.add_argument("path", nargs="?", help="The path to the verification key json file generated by snarkjs.")
    parser.add_argument(
        "-o",
        "--output",
        help="Save the verifier contract to this file instead of sending it to stdout.",
    )
    parser.add_argument("-t", "--template", help="Contract template to use instead of the bundled one.")
    parser.add_argument("-c", "--config", help="TOML configuration file.")
    parser.add_argument(
        "--permissive",
        action="store_true",
        help="Do not fail if placeholders are left in the generated contract.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug information to stderr.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def load_config(config_path: Path) -> dict:
    """Load the `[huffv]` table of a TOML configuration file.

    Raises:
        ConfigurationError: If the file is not valid TOML or contains unknown or mistyped keys.
    """
    try:
        with Path.open(config_path, "rb") as f:
            config = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid configuration file {config_path}: {e}"
        raise ConfigurationError(msg) from e

    config = config.get("huffv", {})
    if not isinstance(config, dict):
        msg = f"The huffv entry in {config_path} must be a table"
        raise ConfigurationError(msg)
    for key, value in config.items():
        if key not in CONFIG_KEYS:
            msg = f"Unknown configuration key in {config_path}: {key}"
            raise ConfigurationError(msg)
        if not isinstance(value, CONFIG_KEYS[key]):
            msg = f"Configuration key {key} in {config_path} must be of type {CONFIG_KEYS[key].__name__}"
            raise ConfigurationError(msg)
    return config


def main(argv: list[str] | None = None) -> int:
    """Run the command line interface and return the exit status."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.path is None:
        logger.error("No file path provided!")
        return 1
    path = Path(args.path)
    if not path.exists():
        logger.error("File does not exist!")
        return 1

    try:
        config = load_config(Path(args.config)) if args.config is not None else {}
        template_path = args.template or config.get("template")
        output = args.output or config.get("output")
        strict = not args.permissive and config.get("strict", True)

        vk = load_verification_key(path)
        logger.debug("Loaded verification key %s with %d IC points", path, len(vk.ic))

        if template_path is not None:
            logger.debug("Using template %s", template_path)
            template = Path(template_path).read_text(encoding="utf-8")
        else:
            logger.debug("Using bundled template")
            template = None

        contract = generate_verifier(vk, template, strict=strict)

        if output is not None:
            Path(output).write_text(contract + "\n", encoding="utf-8")
            logger.debug("Verifier contract saved to %s", output)
        else:
            sys.stdout.write(contract + "\n")
    except json.JSONDecodeError as e:
        logger.error("Error while deserializing verification key JSON: %s", e)
        return 1
    except UnicodeDecodeError as e:
        logger.error("Input is not valid UTF-8: %s", e)
        return 1
    except (HuffvError, OSError) as e:
        logger.error("%s", e)
        return 1

    return 0
