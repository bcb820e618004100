"""Command-line interface for Katana segmentation."""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from katana.config.loader import load_config, ConfigLoadError
from katana.config.schema import PipelineConfig
from katana.core.util import safe_json, SimpleConsoleLogger
from katana.markup.markdown import MarkupError
from katana.runtime.preparer import TextPreparer
from katana.segmenters.sentence import SentenceSegmenter


def _read_input(source: Optional[str]) -> str:
    if not source or source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _print_paragraphs(paragraphs: List[List[str]]) -> None:
    print("\n\n".join("\n".join(paragraph) for paragraph in paragraphs))


def cut_command(args):
    """Split plain text into sentences."""
    try:
        text = _read_input(args.input_file)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Cannot read input: {e}")
        return 1

    logger = SimpleConsoleLogger() if args.verbose else None
    paragraphs = SentenceSegmenter(logger=logger).cut(text)

    if args.json:
        print(safe_json(paragraphs))
    else:
        _print_paragraphs(paragraphs)
    return 0


def prepare_command(args):
    """Convert an HTML file into segmented text."""
    try:
        config = load_config(args.config) if args.config else PipelineConfig()
        html = _read_input(args.input_file)
    except ConfigLoadError as e:
        print(f"❌ Config error: {e}")
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Cannot read input: {e}")
        return 1

    logger = SimpleConsoleLogger() if args.verbose else None
    preparer = TextPreparer(config=config, segmenter=SentenceSegmenter(logger=logger),
                            logger=logger)
    try:
        result = preparer.prepare(html)
    except MarkupError as e:
        print(f"❌ {e}")
        return 1

    if args.json:
        print(safe_json(result))
    else:
        print(result.text)
    return 0


def validate_config_command(args):
    """Validate a pipeline config file."""
    config_path = Path(args.config_file)
    if not config_path.exists():
        print(f"Error: Config file not found: {config_path}")
        return 1

    print(f"Validating config: {config_path}")
    try:
        config = load_config(config_path)
    except ConfigLoadError as e:
        print(f"❌ Config validation failed: {e}")
        return 1

    print("✅ Config validation successful!")
    print(f"   Version: {config.version}")
    print(f"   Parser: {config.markup.parser} (fence_code={config.markup.fence_code})")
    print(f"   Abbreviations: {len(config.cleaning.abbreviations)}")

    if args.verbose:
        print("\nAbbreviations:")
        for abbreviation, replacement in config.cleaning.abbreviations.items():
            print(f"   {abbreviation} -> {replacement}")

    return 0


def info_command(args):
    """Display Katana version and system information."""
    print("Katana CLI")
    print("=" * 50)

    # Try to get version from package
    try:
        import importlib.metadata
        version = importlib.metadata.version("katana-segmenter")
        print(f"Version: {version}")
    except importlib.metadata.PackageNotFoundError:
        print("Version: development")

    print(f"Python: {sys.version.split()[0]}")

    print("\nOptional dependencies:")

    try:
        import langchain_core
        print(f"   ✅ langchain-core: {langchain_core.__version__}")
    except ImportError:
        print("   ❌ langchain-core: not installed")

    try:
        import lxml.etree
        print(f"   ✅ lxml: {lxml.etree.__version__}")
    except ImportError:
        print("   ❌ lxml: not installed")

    return 0


def create_parser():
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="katana",
        description="Sentence and paragraph segmentation for prose and HTML"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Cut command
    cut_parser = subparsers.add_parser(
        "cut",
        help="Split plain text into paragraphs of sentences"
    )
    cut_parser.add_argument(
        "input_file",
        nargs="?",
        help="Path to a UTF-8 text file (default: stdin)"
    )
    cut_parser.add_argument(
        "--json",
        action="store_true",
        help="Print paragraphs as JSON"
    )
    cut_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log segmentation statistics to stderr"
    )

    # Prepare command
    prepare_parser = subparsers.add_parser(
        "prepare",
        help="Convert HTML into segmented text"
    )
    prepare_parser.add_argument(
        "input_file",
        nargs="?",
        help="Path to an HTML file (default: stdin)"
    )
    prepare_parser.add_argument(
        "-c", "--config",
        help="Path to a pipeline config YAML file"
    )
    prepare_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full result as JSON"
    )
    prepare_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log pipeline statistics to stderr"
    )

    # Validate command
    validate_parser = subparsers.add_parser(
        "validate-config",
        help="Validate a pipeline config file"
    )
    validate_parser.add_argument(
        "config_file",
        help="Path to the config YAML file"
    )
    validate_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show detailed validation results"
    )

    # Info command
    subparsers.add_parser(
        "info",
        help="Display version and system information"
    )

    return parser


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "cut":
        return cut_command(args)
    elif args.command == "prepare":
        return prepare_command(args)
    elif args.command == "validate-config":
        return validate_config_command(args)
    elif args.command == "info":
        return info_command(args)
    else:
        print(f"Unknown command: {args.command}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
