"""
Main entry point for think_tool.
"""
import argparse
import logging
import sys
from typing import Optional, Sequence

from .constants import (
    APP_NAME,
    APP_VERSION,
    APP_DESCRIPTION,
    DEFAULT_THOUGHT,
    OUTPUT_FORMATS,
)


EPILOG = """examples:
  think-tool "I believe we should launch the feature next week"
  think-tool --input thoughts.txt --output analysis.json --format json
  think-tool --interactive
"""


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description=APP_DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-v", "--version",
        action="version",
        version=f"{APP_NAME} {APP_VERSION}"
    )

    parser.add_argument(
        "thought",
        nargs="?",
        help="Thought to analyze (default: a built-in example)"
    )

    parser.add_argument(
        "--apikey",
        type=str,
        help="Anthropic API key (default: ANTHROPIC_API_KEY env var)"
    )

    parser.add_argument(
        "-m", "--model",
        type=str,
        help="Claude model to use"
    )

    parser.add_argument(
        "--timeout",
        type=float,
        help="API request timeout in seconds, shared by both requests"
    )

    parser.add_argument(
        "--max-tokens",
        type=int,
        help="Maximum tokens in Claude's response"
    )

    parser.add_argument(
        "-i", "--input",
        type=str,
        help="Input file containing thought to analyze"
    )

    parser.add_argument(
        "-o", "--output",
        type=str,
        help="Output file for analysis results"
    )

    parser.add_argument(
        "-f", "--format",
        type=str,
        choices=list(OUTPUT_FORMATS),
        help="Output format (text, json)"
    )

    parser.add_argument(
        "-p", "--prompt",
        type=str,
        help='Custom prompt template (default: "Please analyze the following thought:")'
    )

    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Interactive mode"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Verbose output mode"
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to config file"
    )

    return parser.parse_args(argv)


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr, at DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    configure_logging(args.verbose)

    from .cli import CLI
    from .config import get_config
    from .errors import ConfigError, StorageError
    from .io_handlers import FileStorage
    from .llm import AnthropicClient
    from .rich_ui import RichRenderer

    renderer = RichRenderer()
    storage = FileStorage()

    try:
        manager = get_config(args.config)
        app_config = manager.apply_overrides(
            api_key=args.apikey,
            model=args.model,
            timeout=args.timeout,
            max_tokens=args.max_tokens,
            prompt_template=args.prompt,
            output_format=args.format,
        )
        api_key = manager.require_api_key()
        conversation_config = manager.conversation_config()
    except ConfigError as e:
        renderer.print_error(str(e), title="Configuration error")
        return 1

    cli = CLI(
        config=conversation_config,
        client=AnthropicClient(api_key=api_key),
        output_format=app_config.output_format,
        renderer=renderer,
        storage=storage,
    )

    if args.interactive:
        try:
            return cli.run_interactive()
        except KeyboardInterrupt:
            renderer.print("\nGoodbye!")
            return 0

    if args.input:
        try:
            thought = storage.read(args.input)
        except StorageError as e:
            renderer.print_error(str(e), title="Error reading input file")
            return 1
    elif args.thought:
        thought = args.thought
    else:
        thought = DEFAULT_THOUGHT

    return cli.run_once(thought, output_file=args.output)


if __name__ == "__main__":
    sys.exit(main())
