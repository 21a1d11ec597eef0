"""
Command line interface.

    oerschema generate --output-dir public/static
    oerschema generate --scope class --base-url https://example.org/oer/ --compact
    oerschema serve --port 8000 --reload
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from oerschema.config import get_settings
from oerschema.converters import ConversionOptions, EntityScope
from oerschema.core.exceptions import OERSchemaException
from oerschema.services.static_generator import StaticSiteGenerator
from oerschema.services.vocabulary_loader import load_vocabulary
from oerschema.storage.local import LocalStorageBackend

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def cmd_generate(args: argparse.Namespace) -> int:
    """Write every term in every format to the output directory."""
    settings = get_settings()
    _configure_logging(args.log_level or settings.LOG_LEVEL)

    try:
        vocabulary = load_vocabulary(args.vocabulary or settings.VOCABULARY_PATH)
        storage = LocalStorageBackend(args.output_dir or settings.STATIC_OUTPUT_DIR)
        options = ConversionOptions(
            base_url=args.base_url or settings.BASE_URL,
            pretty=not args.compact,
        )
        generator = StaticSiteGenerator(vocabulary, storage, options)
        written = asyncio.run(generator.generate(args.scope))
    except OERSchemaException as e:
        logger.error(f"{e.error}: {e.message}")
        return 1

    print(f"Wrote {len(written)} files to {storage.base_path}")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "oerschema.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
    )
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="oerschema",
        description="OER Schema vocabulary publishing tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    %(prog)s generate --output-dir public/static
    %(prog)s generate --scope class --scope property --compact
    %(prog)s serve --host 127.0.0.1 --port 8080
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    generate_parser = subparsers.add_parser(
        "generate",
        help="Render the vocabulary to static files in every format",
    )
    generate_parser.add_argument(
        "--output-dir", "-o",
        help="Output directory (default: STATIC_OUTPUT_DIR setting)",
    )
    generate_parser.add_argument(
        "--base-url", "-b",
        help="Namespace for local terms (default: BASE_URL setting)",
    )
    generate_parser.add_argument(
        "--vocabulary",
        help="Vocabulary YAML file (default: bundled definition)",
    )
    generate_parser.add_argument(
        "--scope",
        action="append",
        help=(
            "Limit output to a scope; repeatable. One of: "
            + ", ".join(scope.value for scope in EntityScope)
        ),
    )
    generate_parser.add_argument(
        "--compact",
        action="store_true",
        help="Write JSON family files without indentation",
    )
    generate_parser.add_argument("--log-level", help="Logging level (default: LOG_LEVEL setting)")
    generate_parser.set_defaults(func=cmd_generate)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="0.0.0.0", help="Bind address")
    serve_parser.add_argument("--port", "-p", type=int, default=8000, help="Bind port")
    serve_parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not getattr(args, "func", None):
        parser.print_help()
        return 0
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
