#!/usr/bin/env python3

import argparse
import asyncio
import importlib
import json
import logging
import sys
from typing import Any, List, Optional

from src.logger import get_logger, set_level
from src.settings import get_settings
from src.urlbuilder import (
    PageBodyFetcher,
    StaticSiteBuilder,
    UrlBuilderError,
    UrlEnumerator,
    compose,
)
from src.urlbuilder.domain.value_objects import coerce_overrides

logger = get_logger("url-builder-cli")


def load_object(reference: str) -> Any:
    """Import `package.module:attribute` and return the attribute."""
    module_name, separator, attribute = reference.partition(":")
    if not separator or not module_name or not attribute:
        raise ValueError(f"Expected MODULE:ATTRIBUTE, got '{reference}'")
    target = importlib.import_module(module_name)
    for part in attribute.split("."):
        target = getattr(target, part)
    return target


def parse_data(raw: List[str]) -> List[dict]:
    """Decode each --data argument as a JSON object of overrides."""
    overrides = []
    for item in raw:
        data = json.loads(item)
        if not isinstance(data, dict):
            raise ValueError(f"Override data must be a JSON object, got: {item}")
        overrides.append(coerce_overrides(data))
    return overrides


async def build_static_site(
    output_dir: str,
    app: Any,
    enumerator: UrlEnumerator,
    base_url: Optional[str] = None,
    locales: Optional[List[str]] = None,
    exclude_types: Optional[List[str]] = None,
    keep_going: bool = False,
) -> int:
    """
    Build a static site and summarize the outcome.

    Returns:
        Process exit code: 0 when every page was written, 1 otherwise.
    """
    settings = get_settings()
    fetcher = PageBodyFetcher(app, base_url=base_url, settings=settings)
    builder = StaticSiteBuilder(
        enumerator,
        fetcher,
        locales=locales,
        exclude_types=exclude_types,
        settings=settings,
    )
    report = await builder.build(output_dir, continue_on_error=keep_going)
    for failure in report.failures:
        logger.error(f"Failed: {failure['message']}")
    logger.info(f"Wrote {len(report.written)} page(s) to {report.output_dir}")
    return 0 if report.succeeded else 1


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="URL builder CLI")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    build = subparsers.add_parser("build", help="Compose a URL from overrides")
    build.add_argument("url", help="Starting URL, may carry a query string and fragment")
    build.add_argument("-k", "--path-key", dest="path_keys", action="append", default=[],
                       help="Parameter to place in the path (repeat, in order)")
    build.add_argument("-d", "--data", action="append", default=[],
                       help='JSON object of overrides, e.g. \'{"colors": {"$addToSet": "blue"}}\' '
                            '(repeat; the last one wins)')

    static = subparsers.add_parser("build-static-site",
                                   help="Build a static site at a specified directory path")
    static.add_argument("directory", help="Output directory")
    static.add_argument("--app", required=True, help="ASGI application, as MODULE:ATTRIBUTE")
    static.add_argument("--enumerator", required=True, help="UrlEnumerator, as MODULE:ATTRIBUTE")
    static.add_argument("--base-url", help="Site base URL (defaults to the BASE_URL setting)")
    static.add_argument("--locale", dest="locales", action="append",
                        help="Locale to build (repeat; defaults to the LOCALES setting)")
    static.add_argument("--exclude-type", dest="exclude_types", action="append",
                        help="Content type to leave out (repeat)")
    static.add_argument("--keep-going", action="store_true",
                        help="Continue past pages that fail and report them at the end")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse command line arguments and run the requested command."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        set_level(logging.DEBUG)

    try:
        if args.command == "build":
            print(compose(args.url, args.path_keys or None, *parse_data(args.data)))
            return 0

        app = load_object(args.app)
        enumerator = load_object(args.enumerator)
        return asyncio.run(build_static_site(
            args.directory,
            app,
            enumerator,
            base_url=args.base_url,
            locales=args.locales,
            exclude_types=args.exclude_types,
            keep_going=args.keep_going,
        ))
    except UrlBuilderError as e:
        logger.error(str(e))
        return 1
    except (ValueError, ImportError, AttributeError) as e:
        logger.error(f"Invalid arguments: {e}")
        return 2
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 1


if __name__ == "__main__":
    sys.exit(main())
