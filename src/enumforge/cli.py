"""Command line interface for generating enumerable classes."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, Sequence

from pydantic import ValidationError

from .config import GeneratorConfig
from .errors import GenerationError
from .generator import EnumerableGenerator
from .paths import AliasPathResolver, DirectoryPathResolver
from .schema import GenerationRequest
from .template import TemplateRenderingError

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_INVALID_INPUT = 2


def _parse_key_value_pairs(pairs: Iterable[str]) -> dict[str, str]:
    aliases: dict[str, str] = {}
    for pair in pairs:
        if "=" not in pair:
            raise argparse.ArgumentTypeError(
                f"invalid alias '{pair}'. Expected NAME=PATH syntax."
            )
        key, value = pair.split("=", 1)
        key = key.strip()
        if not key:
            raise argparse.ArgumentTypeError("alias names must not be empty")
        aliases[key] = value
    return aliases


def _request_arguments(config: GeneratorConfig) -> argparse.ArgumentParser:
    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument("class_id", help="Lower-case class id, e.g. 'order-item' generates OrderItem")
    parent.add_argument(
        "-V",
        "--values",
        required=True,
        help="Constant names separated by commas, e.g. 'free, paid'",
    )
    parent.add_argument("--namespace", help=f"Namespace of the generated class (default: {config.namespace})")
    parent.add_argument("--start", type=int, default=0, help="Value of the first constant")
    parent.add_argument("--sort", action="store_true", help="Sort constant names before numbering")
    parent.add_argument("--author", help="Author written into the doc block")
    parent.add_argument("--description", help="Class description")
    return parent


def build_parser(config: GeneratorConfig | None = None) -> argparse.ArgumentParser:
    config = config or GeneratorConfig.from_env()
    parser = argparse.ArgumentParser(description="Generate enumerable classes from a list of names")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    subparsers = parser.add_subparsers(dest="command", required=True)
    request_arguments = _request_arguments(config)

    generate_parser = subparsers.add_parser(
        "generate", parents=[request_arguments], help="write the enumerable class to disk"
    )
    generate_parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=Path.cwd(),
        help="Root directory; namespace segments become sub-directories",
    )
    generate_parser.add_argument(
        "-a",
        "--alias",
        metavar="NAME=PATH",
        action="append",
        default=[],
        help="Map a leading namespace segment to a directory",
    )
    generate_parser.add_argument(
        "--strict-aliases",
        action="store_true",
        help="Fail when the namespace does not start with a registered alias",
    )
    generate_parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Overwrite an existing file instead of failing",
    )

    subparsers.add_parser(
        "preview", parents=[request_arguments], help="print the enumerable class to stdout"
    )

    return parser


def _build_request(args: argparse.Namespace) -> GenerationRequest:
    return GenerationRequest(
        class_id=args.class_id,
        values=args.values,
        namespace=args.namespace,
        author=args.author,
        description=args.description,
        start=args.start,
        sort=args.sort,
    )


def _report_validation_error(exc: ValidationError) -> None:
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "request"
        print(f"error: {location}: {error['msg']}", file=sys.stderr)


def _handle_generate(args: argparse.Namespace, config: GeneratorConfig) -> int:
    request = _build_request(args)
    base = DirectoryPathResolver(args.directory)
    aliases = _parse_key_value_pairs(args.alias)
    if args.strict_aliases:
        resolver = AliasPathResolver(aliases)
    elif aliases:
        resolver = AliasPathResolver(aliases, fallback=base)
    else:
        resolver = base
    generator = EnumerableGenerator(resolver, config)

    files = generator.generate(request)
    written = generator.save(files, force=args.force)
    for code_file in files:
        state = "written" if code_file in written else "unchanged"
        print(f"{code_file.path} ({state})")
    print(generator.success_message)
    return EXIT_OK


def _handle_preview(args: argparse.Namespace, config: GeneratorConfig) -> int:
    request = _build_request(args)
    generator = EnumerableGenerator(config=config)
    sys.stdout.write(generator.render(request))
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    config = GeneratorConfig.from_env()
    parser = build_parser(config)
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    handlers = {"generate": _handle_generate, "preview": _handle_preview}
    handler = handlers.get(args.command)
    if handler is None:
        parser.error("no command provided")
        return EXIT_INVALID_INPUT

    try:
        return handler(args, config)
    except ValidationError as exc:
        _report_validation_error(exc)
        return EXIT_INVALID_INPUT
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_INVALID_INPUT
    except (OSError, GenerationError, TemplateRenderingError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_IO_ERROR


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
