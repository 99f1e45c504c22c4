"""Regenerate the Datastore protobuf bindings.

The bindings in ``clouddatastore._generated`` are build output. They are
produced from the ``proto/googleapis`` submodule in two explicit steps:

Usage:
    python3 -m clouddatastore.protobuild sync
    python3 -m clouddatastore.protobuild generate

or both at once with ``generate --sync``. ``check`` reports whether the
committed bindings still match the vendored schema.

Generation needs the optional ``protobuild`` dependencies (``grpcio-tools``)::

    pip install clouddatastore[protobuild]

Nothing in this package runs as part of installing or importing
:py:mod:`clouddatastore`, because it rewrites tracked source files.

The same operations are available from Python through
:py:func:`sync_submodule`, :py:func:`generate` and :py:func:`check`, configured
with a :py:class:`ProtobuildConfiguration`.
"""

from __future__ import annotations

__all__ = (
    "check",
    "configuration",
    "generate",
    "main",
    "make_parser",
    "parser",
    "ProtobuildConfiguration",
    "sync_submodule",
)

import argparse
import logging
import sys
import typing

from ..exceptions import CloudDatastoreError
from ..logger import configure_console_logging
from .configuration import configuration
from .configuration import from_namespace
from .configuration import parser
from .configuration import ProtobuildConfiguration
from .generator import check
from .generator import generate
from .submodule import sync_submodule

logger = logging.getLogger(__name__)
logger.debug("Importing {}".format(__name__))


def make_parser(prog: str = "python -m clouddatastore.protobuild") -> argparse.ArgumentParser:
    """Make the command line parser, with one sub-parser per step.

    The shared options from :py:func:`parser` belong to each sub-command, so they
    follow the command name: ``generate --log-level=DEBUG``.
    """
    from .. import __version__ as _version

    _parser = argparse.ArgumentParser(
        prog=prog,
        description="Synchronize the vendored Datastore schema and regenerate its Python bindings.",
    )
    _parser.add_argument("--version", action="version", version=f"clouddatastore version {_version}")
    commands = _parser.add_subparsers(dest="command", metavar="command", required=True)
    commands.add_parser(
        "sync", help="Check out the latest upstream commit of the schema submodule.", parents=[parser()]
    )
    _generate = commands.add_parser(
        "generate", help="Replace the generated bindings with output for the current schema.", parents=[parser()]
    )
    _generate.add_argument("--sync", action="store_true", help="Synchronize the schema submodule first.")
    commands.add_parser(
        "check", help="Report whether the generated bindings match the current schema.", parents=[parser()]
    )
    return _parser


def _sync(config: ProtobuildConfiguration):
    result = sync_submodule(config)
    if result.changed:
        print(f"{result.name}: {result.previous[:12]} -> {result.current[:12]}")
    else:
        print(f"{result.name}: already at {result.current[:12]}")


def main(argv: typing.Optional[typing.Sequence[str]] = None) -> int:
    """Run the command line interface. Return the process exit status."""
    _parser = make_parser()
    args = _parser.parse_args(argv)

    if args.log_level is not None:
        configure_console_logging(args.log_level)

    try:
        config = from_namespace(args)
        logger.debug(f"Configuration: {config}")
        if args.command == "sync":
            _sync(config)
        elif args.command == "generate":
            if args.sync:
                _sync(config)
            result = generate(config)
            print(f"Generated {len(result.files)} files in {result.output}")
        elif args.command == "check":
            reasons = check(config)
            for reason in reasons:
                print(reason)
            if reasons:
                print(f"Bindings in {config.output_path} are stale.", file=sys.stderr)
                return 1
            print(f"Bindings in {config.output_path} are current.")
    except CloudDatastoreError as e:
        logger.exception(f"{args.command} failed.")
        print(f"{_parser.prog}: error: {e}", file=sys.stderr)
        return 1
    return 0
