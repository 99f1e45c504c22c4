from __future__ import annotations

__all__ = (
    "configuration",
    "parser",
    "ProtobuildConfiguration",
)

import argparse
import dataclasses
import functools
import logging
import os
import pathlib
import typing

from .exceptions import ConfigurationError
from .schema import DEFAULT_PROVIDED_PACKAGES

logger = logging.getLogger(__name__)
logger.debug("Importing {}".format(__name__))

DEFAULT_SCHEMA_ROOT = "proto/googleapis"
DEFAULT_PROTOS = ("google/datastore/v1/datastore.proto",)
DEFAULT_OUTPUT = "src/clouddatastore/_generated"
DEFAULT_PACKAGE = "clouddatastore._generated"


@functools.cache
def parser(add_help=False):
    """Get the argument parser for protobuild options shared by all subcommands.

    By default, the returned ArgumentParser is created with ``add_help=False``
    to avoid conflicts when used as a *parent* for a parser more local to the caller.
    If *add_help* is provided, it is passed along to the ArgumentParser created
    in this function.

    See Also:
         https://docs.python.org/3/library/argparse.html#parents
    """
    from .. import __version__ as _version

    _parser = argparse.ArgumentParser(add_help=add_help)

    _parser.add_argument("--version", action="version", version=f"clouddatastore version {_version}")

    _parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Optionally configure console logging to the indicated level.",
    )

    _parser.add_argument(
        "--project-dir",
        metavar="PATH",
        type=pathlib.Path,
        default=None,
        help="Repository root that relative paths are resolved against. (Default: current directory)",
    )

    _parser.add_argument(
        "--schema-root",
        metavar="PATH",
        type=pathlib.Path,
        default=None,
        help=f"Directory containing the vendored .proto tree. (Default: {DEFAULT_SCHEMA_ROOT})",
    )

    _parser.add_argument(
        "--proto",
        dest="protos",
        action="append",
        metavar="NAME",
        help="Entry proto to compile, relative to the schema root. May be repeated. "
        f"(Default: {' '.join(DEFAULT_PROTOS)})",
    )

    _parser.add_argument(
        "--output",
        metavar="PATH",
        type=pathlib.Path,
        default=None,
        help=f"Directory that is replaced with the generated bindings. (Default: {DEFAULT_OUTPUT})",
    )

    _parser.add_argument(
        "--package",
        type=str,
        default=None,
        help=f"Python package that the output directory is imported as. (Default: {DEFAULT_PACKAGE})",
    )

    return _parser


@dataclasses.dataclass(frozen=True)
class ProtobuildConfiguration:
    """Module configuration information.

    Relative paths are interpreted relative to *project_dir*.

    See also:
        * :py:func:`clouddatastore.protobuild.configuration.configuration()`
        * :py:func:`clouddatastore.protobuild.configuration.parser()`
    """

    project_dir: pathlib.Path = dataclasses.field(default_factory=pathlib.Path.cwd)
    """Root of the repository holding the schema submodule and the bindings."""

    schema_root: pathlib.Path = pathlib.Path(DEFAULT_SCHEMA_ROOT)
    """Vendored schema tree (the submodule working tree)."""

    protos: typing.Tuple[str, ...] = DEFAULT_PROTOS
    """Entry protos, as import names relative to *schema_root*."""

    output: pathlib.Path = pathlib.Path(DEFAULT_OUTPUT)
    """Directory replaced wholesale by each regeneration."""

    package: str = DEFAULT_PACKAGE
    """Dotted Python package name under which *output* is importable."""

    provided_packages: typing.Tuple[str, ...] = DEFAULT_PROVIDED_PACKAGES
    """Schema directories compiled elsewhere (``protobuf``, ``googleapis-common-protos``)."""

    def __post_init__(self):
        # Normalize types for values that may come from the command line or from kwargs.
        object.__setattr__(self, "project_dir", pathlib.Path(self.project_dir).resolve())
        object.__setattr__(self, "schema_root", pathlib.Path(self.schema_root))
        object.__setattr__(self, "output", pathlib.Path(self.output))
        if isinstance(self.protos, str):
            object.__setattr__(self, "protos", (self.protos,))
        else:
            object.__setattr__(self, "protos", tuple(self.protos))
        object.__setattr__(self, "provided_packages", tuple(self.provided_packages))

        if len(self.protos) == 0:
            raise ConfigurationError("At least one entry proto is required.")
        if not self.package or not all(part.isidentifier() for part in self.package.split(".")):
            raise ConfigurationError(f"{self.package!r} is not a valid Python package name.")
        if self.output_path == self.project_dir or self.output_path in self.project_dir.parents:
            raise ConfigurationError(f"Refusing to use {self.output_path} as the generated output directory.")

    @property
    def schema_path(self) -> pathlib.Path:
        return self.project_dir.joinpath(self.schema_root).resolve()

    @property
    def output_path(self) -> pathlib.Path:
        return self.project_dir.joinpath(self.output).resolve()


def configuration(*args, **kwargs) -> ProtobuildConfiguration:
    """Get a protobuild configuration.

    With no arguments, the command line parser is invoked to try to build a new
    configuration.

    If arguments are provided, try to construct a `ProtobuildConfiguration` directly.
    """
    # Warning: (bool(args) or bool(kwargs)) != (args or kwargs).
    # Using `len` for readability.
    if len(args) > 0 or len(kwargs) > 0:
        config = ProtobuildConfiguration(*args, **kwargs)
    else:
        namespace, _ = parser().parse_known_args()
        config = from_namespace(namespace)
    logger.debug(f"Configuration: {config}")
    return config


def from_namespace(namespace: argparse.Namespace) -> ProtobuildConfiguration:
    """Build a configuration from parsed command line options, keeping defaults for omitted options."""
    options = {}
    for name in ("project_dir", "schema_root", "protos", "output", "package"):
        value = getattr(namespace, name, None)
        if value is not None:
            options[name] = value
    if "project_dir" not in options:
        options["project_dir"] = os.getcwd()
    return ProtobuildConfiguration(**options)
