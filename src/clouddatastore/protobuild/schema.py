"""Discover the .proto files that make up a schema.

The binding generator compiles a set of *entry* protos together with every
file they import, directly or indirectly, from the vendored schema tree.
:py:class:`SchemaTree` walks the ``import`` statements to find that set and
reports anything missing before ``protoc`` ever runs.

Some imported files belong to *provided packages*: their Python modules ship
with :py:mod:`google.protobuf` and ``googleapis-common-protos``, so they are
used as include files but never compiled.
"""

from __future__ import annotations

__all__ = (
    "DEFAULT_PROVIDED_PACKAGES",
    "ProtoFile",
    "SchemaFileSet",
    "SchemaTree",
)

import dataclasses
import hashlib
import logging
import os
import pathlib
import re
import typing

from .exceptions import SchemaError

logger = logging.getLogger(__name__)
logger.debug("Importing {}".format(__name__))

DEFAULT_PROVIDED_PACKAGES = (
    "google/api",
    "google/longrunning",
    "google/protobuf",
    "google/rpc",
    "google/type",
)
"""Schema directories whose Python modules are installed as dependencies."""

_import_statement = re.compile(r'^\s*import\s+(?:(?:public|weak)\s+)?"(?P<name>[^"]+)"\s*;', re.MULTILINE)


def _strip_comments(text: str) -> str:
    """Remove ``//`` and ``/* */`` comments that are not inside string literals."""
    out = []
    i = 0
    quote = None
    length = len(text)
    while i < length:
        char = text[i]
        if quote is not None:
            out.append(char)
            if char == "\\" and i + 1 < length:
                out.append(text[i + 1])
                i += 1
            elif char == quote or char == "\n":
                quote = None
        elif char in "\"'":
            quote = char
            out.append(char)
        elif text.startswith("//", i):
            end = text.find("\n", i)
            i = length if end < 0 else end
            continue
        elif text.startswith("/*", i):
            end = text.find("*/", i + 2)
            if end < 0:
                raise SchemaError("Unterminated block comment.")
            # Keep line structure so that error positions stay meaningful.
            out.append("\n" * text.count("\n", i, end))
            i = end + 2
            continue
        else:
            out.append(char)
        i += 1
    return "".join(out)


def parse_imports(text: str) -> typing.Tuple[str, ...]:
    """Get the import names declared in the source of a .proto file, in order."""
    return tuple(match.group("name") for match in _import_statement.finditer(_strip_comments(text)))


@dataclasses.dataclass(frozen=True)
class ProtoFile:
    """A schema file, identified by its import name."""

    name: str
    """Import name, relative to its include directory (POSIX separators)."""

    path: pathlib.Path
    """Absolute location in the local filesystem."""

    provided: bool = False
    """True if the Python module for this file is supplied by an installed package."""

    @property
    def package_directory(self) -> str:
        return self.name.rpartition("/")[0]

    @property
    def module_name(self) -> str:
        """Dotted name of the ``_pb2`` module protoc generates for this file."""
        return self.name[: -len(".proto")].replace("/", ".") + "_pb2"

    def digest(self) -> str:
        return hashlib.sha256(self.path.read_bytes()).hexdigest()


@dataclasses.dataclass(frozen=True)
class SchemaFileSet:
    """The closure of a set of entry protos.

    Both sequences are sorted by import name.
    """

    compiled: typing.Tuple[ProtoFile, ...]
    provided: typing.Tuple[ProtoFile, ...]

    def digests(self) -> typing.Dict[str, str]:
        """Map the import name of each compiled file to the SHA-256 of its content."""
        return {proto.name: proto.digest() for proto in self.compiled}

    def python_packages(self) -> typing.Tuple[str, ...]:
        """Dotted Python package names that the generated modules will occupy.

        The top level is represented by the empty string.
        """
        return tuple(sorted({proto.package_directory.replace("/", ".") for proto in self.compiled}))


class SchemaTree:
    """A directory of .proto files, such as the vendored googleapis checkout.

    Args:
        root: Directory that import names are resolved against.
        include_paths: Additional directories to resolve imports against, after *root*.
            Files found only here are never compiled.
        provided_packages: Directories (relative to any include directory)
            whose files are resolved but not compiled.

    Raises:
        SchemaError: if *root* is not an existing directory.
    """

    def __init__(
        self,
        root: typing.Union[str, os.PathLike],
        include_paths: typing.Iterable[typing.Union[str, os.PathLike]] = (),
        provided_packages: typing.Iterable[str] = DEFAULT_PROVIDED_PACKAGES,
    ):
        self.root = pathlib.Path(root).resolve()
        if not self.root.is_dir():
            raise SchemaError(f"Schema root {self.root} does not exist. Has the submodule been synchronized?")
        self.include_paths = tuple(pathlib.Path(path).resolve() for path in include_paths)
        self.provided_packages = tuple(package.strip("/") for package in provided_packages)

    def __repr__(self):
        return f"<{self.__class__.__qualname__} root={self.root}>"

    def is_provided(self, name: str) -> bool:
        return any(name.startswith(package + "/") for package in self.provided_packages)

    def resolve(self, name: str) -> ProtoFile:
        """Locate the file for an import name.

        Raises:
            SchemaError: if the file is not in the tree or any include path.
        """
        if name.startswith("/") or ".." in pathlib.PurePosixPath(name).parts or not name.endswith(".proto"):
            raise SchemaError(f"Invalid proto import name: {name!r}")
        candidate = self.root.joinpath(name)
        if candidate.is_file():
            return ProtoFile(name=name, path=candidate, provided=self.is_provided(name))
        for include in self.include_paths:
            candidate = include.joinpath(name)
            if candidate.is_file():
                return ProtoFile(name=name, path=candidate, provided=True)
        raise SchemaError(f"{name} not found in {self.root} or include paths {[str(p) for p in self.include_paths]}")

    def collect(self, entry_protos: typing.Iterable[str]) -> SchemaFileSet:
        """Resolve the transitive imports of *entry_protos*.

        Raises:
            SchemaError: if no entry protos are given, if an entry proto belongs to a
                provided package, or if any file (or import) cannot be resolved or read.
        """
        pending = list(entry_protos)
        if not pending:
            raise SchemaError("No entry protos to compile.")
        for name in pending:
            if self.is_provided(name):
                raise SchemaError(f"Entry proto {name} belongs to a provided package and would not be compiled.")

        found: typing.Dict[str, ProtoFile] = {}
        importer: typing.Dict[str, str] = {}
        while pending:
            name = pending.pop()
            if name in found:
                continue
            try:
                proto = self.resolve(name)
            except SchemaError as e:
                if name in importer:
                    raise SchemaError(f"{importer[name]} imports {name}, which cannot be resolved.") from e
                raise
            found[name] = proto
            if proto.provided:
                # Provided files are compiled elsewhere. Their own imports are, too.
                continue
            try:
                text = proto.path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                raise SchemaError(f"Could not read {proto.path}.") from e
            try:
                imports = parse_imports(text)
            except SchemaError as e:
                raise SchemaError(f"{name}: {e}") from e
            for imported in imports:
                importer.setdefault(imported, name)
                pending.append(imported)

        compiled = tuple(sorted((p for p in found.values() if not p.provided), key=lambda p: p.name))
        provided = tuple(sorted((p for p in found.values() if p.provided), key=lambda p: p.name))
        logger.debug(f"Schema closure: {len(compiled)} compiled, {len(provided)} provided.")
        return SchemaFileSet(compiled=compiled, provided=provided)
