"""Generate Python bindings from the vendored schema.

Regeneration is total: the output directory is replaced as a whole, so it only
ever holds modules for the current schema. The new tree is assembled in a
staging directory beside the output and renamed into place at the end. Until
that rename, the previous bindings are untouched, and any failure discards the
staging directory.

Generation is deterministic. ``protoc`` output depends only on its input and its
version, the post-processing here is a pure function of that output, and the
manifest records no timestamps. Regenerating from an unchanged schema with the
same ``grpcio-tools`` produces byte-identical files.
"""

from __future__ import annotations

__all__ = (
    "MANIFEST_FILENAME",
    "check",
    "generate",
    "GenerationResult",
    "package_directories",
    "rewrite_imports",
    "well_known_include",
)

import dataclasses
import hashlib
import importlib.metadata
import json
import logging
import os
import pathlib
import re
import shutil
import tempfile
import typing

from . import _lock
from .configuration import ProtobuildConfiguration
from .exceptions import GenerationError
from .exceptions import ProtobuildUnavailable
from .schema import SchemaFileSet
from .schema import SchemaTree
from .submodule import revision

logger = logging.getLogger(__name__)
logger.debug("Importing {}".format(__name__))

MANIFEST_FILENAME = "_manifest.json"
"""Name of the manifest at the root of the generated tree (module constant)."""

_init_content = "# Generated by clouddatastore.protobuild. DO NOT EDIT.\n"


def _protoc():
    try:
        from grpc_tools import protoc
    except ImportError as e:
        raise ProtobuildUnavailable(
            "Generating bindings requires grpcio-tools. Install with `pip install clouddatastore[protobuild]`."
        ) from e
    return protoc


def well_known_include() -> pathlib.Path:
    """Directory of the ``google/protobuf`` well-known types bundled with grpcio-tools."""
    protoc = _protoc()
    return pathlib.Path(protoc.__file__).resolve().parent.joinpath("_proto")


def _tools_version() -> str:
    return importlib.metadata.version("grpcio-tools")


def _sha256(path: pathlib.Path) -> str:
    return hashlib.sha256(path.read_bytes()).hexdigest()


@dataclasses.dataclass(frozen=True)
class GenerationResult:
    output: pathlib.Path
    """The (replaced) output directory."""

    files: typing.Tuple[str, ...]
    """Paths of the generated files relative to *output*, sorted, including the manifest."""

    manifest: dict


def _schema(configuration: ProtobuildConfiguration) -> SchemaFileSet:
    tree = SchemaTree(
        configuration.schema_path,
        include_paths=(well_known_include(),),
        provided_packages=configuration.provided_packages,
    )
    return tree.collect(configuration.protos)


def rewrite_imports(text: str, fileset: SchemaFileSet, package: str) -> str:
    """Relocate references between generated modules into *package*.

    protoc writes absolute imports that assume the generated tree is on
    ``sys.path`` (``from google.datastore.v1 import entity_pb2``). Only modules
    compiled in this run are relocated. Imports of provided modules, such as
    ``google.protobuf`` or ``google.type``, are left alone.
    """
    for proto in fileset.compiled:
        parent, _, basename = proto.module_name.rpartition(".")
        if parent:
            text = re.sub(
                rf"^(\s*)from {re.escape(parent)} import {basename}\b",
                rf"\1from {package}.{parent} import {basename}",
                text,
                flags=re.MULTILINE,
            )
        else:
            text = re.sub(
                rf"^(\s*)import {basename}\b",
                rf"\1from {package} import {basename}",
                text,
                flags=re.MULTILINE,
            )
        # Module name passed to the descriptor builder, which sets __module__ on message classes.
        text = re.sub(
            rf"(['\"]){re.escape(proto.module_name)}\1",
            rf"\g<1>{package}.{proto.module_name}\g<1>",
            text,
        )
    return text


def _run_protoc(fileset: SchemaFileSet, schema_root: pathlib.Path, destination: pathlib.Path):
    protoc = _protoc()
    args = [
        "grpc_tools.protoc",
        f"--proto_path={schema_root}",
        f"--proto_path={well_known_include()}",
        f"--python_out={destination}",
        f"--pyi_out={destination}",
        f"--grpc_python_out={destination}",
    ]
    args.extend(str(proto.path) for proto in fileset.compiled)
    logger.debug(f"protoc arguments: {args[1:]}")
    status = protoc.main(args)
    if status != 0:
        raise GenerationError(f"protoc exited with status {status}. See its messages above.")


def package_directories(root: pathlib.Path, fileset: SchemaFileSet) -> typing.List[pathlib.Path]:
    """Directories under *root* that hold generated packages, parents before children.

    Includes *root* itself and every intermediate package, such as ``google``
    for ``google.datastore.v1``.
    """
    names = {""}
    for package in fileset.python_packages():
        parts = package.split(".") if package else []
        names.update(".".join(parts[:i]) for i in range(1, len(parts) + 1))
    return [root.joinpath(*name.split(".")) for name in sorted(names)]


def _assemble(
    fileset: SchemaFileSet, raw: pathlib.Path, staged: pathlib.Path, configuration: ProtobuildConfiguration
) -> dict:
    """Post-process protoc output from *raw* into the final tree at *staged*. Return the manifest."""
    staged.mkdir()
    sources = sorted(path for path in raw.rglob("*") if path.is_file())
    if not sources:
        raise GenerationError("protoc produced no output.")
    for source in sources:
        relative = source.relative_to(raw)
        target = staged.joinpath(relative)
        target.parent.mkdir(parents=True, exist_ok=True)
        if source.suffix in (".py", ".pyi"):
            text = source.read_text(encoding="utf-8")
            target.write_text(rewrite_imports(text, fileset, configuration.package), encoding="utf-8")
        else:
            shutil.copyfile(source, target)

    for directory in package_directories(staged, fileset):
        directory.mkdir(parents=True, exist_ok=True)
        init = directory.joinpath("__init__.py")
        if not init.exists():
            init.write_text(_init_content, encoding="utf-8")

    outputs = {
        path.relative_to(staged).as_posix(): _sha256(path)
        for path in sorted(staged.rglob("*"))
        if path.is_file()
    }
    manifest = {
        "generator": "clouddatastore.protobuild",
        "grpcio_tools": _tools_version(),
        "package": configuration.package,
        "schema_revision": revision(configuration.schema_path),
        "sources": fileset.digests(),
        "outputs": outputs,
    }
    staged.joinpath(MANIFEST_FILENAME).write_text(json.dumps(manifest, indent=2, sort_keys=True) + "\n")
    return manifest


def _install(staged: pathlib.Path, output: pathlib.Path):
    """Replace *output* with *staged*. Caller holds the directory lock."""
    backup = None
    if output.exists():
        if not output.joinpath(MANIFEST_FILENAME).exists() and any(output.iterdir()):
            raise GenerationError(
                f"{output} exists and was not generated by clouddatastore.protobuild. Refusing to replace it."
            )
        backup = output.with_name(f".{output.name}.previous-{os.getpid()}")
        output.rename(backup)
    try:
        staged.rename(output)
    except OSError as e:
        if backup is not None:
            backup.rename(output)
        raise GenerationError(f"Could not move generated bindings into {output}.") from e
    if backup is not None:
        shutil.rmtree(backup)


def generate(configuration: ProtobuildConfiguration) -> GenerationResult:
    """Regenerate the bindings for *configuration*.

    Raises:
        ProtobuildUnavailable: if grpcio-tools is not installed.
        SchemaError: if the schema tree is missing or incomplete.
        GenerationError: if protoc rejects the schema, or the output cannot be replaced.
            The previous output is left in place.
    """
    output = configuration.output_path
    fileset = _schema(configuration)
    logger.info(f"Generating bindings for {len(fileset.compiled)} protos into {output}.")

    output.parent.mkdir(parents=True, exist_ok=True)
    try:
        with _lock.scoped_directory_lock(output.parent):
            workdir = pathlib.Path(tempfile.mkdtemp(dir=output.parent, prefix=".protobuild-"))
            try:
                raw = workdir.joinpath("raw")
                raw.mkdir()
                _run_protoc(fileset, configuration.schema_path, raw)
                staged = workdir.joinpath(output.name)
                manifest = _assemble(fileset, raw, staged, configuration)
                files = tuple(sorted(path.relative_to(staged).as_posix() for path in staged.rglob("*") if path.is_file()))
                _install(staged, output)
            finally:
                shutil.rmtree(workdir, ignore_errors=True)
    except _lock.LockException as e:
        raise GenerationError(f"Another regeneration is in progress in {output.parent}.") from e

    logger.info(f"Wrote {len(files)} files to {output}.")
    return GenerationResult(output=output, files=files, manifest=manifest)


def check(configuration: ProtobuildConfiguration) -> typing.List[str]:
    """Compare the generated bindings with the current schema.

    Returns:
        Reasons the bindings are stale, sorted. An empty list means the bindings are current.

    Raises:
        SchemaError: if the current schema cannot be collected.
    """
    output = configuration.output_path
    manifest_path = output.joinpath(MANIFEST_FILENAME)
    if not manifest_path.exists():
        return [f"{output}: no generated bindings (missing {MANIFEST_FILENAME})"]
    try:
        manifest = json.loads(manifest_path.read_text())
    except ValueError as e:
        return [f"{manifest_path}: unreadable manifest ({e})"]

    reasons = []
    if manifest.get("package") != configuration.package:
        reasons.append(f"package: generated for {manifest.get('package')!r}, configured {configuration.package!r}")

    current = _schema(configuration).digests()
    recorded: dict = manifest.get("sources", {})
    for name in sorted(set(current) | set(recorded)):
        if name not in recorded:
            reasons.append(f"{name}: added to schema")
        elif name not in current:
            reasons.append(f"{name}: removed from schema")
        elif current[name] != recorded[name]:
            reasons.append(f"{name}: changed since generation")

    outputs: dict = manifest.get("outputs", {})
    for name, digest in outputs.items():
        path = output.joinpath(name)
        if not path.is_file():
            reasons.append(f"{name}: missing from output")
        elif _sha256(path) != digest:
            reasons.append(f"{name}: modified since generation")
    for path in output.rglob("*"):
        name = path.relative_to(output).as_posix()
        if path.is_file() and name != MANIFEST_FILENAME and name not in outputs and "__pycache__" not in path.parts:
            reasons.append(f"{name}: not produced by generation")
    return sorted(reasons)
