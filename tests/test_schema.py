"""Discovery of the .proto files to compile."""
import pathlib

import pytest

from clouddatastore.protobuild.exceptions import SchemaError
from clouddatastore.protobuild.generator import well_known_include
from clouddatastore.protobuild.schema import parse_imports
from clouddatastore.protobuild.schema import SchemaTree


def write(root: pathlib.Path, name: str, text: str):
    path = root.joinpath(name)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return path


def test_parse_imports():
    text = """
    syntax = "proto3";
    // import "commented/out.proto";
    import "a/b.proto";
    import public "c/d.proto";
    /* import "block/comment.proto";
       still a comment */
    import weak "e/f.proto";
    option java_package = "com.example.import"; // "import \\"x.proto\\";"
    """
    assert parse_imports(text) == ("a/b.proto", "c/d.proto", "e/f.proto")


def test_parse_imports_unterminated_comment():
    with pytest.raises(SchemaError):
        parse_imports('import "a.proto";\n/* never closed')


def test_missing_root(tmp_path):
    with pytest.raises(SchemaError):
        SchemaTree(tmp_path / "missing")


def test_collect_closure(tmp_path):
    include = tmp_path / "include"
    write(include, "google/protobuf/timestamp.proto", 'syntax = "proto3";')
    root = tmp_path / "schema"
    write(root, "pkg/v1/service.proto", 'import "pkg/v1/types.proto";\nimport "google/api/annotations.proto";')
    write(root, "pkg/v1/types.proto", 'import "google/protobuf/timestamp.proto";\nimport "pkg/v1/common.proto";')
    write(root, "pkg/v1/common.proto", 'syntax = "proto3";')
    write(root, "pkg/v1/unused.proto", 'syntax = "proto3";')
    # A provided file's own imports are not followed.
    write(root, "google/api/annotations.proto", 'import "google/api/http.proto";')

    tree = SchemaTree(root, include_paths=[include])
    fileset = tree.collect(["pkg/v1/service.proto"])

    assert [proto.name for proto in fileset.compiled] == [
        "pkg/v1/common.proto",
        "pkg/v1/service.proto",
        "pkg/v1/types.proto",
    ]
    assert [proto.name for proto in fileset.provided] == [
        "google/api/annotations.proto",
        "google/protobuf/timestamp.proto",
    ]
    assert fileset.compiled[0].module_name == "pkg.v1.common_pb2"
    assert fileset.python_packages() == ("pkg.v1",)
    assert set(fileset.digests()) == {proto.name for proto in fileset.compiled}


def test_collect_is_independent_of_entry_order(tmp_path):
    write(tmp_path, "a.proto", 'import "b.proto";')
    write(tmp_path, "b.proto", 'import "a.proto";')
    tree = SchemaTree(tmp_path, provided_packages=())
    assert tree.collect(["a.proto"]) == tree.collect(["b.proto", "a.proto"])


def test_collect_reports_unresolved_import(tmp_path):
    write(tmp_path, "pkg/a.proto", 'import "pkg/missing.proto";')
    tree = SchemaTree(tmp_path)
    with pytest.raises(SchemaError, match="pkg/a.proto imports pkg/missing.proto"):
        tree.collect(["pkg/a.proto"])


def test_collect_rejects_bad_entries(tmp_path):
    write(tmp_path, "google/type/latlng.proto", 'syntax = "proto3";')
    tree = SchemaTree(tmp_path)
    with pytest.raises(SchemaError):
        tree.collect([])
    with pytest.raises(SchemaError):
        tree.collect(["google/type/latlng.proto"])
    with pytest.raises(SchemaError):
        tree.collect(["../outside.proto"])
    with pytest.raises(SchemaError):
        tree.collect(["missing.proto"])


@pytest.mark.protobuild
def test_datastore_test_schema():
    root = pathlib.Path(__file__).parent / "data" / "googleapis"
    tree = SchemaTree(root, include_paths=(well_known_include(),))
    fileset = tree.collect(["google/datastore/v1/datastore.proto"])
    assert [proto.name for proto in fileset.compiled] == [
        "google/datastore/v1/datastore.proto",
        "google/datastore/v1/entity.proto",
        "google/datastore/v1/query.proto",
    ]
