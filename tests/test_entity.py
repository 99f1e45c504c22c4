"""Building entities and reading typed properties back."""
import dataclasses
import datetime

import pytest

v1 = pytest.importorskip("clouddatastore.v1", reason="requires generated bindings")

from clouddatastore import entity as _entity  # noqa: E402
from clouddatastore.exceptions import EntityConversionError  # noqa: E402
from clouddatastore.exceptions import EntityValueError  # noqa: E402
from clouddatastore.exceptions import KeyPathError  # noqa: E402


@dataclasses.dataclass
class Book:
    kind = "Book"

    name: str
    title: str
    published: datetime.datetime
    tags: list
    in_print: bool = True
    summary: str = None

    @classmethod
    def from_entity(cls, entity):
        key = _entity.req_key(entity, cls.kind)
        return cls(
            name=_entity.key_name(key),
            title=_entity.req_string(entity, "title"),
            published=_entity.req_timestamp(entity, "published"),
            tags=_entity.req_string_array(entity, "tags"),
            in_print=_entity.req_bool(entity, "in_print"),
            summary=_entity.opt_string(entity, "summary"),
        )

    def to_entity(self):
        return (
            _entity.EntityBuilder()
            .with_key_name(self.kind, self.name)
            .add_string("title", self.title)
            .add_timestamp("published", self.published)
            .add_string_array("tags", self.tags)
            .add_bool("in_print", self.in_print)
            .opt_string("summary", self.summary, indexed=False)
            .build()
        )


published = datetime.datetime(2021, 5, 4, 12, 30, 15, 250000, tzinfo=datetime.timezone.utc)


def test_book_model():
    book = Book(name="book_one", title="Book One", published=published, tags=["fiction", "new"])
    assert isinstance(book, _entity.EntityModel)
    entity = book.to_entity()
    assert "summary" not in entity.properties
    assert Book.from_entity(entity) == book

    book.summary = "A long description."
    entity = book.to_entity()
    assert entity.properties["summary"].exclude_from_indexes
    assert not entity.properties["title"].exclude_from_indexes
    assert Book.from_entity(entity) == book


def test_keys():
    key = _entity.name_key("Book", "book_one")
    assert _entity.key_kind(key) == "Book"
    assert _entity.key_name(key) == "book_one"
    with pytest.raises(KeyPathError, match="Key has no id"):
        _entity.key_id(key)

    child = _entity.id_key("Chapter", 3, parent=key)
    assert [element.kind for element in child.path] == ["Book", "Chapter"]
    assert _entity.key_kind(child) == "Chapter"
    assert _entity.key_id(child) == 3
    with pytest.raises(KeyPathError, match="Key has no name"):
        _entity.key_name(child)
    # The parent key is not modified.
    assert len(key.path) == 1

    shelved = _entity.name_key("Book", "b1", parent=_entity.name_key("Shelf", "s1"))
    assert _entity.key_kind(shelved) == "Book"
    assert _entity.key_name(shelved) == "b1"
    assert shelved.path[0].kind == "Shelf"
    entity = _entity.EntityBuilder().with_key(shelved).build()
    assert _entity.req_key(entity, "Book") == shelved
    with pytest.raises(EntityValueError, match="Invalid Key Kind"):
        _entity.req_key(entity, "Shelf")

    with pytest.raises(KeyPathError, match="Key has no path"):
        _entity.key_kind(v1.Key())


def test_req_key():
    entity = _entity.EntityBuilder().with_key_name("Book", "book_one").build()
    assert _entity.key_name(_entity.req_key(entity, "Book")) == "book_one"
    with pytest.raises(EntityValueError, match="Invalid Key Kind. Expected 'Author'."):
        _entity.req_key(entity, "Author")
    with pytest.raises(EntityValueError, match="Missing Key"):
        _entity.req_key(v1.Entity(), "Book")
    keyless = v1.Entity()
    keyless.key.SetInParent()
    with pytest.raises(EntityValueError, match="Key has no path"):
        _entity.req_key(keyless, "Book")


def test_to_value():
    assert _entity.to_value(None).WhichOneof("value_type") == "null_value"
    assert _entity.to_value(True).boolean_value is True
    assert _entity.to_value(True).WhichOneof("value_type") == "boolean_value"
    assert _entity.to_value(7).integer_value == 7
    assert _entity.to_value(0.5).double_value == 0.5
    assert _entity.to_value("text").string_value == "text"
    assert _entity.to_value(b"\x00\x01").blob_value == b"\x00\x01"
    key = _entity.name_key("Book", "book_one")
    assert _entity.to_value(key).key_value == key
    nested = _entity.EntityBuilder().add_integer("pages", 3).build()
    assert _entity.to_value(nested).entity_value == nested

    array = _entity.to_value(("a", 1, key))
    assert [item.WhichOneof("value_type") for item in array.array_value.values] == [
        "string_value",
        "integer_value",
        "key_value",
    ]
    assert _entity.to_value([]).WhichOneof("value_type") == "array_value"
    # Datastore does not store arrays of arrays.
    with pytest.raises(TypeError, match="cannot contain another array"):
        _entity.to_value([[1, 2], 3])
    with pytest.raises(TypeError, match="cannot contain another array"):
        _entity.to_value(["a", _entity.to_value([1])])

    original = v1.Value(string_value="x")
    copy = _entity.to_value(original)
    copy.exclude_from_indexes = True
    assert not original.exclude_from_indexes

    with pytest.raises(TypeError):
        _entity.to_value(object())


def test_timestamps():
    naive = datetime.datetime(2021, 5, 4, 12, 30, 15, 250000)
    offset = datetime.timezone(datetime.timedelta(hours=2))
    local = datetime.datetime(2021, 5, 4, 14, 30, 15, 250000, tzinfo=offset)
    entity = _entity.EntityBuilder().add_timestamp("naive", naive).add_timestamp("local", local).build()
    assert entity.properties["naive"].timestamp_value.seconds == int(published.timestamp())
    assert entity.properties["naive"].timestamp_value.nanos == 250000000
    assert _entity.req_timestamp(entity, "naive") == published
    assert _entity.req_timestamp(entity, "local") == published
    assert _entity.req_timestamp(entity, "local").tzinfo == datetime.timezone.utc

    with pytest.raises(TypeError):
        _entity.EntityBuilder().add_timestamp("when", "2021-05-04")
    entity = _entity.EntityBuilder().opt_timestamp("when", None).build()
    assert _entity.opt_timestamp(entity, "when") is None


def test_typed_accessors():
    entity = (
        _entity.EntityBuilder()
        .add_string("title", "Book One")
        .add_bool("in_print", False)
        .add_integer("pages", 320)
        .add_double("rating", 4.5)
        .add_value("nothing", None)
        .build()
    )
    assert _entity.req_string(entity, "title") == "Book One"
    assert _entity.req_bool(entity, "in_print") is False
    assert _entity.req_integer(entity, "pages") == 320
    assert _entity.req_double(entity, "rating") == 4.5

    assert _entity.opt_string(entity, "missing") is None
    assert _entity.opt_bool(entity, "missing") is None
    assert _entity.opt_integer(entity, "missing") is None
    assert _entity.opt_double(entity, "missing") is None

    with pytest.raises(EntityValueError, match="Field title is not a boolean"):
        _entity.opt_bool(entity, "title")
    with pytest.raises(EntityValueError, match="Field pages is not a string"):
        _entity.req_string(entity, "pages")
    with pytest.raises(EntityValueError, match="Field nothing is not a Timestamp"):
        _entity.opt_timestamp(entity, "nothing")
    with pytest.raises(EntityValueError, match="Entity missing required field 'subtitle'"):
        _entity.req_string(entity, "subtitle")
    # Value errors are entity conversion errors.
    with pytest.raises(EntityConversionError):
        _entity.req_integer(entity, "rating")


def test_string_arrays():
    entity = (
        _entity.EntityBuilder()
        .add_string_array("tags", ["a", "b"], indexed=False)
        .add_string_array("empty", [])
        .add_value("mixed", ["a", 1])
        .add_string("title", "Book One")
        .build()
    )
    tags = entity.properties["tags"]
    # Index exclusion applies to the elements of an array.
    assert not tags.exclude_from_indexes
    assert all(value.exclude_from_indexes for value in tags.array_value.values)

    assert _entity.req_string_array(entity, "tags") == ["a", "b"]
    assert _entity.req_string_array(entity, "empty") == []
    assert _entity.opt_string_array(entity, "missing") is None
    with pytest.raises(EntityValueError, match="Field mixed is not a string"):
        _entity.opt_string_array(entity, "mixed")
    with pytest.raises(EntityValueError, match="Field title is not an array"):
        _entity.opt_string_array(entity, "title")
    with pytest.raises(EntityValueError, match="Entity missing required field 'missing'"):
        _entity.req_string_array(entity, "missing")

    entity.properties["unset"].CopyFrom(v1.Value())
    assert _entity.opt_string_array(entity, "unset") is None


def test_builder_replaces_and_copies():
    builder = _entity.EntityBuilder().add_string("title", "First")
    first = builder.build()
    second = builder.add_integer("title", 2).opt_value("skipped", None).build()
    assert _entity.req_string(first, "title") == "First"
    assert _entity.req_integer(second, "title") == 2
    assert "skipped" not in second.properties


def test_as_entity():
    entity = v1.Entity()
    assert _entity.as_entity(entity) is entity
    book = Book(name="book_one", title="Book One", published=published, tags=[])
    assert _entity.as_entity(book) == book.to_entity()
    with pytest.raises(TypeError):
        _entity.as_entity("Book")


def test_as_key():
    key = _entity.name_key("Book", "book_one")
    assert _entity.as_key(key) is key

    class BookRef:
        def to_key(self):
            return _entity.name_key("Book", "book_two")

    assert _entity.key_name(_entity.as_key(BookRef())) == "book_two"
    with pytest.raises(TypeError):
        _entity.as_key("book_one")
