"""Build and decode Datastore entities.

:py:class:`EntityBuilder` assembles a :py:class:`~clouddatastore.v1.Entity`
one property at a time. The module-level accessor functions read typed values
back out of an entity, raising :py:class:`~clouddatastore.exceptions.EntityValueError`
when a property is missing or holds a different type.

Python values are converted to Datastore values by :py:func:`to_value`.
Register additional types with ``@to_value.register``.

Example::

    from clouddatastore import entity as _entity

    book = (
        _entity.EntityBuilder()
        .with_key_name("Book", "book_one")
        .add_string("title", "Book One")
        .add_string("summary", "A long description.", indexed=False)
        .add_string_array("tags", ["fiction"])
        .build()
    )
    assert _entity.req_string(book, "title") == "Book One"

Timestamps:
    Datastore timestamps have microsecond precision. Naive :py:class:`~datetime.datetime`
    values are interpreted as UTC. Timestamps are always read back as
    timezone-aware UTC datetimes.
"""

__all__ = (
    "as_entity",
    "as_key",
    "EntityBuilder",
    "EntityModel",
    "id_key",
    "key_id",
    "key_kind",
    "key_name",
    "name_key",
    "opt_bool",
    "opt_double",
    "opt_integer",
    "opt_string",
    "opt_string_array",
    "opt_timestamp",
    "req_bool",
    "req_double",
    "req_integer",
    "req_key",
    "req_string",
    "req_string_array",
    "req_timestamp",
    "to_value",
)

import abc
import datetime
import functools
import logging
import typing

from google.protobuf import struct_pb2
from google.protobuf import timestamp_pb2

from . import v1
from .exceptions import EntityValueError
from .exceptions import KeyPathError

logger = logging.getLogger(__name__)
logger.debug("Importing {}".format(__name__))

_T = typing.TypeVar("_T")


@functools.singledispatch
def to_value(value) -> v1.Value:
    """Convert a Python object to a Datastore Value.

    This is a dispatching function. Handlers for particular object types are
    registered by decorating with ``@to_value.register``. See
    :py:func:`functools.singledispatch`.

    Supported by default: None, bool, int, float, str, bytes, datetime,
    Key, Entity, Value, and lists or tuples of any of these.

    Raises:
        TypeError: if no conversion is registered for the type of *value*.
    """
    raise TypeError(f"Cannot convert {value.__class__.__qualname__} to a Datastore Value.")


@to_value.register(type(None))
def _(value) -> v1.Value:
    return v1.Value(null_value=struct_pb2.NULL_VALUE)


@to_value.register
def _(value: bool) -> v1.Value:
    return v1.Value(boolean_value=value)


@to_value.register
def _(value: int) -> v1.Value:
    return v1.Value(integer_value=value)


@to_value.register
def _(value: float) -> v1.Value:
    return v1.Value(double_value=value)


@to_value.register
def _(value: str) -> v1.Value:
    return v1.Value(string_value=value)


@to_value.register
def _(value: bytes) -> v1.Value:
    return v1.Value(blob_value=value)


@to_value.register
def _(value: datetime.datetime) -> v1.Value:
    return _message_value("timestamp_value", _timestamp(value))


@to_value.register(v1.Key)
def _(value) -> v1.Value:
    return _message_value("key_value", value)


@to_value.register(v1.Entity)
def _(value) -> v1.Value:
    return _message_value("entity_value", value)


@to_value.register(v1.Value)
def _(value) -> v1.Value:
    copy = v1.Value()
    copy.CopyFrom(value)
    return copy


@to_value.register(list)
@to_value.register(tuple)
def _(value) -> v1.Value:
    result = _message_value("array_value", v1.ArrayValue())
    for item in value:
        element = to_value(item)
        if element.WhichOneof("value_type") == "array_value":
            raise TypeError("An array value cannot contain another array.")
        result.array_value.values.append(element)
    return result


def _message_value(field: str, message) -> v1.Value:
    # An empty message still selects its member of the oneof.
    result = v1.Value()
    getattr(result, field).SetInParent()
    getattr(result, field).MergeFrom(message)
    return result


def _timestamp(value: datetime.datetime) -> timestamp_pb2.Timestamp:
    if value.tzinfo is None:
        value = value.replace(tzinfo=datetime.timezone.utc)
    timestamp = timestamp_pb2.Timestamp()
    timestamp.FromDatetime(value.astimezone(datetime.timezone.utc))
    return timestamp


def name_key(kind: str, name: str, parent: typing.Optional[v1.Key] = None) -> v1.Key:
    """Make a key for an entity identified by *name*, optionally under an ancestor key."""
    key = v1.Key()
    if parent is not None:
        key.CopyFrom(parent)
    key.path.add(kind=kind, name=name)
    return key


def id_key(kind: str, id: int, parent: typing.Optional[v1.Key] = None) -> v1.Key:
    """Make a key for an entity identified by a numeric *id*, optionally under an ancestor key."""
    key = v1.Key()
    if parent is not None:
        key.CopyFrom(parent)
    key.path.add(kind=kind, id=id)
    return key


def _last_element(key: v1.Key):
    if len(key.path) == 0:
        raise KeyPathError("Key has no path")
    return key.path[-1]


def key_kind(key: v1.Key) -> str:
    """Get the kind of the entity that *key* identifies (the last path element).

    For a key with ancestors, this is the kind of the entity itself, not of its
    root ancestor: ``key_kind(name_key("Book", "b1", parent=name_key("Shelf", "s1")))``
    is ``"Book"``. :py:func:`key_name`, :py:func:`key_id` and :py:func:`req_key`
    read the same element. Use ``key.path[0]`` for the root ancestor.

    Raises:
        KeyPathError: if the key has no path.
    """
    return _last_element(key).kind


def key_name(key: v1.Key) -> str:
    """Get the name of the entity that *key* identifies.

    Raises:
        KeyPathError: if the key has no path, or its last element is not identified by name.
    """
    element = _last_element(key)
    if element.WhichOneof("id_type") != "name":
        raise KeyPathError("Key has no name")
    return element.name


def key_id(key: v1.Key) -> int:
    """Get the numeric id of the entity that *key* identifies.

    Raises:
        KeyPathError: if the key has no path, or its last element is not identified by id.
    """
    element = _last_element(key)
    if element.WhichOneof("id_type") != "id":
        raise KeyPathError("Key has no id")
    return element.id


class EntityBuilder:
    """Assemble an Entity.

    Each ``add_*`` method sets a property and returns the builder, so calls chain.
    Properties are indexed unless *indexed* is False. The ``opt_*`` methods skip
    the property entirely when the value is None.

    Setting a property that was already set replaces it.
    """

    def __init__(self):
        self._entity = v1.Entity()

    def with_key(self, key: v1.Key) -> "EntityBuilder":
        self._entity.key.Clear()
        self._entity.key.SetInParent()
        self._entity.key.MergeFrom(key)
        return self

    def with_key_name(self, kind: str, name: str) -> "EntityBuilder":
        return self.with_key(name_key(kind, name))

    def add_value(self, name: str, value, indexed: bool = True) -> "EntityBuilder":
        """Set property *name* to *value*, converted with :py:func:`to_value`.

        Datastore does not accept ``exclude_from_indexes`` on an array value,
        so for arrays the flag is applied to each element instead.
        """
        converted = to_value(value)
        if converted.WhichOneof("value_type") == "array_value":
            for item in converted.array_value.values:
                item.exclude_from_indexes = not indexed
        else:
            converted.exclude_from_indexes = not indexed
        self._entity.properties[name].CopyFrom(converted)
        return self

    def opt_value(self, name: str, value, indexed: bool = True) -> "EntityBuilder":
        if value is not None:
            self.add_value(name, value, indexed)
        return self

    def add_string(self, name: str, value: str, indexed: bool = True) -> "EntityBuilder":
        return self.add_value(name, str(value), indexed)

    def opt_string(self, name: str, value: typing.Optional[str], indexed: bool = True) -> "EntityBuilder":
        return self.opt_value(name, value, indexed)

    def add_bool(self, name: str, value: bool, indexed: bool = True) -> "EntityBuilder":
        return self.add_value(name, bool(value), indexed)

    def opt_bool(self, name: str, value: typing.Optional[bool], indexed: bool = True) -> "EntityBuilder":
        return self.opt_value(name, value, indexed)

    def add_integer(self, name: str, value: int, indexed: bool = True) -> "EntityBuilder":
        return self.add_value(name, int(value), indexed)

    def opt_integer(self, name: str, value: typing.Optional[int], indexed: bool = True) -> "EntityBuilder":
        return self.opt_value(name, value, indexed)

    def add_double(self, name: str, value: float, indexed: bool = True) -> "EntityBuilder":
        return self.add_value(name, float(value), indexed)

    def opt_double(self, name: str, value: typing.Optional[float], indexed: bool = True) -> "EntityBuilder":
        return self.opt_value(name, value, indexed)

    def add_timestamp(self, name: str, value: datetime.datetime, indexed: bool = True) -> "EntityBuilder":
        if not isinstance(value, datetime.datetime):
            raise TypeError(f"Expected datetime.datetime. Got {value.__class__.__qualname__}.")
        return self.add_value(name, value, indexed)

    def opt_timestamp(
        self, name: str, value: typing.Optional[datetime.datetime], indexed: bool = True
    ) -> "EntityBuilder":
        if value is not None:
            self.add_timestamp(name, value, indexed)
        return self

    def add_string_array(self, name: str, values: typing.Iterable[str], indexed: bool = True) -> "EntityBuilder":
        return self.add_value(name, [str(value) for value in values], indexed)

    def build(self) -> v1.Entity:
        """Get the assembled Entity. The builder can continue to be used."""
        entity = v1.Entity()
        entity.CopyFrom(self._entity)
        return entity


def _property(entity: v1.Entity, name: str, field: str, description: str):
    """Get the *field* member of property *name*, or None if the property is absent."""
    if name not in entity.properties:
        return None
    value = entity.properties[name]
    if value.WhichOneof("value_type") != field:
        raise EntityValueError(f"Field {name} is not a {description}")
    return value


def _required(name: str, value: typing.Optional[_T]) -> _T:
    if value is None:
        raise EntityValueError(f"Entity missing required field '{name}'")
    return value


def req_key(entity: v1.Entity, kind: str) -> v1.Key:
    """Get the key of *entity*, which must identify an entity of *kind*.

    Raises:
        EntityValueError: if the entity has no key, or the key is for another kind.
    """
    if not entity.HasField("key"):
        raise EntityValueError("Missing Key")
    try:
        actual = key_kind(entity.key)
    except KeyPathError as e:
        raise EntityValueError(str(e)) from e
    if actual != kind:
        raise EntityValueError(f"Invalid Key Kind. Expected '{kind}'.")
    return entity.key


def opt_string(entity: v1.Entity, name: str) -> typing.Optional[str]:
    value = _property(entity, name, "string_value", "string")
    return None if value is None else value.string_value


def req_string(entity: v1.Entity, name: str) -> str:
    return _required(name, opt_string(entity, name))


def opt_bool(entity: v1.Entity, name: str) -> typing.Optional[bool]:
    value = _property(entity, name, "boolean_value", "boolean")
    return None if value is None else value.boolean_value


def req_bool(entity: v1.Entity, name: str) -> bool:
    return _required(name, opt_bool(entity, name))


def opt_integer(entity: v1.Entity, name: str) -> typing.Optional[int]:
    value = _property(entity, name, "integer_value", "integer")
    return None if value is None else value.integer_value


def req_integer(entity: v1.Entity, name: str) -> int:
    return _required(name, opt_integer(entity, name))


def opt_double(entity: v1.Entity, name: str) -> typing.Optional[float]:
    value = _property(entity, name, "double_value", "double")
    return None if value is None else value.double_value


def req_double(entity: v1.Entity, name: str) -> float:
    return _required(name, opt_double(entity, name))


def opt_timestamp(entity: v1.Entity, name: str) -> typing.Optional[datetime.datetime]:
    """Get a timestamp property as an aware UTC datetime.

    Raises:
        EntityValueError: if the property is not a Timestamp, or is outside the datetime range.
    """
    value = _property(entity, name, "timestamp_value", "Timestamp")
    if value is None:
        return None
    try:
        return value.timestamp_value.ToDatetime(tzinfo=datetime.timezone.utc)
    except (ValueError, OverflowError) as e:
        raise EntityValueError(f"Field {name} is not a valid Timestamp") from e


def req_timestamp(entity: v1.Entity, name: str) -> datetime.datetime:
    return _required(name, opt_timestamp(entity, name))


def opt_string_array(entity: v1.Entity, name: str) -> typing.Optional[typing.List[str]]:
    """Get an array property whose elements are all strings.

    A property that is absent, or present without any value, gives None.

    Raises:
        EntityValueError: if the property is not an array, or an element is not a string.
    """
    if name not in entity.properties:
        logger.debug(f"No value found for field {name}.")
        return None
    value = entity.properties[name]
    value_type = value.WhichOneof("value_type")
    if value_type is None:
        return None
    if value_type != "array_value":
        raise EntityValueError(f"Field {name} is not an array")
    result = []
    for item in value.array_value.values:
        if item.WhichOneof("value_type") != "string_value":
            raise EntityValueError(f"Field {name} is not a string")
        result.append(item.string_value)
    return result


def req_string_array(entity: v1.Entity, name: str) -> typing.List[str]:
    return _required(name, opt_string_array(entity, name))


@typing.runtime_checkable
class EntityModel(typing.Protocol):
    """A Python type that is stored as entities of one kind.

    The client loads entities into such types with :py:meth:`from_entity`.
    Types that also provide ``to_entity()`` can be passed to the client
    wherever an Entity is accepted.
    """

    kind: typing.ClassVar[str]

    @classmethod
    @abc.abstractmethod
    def from_entity(cls, entity: v1.Entity):
        """Build an instance from *entity*.

        Raises:
            EntityConversionError: if *entity* does not describe an instance.
        """
        raise NotImplementedError


def as_entity(obj) -> v1.Entity:
    """Get an Entity for *obj*, which is an Entity or provides ``to_entity()``.

    Raises:
        TypeError: for any other object.
    """
    if isinstance(obj, v1.Entity):
        return obj
    to_entity = getattr(obj, "to_entity", None)
    if to_entity is None:
        raise TypeError(f"Cannot convert {obj.__class__.__qualname__} to an Entity.")
    return to_entity()


def as_key(obj) -> v1.Key:
    """Get a Key for *obj*, which is a Key or provides ``to_key()``.

    Raises:
        TypeError: for any other object.
    """
    if isinstance(obj, v1.Key):
        return obj
    to_key = getattr(obj, "to_key", None)
    if to_key is None:
        raise TypeError(f"Cannot convert {obj.__class__.__qualname__} to a Key.")
    return to_key()
