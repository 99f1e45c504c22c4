"""Store and load Book entities through a model type.

Example:

    $ export DATASTORE_PROJECT_ID=my-project
    $ python high_level.py --log-level=info

Credentials are found with Google Application Default Credentials, for instance
after ``gcloud auth application-default login``.
"""

import argparse
import asyncio
import dataclasses
import typing

from clouddatastore import entity as _entity
from clouddatastore.client import configuration
from clouddatastore.client import Datastore
from clouddatastore.logger import configure_console_logging
from clouddatastore.logger import logger as _logger


@dataclasses.dataclass
class Book:
    kind: typing.ClassVar[str] = "Book"

    id: str
    title: str
    tags: typing.List[str]

    @classmethod
    def from_entity(cls, entity) -> "Book":
        # Ensure the key is of kind 'Book'
        key = _entity.req_key(entity, cls.kind)
        return cls(
            id=_entity.key_name(key),
            title=_entity.req_string(entity, "title"),
            tags=_entity.req_string_array(entity, "tags"),
        )

    def to_entity(self):
        return (
            _entity.EntityBuilder()
            .with_key_name(self.kind, self.id)
            .add_string("title", self.title)
            .add_string_array("tags", self.tags)
            .build()
        )


async def main():
    config = configuration()
    async with await Datastore.connect(config) as datastore:
        result = await datastore.upsert_entity(Book(id="book_one", title="Book One Title", tags=["tag_one", "tag_two"]))
        print(result)

        book = await datastore.lookup_entity(_entity.name_key(Book.kind, "book_one"), Book)
        print(book)

        result = await datastore.upsert_entities(
            [
                Book(id="book_three", title="Book Three Title", tags=["tag_three"]),
                Book(id="book_four", title="Book Four Title", tags=["tag_four"]),
            ]
        )
        print(result)

        for book in await datastore.load_entities(Book):
            print(book)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--log-level", type=str.upper, default=None)
    args = parser.parse_args()
    if args.log_level is not None:
        configure_console_logging(args.log_level)
        _logger.debug("Console logging enabled.")
    asyncio.run(main())
