"""Use the generated Datastore messages directly, without the model helpers.

Example:

    $ export DATASTORE_PROJECT_ID=my-project
    $ python store_and_load.py
"""

import asyncio

from clouddatastore import v1
from clouddatastore.client import configuration
from clouddatastore.client import Datastore


async def main():
    config = configuration()
    async with await Datastore.connect(config) as datastore:
        key = v1.Key(path=[v1.Key.PathElement(kind="Book", id=1)])
        book = v1.Entity(key=key)
        book.properties["title"].string_value = "Book One"
        book.properties["pages"].integer_value = 320

        commit = v1.CommitRequest(
            mode=v1.CommitRequest.NON_TRANSACTIONAL,
            mutations=[v1.Mutation(upsert=book)],
        )
        print(await datastore.commit(commit))

        print(await datastore.lookup([key]))

        print(await datastore.run_gql_query("select * from Book"))


if __name__ == "__main__":
    asyncio.run(main())
