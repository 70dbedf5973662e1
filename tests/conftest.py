import os
import socket

import mongomock
import pytest

from movie_queries.seed_sample import seed

TEST_DB_NAME = os.getenv("MONGO_DB", "movies_test")


def _internet_available() -> bool:
    try:
        with socket.create_connection(("8.8.8.8", 53), timeout=2):
            return True
    except OSError:
        return False


def pytest_collection_modifyitems(config, items):
    online = _internet_available()
    if online:
        return

    skip_live = pytest.mark.skip(reason="No internet connection — skipping live tests.")
    for item in items:
        if "live" in item.keywords:
            item.add_marker(skip_live)


@pytest.fixture(scope="session")
def mongo_client():
    client = mongomock.MongoClient()  # in-memory Mongo
    yield client


@pytest.fixture(scope="function")
def mongo_db(mongo_client):
    db = mongo_client[TEST_DB_NAME]
    # clean before each test
    for coll in db.list_collection_names():
        db.drop_collection(coll)
    yield db
    # clean after each test
    mongo_client.drop_database(TEST_DB_NAME)


@pytest.fixture()
def movie_ids(mongo_db):
    """Seed mongo_db with the sample movies and linked comments; title -> _id."""
    return seed(mongo_db)
