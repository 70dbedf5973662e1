#!/usr/local/bin/python3.12
import sys

from pymongo import MongoClient
from pymongo.server_api import ServerApi

from movie_queries.utils.config import get_db_name, get_mongo_uri


def connect_to_db():
    uri = get_mongo_uri()

    if not uri:
        print(
            "❌ Missing MONGO_URI. Copy .env.example to .env and fill it in.",
            file=sys.stderr,
        )
        raise SystemExit(2)

    client = MongoClient(uri, server_api=ServerApi("1"))
    db = client.get_default_database(default=get_db_name())
    return db, client
