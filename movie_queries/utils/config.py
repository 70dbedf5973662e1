import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_DB_NAME = "test"


def get_mongo_uri():
    return os.getenv("MONGO_URI")


def get_db_name():
    return os.getenv("MONGO_DB", DEFAULT_DB_NAME)


def get_comment_id():
    # empty string counts as unset
    return os.getenv("COMMENT_ID") or None
