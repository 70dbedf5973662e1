from unittest.mock import MagicMock

import pytest

from movie_queries import queries
from movie_queries import run_queries as runner


@pytest.fixture()
def patched_runner(mongo_db, monkeypatch):
    client = MagicMock()
    monkeypatch.setattr(runner, "connect_to_db", lambda: (mongo_db, client))
    monkeypatch.delenv("COMMENT_ID", raising=False)

    # mongomock has no $round
    pipeline = queries.avg_rating_by_director_pipeline()
    pipeline[2]["$project"]["avgRating"] = "$avgRating"
    monkeypatch.setattr(queries, "avg_rating_by_director_pipeline", lambda: pipeline)
    return client


def test_main_runs_full_sequence(mongo_db, movie_ids, patched_runner, capsys):
    assert runner.main() == 0

    out = capsys.readouterr().out
    assert "New user inserted:" in out
    assert "Set available_on for The Matrix -> 1 document(s)" in out
    assert 'Added "Gen Z" to 1997 movies -> 2 document(s)' in out
    assert "Deleted comment by ID ->" in out
    assert "Deleted movies with no genres -> 1 movie(s)" in out
    assert "Average IMDb rating by director (desc):" in out
    patched_runner.close.assert_called_once()

    assert mongo_db.users.count_documents({}) == 1
    matrix = mongo_db.movies.find_one({"title": "The Matrix"})
    assert matrix["available_on"] == "Sflix"
    assert matrix["comments"] == []
    assert mongo_db.comments.count_documents({"movie": movie_ids["The Matrix"]}) == 0
    assert mongo_db.movies.find_one({"title": "Untitled Draft"}) is None


def test_main_with_configured_comment_id(mongo_db, movie_ids, patched_runner, monkeypatch, capsys):
    inception_comment = mongo_db.comments.find_one({"movie": movie_ids["Inception"]})
    monkeypatch.setenv("COMMENT_ID", str(inception_comment["_id"]))

    assert runner.main() == 0

    out = capsys.readouterr().out
    assert f"Deleted comment by ID -> {inception_comment['_id']} | deleted count: 1" in out
    assert mongo_db.movies.find_one({"title": "Inception"})["comments"] == []


def test_main_skips_deletes_on_empty_db(mongo_db, patched_runner, capsys):
    assert runner.main() == 0

    out = capsys.readouterr().out
    assert "No comment found/provided to delete. Skipping specific-ID delete." in out
    assert 'Movie "The Matrix" not found. Skipping delete of its comments.' in out
    assert "Set available_on for The Matrix -> 0 document(s)" in out


def test_main_aborts_on_failure_and_closes(mongo_db, movie_ids, patched_runner, monkeypatch, capsys):
    def _boom(*args, **kwargs):
        raise RuntimeError("query failed")

    monkeypatch.setattr(queries, "find_by_director", _boom)

    assert runner.main() == 1

    captured = capsys.readouterr()
    assert "New user inserted:" in captured.out
    assert "Action movies sorted by year" not in captured.out
    assert "Error: query failed" in captured.err
    assert "RuntimeError" in captured.err
    patched_runner.close.assert_called_once()
    # nothing after the failure was written
    assert "available_on" not in mongo_db.movies.find_one({"title": "The Matrix"})


def test_main_malformed_comment_id_is_a_failure(mongo_db, movie_ids, patched_runner, monkeypatch, capsys):
    monkeypatch.setenv("COMMENT_ID", "not-an-id")

    assert runner.main() == 1

    captured = capsys.readouterr()
    assert "Deleted comment by ID" not in captured.out
    assert "Error:" in captured.err
    assert mongo_db.comments.count_documents({}) == 3
    patched_runner.close.assert_called_once()
