#!/usr/local/bin/python3.12
"""run_queries.py: Run the fixed sequence of CRUD and aggregation queries against the users/movies/comments collections and print each result"""

import sys
import traceback

from movie_queries import queries
from movie_queries.models import COMMENTS, MOVIES, USERS
from movie_queries.utils.config import get_comment_id
from movie_queries.utils.db_connect import connect_to_db
from movie_queries.utils.utils import print_count, print_result


def run_queries(db, comment_id=None):
    users = db[USERS]
    movies = db[MOVIES]
    comments = db[COMMENTS]

    # CREATE
    new_user = queries.insert_user(users)
    print_result("New user inserted", new_user)

    # READ
    print_result(
        "Movies directed by Christopher Nolan",
        queries.find_by_director(movies, "Christopher Nolan"),
    )
    print_result(
        "Action movies sorted by year",
        queries.find_by_genre_newest_first(movies, "Action"),
    )
    print_result("Movies with IMDb rating > 8", queries.find_highly_rated(movies, 8))
    print_result(
        "Movies starring Tom Hanks and Tim Allen",
        queries.find_with_cast(movies, queries.HANKS_ALLEN_CAST),
    )
    print_result(
        "Movies starring ONLY Tom Hanks and Tim Allen",
        queries.find_with_cast(movies, queries.HANKS_ALLEN_CAST, exact=True),
    )
    print_result(
        "Comedy movies directed by Steven Spielberg",
        queries.find_by_genre_and_director(movies, "Comedy", "Steven Spielberg"),
    )

    # UPDATE
    print_count(
        "Set available_on for The Matrix",
        queries.set_available_on(movies, queries.MATRIX_TITLE, "Sflix"),
    )
    print_count(
        "Incremented metacritic for The Matrix",
        queries.increment_metacritic(movies, queries.MATRIX_TITLE),
    )
    print_count(
        'Added "Gen Z" to 1997 movies',
        queries.add_genre_for_year(movies, 1997, "Gen Z"),
    )
    print_count("Increased low IMDb ratings", queries.bump_low_ratings(movies))

    # DELETE
    comment_to_delete = queries.resolve_comment_id(comments, comment_id)
    if comment_to_delete is not None:
        deleted = queries.delete_comment(comments, movies, comment_to_delete)
        print(
            f"Deleted comment by ID -> {comment_to_delete} | deleted count: {deleted}"
        )
    else:
        print("No comment found/provided to delete. Skipping specific-ID delete.")

    deleted = queries.delete_comments_for_title(comments, movies, queries.MATRIX_TITLE)
    if deleted is not None:
        print_count("Deleted comments for The Matrix", deleted, noun="comment")
    else:
        print(
            f'Movie "{queries.MATRIX_TITLE}" not found. Skipping delete of its comments.'
        )

    print_count(
        "Deleted movies with no genres",
        queries.delete_movies_without_genres(movies),
        noun="movie",
    )

    # AGGREGATE
    print_result(
        "Movies released per year (earliest->latest)",
        queries.count_movies_per_year(movies),
    )
    print_result(
        "Average IMDb rating by director (desc)",
        queries.avg_rating_by_director(movies),
    )


def main():
    db, client = connect_to_db()

    try:
        run_queries(db, comment_id=get_comment_id())
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        print(traceback.format_exc(), file=sys.stderr)
        return 1
    finally:
        client.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
