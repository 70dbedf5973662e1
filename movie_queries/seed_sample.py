#!/usr/local/bin/python3.12
"""seed_sample.py: Upsert a small sample set of movies and linked comments to run the queries against"""

from pymongo import ReturnDocument

from movie_queries.models import COMMENTS, MOVIES, link_comment, new_movie
from movie_queries.utils.db_connect import connect_to_db

SAMPLE_MOVIES = [
    new_movie(
        title="The Matrix",
        director="Lana Wachowski",
        year=1999,
        genres=["Action", "Sci-Fi"],
        imdb={"rating": 8.7, "votes": 2000000},
        metacritic=73,
        cast=["Keanu Reeves", "Laurence Fishburne", "Carrie-Anne Moss"],
    ),
    new_movie(
        title="Inception",
        director="Christopher Nolan",
        year=2010,
        genres=["Action", "Sci-Fi", "Thriller"],
        imdb={"rating": 8.8, "votes": 2400000},
        metacritic=74,
        cast=["Leonardo DiCaprio", "Joseph Gordon-Levitt"],
    ),
    new_movie(
        title="Toy Story",
        director="John Lasseter",
        year=1995,
        genres=["Animation", "Comedy"],
        imdb={"rating": 8.3, "votes": 1000000},
        metacritic=95,
        cast=["Tom Hanks", "Tim Allen"],
    ),
    new_movie(
        title="Toy Story 2",
        director="John Lasseter",
        year=1999,
        genres=["Animation", "Comedy"],
        imdb={"rating": 7.9, "votes": 600000},
        metacritic=88,
        cast=["Tom Hanks", "Tim Allen", "Joan Cusack"],
    ),
    new_movie(
        title="The Terminal",
        director="Steven Spielberg",
        year=2004,
        genres=["Comedy", "Drama"],
        imdb={"rating": 7.4, "votes": 480000},
        metacritic=55,
        cast=["Tom Hanks", "Catherine Zeta-Jones"],
    ),
    new_movie(
        title="Titanic",
        director="James Cameron",
        year=1997,
        genres=["Drama", "Romance"],
        imdb={"rating": 7.9, "votes": 1200000},
        metacritic=75,
        cast=["Leonardo DiCaprio", "Kate Winslet"],
    ),
    new_movie(
        title="Batman & Robin",
        director="Joel Schumacher",
        year=1997,
        genres=["Action"],
        imdb={"rating": 3.8, "votes": 260000},
        metacritic=28,
        cast=["George Clooney", "Chris O'Donnell"],
    ),
    new_movie(
        title="Untitled Draft",
        director="Unknown",
        year=2020,
        genres=[],
    ),
]

SAMPLE_COMMENTS = [
    ("The Matrix", "Still holds up.", "neo"),
    ("The Matrix", "Red pill every time.", "morpheus"),
    ("Inception", "Was it a dream?", "cobb"),
]


def seed(db):
    movies = db[MOVIES]
    comments = db[COMMENTS]

    movie_ids = {}
    for movie in SAMPLE_MOVIES:
        res = movies.find_one_and_update(
            {"title": movie["title"]},
            {"$set": {**movie, "comments": []}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        movie_ids[movie["title"]] = res["_id"]

    # reseeding replaces earlier sample comments instead of piling up
    comments.delete_many({"movie": {"$in": list(movie_ids.values())}})

    for title, text, author in SAMPLE_COMMENTS:
        link_comment(movies, comments, movie_ids[title], text, author)

    return movie_ids


def main():
    db, client = connect_to_db()
    try:
        movie_ids = seed(db)
    finally:
        client.close()

    print(
        f"Seeded {len(movie_ids)} movies and {len(SAMPLE_COMMENTS)} comments into {db.name}."
    )


if __name__ == "__main__":
    main()
