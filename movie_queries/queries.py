"""queries.py: Read/update/delete/aggregate operations run against the movies, comments and users collections"""

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING

from movie_queries.models import new_user

MATRIX_TITLE = "The Matrix"
HANKS_ALLEN_CAST = ["Tom Hanks", "Tim Allen"]


# CREATE


def insert_user(users_coll, name="John Doe", email="john.doe@example.com"):
    doc = new_user(name, email)
    # insert_one stamps the generated _id onto doc
    users_coll.insert_one(doc)
    return doc


# READ


def find_by_director(movies_coll, director):
    return list(movies_coll.find({"director": director}))


def find_by_genre_newest_first(movies_coll, genre):
    return list(movies_coll.find({"genres": genre}).sort("year", DESCENDING))


def find_highly_rated(movies_coll, min_rating=8):
    projection = {"title": 1, "imdb": 1, "_id": 0}
    return list(
        movies_coll.find({"imdb.rating": {"$gt": min_rating}}, projection=projection)
    )


def get_cast_filter_exp(cast, exact=False):
    filter_exp = {"$all": list(cast)}
    if exact:
        filter_exp["$size"] = len(set(cast))
    return {"cast": filter_exp}


def find_with_cast(movies_coll, cast, exact=False):
    return list(movies_coll.find(get_cast_filter_exp(cast, exact=exact)))


def find_by_genre_and_director(movies_coll, genre, director):
    return list(movies_coll.find({"genres": genre, "director": director}))


# UPDATE


def set_available_on(movies_coll, title, platform):
    res = movies_coll.update_one({"title": title}, {"$set": {"available_on": platform}})
    return res.modified_count


def increment_metacritic(movies_coll, title, amount=1):
    res = movies_coll.update_one({"title": title}, {"$inc": {"metacritic": amount}})
    return res.modified_count


def add_genre_for_year(movies_coll, year, genre):
    res = movies_coll.update_many({"year": year}, {"$addToSet": {"genres": genre}})
    return res.modified_count


def bump_low_ratings(movies_coll, threshold=5, amount=1):
    # no upper clamp, a 4.5 becomes 5.5
    res = movies_coll.update_many(
        {"imdb.rating": {"$lt": threshold}}, {"$inc": {"imdb.rating": amount}}
    )
    return res.modified_count


# DELETE


def resolve_comment_id(comments_coll, configured_id=None):
    """
    Return the ObjectId of the comment to delete: the configured id when one is
    given, otherwise whichever comment the store hands back first (or None when
    the collection is empty). A malformed configured id raises InvalidId.
    """
    if configured_id:
        return ObjectId(configured_id)

    any_comment = comments_coll.find_one({}, {"_id": 1})
    return any_comment["_id"] if any_comment else None


def delete_comment(comments_coll, movies_coll, comment_id):
    deleted_count = comments_coll.delete_one({"_id": comment_id}).deleted_count

    # no cascade in the store; drop dangling refs from movies.comments
    movies_coll.update_many(
        {"comments": comment_id}, {"$pull": {"comments": comment_id}}
    )
    return deleted_count


def delete_comments_for_title(comments_coll, movies_coll, title):
    """Returns the number of deleted comments, or None if no movie has that title."""
    movie = movies_coll.find_one({"title": title}, {"_id": 1, "comments": 1})
    if movie is None:
        return None

    res = comments_coll.delete_many({"movie": movie["_id"]})
    movies_coll.update_one({"_id": movie["_id"]}, {"$set": {"comments": []}})
    return res.deleted_count


def get_no_genres_filter_exp():
    return {
        "$or": [
            {"genres": {"$exists": False}},
            {"genres": {"$size": 0}},
            {"genres": None},
        ]
    }


def delete_movies_without_genres(movies_coll):
    return movies_coll.delete_many(get_no_genres_filter_exp()).deleted_count


# AGGREGATE


def movies_per_year_pipeline():
    return [
        {"$match": {"year": {"$type": "number"}}},
        {"$group": {"_id": "$year", "count": {"$sum": 1}}},
        {"$sort": {"_id": ASCENDING}},
        {"$project": {"_id": 0, "year": "$_id", "count": 1}},
    ]


def avg_rating_by_director_pipeline():
    return [
        {
            "$match": {
                "director": {"$ne": None},
                "imdb.rating": {"$type": "number"},
            }
        },
        {
            "$group": {
                "_id": "$director",
                "avgRating": {"$avg": "$imdb.rating"},
                "count": {"$sum": 1},
            }
        },
        {
            "$project": {
                "_id": 0,
                "director": "$_id",
                "avgRating": {"$round": ["$avgRating", 2]},
                "count": 1,
            }
        },
        {"$sort": {"avgRating": DESCENDING, "director": ASCENDING}},
    ]


def count_movies_per_year(movies_coll):
    return list(movies_coll.aggregate(movies_per_year_pipeline()))


def avg_rating_by_director(movies_coll):
    return list(movies_coll.aggregate(avg_rating_by_director_pipeline()))
