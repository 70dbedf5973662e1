"""models.py: Collection names and document builders for users, movies and comments"""

USERS = "users"
MOVIES = "movies"
COMMENTS = "comments"

USER_FIELDS = ("name", "email")
MOVIE_FIELDS = (
    "title",
    "director",
    "year",
    "genres",
    "imdb",
    "metacritic",
    "comments",
    "available_on",
    "cast",
)
COMMENT_FIELDS = ("movie", "text", "author")


def _build(fields, values):
    unknown = set(values) - set(fields)
    if unknown:
        raise ValueError(f"Unknown field(s): {', '.join(sorted(unknown))}")

    # unset fields stay off the document so $exists filters see them as missing
    return {k: values[k] for k in fields if k in values}


def new_user(name, email):
    return _build(USER_FIELDS, {"name": name, "email": email})


def new_movie(**fields):
    imdb = fields.get("imdb")
    if imdb is not None:
        fields["imdb"] = {k: imdb[k] for k in ("rating", "votes") if k in imdb}

    return _build(MOVIE_FIELDS, fields)


def new_comment(movie_id, text, author):
    return _build(
        COMMENT_FIELDS, {"movie": movie_id, "text": text, "author": author}
    )


def link_comment(movies_coll, comments_coll, movie_id, text, author):
    """
    Insert a comment for a movie and push its id onto the movie's comments
    array so both sides of the reference agree. Returns the new comment id.
    """
    comment_id = comments_coll.insert_one(new_comment(movie_id, text, author)).inserted_id
    movies_coll.update_one({"_id": movie_id}, {"$push": {"comments": comment_id}})
    return comment_id
