# app/models/__init__.py

from .film import FilmModel
from .user import UserModel
from .genre import GenreModel
from .mpa import MpaModel
from .director import DirectorModel
from .film_genre import FilmGenreModel
from .film_director import FilmDirectorModel
from .film_like import FilmLikeModel
from .friendship import FriendshipModel
from .feed_event import FeedEventModel, EventType, OperationType


__all__ = [
    "FilmModel",
    "UserModel",
    "GenreModel",
    "MpaModel",
    "DirectorModel",
    "FilmGenreModel",
    "FilmDirectorModel",
    "FilmLikeModel",
    "FriendshipModel",
    "FeedEventModel",
    "EventType",
    "OperationType",
]
