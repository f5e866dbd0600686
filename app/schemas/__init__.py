# app/schemas/__init__.py

from .film import Film, FilmCreate, FilmUpdate, FilmLike, DirectorSortKey, SearchField
from .user import User, UserCreate, UserUpdate
from .genre import Genre, Mpa, GenreListResponse, MpaListResponse
from .director import Director, DirectorCreate, DirectorUpdate
from .feed import FeedEvent

__all__ = [
    "Film",
    "FilmCreate",
    "FilmUpdate",
    "FilmLike",
    "DirectorSortKey",
    "SearchField",
    "User",
    "UserCreate",
    "UserUpdate",
    "Genre",
    "Mpa",
    "GenreListResponse",
    "MpaListResponse",
    "Director",
    "DirectorCreate",
    "DirectorUpdate",
    "FeedEvent",
]
