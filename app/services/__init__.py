# app/services/__init__.py

from .feed_service import FeedService
from .film_service import FilmService
from .user_service import UserService
from .genre_service import GenreService
from .director_service import DirectorService

__all__ = ["FeedService", "FilmService", "UserService", "GenreService", "DirectorService"]
