from datetime import date

import pytest
from pydantic import ValidationError as SchemaValidationError

from app.core.exceptions import DataNotFound
from app.schemas.film import FilmCreate, FilmUpdate


def test_create_film_with_references(make_film, make_director, film_service):
    director = make_director("Lana Wachowski")

    film = make_film(
        "The Matrix",
        release_date=date(1999, 3, 31),
        mpa_id=4,
        genre_ids=[6, 4, 6],
        director_ids=[director.director_id],
    )

    stored = film_service.get_film_by_id(film.film_id)
    assert stored.name == "The Matrix"
    assert stored.mpa.name == "R"
    assert [genre.genre_id for genre in stored.genres] == [4, 6]
    assert [d.name for d in stored.directors] == ["Lana Wachowski"]
    assert stored.likes_count == 0


@pytest.mark.parametrize(
    "references",
    [{"mpa_id": 99}, {"genre_ids": [1, 99]}, {"director_ids": [99]}],
)
def test_create_film_with_missing_reference_is_not_found(make_film, film_service, references):
    with pytest.raises(DataNotFound):
        make_film("Broken", **references)

    assert film_service.get_all_films() == []


def test_update_film_replaces_links(make_film, make_director, film_service):
    first = make_director("First")
    second = make_director("Second")
    film = make_film("Draft", genre_ids=[1, 2], director_ids=[first.director_id])

    updated = film_service.update_film(
        film.film_id,
        FilmUpdate(
            name="Final",
            description="changed",
            release_date=date(2010, 7, 16),
            duration=148,
            mpa_id=3,
            genre_ids=[2, 3],
            director_ids=[second.director_id],
        ),
    )

    assert updated.name == "Final"
    assert updated.duration == 148
    assert updated.mpa.mpa_id == 3
    assert [genre.genre_id for genre in updated.genres] == [2, 3]
    assert [d.director_id for d in updated.directors] == [second.director_id]


def test_update_unknown_film_is_not_found(film_service):
    data = FilmUpdate(name="Ghost", release_date=date(2000, 1, 1), duration=90)

    with pytest.raises(DataNotFound):
        film_service.update_film(999, data)


def test_delete_film_removes_it_with_likes(make_film, like_film, film_service):
    film = make_film("Doomed")
    keeper = make_film("Keeper")
    like_film(film, 2)

    film_service.delete_film(film.film_id)

    assert not film_service.film_exists(film.film_id)
    assert film_service.get_likes_count(film.film_id) == 0
    assert [f.film_id for f in film_service.get_all_films()] == [keeper.film_id]
    with pytest.raises(DataNotFound):
        film_service.get_film_by_id(film.film_id)


@pytest.mark.parametrize(
    "overrides",
    [
        {"name": "  "},
        {"description": "x" * 201},
        {"release_date": date(1895, 12, 28)},
        {"duration": 0},
        {"duration": -5},
    ],
)
def test_film_schema_rejects_invalid_fields(overrides):
    payload = {
        "name": "Valid",
        "description": "ok",
        "release_date": date(2000, 1, 1),
        "duration": 100,
    }
    payload.update(overrides)

    with pytest.raises(SchemaValidationError):
        FilmCreate(**payload)


def test_film_schema_accepts_first_day_after_cinema_birthday():
    film = FilmCreate(name="Early", release_date=date(1895, 12, 29), duration=1)

    assert film.release_date == date(1895, 12, 29)
