from datetime import date

import pytest

from app.core.exceptions import DataNotFound, ValidationError


@pytest.fixture
def filmography(make_director, make_film, like_film):
    director = make_director("D")
    a = make_film("A", release_date=date(2023, 3, 1), director_ids=[director.director_id])
    b = make_film("B", release_date=date(2023, 8, 1), director_ids=[director.director_id])
    c = make_film("C", release_date=date(2021, 6, 1), director_ids=[director.director_id])
    make_film("Other director's film", release_date=date(2020, 1, 1))
    like_film(a, 5)
    like_film(b, 9)
    like_film(c, 9)
    return director, a, b, c


def test_sort_by_likes_breaks_ties_by_id(filmography, film_service):
    director, a, b, c = filmography

    films = film_service.get_films_by_director(director.director_id, "likes")

    assert [film.film_id for film in films] == [b.film_id, c.film_id, a.film_id]
    assert [film.likes_count for film in films] == [9, 9, 5]


def test_sort_by_year_orders_by_release_date(filmography, film_service):
    director, a, b, c = filmography

    films = film_service.get_films_by_director(director.director_id, "year")

    assert [film.film_id for film in films] == [c.film_id, a.film_id, b.film_id]
    dates = [film.release_date for film in films]
    assert dates == sorted(dates)


def test_films_carry_director(filmography, film_service):
    director, *_ = filmography

    films = film_service.get_films_by_director(director.director_id, "year")

    assert all(
        [d.director_id for d in film.directors] == [director.director_id] for film in films
    )


def test_director_without_films_is_empty(make_director, film_service):
    director = make_director("Newcomer")

    assert film_service.get_films_by_director(director.director_id, "likes") == []


def test_unknown_sort_key_is_validation_error(make_director, film_service):
    director = make_director()

    with pytest.raises(ValidationError):
        film_service.get_films_by_director(director.director_id, "popularity")


def test_sort_key_checked_before_director_existence(film_service):
    with pytest.raises(ValidationError):
        film_service.get_films_by_director(999, "popularity")


def test_unknown_director_is_not_found(film_service):
    with pytest.raises(DataNotFound):
        film_service.get_films_by_director(999, "year")
