import pytest

from app.core.exceptions import DataNotFound
from app.models.feed_event import EventType, FeedEventModel, OperationType


def test_like_twice_counts_once(make_film, make_user, film_service):
    film = make_film()
    user = make_user()

    assert film_service.add_like(film.film_id, user.user_id) is True
    assert film_service.add_like(film.film_id, user.user_id) is False

    assert film_service.get_likes_count(film.film_id) == 1
    assert film_service.get_film_by_id(film.film_id).likes_count == 1


def test_unlike_without_like_is_noop(make_film, make_user, like_film, film_service):
    film = make_film()
    like_film(film, 2)
    stranger = make_user()

    assert film_service.remove_like(film.film_id, stranger.user_id) is False
    assert film_service.get_likes_count(film.film_id) == 2


def test_unlike_removes_existing_like(make_film, make_user, film_service):
    film = make_film()
    user = make_user()
    film_service.add_like(film.film_id, user.user_id)

    assert film_service.remove_like(film.film_id, user.user_id) is True
    assert film_service.get_likes_count(film.film_id) == 0


def test_like_requires_existing_film_and_user(make_film, make_user, film_service):
    film = make_film()
    user = make_user()

    with pytest.raises(DataNotFound):
        film_service.add_like(999, user.user_id)
    with pytest.raises(DataNotFound):
        film_service.add_like(film.film_id, 999)
    with pytest.raises(DataNotFound):
        film_service.remove_like(999, user.user_id)
    with pytest.raises(DataNotFound):
        film_service.remove_like(film.film_id, 999)

    assert film_service.get_likes_count(film.film_id) == 0


def test_like_and_unlike_record_feed_events(make_film, make_user, film_service, feed_service):
    film = make_film()
    user = make_user()

    film_service.add_like(film.film_id, user.user_id)
    film_service.remove_like(film.film_id, user.user_id)

    events = feed_service.get_user_feed(user.user_id)
    assert [(e.event_type, e.operation, e.entity_id) for e in events] == [
        (EventType.LIKE, OperationType.ADD, film.film_id),
        (EventType.LIKE, OperationType.REMOVE, film.film_id),
    ]
    assert events[0].timestamp <= events[1].timestamp


def test_feed_failure_does_not_roll_back_like(engine, make_film, make_user, film_service):
    film = make_film()
    user = make_user()
    FeedEventModel.__table__.drop(bind=engine)

    assert film_service.add_like(film.film_id, user.user_id) is True

    assert film_service.get_likes_count(film.film_id) == 1
