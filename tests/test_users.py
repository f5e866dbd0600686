from datetime import date, timedelta

import pytest
from pydantic import ValidationError as SchemaValidationError

from app.core.exceptions import DataNotFound, ValidationError
from app.models.feed_event import EventType, OperationType
from app.schemas.user import UserCreate, UserUpdate


def test_blank_name_defaults_to_login(make_user):
    user = make_user("neo", name="  ")

    assert user.name == "neo"


def test_duplicate_email_is_rejected(make_user, user_service):
    make_user("first", email="same@example.com")

    with pytest.raises(ValidationError):
        make_user("second", email="same@example.com")


def test_update_user(make_user, user_service):
    user = make_user("old")

    updated = user_service.update_user(
        user.user_id,
        UserUpdate(email="new@example.com", login="new", name="New Name"),
    )

    assert updated.login == "new"
    assert updated.name == "New Name"
    assert user_service.get_user_by_id(user.user_id).email == "new@example.com"


def test_update_user_to_taken_email_is_rejected(make_user, user_service):
    make_user("a", email="a@example.com")
    b = make_user("b", email="b@example.com")

    with pytest.raises(ValidationError):
        user_service.update_user(b.user_id, UserUpdate(email="a@example.com", login="b"))


@pytest.mark.parametrize(
    "overrides",
    [
        {"email": "not-an-email"},
        {"login": "has space"},
        {"login": ""},
        {"birthday": date.today() + timedelta(days=1)},
    ],
)
def test_user_schema_rejects_invalid_fields(overrides):
    payload = {"email": "ok@example.com", "login": "ok", "birthday": date(1990, 1, 1)}
    payload.update(overrides)

    with pytest.raises(SchemaValidationError):
        UserCreate(**payload)


def test_friendship_is_one_directional(make_user, user_service):
    a, b = make_user(), make_user()

    assert user_service.add_friend(a.user_id, b.user_id) is True

    assert [u.user_id for u in user_service.get_friends(a.user_id)] == [b.user_id]
    assert user_service.get_friends(b.user_id) == []


def test_add_friend_twice_is_noop(make_user, user_service):
    a, b = make_user(), make_user()
    user_service.add_friend(a.user_id, b.user_id)

    assert user_service.add_friend(a.user_id, b.user_id) is False
    assert len(user_service.get_friends(a.user_id)) == 1


def test_remove_friend(make_user, user_service):
    a, b = make_user(), make_user()
    user_service.add_friend(a.user_id, b.user_id)

    assert user_service.remove_friend(a.user_id, b.user_id) is True
    assert user_service.remove_friend(a.user_id, b.user_id) is False
    assert user_service.get_friends(a.user_id) == []


def test_friend_checks(make_user, user_service):
    a = make_user()

    with pytest.raises(ValidationError):
        user_service.add_friend(a.user_id, a.user_id)
    with pytest.raises(DataNotFound):
        user_service.add_friend(a.user_id, 999)
    with pytest.raises(DataNotFound):
        user_service.get_friends(999)


def test_common_friends(make_user, user_service):
    a, b, common, only_a = (make_user() for _ in range(4))
    user_service.add_friend(a.user_id, common.user_id)
    user_service.add_friend(a.user_id, only_a.user_id)
    user_service.add_friend(b.user_id, common.user_id)

    friends = user_service.get_common_friends(a.user_id, b.user_id)

    assert [u.user_id for u in friends] == [common.user_id]


def test_friend_feed_events(make_user, user_service):
    a, b = make_user(), make_user()
    user_service.add_friend(a.user_id, b.user_id)
    user_service.remove_friend(a.user_id, b.user_id)

    feed = user_service.get_feed(a.user_id)

    assert [(e.event_type, e.operation, e.entity_id) for e in feed] == [
        (EventType.FRIEND, OperationType.ADD, b.user_id),
        (EventType.FRIEND, OperationType.REMOVE, b.user_id),
    ]
    assert user_service.get_feed(b.user_id) == []


def test_delete_user_cleans_up_relations(make_user, make_film, user_service, film_service):
    a, b = make_user(), make_user()
    film = make_film()
    film_service.add_like(film.film_id, a.user_id)
    user_service.add_friend(a.user_id, b.user_id)
    user_service.add_friend(b.user_id, a.user_id)

    user_service.delete_user(a.user_id)

    assert not user_service.user_exists(a.user_id)
    assert film_service.get_likes_count(film.film_id) == 0
    assert user_service.get_friends(b.user_id) == []
    with pytest.raises(DataNotFound):
        user_service.get_user_by_id(a.user_id)
