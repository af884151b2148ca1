"""User validation and model behavior tests."""

from datetime import UTC, datetime, timedelta

import pytest
from fastapi import HTTPException
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError

from microblog.models.micropost import Micropost
from microblog.models.user import User
from microblog.schemas.user import UserCreate, UserUpdate
from microblog.services.auth import authenticate_user
from microblog.services.relationship_service import RelationshipService
from microblog.services.user_service import UserService
from tests.factories import MicropostFactory, UserFactory

VALID_ATTRS = {
    "name": "Example User",
    "email": "user@example.com",
    "password": "foobar",
    "password_confirmation": "foobar",
}


def build(**overrides) -> UserCreate:
    return UserCreate(**{**VALID_ATTRS, **overrides})


def test_creates_user_given_valid_attributes(db):
    """Test that a valid registration creates a user."""
    user = UserService(db).create(build())
    assert user.id is not None
    assert user.name == "Example User"
    assert user.email == "user@example.com"


def test_requires_name():
    with pytest.raises(ValidationError):
        build(name="")


def test_rejects_blank_name():
    with pytest.raises(ValidationError):
        build(name="   ")


def test_requires_email():
    with pytest.raises(ValidationError):
        build(email="")


def test_rejects_names_that_are_too_long():
    with pytest.raises(ValidationError):
        build(name="a" * 51)


def test_accepts_name_at_max_length():
    assert build(name="a" * 50).name == "a" * 50


@pytest.mark.parametrize("address", ["user@foo.com", "THE_USER@foo.bar.org", "first.last@foo.jp"])
def test_accepts_valid_email_addresses(address):
    assert build(email=address).email == address.lower()


@pytest.mark.parametrize("address", ["user@foo,com", "user_at_foo.org", "example.user@foo."])
def test_rejects_invalid_email_addresses(address):
    with pytest.raises(ValidationError):
        build(email=address)


def test_rejects_duplicate_email_addresses(db):
    """Test that the same email cannot register twice."""
    service = UserService(db)
    service.create(build())

    with pytest.raises(HTTPException) as exc_info:
        service.create(build())
    assert exc_info.value.status_code == 400


def test_rejects_email_addresses_identical_up_to_case(db):
    """Test that email uniqueness ignores case."""
    service = UserService(db)
    service.create(build(email=VALID_ATTRS["email"].upper()))

    with pytest.raises(HTTPException) as exc_info:
        service.create(build())
    assert exc_info.value.status_code == 400


def test_email_index_rejects_case_duplicates_at_storage_layer(db):
    """Test that the unique index catches duplicates that bypass validation."""
    UserFactory(email="dup@example.com")

    db.add(User(name="Sneaky", email="DUP@Example.com", password_hash="x"))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()

    assert db.query(User).filter(User.email.ilike("dup@example.com")).count() == 1


def test_email_is_lowercased_on_assignment(db):
    user = UserFactory(email="Mixed.CASE@Example.COM")
    assert user.email == "mixed.case@example.com"

    user.email = "Other@Example.com"
    db.commit()
    db.refresh(user)
    assert user.email == "other@example.com"


def test_integrity_error_on_commit_maps_to_conflict(db, monkeypatch):
    """Test that a duplicate slipping past the lookup is rolled back as a 409."""
    UserFactory(email="race@example.com")
    monkeypatch.setattr("microblog.services.user_service.get_user_by_email", lambda *a: None)

    with pytest.raises(HTTPException) as exc_info:
        UserService(db).create(build(email="race@example.com"))
    assert exc_info.value.status_code == 409

    # Session was rolled back and is usable again
    assert db.query(User).filter(User.email == "race@example.com").count() == 1
    other = UserService(db).create(build(email="other@example.com"))
    assert other.id is not None


def test_requires_password():
    with pytest.raises(ValidationError):
        build(password="", password_confirmation="")


def test_requires_matching_password_confirmation():
    with pytest.raises(ValidationError):
        build(password_confirmation="invalid")


def test_rejects_short_passwords():
    short = "a" * 5
    with pytest.raises(ValidationError):
        build(password=short, password_confirmation=short)


def test_rejects_long_passwords():
    long = "a" * 41
    with pytest.raises(ValidationError):
        build(password=long, password_confirmation=long)


def test_update_requires_confirmation_for_new_password():
    with pytest.raises(ValidationError):
        UserUpdate(password="newpass", password_confirmation="other")


def test_update_allows_partial_changes():
    update = UserUpdate(name="New Name")
    assert update.name == "New Name"
    assert update.email is None
    assert update.password is None


def test_sets_the_encrypted_password(db):
    """Test that only a salted hash of the password is stored."""
    user = UserService(db).create(build())
    assert user.password_hash
    assert user.password_hash != VALID_ATTRS["password"]


def test_identical_passwords_get_different_hashes(db):
    first = UserService(db).create(build())
    second = UserService(db).create(build(email="second@example.com"))
    assert first.password_hash != second.password_hash


def test_has_password_is_true_if_passwords_match(db):
    user = UserService(db).create(build())
    assert user.has_password(VALID_ATTRS["password"]) is True


def test_has_password_is_false_if_passwords_dont_match(db):
    user = UserService(db).create(build())
    assert user.has_password("invalid") is False


def test_authenticate_returns_none_on_password_mismatch(db):
    UserService(db).create(build())
    assert authenticate_user(db, VALID_ATTRS["email"], "wrongpass") is None


def test_authenticate_returns_none_for_unknown_email(db):
    UserService(db).create(build())
    assert authenticate_user(db, "bar@foo.com", VALID_ATTRS["password"]) is None


def test_authenticate_returns_user_on_match(db):
    user = UserService(db).create(build())
    assert authenticate_user(db, VALID_ATTRS["email"], VALID_ATTRS["password"]) == user


def test_authenticate_ignores_email_case(db):
    user = UserService(db).create(build())
    assert authenticate_user(db, "USER@Example.com", VALID_ATTRS["password"]) == user


def test_is_not_admin_by_default(db):
    user = UserService(db).create(build())
    assert user.admin is False


def test_is_convertible_to_admin(db):
    user = UserService(db).create(build())
    user.toggle_admin()
    db.commit()
    db.refresh(user)
    assert user.admin is True


def test_has_microposts_in_the_right_order(db):
    """Test that microposts come newest first."""
    user = UserFactory()
    now = datetime.now(UTC)
    older = MicropostFactory(user=user, created_at=now - timedelta(days=1))
    newer = MicropostFactory(user=user, created_at=now - timedelta(hours=1))

    assert user.microposts == [newer, older]


def test_destroys_associated_microposts(db):
    """Test that destroying a user destroys their microposts."""
    user = UserFactory()
    micropost_ids = [MicropostFactory(user=user).id, MicropostFactory(user=user).id]

    UserService(db).delete(user)

    for micropost_id in micropost_ids:
        assert db.get(Micropost, micropost_id) is None


def test_follows_another_user(db):
    user = UserFactory()
    followed = UserFactory()

    RelationshipService(db).follow(user, followed)

    assert user.is_following(followed)
    assert RelationshipService(db).is_following(user, followed)


def test_includes_followed_user_in_following(db):
    user = UserFactory()
    followed = UserFactory()

    RelationshipService(db).follow(user, followed)

    assert followed in user.following


def test_unfollows_a_user(db):
    user = UserFactory()
    followed = UserFactory()
    service = RelationshipService(db)

    service.follow(user, followed)
    service.unfollow(user, followed)

    assert not user.is_following(followed)
    assert not service.is_following(user, followed)


def test_includes_follower_in_followers(db):
    user = UserFactory()
    followed = UserFactory()

    RelationshipService(db).follow(user, followed)

    assert user in followed.followers


def test_following_twice_keeps_a_single_edge(db):
    user = UserFactory()
    followed = UserFactory()
    service = RelationshipService(db)

    first = service.follow(user, followed)
    second = service.follow(user, followed)

    assert first.id == second.id
    assert len(user.relationships) == 1


def test_destroying_user_removes_follow_edges(db):
    user = UserFactory()
    followed = UserFactory()
    follower = UserFactory()
    service = RelationshipService(db)
    service.follow(user, followed)
    service.follow(follower, user)

    UserService(db).delete(user)

    assert followed.followers == []
    assert follower.following == []
