"""
Unit tests for the user DTO serialization rules.
"""
from calicot.application.dto.user_dto import UserResponse
from calicot.domain.models.user import User


def test_password_never_serialized():
    user = UserResponse(
        id="usr-1",
        user_name="marie",
        email="marie@example.com",
        password="plain-text",
    )
    assert user.password == "plain-text"
    assert "password" not in user.model_dump()
    assert "plain-text" not in user.model_dump_json()


def test_from_domain_drops_password_hash():
    user = User(
        id="usr-1",
        user_name="marie",
        email="marie@example.com",
        password_hash="$2b$12$hash",
        first_name="Marie",
        last_name="Tremblay",
    )
    dumped = UserResponse.from_domain(user).model_dump()
    assert dumped == {
        "id": "usr-1",
        "user_name": "marie",
        "email": "marie@example.com",
        "first_name": "Marie",
        "last_name": "Tremblay",
    }
