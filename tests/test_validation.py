import app.services.validation as validation
from app.services.validation import (
    MISMATCH_MESSAGE,
    password_mismatch,
    validate_login,
    validate_signup,
)


def test_signup_requires_all_fields():
    issues = validate_signup("me@example.com", "secret1", "secret1", "  ")
    assert issues and issues[0].field == "form"


def test_signup_password_mismatch():
    issues = validate_signup("me@example.com", "secret1", "secret2", "me")
    assert issues and issues[0].message == MISMATCH_MESSAGE


def test_signup_password_length():
    issues = validate_signup("me@example.com", "abc", "abc", "me", min_length=6)
    assert issues and "6" in issues[0].message

    assert not validate_signup("me@example.com", "abcdef", "abcdef", "me", min_length=6)


def test_signup_uses_configured_minimum(monkeypatch):
    import app.services.validation as validation
    from app.settings import AppSettings

    monkeypatch.setattr(validation, "settings", AppSettings(min_password_length=10))
    issues = validate_signup("me@example.com", "abcdefgh", "abcdefgh", "me")
    assert issues and "10" in issues[0].message


def test_live_mismatch_hint():
    assert password_mismatch("secret", "") == ""
    assert password_mismatch("secret", "secre") == MISMATCH_MESSAGE
    assert password_mismatch("secret", "secret") == ""


def test_login_requires_email_and_password():
    issues = validate_login(" ", "")
    assert [issue.field for issue in issues] == ["email", "password"]
    assert not validate_login("me@example.com", "pw")


def test_public_names():
    assert sorted(validation.__all__) == [
        "MISMATCH_MESSAGE",
        "ValidationIssue",
        "password_mismatch",
        "validate_login",
        "validate_signup",
    ]
    assert "settings" not in validation.__all__
    for name in validation.__all__:
        assert hasattr(validation, name)
