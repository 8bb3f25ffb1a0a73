"""Validation rules of the request schemas."""

import uuid

import pytest
from pydantic import ValidationError

from noteshare.core.enums import Visibility
from noteshare.core.schemas.auth import LoginRequest, RegisterRequest
from noteshare.core.schemas.notes import NoteCreate, NoteUpdate, VisibilityChange


def test_register_normalises_email_and_blank_name():
    req = RegisterRequest(
        email="Mixed.Case@Example.COM", password="password1", confirm_password="password1", name="  "
    )
    assert req.email == "mixed.case@example.com"
    assert req.name is None


def test_register_passwords_must_match():
    with pytest.raises(ValidationError):
        RegisterRequest(email="a@example.com", password="password1", confirm_password="password2")


def test_register_rejects_short_password_and_bad_email():
    with pytest.raises(ValidationError):
        RegisterRequest(email="a@example.com", password="short", confirm_password="short")
    with pytest.raises(ValidationError):
        RegisterRequest(email="not-an-email", password="password1", confirm_password="password1")


def test_login_lowercases_email():
    assert LoginRequest(email="A@Example.com", password="x").email == "a@example.com"


def test_note_create_defaults():
    req = NoteCreate(title="t")
    assert req.content == ""
    assert req.color is None
    assert req.share_mode == Visibility.PRIVATE
    assert req.team_user_id is None


def test_note_create_limits():
    with pytest.raises(ValidationError):
        NoteCreate(title="x" * 201)
    with pytest.raises(ValidationError):
        NoteCreate(title="t", share_mode="everyone")


def test_note_update_all_optional():
    req = NoteUpdate()
    assert req.model_dump(exclude_none=True) == {}


def test_visibility_change_parses_mode():
    invitee = uuid.uuid4()
    req = VisibilityChange(mode="team", team_user_id=str(invitee))
    assert req.mode is Visibility.TEAM
    assert req.team_user_id == invitee
