"""Unit tests for core/exceptions.py"""

from fastapi import HTTPException

from noteshare.core.exceptions import Forbidden, InvalidInput, NotFound, Unauthenticated


def test_status_codes_and_default_details():
    assert (Unauthenticated().status_code, Unauthenticated().detail) == (401, "Unauthorized")
    assert (Forbidden().status_code, Forbidden().detail) == (403, "Forbidden")
    assert (NotFound().status_code, NotFound().detail) == (404, "Not found")
    assert (InvalidInput().status_code, InvalidInput().detail) == (400, "Invalid input")


def test_custom_detail_and_bearer_challenge():
    exc = Unauthenticated("Invalid credentials")
    assert isinstance(exc, HTTPException)
    assert exc.detail == "Invalid credentials"
    assert exc.headers == {"WWW-Authenticate": "Bearer"}


def test_not_found_carries_message():
    assert NotFound("Note not found").detail == "Note not found"
