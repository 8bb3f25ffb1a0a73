"""Public link slugs."""

import secrets


def generate_slug(length: int = 10) -> str:
    """Short URL-safe random token.

    No uniqueness retry: at 64**10 possible values a collision is not
    defended against.
    """
    return secrets.token_urlsafe(length)[:length]
