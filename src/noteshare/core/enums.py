"""Closed value sets shared by models, schemas and services."""

from enum import Enum


class Visibility(str, Enum):
    """Sharing mode of a note."""

    PRIVATE = "private"
    TEAM = "team"
    PUBLIC = "public"


class Role(str, Enum):
    """What the caller is to a given note."""

    OWNER = "owner"
    EDITOR = "editor"
    VIEWER = "viewer"
    NONE = "none"
