"""
NoteShare Backend - Collaborative Note Taking API

Notes can be kept private, shared with a teammate, or published behind a
random link, and readers can leave comments on anything they can see.
"""

__version__ = "1.0.0"
