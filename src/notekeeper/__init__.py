"""
NoteKeeper Backend - Notes with cookie sessions

A small notes backend with username/password login, admin-managed users and
JSON-file record stores.

Version: 1.0.0
"""

__version__ = "1.0.0"
