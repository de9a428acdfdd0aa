"""Persistence backends for player progress."""

from .backend import KeyValueStore, MemoryStore, JsonFileStore, SqliteStore

__all__ = ["KeyValueStore", "MemoryStore", "JsonFileStore", "SqliteStore"]
