"""Persistence adapters implementing the HistoryStore protocol."""

from .history_store import InMemoryHistoryStore, JsonFileHistoryStore

__all__ = ["InMemoryHistoryStore", "JsonFileHistoryStore"]
