"""Store implementations."""

from .local import JsonFileLocalStore, KeyValueLocalStore
from .postgres import PostgresRemoteStore, PostgresRemoteTransaction, translate_db_error

__all__ = [
    "JsonFileLocalStore",
    "KeyValueLocalStore",
    "PostgresRemoteStore",
    "PostgresRemoteTransaction",
    "translate_db_error",
]
