"""In-memory stand-in for the Supabase table API used by ProfileStore."""

from __future__ import annotations

import threading
from typing import Any

TEST_TABLE = "profiles"


class FakeResponse:
    """Mimics the ``.data`` attribute of a PostgREST response."""

    def __init__(self, data: list[dict[str, Any]]) -> None:
        self.data = data


class FakeQuery:
    """Supports the select/eq/limit/upsert chains used by ProfileStore."""

    def __init__(self, client: FakeSupabaseClient, table: str) -> None:
        self._client = client
        self._table = table
        self._filters: list[tuple[str, Any]] = []
        self._limit: int | None = None
        self._upsert: tuple[dict[str, Any], str] | None = None

    def select(self, columns: str) -> FakeQuery:
        return self

    def eq(self, column: str, value: Any) -> FakeQuery:
        self._filters.append((column, value))
        return self

    def limit(self, count: int) -> FakeQuery:
        self._limit = count
        return self

    def upsert(self, document: dict[str, Any], on_conflict: str) -> FakeQuery:
        self._upsert = (dict(document), on_conflict)
        return self

    def execute(self) -> FakeResponse:
        with self._client.lock:
            rows = self._client.tables.setdefault(self._table, [])
            if self._upsert is not None:
                document, key = self._upsert
                for index, row in enumerate(rows):
                    if row[key] == document[key]:
                        rows[index] = {**row, **document}
                        return FakeResponse([dict(rows[index])])
                rows.append(document)
                return FakeResponse([dict(document)])

            matched = [
                dict(row)
                for row in rows
                if all(row.get(column) == value for column, value in self._filters)
            ]
            if self._limit is not None:
                matched = matched[: self._limit]
            return FakeResponse(matched)


class FakeSupabaseClient:
    """In-memory tables keyed by name; each row is a plain dict."""

    def __init__(self) -> None:
        self.tables: dict[str, list[dict[str, Any]]] = {}
        self.lock = threading.Lock()

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)
