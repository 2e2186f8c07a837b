"""SQLite compilation shim for the PostgreSQL JSONB type.

Installs a compiler for JSONB when the active dialect is SQLite so that
``Base.metadata.create_all()`` succeeds in test runs backed by an in-memory
SQLite database. Values are stored as plain JSON text.

Usage: imported for side-effects by storefront.db.models.
"""
from __future__ import annotations

from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.ext.compiler import compiles


@compiles(JSONB, "sqlite")
def _compile_jsonb_sqlite(element, compiler, **kw):  # pragma: no cover - trivial
    # JSONB operators and indexing are lost; storage and round-trips work.
    return "JSON"
