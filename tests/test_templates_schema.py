from __future__ import annotations

import logging

from src.templates.schema import (
    DEFAULT_SCHEMA,
    append_schema_fragment,
    schema_path,
    write_default_schema,
)

PRISMA_INIT_SCHEMA = 'generator client {\n  provider = "prisma-client-js"\n}\n'


def test_default_schema_has_user_model(tmp_path) -> None:
    p = write_default_schema(tmp_path)
    text = p.read_text(encoding="utf-8")
    assert text == DEFAULT_SCHEMA
    assert 'url      = env("DATABASE_URL")' in text
    assert "model User {" in text


def test_default_schema_replaces_existing_file(tmp_path) -> None:
    p = schema_path(tmp_path)
    p.parent.mkdir(parents=True)
    p.write_text(PRISMA_INIT_SCHEMA, encoding="utf-8")
    write_default_schema(tmp_path)
    assert p.read_text(encoding="utf-8") == DEFAULT_SCHEMA


def test_fragment_is_appended_verbatim(tmp_path) -> None:
    p = schema_path(tmp_path)
    p.parent.mkdir(parents=True)
    p.write_text(PRISMA_INIT_SCHEMA, encoding="utf-8")
    fragment = b"model Post {\n  id Int @id\n  title String\n}\n"
    append_schema_fragment(tmp_path, fragment)
    assert p.read_bytes() == PRISMA_INIT_SCHEMA.encode() + fragment


def test_malformed_fragment_is_not_rejected(tmp_path) -> None:
    append_schema_fragment(tmp_path, b"model {{{ broken")
    assert schema_path(tmp_path).read_bytes() == b"model {{{ broken"


def test_empty_fragment_warns(tmp_path, caplog) -> None:
    with caplog.at_level(logging.WARNING):
        append_schema_fragment(tmp_path, b"  \n")
    assert "Custom model is empty" in caplog.text


def test_fragment_bytes_are_not_reencoded(tmp_path) -> None:
    p = schema_path(tmp_path)
    p.parent.mkdir(parents=True)
    p.write_bytes(PRISMA_INIT_SCHEMA.encode())
    fragment = b"model Caf\xe9 {\r\n  id Int @id\r\n}\r\n"
    append_schema_fragment(tmp_path, fragment)
    assert p.read_bytes() == PRISMA_INIT_SCHEMA.encode() + fragment
