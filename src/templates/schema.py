from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

SCHEMA_PATH = "prisma/schema.prisma"

DEFAULT_SCHEMA = """datasource db {
  provider = "postgresql"
  url      = env("DATABASE_URL")
}
generator client {
  provider = "prisma-client-js"
}
model User {
  id        Int      @id @default(autoincrement())
  name      String
  email     String   @unique
  createdAt DateTime @default(now())
}
"""


def schema_path(project_dir: str | Path) -> Path:
    return Path(project_dir) / SCHEMA_PATH


def write_default_schema(project_dir: str | Path) -> Path:
    p = schema_path(project_dir)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(DEFAULT_SCHEMA, encoding="utf-8")
    return p


def append_schema_fragment(project_dir: str | Path, fragment: bytes) -> Path:
    """Append a user-supplied model fragment to the schema file byte for byte.

    The fragment is not parsed; ``prisma migrate`` is the first thing to
    complain about a malformed one.
    """
    p = schema_path(project_dir)
    p.parent.mkdir(parents=True, exist_ok=True)
    if not fragment.strip():
        logger.warning("Custom model is empty; %s is left unchanged", p)
    with p.open("ab") as f:
        f.write(fragment)
    return p
