"""Starter files written into a freshly generated Next.js + Prisma project.

Every file here has fixed content (only ``.env`` takes the database URL) and
is always overwritten, so re-running the setup converges on the same tree.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from src.setup.config import DatabaseSettings

logger = logging.getLogger(__name__)

ENV_PATH = ".env"
PRISMA_JS_PATH = "src/lib/prisma.js"
PRISMA_TS_PATH = "src/lib/prisma.ts"
GLOBALS_CSS_PATH = "src/app/globals.css"
PAGE_TSX_PATH = "src/app/page.tsx"
POSTCSS_CONFIG_PATH = "postcss.config.js"


@dataclass(frozen=True)
class ProjectFile:
    path: str
    content: str


def render_env_file(db_name: str, database: DatabaseSettings) -> str:
    return f'DATABASE_URL="{database.url_for(db_name)}"\n'


PRISMA_CLIENT_JS = """//lib/prisma.js

import { PrismaClient } from '@prisma/client';

const globalForPrisma = global;

export const prisma =
  globalForPrisma.prisma ||
  new PrismaClient({
    log: ['query'],
  });

if (process.env.NODE_ENV !== 'production') globalForPrisma.prisma = prisma;

"""

PRISMA_CLIENT_TS = """// lib/prisma.ts
import { PrismaClient } from '@prisma/client'

const globalForPrisma = global as unknown as { prisma: PrismaClient }

export const prisma = globalForPrisma.prisma || new PrismaClient()

if (process.env.NODE_ENV !== 'production') globalForPrisma.prisma = prisma

export default prisma

"""

GLOBALS_CSS = """@tailwind base;
@tailwind components;
@tailwind utilities;

/* div,
p {
  border: solid;
} */
"""

PAGE_TSX = """export default function Home() {
  return (
    <>
      <h1> this is new aka project</h1>
    </>
  );
}
"""

POSTCSS_CONFIG = """module.exports = {
  plugins: {
    tailwindcss: {},
    autoprefixer: {},
  },
};
"""


def env_file(db_name: str, database: DatabaseSettings) -> ProjectFile:
    return ProjectFile(ENV_PATH, render_env_file(db_name, database))


def prisma_client_files() -> list[ProjectFile]:
    return [
        ProjectFile(PRISMA_JS_PATH, PRISMA_CLIENT_JS),
        ProjectFile(PRISMA_TS_PATH, PRISMA_CLIENT_TS),
    ]


def app_files() -> list[ProjectFile]:
    return [
        ProjectFile(GLOBALS_CSS_PATH, GLOBALS_CSS),
        ProjectFile(PAGE_TSX_PATH, PAGE_TSX),
    ]


def postcss_file() -> ProjectFile:
    return ProjectFile(POSTCSS_CONFIG_PATH, POSTCSS_CONFIG)


def write_project_file(project_dir: str | Path, f: ProjectFile) -> Path:
    """Write ``f`` below ``project_dir``, replacing any existing file."""
    out = Path(project_dir) / f.path
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(f.content, encoding="utf-8")
    logger.debug("Wrote %s (%d bytes)", out, len(f.content))
    return out
