from __future__ import annotations

import shlex
from dataclasses import dataclass

PACKAGE_MANAGER = "pnpm"

# TypeScript, Tailwind CSS, ESLint, App Router, src/ dir, "@/*" alias, pnpm.
NEXT_APP_FLAGS: tuple[str, ...] = (
    "--ts",
    "--tailwind",
    "--eslint",
    "--app",
    "--src-dir",
    "--import-alias",
    "@/*",
    "--use-pnpm",
)

PRISMA_RUNTIME_PACKAGES: tuple[str, ...] = ("@prisma/client",)
PRISMA_DEV_PACKAGES: tuple[str, ...] = ("prisma",)
POSTCSS_DEV_PACKAGES: tuple[str, ...] = ("autoprefixer",)

MIGRATION_NAME = "init"


@dataclass(frozen=True)
class ToolCommand:
    name: str
    argv: tuple[str, ...]

    def display(self) -> str:
        return shlex.join(self.argv)


def _dlx(*args: str) -> tuple[str, ...]:
    return (PACKAGE_MANAGER, "dlx", *args)


def create_next_app_command(folder: str, *, package: str) -> ToolCommand:
    return ToolCommand("create-next-app", _dlx(package, folder, *NEXT_APP_FLAGS))


def install_commands(*, autoprefixer: bool) -> list[ToolCommand]:
    cmds = [
        ToolCommand("pnpm-install", (PACKAGE_MANAGER, "install")),
        ToolCommand("add-prisma-client", (PACKAGE_MANAGER, "add", *PRISMA_RUNTIME_PACKAGES)),
        ToolCommand("add-prisma", (PACKAGE_MANAGER, "add", "-D", *PRISMA_DEV_PACKAGES)),
    ]
    if autoprefixer:
        cmds.append(
            ToolCommand(
                "add-autoprefixer",
                (PACKAGE_MANAGER, "install", "-D", *POSTCSS_DEV_PACKAGES),
            )
        )
    return cmds


def prisma_command(name: str, *args: str) -> ToolCommand:
    return ToolCommand(f"prisma-{name}", _dlx("prisma", *args))


def prisma_init_command() -> ToolCommand:
    return prisma_command("init", "init")


def prisma_migrate_command() -> ToolCommand:
    return prisma_command("migrate", "migrate", "dev", "--name", MIGRATION_NAME)


def prisma_generate_command() -> ToolCommand:
    return prisma_command("generate", "generate")


def prisma_studio_command() -> ToolCommand:
    return prisma_command("studio", "studio")


def git_commands(commit_message: str) -> list[ToolCommand]:
    return [
        ToolCommand("git-init", ("git", "init")),
        ToolCommand("git-add", ("git", "add", ".")),
        ToolCommand("git-commit", ("git", "commit", "-m", commit_message)),
    ]


def ide_command(ide: str) -> ToolCommand:
    return ToolCommand("open-ide", (*shlex.split(ide), "."))


def dev_server_command() -> ToolCommand:
    return ToolCommand("dev-server", (PACKAGE_MANAGER, "run", "dev"))
