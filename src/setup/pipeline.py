"""One-shot Next.js + Prisma project setup.

The flow is strictly linear. Only the project generator is checked: if it
fails nothing else runs. Every later command is fire-and-continue; its exit
code ends up in the report and a warning in the log, nothing more.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path

from src.projects.naming import default_db_name, is_current_dir, resolve_project_folder
from src.setup.config import SetupSettings, load_settings
from src.setup.prompts import Prompter, capture_schema_fragment
from src.setup.report import SetupReport, StepResult
from src.setup.runner import CommandRunner
from src.templates import files as starter
from src.templates import registry
from src.templates.schema import append_schema_fragment, write_default_schema

logger = logging.getLogger(__name__)


class SetupError(RuntimeError):
    """Fatal error that stops the setup; carries the partial report."""

    def __init__(self, message: str, *, report: SetupReport | None = None) -> None:
        super().__init__(message)
        self.report = report


class ProjectCreationError(SetupError):
    pass


class SetupAborted(SetupError):
    pass


@dataclass(frozen=True)
class SetupOptions:
    folder: str | None = None
    db_name: str | None = None
    prompt_db_name: bool = False
    autoprefixer: bool | None = None
    custom_model: bool | None = None
    open_ide: bool = True
    launch: bool = True
    git: bool = True
    commit_message: str | None = None
    base_dir: str | None = None


def _apply_overrides(settings: SetupSettings, options: SetupOptions) -> SetupSettings:
    out = settings
    if options.autoprefixer is not None:
        out = replace(out, autoprefixer=options.autoprefixer)
    if options.custom_model is not None:
        out = replace(out, ask_custom_model=options.custom_model)
    if options.commit_message:
        out = replace(out, commit_message=options.commit_message)
    return out


class _Steps:
    def __init__(self, runner: CommandRunner, report: SetupReport) -> None:
        self._runner = runner
        self._report = report

    def run(
        self, cmd: registry.ToolCommand, *, cwd: Path, checked: bool = False
    ) -> StepResult:
        rc = self._runner.run(list(cmd.argv), cwd=str(cwd))
        step = StepResult(name=cmd.name, argv=list(cmd.argv), exit_code=rc, checked=checked)
        self._report.steps.append(step)
        if rc != 0 and not checked:
            logger.warning("%s exited with code %d; continuing", cmd.display(), rc)
        return step

    def spawn(self, cmd: registry.ToolCommand, *, cwd: Path) -> StepResult:
        pid = self._runner.spawn(list(cmd.argv), cwd=str(cwd))
        step = StepResult(name=cmd.name, argv=list(cmd.argv), background=True, pid=pid)
        self._report.steps.append(step)
        return step

    def skip(self, name: str) -> None:
        self._report.steps.append(StepResult(name=name, skipped=True))

    def write(self, project_dir: Path, f: starter.ProjectFile) -> None:
        starter.write_project_file(project_dir, f)
        self._report.files.append(f.path)


def run_setup(
    options: SetupOptions,
    *,
    runner: CommandRunner,
    prompter: Prompter,
    settings: SetupSettings | None = None,
    report: SetupReport | None = None,
) -> SetupReport:
    """Scaffold a Next.js + Prisma project.

    Raises ``ProjectCreationError`` when the generator fails and
    ``SetupAborted`` when a custom model was announced but not confirmed.
    Steps are recorded into ``report`` as they run, so a caller that passes
    one in still has the partial record if the flow is interrupted.
    """
    settings = _apply_overrides(settings or load_settings(), options)
    base_dir = Path(options.base_dir or os.getcwd())
    report = report if report is not None else SetupReport()
    steps = _Steps(runner, report)

    logger.info("=== Starting the Next.js + Prisma setup process ===")
    logger.info("Current folder: %s", base_dir)

    if options.folder is not None:
        folder = resolve_project_folder(options.folder)
    else:
        folder = resolve_project_folder(
            prompter.ask("Enter project folder name (default is './'): ")
        )
    logger.info("Project folder set to: %s", folder)

    derived = default_db_name(folder)
    logger.info("Default database name set to: %s", derived)
    if options.db_name:
        db_name = options.db_name.strip() or derived
    elif options.prompt_db_name:
        db_name = prompter.ask(
            f"Enter database name (default is '{derived}'): ", default=derived
        )
    else:
        db_name = derived
    logger.info("Database name set to: %s", db_name)

    project_dir = base_dir if is_current_dir(folder) else base_dir / folder
    report.project_dir = str(project_dir)
    report.database_name = db_name

    logger.info(
        "Creating Next.js app with the following configuration: "
        "TypeScript, Tailwind CSS, ESLint, and pnpm"
    )
    if is_current_dir(folder):
        logger.info("Creating Next.js app in the current directory...")
    else:
        logger.info("Creating Next.js app in %s...", folder)
    gen = steps.run(
        registry.create_next_app_command(folder, package=settings.create_next_app),
        cwd=base_dir,
        checked=True,
    )
    if gen.exit_code != 0:
        report.aborted = True
        report.abort_reason = f"create-next-app exited with code {gen.exit_code}"
        raise ProjectCreationError("Failed to create Next.js app", report=report)
    logger.info("Next.js app created successfully.")

    logger.info("Installing Prisma client and development dependencies...")
    for cmd in registry.install_commands(autoprefixer=settings.autoprefixer):
        steps.run(cmd, cwd=project_dir)
    if settings.autoprefixer:
        logger.info("Configuring PostCSS to include Autoprefixer...")
        steps.write(project_dir, starter.postcss_file())
    logger.info("Prisma dependencies installed.")

    logger.info("Initializing Prisma...")
    steps.run(registry.prisma_init_command(), cwd=project_dir)

    logger.info("Setting up .env file for the database...")
    steps.write(project_dir, starter.env_file(db_name, settings.database))

    logger.info("Creating Prisma files in src/lib...")
    for f in starter.prisma_client_files():
        steps.write(project_dir, f)

    _write_schema(project_dir, settings=settings, runner=runner, prompter=prompter, report=report)

    logger.info("Running Prisma migration to create database tables...")
    steps.run(registry.prisma_migrate_command(), cwd=project_dir)
    logger.info("Generating the Prisma client...")
    steps.run(registry.prisma_generate_command(), cwd=project_dir)

    logger.info("Updating src/app/globals.css and src/app/page.tsx with custom content...")
    for f in starter.app_files():
        steps.write(project_dir, f)

    if options.git:
        logger.info("Initializing Git repository...")
        for cmd in registry.git_commands(settings.commit_message):
            steps.run(cmd, cwd=project_dir)
    else:
        steps.skip("git")

    if options.open_ide:
        logger.info("Opening the project in %s...", settings.ide_command)
        steps.run(registry.ide_command(settings.ide_command), cwd=project_dir)
    else:
        steps.skip("open-ide")

    if options.launch:
        logger.info("Starting Prisma Studio...")
        steps.spawn(registry.prisma_studio_command(), cwd=project_dir)
        logger.info("Starting the development server...")
        steps.spawn(registry.dev_server_command(), cwd=project_dir)
    else:
        steps.skip("prisma-studio")
        steps.skip("dev-server")

    logger.info("=== Project setup completed successfully! ===")
    return report


def _write_schema(
    project_dir: Path,
    *,
    settings: SetupSettings,
    runner: CommandRunner,
    prompter: Prompter,
    report: SetupReport,
) -> None:
    has_model = settings.ask_custom_model and prompter.confirm(
        "Do you have a Prisma model ready? (y/no): "
    )
    if not has_model:
        logger.info("No custom model provided. Using default User model...")
        write_default_schema(project_dir)
        report.files.append("prisma/schema.prisma")
        return

    fragment = capture_schema_fragment(
        project_dir, runner=runner, prompter=prompter, editor=settings.editor
    )
    if fragment is None:
        report.aborted = True
        report.abort_reason = "custom model input not confirmed"
        raise SetupAborted("Model input not complete", report=report)

    logger.info("Adding your model to schema.prisma...")
    append_schema_fragment(project_dir, fragment)
    report.custom_model = True
    report.files.append("prisma/schema.prisma")
