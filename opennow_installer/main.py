"""
OpenNOW installer — CLI entrypoint.

Usage:
    opennow-install                 # interactive install
    opennow-install --no-deps       # skip the GStreamer prompt, don't install
    opennow-install detect --json   # show what would be installed
    python -m opennow_installer --help
"""

from __future__ import annotations

import json
import os
import signal
import sys
from pathlib import Path

import click

from opennow_installer import __version__
from opennow_installer.core.config.loader import ConfigError, load_settings
from opennow_installer.core.models.context import InstallContext, InstallPaths
from opennow_installer.core.models.settings import InstallerSettings
from opennow_installer.core.observability.logging_config import (
    LOG_FILE_ENV,
    LOG_FILE_LEVEL_ENV,
    resolve_level,
    setup_logging,
)
from opennow_installer.core.services.install.errors import InstallError
from opennow_installer.core.services.install.events import (
    DETAIL,
    INFO,
    SUCCESS,
    WARN,
    null_emit,
)
from opennow_installer.core.services.install.orchestration.orchestrator import (
    detect_host,
    run_install,
)

BANNER = r"""
  ___                   _   _  _____      __
 / _ \ _ __   ___ _ __ | \ | |/ _ \ \    / /
| | | | '_ \ / _ \ '_ \|  \| | | | \ \/\/ /
| |_| | |_) |  __/ | | | |\  | |_| |\    /
 \___/| .__/ \___|_| |_|_| \_|\___/  \/\/
      |_|
"""

DEPENDENCY_PROMPT = "Install GStreamer dependencies? [Y/n]"

_EVENT_STYLE = {
    INFO: ("[INFO]", "blue"),
    SUCCESS: ("[OK]", "green"),
    WARN: ("[WARN]", "yellow"),
}


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="opennow-install")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential log output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to installer.yml (default: ~/.config/opennow/installer.yml).",
)
@click.option(
    "--deps/--no-deps",
    "install_deps",
    default=None,
    help="Answer the GStreamer dependency prompt up front.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: Path | None,
    install_deps: bool | None,
) -> None:
    """OpenNOW installer — fetch and install the latest OpenNOW release."""
    setup_logging(
        level=resolve_level(debug=debug, verbose=verbose, quiet=quiet),
        log_file=os.environ.get(LOG_FILE_ENV),
        log_file_level=os.environ.get(LOG_FILE_LEVEL_ENV),
    )

    try:
        settings = load_settings(config_path)
    except ConfigError as e:
        _error(str(e))
        sys.exit(1)

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings

    if ctx.invoked_subcommand is None:
        _install(settings, install_deps)


@cli.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
def detect(as_json: bool) -> None:
    """Show the detected platform and package manager (no changes made)."""
    try:
        identity, pm = detect_host(emit=null_emit if as_json else _render_event)
    except InstallError as e:
        if as_json:
            click.echo(json.dumps({"error": e.message, "remediation": e.remediation}, indent=2))
        else:
            _error(e.message, e.remediation)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps({
            "platform": identity.model_dump(mode="json"),
            "package_manager": pm.value,
        }, indent=2))


# ── Install flow ────────────────────────────────────────────────


def _install(settings: InstallerSettings, install_deps: bool | None) -> None:
    previous = signal.signal(signal.SIGTERM, _on_sigterm)
    try:
        _print_banner()
        try:
            identity, pm = detect_host(emit=_render_event)

            click.echo()
            if install_deps is None:
                install_deps = _confirm_dependencies()
            click.echo()

            context = InstallContext(
                platform=identity,
                package_manager=pm,
                install_dependencies=install_deps,
                settings=settings,
                paths=InstallPaths.for_home(),
            )
            run_install(context, emit=_render_event)
        except InstallError as e:
            _error(e.message, e.remediation)
            sys.exit(1)
        except (KeyboardInterrupt, click.Abort):
            # click.prompt reports Ctrl-C and EOF as Abort
            click.echo()
            _error("Installation cancelled")
            sys.exit(130)
    finally:
        signal.signal(signal.SIGTERM, previous)

    click.echo()
    _render_event(SUCCESS, "Installation complete!")
    click.echo()
    click.echo(f"Enjoy {settings.app_name}! Report issues at: {settings.issues_url}")


def _confirm_dependencies() -> bool:
    """Ask once; anything but an explicit n/N means yes."""
    reply = click.prompt(DEPENDENCY_PROMPT, default="", show_default=False, prompt_suffix=" ")
    return reply.strip()[:1] not in ("n", "N")


def _on_sigterm(signum, frame) -> None:
    # SystemExit unwinds through the temp-dir context manager.
    raise SystemExit(128 + signum)


# ── Rendering ───────────────────────────────────────────────────


def _print_banner() -> None:
    click.secho(BANNER, fg="green")
    click.echo("Open Source GeForce NOW Client")
    click.echo()


def _render_event(level: str, message: str) -> None:
    if level == DETAIL or level not in _EVENT_STYLE:
        click.echo(message)
        return
    label, color = _EVENT_STYLE[level]
    click.secho(label, fg=color, nl=False)
    click.echo(f" {message}")


def _error(message: str, remediation: str = "") -> None:
    click.secho("[ERROR]", fg="red", nl=False)
    click.echo(f" {message}")
    if remediation:
        click.echo(f"  {remediation}")


if __name__ == "__main__":
    cli()
