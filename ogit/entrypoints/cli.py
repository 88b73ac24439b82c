"""ogit CLI entrypoint.

Without arguments ogit opens the interactive controller for the working
copy. With arguments it forwards them to git and prints git's output.
"""

from __future__ import annotations

import functools
import logging
import sys
from pathlib import Path

import click

from ogit.core.errors import OgitCliError, git_not_found_error, not_a_repository_error
from ogit.domain.config import OgitConfig
from ogit.domain.exceptions import OgitDomainError
from ogit.version import __version__

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"


def handle_cli_errors(command_name: str):
    """Decorator to handle common CLI errors.

    OgitCliError propagates unchanged to use its own formatting. Domain and
    runtime errors are converted to OgitCliError with a hint, and tracebacks
    are shown in verbose mode.

    Args:
        command_name: Name of the command for error messages.

    Returns:
        Decorated function with error handling.
    """

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except OgitCliError:
                raise
            except OgitDomainError as e:
                raise OgitCliError(e.message, hint=e.hint) from e
            except RuntimeError as e:
                raise OgitCliError(
                    str(e),
                    hint="Run with --verbose for more details",
                ) from e
            except Exception as e:
                ctx = click.get_current_context()
                if (ctx.obj or {}).get("verbose", False):
                    import traceback

                    traceback.print_exc()
                raise OgitCliError(
                    f"Unexpected error in {command_name}: {e}",
                    hint="Run with --verbose for more details",
                ) from e

        return wrapper

    return decorator


def _load_config(repo_root: Path) -> OgitConfig:
    """Load configuration for the given working copy.

    Args:
        repo_root: Top level of the working copy.

    Returns:
        OgitConfig with merged global and local settings.
    """
    from ogit.adapters.factory import ConfigFactory

    return ConfigFactory().create_config_provider().load(repo_root)


def _configure_logging(config: OgitConfig, verbose: bool, log_file: Path | None) -> bool:
    """Set up the root logger from flags and config.

    Args:
        config: Loaded configuration.
        verbose: Force DEBUG level.
        log_file: Log file from the command line, overrides config.

    Returns:
        True when logs go to a file and can stay enabled under the UI.
    """
    level = logging.DEBUG if verbose else config.log.level_number
    target = log_file or (Path(config.log.file).expanduser() if config.log.file else None)
    handler: logging.Handler
    if target is not None:
        handler = logging.FileHandler(target, encoding="utf-8")
    else:
        handler = logging.StreamHandler()
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=[handler])
    return target is not None


@click.command(
    context_settings={
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
    }
)
@click.version_option(version=__version__, prog_name="ogit")
@click.option(
    "-C",
    "--repo",
    "repo",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=Path("."),
    help="Run as if started in this directory.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging and tracebacks.",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write logs to this file (keeps logging on while the UI runs).",
)
@click.argument("git_args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
@handle_cli_errors("ogit")
def cli(
    ctx: click.Context,
    repo: Path,
    verbose: bool,
    log_file: Path | None,
    git_args: tuple[str, ...],
) -> None:
    """ogit - an interactive controller for git working copies.

    Run without arguments to stage, commit, diff, branch, stash, reset, push
    and pull from a single screen. Any other arguments are passed to git
    unchanged, e.g. 'ogit log --oneline', and work outside a working copy
    too ('ogit init', 'ogit clone').

    \b
    -C/--repo, -v/--verbose, --log-file, --version and --help are read by
    ogit itself when they come before the git command. Put '--' first to
    hand any of them to git, e.g. 'ogit -- --version'.
    """
    from ogit.adapters.factory import ControllerFactory, RepositoryFactory

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose

    if git_args:
        _configure_logging(_load_config(repo.resolve()), verbose, log_file)
        try:
            output = RepositoryFactory().run_git(repo, list(git_args))
        except FileNotFoundError:
            git_not_found_error()
        for line in output.splitlines():
            click.echo(line)
        return

    try:
        repository = RepositoryFactory().create_git_adapter(repo)
    except RuntimeError:
        not_a_repository_error(str(repo.resolve()))
    except FileNotFoundError:
        git_not_found_error()

    config = _load_config(repository.repo_root)
    logs_to_file = _configure_logging(config, verbose, log_file)
    repository.remote = config.remote.name

    ui = ControllerFactory(config).create_ui(repository)
    ui.run(mute_logging=not logs_to_file)


def main() -> int:
    """Main entrypoint for the CLI."""
    try:
        cli(obj={})
        return 0
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
