"""CLI interface for importing r2modman profiles into Valheim."""

import logging
from typing import Any, Optional

import click
from click.core import ParameterSource

from .config import config
from .exceptions import ConfigurationError, R2ImportError
from .manifest import disabled_package_names, load_packages
from .output import OutputFormatter
from .paths import (
    MANIFEST_FILE_NAME,
    default_r2modman_locations,
    default_valheim_locations,
    profile_path,
    resolve_path,
    validate_profile_path,
    validate_r2modman_path,
    validate_valheim_path,
)
from .process import is_process_running
from .sync import SyncEngine, build_exclusions

logger = logging.getLogger(__name__)

DEFAULT_PROFILE = "Default"


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S",
        )
        # Enable debug logging for r2import modules
        logging.getLogger("r2import").setLevel(logging.DEBUG)
    else:
        # Set default logging level to WARNING to suppress debug/info messages
        logging.basicConfig(level=logging.WARNING)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("name", default=DEFAULT_PROFILE)
@click.option(
    "--use-defaults",
    "-d",
    is_flag=True,
    help="Attempt to import using default values.",
)
@click.option(
    "--r2modman-path",
    "-r",
    envvar="R2IMPORT_R2MODMAN_PATH",
    default=None,
    help=(
        "Specifies the path of r2modman. Defaults to "
        "%USERPROFILE%\\AppData\\Roaming\\r2modmanPlus-local"
    ),
)
@click.option(
    "--valheim-path",
    "-v",
    envvar="R2IMPORT_VALHEIM_PATH",
    default=None,
    help=(
        "Specifies the path of Valheim. Defaults to current directory or "
        "%ProgramFiles%\\Steam\\steamapps\\common\\Valheim"
    ),
)
@click.option(
    "--preserve-configs",
    "-p",
    is_flag=True,
    help="Preserves your current Valheim\\BepInEx\\config directory.",
)
@click.option(
    "--save",
    is_flag=True,
    help="Save the r2modman and Valheim paths for future imports.",
)
@click.option(
    "--dry-run", is_flag=True, help="Show what would be imported without importing"
)
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output")
@click.option("--json", is_flag=True, help="Output in JSON format")
@click.option("--verbose", is_flag=True, help="Enable verbose/debug logging output")
@click.version_option(package_name="r2import")
@click.pass_context
def main(
    ctx: Any,
    name: str,
    use_defaults: bool,
    r2modman_path: Optional[str],
    valheim_path: Optional[str],
    preserve_configs: bool,
    save: bool,
    dry_run: bool,
    quiet: bool,
    json: bool,
    verbose: bool,
) -> None:
    """Import an r2modman profile into a Valheim directory.

    NAME: The name of the profile to be imported (default: Default).

    Examples:
        r2import -d                              # Import "Default" profile
        r2import MyProfile -p                    # Keep BepInEx/config as is
        r2import -r D:\\r2modman -v D:\\Valheim    # Explicit paths
        r2import MyProfile --dry-run             # Preview changes
    """
    out = OutputFormatter(json_output=json, quiet=quiet)
    _configure_logging(verbose)

    # A bare invocation never starts an import
    sources = [ctx.get_parameter_source(param) for param in ctx.params]
    if all(source == ParameterSource.DEFAULT for source in sources):
        out.error(
            "No options specified. Please use -d to attempt import with defaults, "
            "or -h for help."
        )
        ctx.exit(1)

    try:
        r2path = resolve_path(
            r2modman_path, default_r2modman_locations, validate_r2modman_path
        )
        if r2path is None:
            raise ConfigurationError(
                "Please specify a valid r2modman path with option -r."
            )
        logger.debug(f"Found path for r2modman: {r2path}")

        valpath = resolve_path(
            valheim_path, default_valheim_locations, validate_valheim_path
        )
        if valpath is None:
            raise ConfigurationError(
                "Please specify a valid Valheim path with option -v."
            )
        logger.debug(f"Found path for Valheim: {valpath}")

        profile_dir = profile_path(r2path, name)
        if not validate_profile_path(profile_dir):
            raise ConfigurationError(f"Profile path is invalid: {profile_dir}")
        logger.debug(f"Profile path validated: {profile_dir}")

        if is_process_running():
            raise ConfigurationError(
                "Valheim is currently running. Please exit the game and rerun."
            )

        packages = load_packages(profile_dir / MANIFEST_FILE_NAME)
        exclusions = build_exclusions(packages, preserve_config=preserve_configs)

        engine = SyncEngine(output=out, dry_run=dry_run)
        outcome = engine.run(
            profile_dir,
            valpath,
            exclusions=exclusions,
            disabled_names=disabled_package_names(packages),
            profile_name=name,
        )
    except R2ImportError as e:
        out.error(f"Error. {e}")
        ctx.exit(1)
        return  # Unreachable, but helps type checker
    except KeyboardInterrupt:
        out.warning("\nImport cancelled by user")
        ctx.exit(130)  # Standard exit code for SIGINT
        return

    if out.json_output:
        out.output_json(outcome.to_dict())

    if outcome.fatal:
        ctx.exit(outcome.exit_code)

    if save and not dry_run:
        saved_to = config.save_paths(r2path, valpath)
        out.info(f"Saved r2modman and Valheim paths to {saved_to}")
