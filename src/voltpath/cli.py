import logging
from pathlib import Path

import click

from voltpath.config import LayoutConfig
from voltpath.constants import LOG_FORMAT, PROFILE_GVIMRC, PROFILE_VIMRC
from voltpath.errors import (
    ExecutableNotFoundError,
    HomeDirectoryUnresolvableError,
    InvalidFormatError,
)
from voltpath.layout import (
    build_info_json,
    bundled_plugconf,
    clone_url,
    config_toml,
    decode_repos_path,
    encode_repos_path,
    full_repos_path,
    lock_json,
    plugconf,
    rc_dir,
    temp_dir,
    trx_lock,
    vim_dir,
    vim_volt_dir,
    vim_volt_opt_dir,
    vim_volt_start_dir,
)
from voltpath.repos import ReposPath, normalize_local_repos, normalize_repos
from voltpath.vim import look_up_gvimrc, look_up_vimrc, vim_executable

local_option = click.option(
    "--local",
    "-L",
    "local",
    is_flag=True,
    help="Treat names without a slash as local plugins.",
)


@click.group(invoke_without_command=True)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging.")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Resolve volt repository names and filesystem paths.

    \b
    Examples:
        voltpath normalize tyru/caw.vim
        voltpath path https://github.com/tyru/caw.vim.git
        voltpath env
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _load_config() -> LayoutConfig:
    """Read the environment, aborting when no home directory is set."""
    try:
        return LayoutConfig.from_env()
    except HomeDirectoryUnresolvableError as exc:
        click.secho(f"Error: {exc}", fg="red", err=True)
        raise SystemExit(1) from exc


def _normalize(repo: str, local: bool) -> ReposPath:
    try:
        return normalize_local_repos(repo) if local else normalize_repos(repo)
    except InvalidFormatError as exc:
        raise click.ClickException(str(exc)) from exc


def _echo_path(label: str, path: Path | str) -> None:
    click.echo(f"  {label:<18}{click.style(str(path), fg='blue')}")


@main.command()
@click.argument("repos", nargs=-1, required=True)
@local_option
def normalize(repos: tuple[str, ...], local: bool) -> None:
    """Print the canonical name of each repository."""
    for repo in repos:
        click.echo(_normalize(repo, local))


@main.command()
@click.argument("repo")
@local_option
def path(repo: str, local: bool) -> None:
    """Show where a repository lives on disk."""
    config = _load_config()
    repos = _normalize(repo, local)
    click.echo(f"\n  Repository: {click.style(repos, fg='cyan', bold=True)}\n")
    _echo_path("Clone dir:", full_repos_path(config, repos))
    _echo_path("Clone URL:", clone_url(repos))
    _echo_path("Plugconf:", plugconf(config, repos))
    _echo_path("Vim opt dir:", encode_repos_path(config, repos))


@main.command()
@click.argument("names", nargs=-1, required=True)
def decode(names: tuple[str, ...]) -> None:
    """Print the repository encoded in each opt directory name."""
    for name in names:
        click.echo(decode_repos_path(name))


@main.command()
@click.argument("name")
def profile(name: str) -> None:
    """Show the rc directory of a profile."""
    config = _load_config()
    profile_dir = rc_dir(config, name)
    _echo_path("Profile dir:", profile_dir)
    _echo_path("vimrc:", profile_dir / PROFILE_VIMRC)
    _echo_path("gvimrc:", profile_dir / PROFILE_GVIMRC)


@main.command()
def env() -> None:
    """Show the resolved volt and vim directories."""
    config = _load_config()
    click.secho("Volt:", bold=True)
    _echo_path("Home:", config.home)
    _echo_path("VOLTPATH:", config.volt_path)
    _echo_path("Lock file:", lock_json(config))
    _echo_path("Config:", config_toml(config))
    _echo_path("Transaction lock:", trx_lock(config))
    _echo_path("Temp dir:", temp_dir(config))

    click.secho("\nVim:", bold=True)
    _echo_path("Vim dir:", vim_dir(config))
    _echo_path("Pack dir:", vim_volt_dir(config))
    _echo_path("Opt dir:", vim_volt_opt_dir(config))
    _echo_path("Start dir:", vim_volt_start_dir(config))
    _echo_path("Build info:", build_info_json(config))
    _echo_path("Bundled plugconf:", bundled_plugconf(config))
    try:
        _echo_path("Executable:", vim_executable(config))
    except ExecutableNotFoundError as exc:
        click.secho(f"  Executable:       {exc}", fg="yellow")

    for label, found in (
        ("vimrc:", look_up_vimrc(config)),
        ("gvimrc:", look_up_gvimrc(config)),
    ):
        if not found:
            click.echo(f"  {label:<18}{click.style('(none)', fg='yellow')}")
        for rc_path in found:
            _echo_path(label, rc_path)


if __name__ == "__main__":
    main()
