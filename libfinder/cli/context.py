from pathlib import Path
from typing import Optional

import click

from libfinder.config.resolver import ResolverConfig
from libfinder.models.environment import HostEnvironment, load_environment
from libfinder.resolution.errors import AmbiguousMatchError
from libfinder.resolution.resolver import Resolver
from libfinder.cli.formatter import console, format_candidates
from libfinder.utils.file_utils import read_source_bytes


class CliContext:
    def __init__(self, config: dict, env_file: Optional[str]):
        self.config = config
        self.resolver = Resolver(ResolverConfig.model_validate(config["resolver"]))
        self._env_file = env_file

    def environment(self) -> HostEnvironment:
        if self._env_file is None:
            return HostEnvironment()
        return load_environment(Path(self._env_file))


def show_ambiguity(error: AmbiguousMatchError) -> None:
    console.print(format_candidates(error.name, error.candidates))
    raise click.ClickException(f"{error}; rerun with --select N")


def insert_file(path: Path) -> None:
    click.echo(read_source_bytes(path).decode("utf-8", errors="replace"), nl=False)


def print_path(path: Path) -> None:
    click.echo(str(path))
