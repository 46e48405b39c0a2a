import click
from libfinder import __version__

from .commands.locate import locate
from .commands.find_library import find_library
from .commands.find_definition import find_definition
from .commands.complete import complete
from .commands.config import config
from .context import CliContext

from libfinder.config.loader import load_config
from libfinder.config.logging import LoggingConfig
from libfinder.utils.logging import setup_logging
from pathlib import Path


@click.group(context_settings=dict(help_option_names=['-h', '--help']))
@click.option('--config', 'config_path', type=click.Path(), help='Path to a .libfinder.yaml file.')
@click.option('--env-file', type=click.Path(exists=True, dir_okay=False), help='YAML snapshot of the host environment.')
@click.option('--verbose', '-v', is_flag=True, help='Verbose output.')
@click.option('--json-logs', is_flag=True, help='Emit log events as JSON.')
@click.version_option(version=__version__)
@click.pass_context
def main(ctx, config_path, env_file, verbose, json_logs):
    """
    libfinder: locate library sources and symbol definitions.
    """
    project_path = Path(config_path).parent if config_path else Path.cwd()
    try:
        raw_config = load_config(str(project_path))
        cli_context = CliContext(raw_config, env_file)
    except ValueError as e:
        raise click.ClickException(str(e))

    logging_config = LoggingConfig(**raw_config.get('logging', {}))
    setup_logging(
        log_level="DEBUG" if verbose else logging_config.level,
        json_logs=json_logs or logging_config.json_logs,
    )

    ctx.obj = cli_context

main.add_command(locate)
main.add_command(find_library)
main.add_command(find_definition)
main.add_command(complete)
main.add_command(config)

if __name__ == '__main__':
    main()
