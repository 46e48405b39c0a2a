import click
import yaml


@click.group()
def config():
    """Inspect the libfinder configuration."""
    pass


@config.command('show')
@click.pass_context
def show(ctx):
    """Show the merged configuration."""
    click.echo(yaml.safe_dump(ctx.obj.config, sort_keys=False, allow_unicode=True))
