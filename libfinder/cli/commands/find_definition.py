import click

from libfinder.cli.context import insert_file
from libfinder.resolution.errors import DefinitionNotFoundError, ResolutionError


@click.command('find-definition')
@click.argument('symbol')
@click.option('--kind', '-k', type=click.Choice(['function', 'variable', 'face']), default='function', help='Kind of definition to look for.')
@click.option('--insert', is_flag=True, help='Print the file contents instead of its location.')
@click.pass_context
def find_definition(ctx, symbol, kind, insert):
    """Find the file and byte offset where SYMBOL is defined."""
    cli = ctx.obj
    try:
        location = cli.resolver.resolve_symbol_definition(
            symbol,
            cli.environment(),
            kind=kind,
            action=insert_file if insert else None,
        )
    except DefinitionNotFoundError as e:
        if not insert:
            click.echo(str(e.path))
        click.echo(f"Warning: {e}", err=True)
        ctx.exit(1)
    except ResolutionError as e:
        raise click.ClickException(str(e))

    if not insert:
        click.echo(f"{location.path}:{location.offset}")
