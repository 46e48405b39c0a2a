import click

from libfinder.cli.context import insert_file, print_path, show_ambiguity
from libfinder.resolution.errors import AmbiguousMatchError, NotFoundError


@click.command('find-library')
@click.argument('name')
@click.option('--select', '-n', 'selector', type=int, help='Pick the N-th match (1-based) when several exist.')
@click.option('--insert', is_flag=True, help='Print the file contents instead of its path.')
@click.pass_context
def find_library(ctx, name, selector, insert):
    """Resolve library NAME to its source file."""
    cli = ctx.obj
    try:
        location = cli.resolver.resolve_library(
            name,
            cli.environment(),
            selector=selector,
            action=insert_file if insert else print_path,
        )
    except AmbiguousMatchError as e:
        show_ambiguity(e)
        return
    except NotFoundError as e:
        raise click.ClickException(str(e))

    if location.note:
        click.echo(f"Note: {location.note}", err=True)
