import click

from libfinder.cli.context import show_ambiguity
from libfinder.resolution.errors import AmbiguousMatchError
from libfinder.utils.file_utils import is_readable


@click.command('locate')
@click.argument('name')
@click.option('--select', '-n', 'selector', type=int, help='Pick the N-th match (1-based) when several exist.')
@click.option('--suffix', '-s', 'suffixes', multiple=True, help='Suffix to try; repeat to give several.')
@click.option('--readable', is_flag=True, help='Only accept files the current user can read.')
@click.option('--all', 'show_all', is_flag=True, help='List every match instead of failing on ambiguity.')
@click.pass_context
def locate(ctx, name, selector, suffixes, readable, show_all):
    """Show where library NAME is on the search path."""
    cli = ctx.obj
    try:
        hits = cli.resolver.locate_library(
            name,
            cli.environment(),
            selector=selector,
            predicate=is_readable if readable else None,
            suffixes=list(suffixes) if suffixes else None,
            interactive=show_all,
        )
    except AmbiguousMatchError as e:
        show_ambiguity(e)
        return

    if not hits:
        click.echo(f"No library {name} in search path", err=True)
        ctx.exit(1)
    for path in hits:
        click.echo(str(path))
