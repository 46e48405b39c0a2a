import click


@click.command('complete')
@click.argument('prefix', default='')
@click.option('--flush', is_flag=True, help='Discard the cached completion table first.')
@click.pass_context
def complete(ctx, prefix, flush):
    """List known library names starting with PREFIX."""
    cli = ctx.obj
    if flush:
        cli.resolver.flush_completion_cache()
    for name in sorted(cli.resolver.completions(prefix, cli.environment())):
        click.echo(name)
