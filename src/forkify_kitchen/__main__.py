from forkify_kitchen.cli import cli

cli()
