from hncli.cli import cli

cli()
