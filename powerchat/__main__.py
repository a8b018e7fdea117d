from powerchat.main import cli

cli()
