from opennow_installer.main import cli

cli()
