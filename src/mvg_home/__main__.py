"""Allow running as ``python -m mvg_home``."""

from mvg_home.cli import cli_main

cli_main()
