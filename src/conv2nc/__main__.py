"""Allow ``python -m conv2nc``."""

from conv2nc.cli.cli import main

main()
