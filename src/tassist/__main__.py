"""Allow ``python -m tassist``."""

from tassist.cli.cli import main

main()
