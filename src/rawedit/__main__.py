"""Allow ``python -m rawedit``."""

from rawedit.cli.main import main

main()
