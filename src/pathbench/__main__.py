"""Allow ``python -m pathbench``."""

from pathbench.cli import main

main()
