""" So that `python -m narsese` works the same as the `narsese` command. """
from .cmdline import main

main()
