"""
Same as the `eswalk` command:

    python -m eswalk tree.json --normalize --trace
"""
from .cmdline import main

main()
