from rich.console import Console

# log messages only, stdout is reserved for the result line and usage text
console = Console(stderr=True, quiet=True)
