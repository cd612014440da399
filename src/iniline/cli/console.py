from rich.console import Console

# Diagnostics only; parse results are echoed as-is by the CLI.
err_console = Console(
    stderr=True, markup=False, emoji=False, highlight=False, soft_wrap=True
)
