from rich.console import Console
from rich.table import Table
from rich.text import Text

from ssoutil.timefmt import EXPIRED
from ssoutil.utils import account_id_to_string


def print_role_table(rows: list[dict], console: Console | None = None) -> None:
    """Print parsed role ARNs as a rich table.

    Each row is {"Arn": str, "AccountId": int, "RoleName": str}.
    """
    console = console or Console()

    if not rows:
        console.print("\n[yellow]No valid role ARNs given.[/yellow]\n")
        return

    table = Table(title="IAM Roles", show_lines=False, title_style="bold cyan")
    table.add_column("#", style="dim", width=5, justify="right")
    table.add_column("Account ID", style="magenta", max_width=14)
    table.add_column("Role Name", style="cyan", max_width=64)
    table.add_column("ARN", style="green")

    for idx, row in enumerate(rows, 1):
        table.add_row(
            str(idx),
            account_id_to_string(row["AccountId"]),
            row["RoleName"] or "-",
            row["Arn"],
        )

    console.print()
    console.print(table)
    console.print(f"\n[bold]{len(rows)}[/bold] role(s) parsed.\n")


def print_time_remaining(remaining: str, console: Console | None = None) -> None:
    """Print a time_remain() result, red when expired."""
    console = console or Console()
    style = "bold red" if remaining == EXPIRED else "bold green"
    console.print(Text(remaining, style=style))
