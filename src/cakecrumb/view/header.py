# SPDX-License-Identifier: MIT

from rich.console import Console
from rich.padding import Padding

from cakecrumb.model.user_stats import UserStats


def header(report_name: str, user_stats: UserStats, coins: int, berries: int) -> None:
    console = Console()
    console.print()
    console.print(
        Padding(
            f"[bold plum1]{report_name}[/bold plum1]  "
            f"[gold1]{coins} coins[/gold1]  "
            f"[medium_purple1]{berries} berries[/medium_purple1]  "
            f"[cyan]Lvl {user_stats['level']}[/cyan]",
            (0, 0, 0, 1),
        )
    )
