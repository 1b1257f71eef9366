# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from cakecrumb.model.achievement import Achievement, is_cumulative
from cakecrumb.model.user_stats import UserStats
from cakecrumb.time import date_to_str_optional
from cakecrumb.view.util import progress_bar


def achievements_view(achievements: list[Achievement]) -> None:
    unlocked_count = sum(1 for a in achievements if a["is_unlocked"])

    achievements_table = Table(
        box=box.SIMPLE,
        title=f"{unlocked_count} / {len(achievements)} unlocked",
    )
    achievements_table.add_column("")
    achievements_table.add_column("achievement")
    achievements_table.add_column("description")
    achievements_table.add_column("progress")

    for achievement in achievements:
        if is_cumulative(achievement):
            progress = achievement["progress"] or 0
            goal = achievement["goal"] or 0
            progress_text = f"{progress_bar(progress, goal)} {progress}/{goal}"
        else:
            progress_text = "done" if achievement["is_unlocked"] else "locked"

        title = achievement["title"]
        if achievement["is_unlocked"]:
            title = f"[bold green]{title}[/bold green]"
        else:
            title = f"[dim]{title}[/dim]"

        achievements_table.add_row(
            achievement["icon"], title, achievement["description"], progress_text
        )

    console = Console()
    console.print(achievements_table)


def stats_view(
    user_stats: UserStats, coins: int, berries: int, achievements: list[Achievement]
) -> None:
    unlocked_count = sum(1 for a in achievements if a["is_unlocked"])

    stats_table = Table(box=box.SIMPLE, show_header=False)
    stats_table.add_column("stat")
    stats_table.add_column("value")

    stats_table.add_row("level", str(user_stats["level"]))
    stats_table.add_row(
        "experience",
        f"{progress_bar(user_stats['experience'], user_stats['experience_to_next_level'])}"
        f" {user_stats['experience']} / {user_stats['experience_to_next_level']} XP",
    )
    stats_table.add_row("streak", f"{user_stats['streak']} day(s)")
    stats_table.add_row(
        "last active", date_to_str_optional(user_stats["last_active_date"]) or "never"
    )
    stats_table.add_row("coins", str(coins))
    stats_table.add_row("berries", str(berries))
    stats_table.add_row("achievements", f"{unlocked_count} / {len(achievements)}")

    console = Console()
    console.print(stats_table)
