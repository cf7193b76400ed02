"""Interactive CLI application."""
import os
import sys
from datetime import datetime

from loguru import logger
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt, IntPrompt
from rich.table import Table

from adaptive_learn.adaptation import (
    DEFAULT_REMINDER_SETTINGS, calculate_best_learning_time, calculate_optimal_study_duration,
    get_time_of_day,
)
from adaptive_learn.models import CRITICAL, HIGH, MEDIUM, LOW, PerformanceFeedback
from adaptive_learn.prioritizer import prioritize_content
from adaptive_learn.profile import UserDataLoadError, load_content_items, load_user_data
from adaptive_learn.scheduler import (
    adjust_for_feedback, calculate_optimal_break_time, detect_study_pattern, generate_schedule,
)
from adaptive_learn.sequencer import recommend_sequence
from adaptive_learn.sessions import group_into_sessions
from adaptive_learn.study_mix import generate_balanced_mix

console = Console()

PRIORITY_COLORS = {
    CRITICAL: "red",
    HIGH: "dark_orange",
    MEDIUM: "yellow",
    LOW: "green",
}


def get_priority_color(priority: str | None) -> str:
    return PRIORITY_COLORS.get(priority, "dim")


def show_welcome(user_data, now: datetime):
    period = calculate_best_learning_time(user_data.habits)
    reminders = "on" if DEFAULT_REMINDER_SETTINGS.enabled else "off"
    console.print(Panel(
        f"[bold]Welcome back, {user_data.name or 'learner'}[/bold]\n"
        f"[dim]It's {get_time_of_day(now.hour)} - you study best in the {period}. "
        f"Reminders {reminders}.[/dim]",
        title="AdaptiveLearn", border_style="blue",
    ))


def show_menu():
    console.print("\n[bold]Commands:[/bold]")
    commands = [
        ("plan", "7-day adaptive schedule"),
        ("sessions", "Prioritized study sessions"),
        ("sequence", "Recommended study order"),
        ("mix", "Balanced study mix"),
        ("pattern", "Your study pattern"),
        ("feedback", "Adjust schedule after studying"),
        ("quit", "Exit"),
    ]
    for cmd, desc in commands:
        console.print(f"  [cyan]{cmd:<14}[/cyan] {desc}")


def render_schedule(schedule: list) -> None:
    if not schedule:
        console.print("[yellow]Nothing to schedule yet![/yellow]")
        return
    table = Table(title=f"{len(schedule)}-Day Study Plan")
    table.add_column("Date")
    table.add_column("Time", justify="right")
    table.add_column("Items")
    table.add_column("Study", justify="right")
    table.add_column("Break", justify="right")
    for session in schedule:
        table.add_row(
            f"{session.date:%a %d %b}",
            f"{session.date:%H:%M}",
            ", ".join(item.title or item.id for item in session.items),
            f"{session.duration} min",
            f"{session.break_duration} min",
        )
    console.print(table)


def cmd_plan(user_data, items: list, now: datetime) -> list:
    schedule = generate_schedule(user_data, items, start_date=now)
    render_schedule(schedule)
    return schedule


def cmd_sessions(user_data, items: list, now: datetime) -> None:
    duration = calculate_optimal_study_duration(user_data.habits, user_data.performance)
    prioritized = prioritize_content(items, user_data, now=now)
    sessions = group_into_sessions(prioritized, session_duration=duration)
    if not sessions:
        console.print("[yellow]No content to study![/yellow]")
        return
    console.print(f"\n[bold]Study Sessions[/bold] - target {duration} min each\n")
    for i, session in enumerate(sessions, 1):
        color = get_priority_color(session.priority)
        lines = [
            f"[{get_priority_color(item.priority)}]{item.priority_score:>2}[/] {item.title or item.id}"
            for item in session.items
        ]
        rest = calculate_optimal_break_time(session.estimated_duration)
        console.print(Panel(
            "\n".join(lines) + f"\n[dim]{session.estimated_duration} min, then a {rest} min break[/dim]",
            title=f"Session {i} ([{color}]{session.priority}[/{color}])", border_style=color,
        ))


def cmd_sequence(items: list) -> None:
    table = Table(title="Recommended Sequence")
    table.add_column("#", justify="right")
    table.add_column("Subject", style="cyan")
    table.add_column("Item")
    table.add_column("Difficulty", justify="right")
    for i, item in enumerate(recommend_sequence(items), 1):
        table.add_row(str(i), item.subject or "general", item.title or item.id, str(item.difficulty))
    console.print(table)


def cmd_mix(user_data, items: list) -> None:
    mix = generate_balanced_mix(items, user_data.performance)
    table = Table(title="Balanced Study Mix")
    table.add_column("Category")
    table.add_column("Subject", style="cyan")
    table.add_column("Item")
    for item in mix:
        table.add_row(item.category, item.subject or "general", item.title or item.id)
    console.print(table)


def cmd_pattern(user_data) -> None:
    result = detect_study_pattern(user_data.habits)
    body = f"[bold]{result.pattern}[/bold]\n{result.recommendation}"
    if result.average_sessions is not None:
        body += (f"\n[dim]{result.average_sessions:.1f} sessions/day, "
                 f"{result.average_duration:.0f} min/session[/dim]")
    console.print(Panel(body, title="Study Pattern", border_style="cyan"))


def cmd_feedback(schedule: list, items: list, now: datetime) -> list:
    if not schedule:
        console.print("[yellow]Generate a plan first with 'plan'.[/yellow]")
        return schedule
    by_id = {item.id: item for item in items}
    answer = Prompt.ask("Items you struggled with (comma-separated ids)", default="")
    struggled = [by_id[i.strip()] for i in answer.split(",") if i.strip() in by_id]
    score = IntPrompt.ask("Average score for this round", default=0)
    feedback = PerformanceFeedback(struggled_items=struggled, average_score=score or None)
    updated = adjust_for_feedback(schedule, feedback, now=now)
    render_schedule(updated)
    return updated


def configure_logging() -> None:
    logger.remove()
    logger.add(
        sys.stderr,
        level=os.environ.get("ADAPTIVE_LEARN_LOG_LEVEL", "WARNING"),
        format="<level>{message}</level>",
    )


def main():
    configure_logging()
    try:
        user_data = load_user_data()
    except UserDataLoadError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)
    items = load_content_items()
    schedule = []

    show_welcome(user_data, datetime.now())

    while True:
        show_menu()
        choice = Prompt.ask("\n[bold]>[/bold]", default="plan").strip().lower()
        now = datetime.now()
        try:
            if choice == "plan":
                schedule = cmd_plan(user_data, items, now)
            elif choice == "sessions":
                cmd_sessions(user_data, items, now)
            elif choice == "sequence":
                cmd_sequence(items)
            elif choice == "mix":
                cmd_mix(user_data, items)
            elif choice == "pattern":
                cmd_pattern(user_data)
            elif choice == "feedback":
                schedule = cmd_feedback(schedule, items, now)
            elif choice in ("quit", "exit", "q"):
                console.print("[dim]Happy studying![/dim]")
                break
            else:
                console.print("[red]Unknown command. Try again.[/red]")
        except KeyboardInterrupt:
            console.print("\n[dim]Use 'quit' to exit.[/dim]")
        except Exception as e:
            logger.debug(f"Command {choice!r} failed: {e}")
            console.print(f"[red]Error: {e}[/red]")


if __name__ == "__main__":
    main()
