"""Typer CLI application for browsing Open Trivia DB."""

import asyncio
import html
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from trivia_client import __version__
from trivia_client.client.asynchronous import AsyncTriviaClient
from trivia_client.client.blocking import TriviaClient
from trivia_client.config.logging import configure_logging
from trivia_client.config.settings import Settings, get_settings
from trivia_client.errors import TriviaError
from trivia_client.models.trivia import (
    CategoryResponse,
    QuestionDifficulty,
    QuestionRequest,
    QuestionResponse,
    QuestionType,
)

app = typer.Typer(
    name="trivia",
    help="Fetch trivia categories and questions from Open Trivia DB",
    add_completion=False,
)

console = Console()


def build_client(settings: Settings) -> TriviaClient:
    return TriviaClient.from_settings(settings)


def build_async_client(settings: Settings) -> AsyncTriviaClient:
    return AsyncTriviaClient.from_settings(settings)


def fail(message: str, error: Exception) -> NoReturn:
    """Report an error and exit with status 1."""
    console.print(f"[red]Error {message}:[/red] {escape(str(error))}", style="bold")
    raise typer.Exit(code=1)


@app.callback(invoke_without_command=True)
def callback(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Log level (DEBUG, INFO, WARNING, ERROR); defaults to TRIVIA_LOG_LEVEL",
    ),
) -> None:
    """
    Trivia client - fetch categories and questions from Open Trivia DB.

    Runs the blocking and async demo when no command is given.
    """
    configure_logging(log_level or get_settings().log_level)
    if ctx.invoked_subcommand is None:
        demo()


@app.command()
def demo() -> None:
    """Fetch categories and questions once blocking and once async."""
    settings = get_settings()
    request = QuestionRequest(amount=settings.default_amount)

    try:
        client = build_client(settings)
        console.print("\n[cyan]Blocking client[/cyan]")
        display_categories(client.fetch_categories())
        display_questions(client.fetch_questions(request))
    except TriviaError as e:
        fail("during blocking fetch", e)

    async def run_async() -> tuple[CategoryResponse, QuestionResponse]:
        async_client = build_async_client(settings)
        categories = await async_client.fetch_categories()
        questions = await async_client.fetch_questions(request)
        return categories, questions

    try:
        categories, questions = asyncio.run(run_async())
    except TriviaError as e:
        fail("during async fetch", e)

    console.print("\n[cyan]Async client[/cyan]")
    display_categories(categories)
    display_questions(questions)


@app.command()
def categories(
    use_async: bool = typer.Option(
        False,
        "--async/--blocking",
        help="Use the async client instead of the blocking one",
    ),
) -> None:
    """List all trivia categories."""
    settings = get_settings()
    try:
        if use_async:
            result = asyncio.run(build_async_client(settings).fetch_categories())
        else:
            result = build_client(settings).fetch_categories()
    except TriviaError as e:
        fail("fetching categories", e)

    display_categories(result)


@app.command()
def questions(
    amount: Optional[int] = typer.Option(
        None,
        "--amount",
        "-n",
        help="Number of questions (defaults to TRIVIA_DEFAULT_AMOUNT)",
        min=1,
        max=50,
    ),
    category: Optional[int] = typer.Option(
        None,
        "--category",
        "-c",
        help="Category id (see the 'categories' command)",
        min=1,
    ),
    difficulty: Optional[QuestionDifficulty] = typer.Option(
        None,
        "--difficulty",
        "-d",
        help="Question difficulty",
        case_sensitive=False,
    ),
    question_type: Optional[QuestionType] = typer.Option(
        None,
        "--type",
        "-t",
        help="Question type",
        case_sensitive=False,
    ),
    use_async: bool = typer.Option(
        False,
        "--async/--blocking",
        help="Use the async client instead of the blocking one",
    ),
) -> None:
    """
    Fetch a batch of questions.

    Example:
        trivia questions -n 5 -d easy -t boolean
    """
    settings = get_settings()
    request = QuestionRequest(
        amount=amount or settings.default_amount,
        category=category,
        difficulty=difficulty,
        type=question_type,
    )

    try:
        if use_async:
            result = asyncio.run(build_async_client(settings).fetch_questions(request))
        else:
            result = build_client(settings).fetch_questions(request)
        result.raise_for_response_code()
    except TriviaError as e:
        fail("fetching questions", e)

    display_questions(result)


@app.command()
def info() -> None:
    """Display the effective configuration."""
    settings = get_settings()
    info_text = f"""
[bold cyan]Trivia Client[/bold cyan]
Version: {__version__}

[bold]API:[/bold] {settings.base_url}
[bold]Timeout:[/bold] {settings.timeout_seconds}s
[bold]Default amount:[/bold] {settings.default_amount}
[bold]Log level:[/bold] {settings.log_level}
    """
    console.print(Panel(info_text, title="Trivia Client Info", border_style="cyan"))


def display_categories(response: CategoryResponse) -> None:
    """Display categories as a table."""
    table = Table(title="Categories", border_style="cyan")
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Name", style="white")

    for category in response.trivia_categories:
        table.add_row(str(category.id), escape(category.name))

    console.print()
    console.print(table)


def display_questions(response: QuestionResponse) -> None:
    """Display questions as a table, colour-coding difficulty."""
    if not response.ok:
        console.print(
            f"[yellow]API response code {response.response_code}[/yellow]"
        )

    table = Table(title="Questions", border_style="green")
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Difficulty")
    table.add_column("Category", style="white")
    table.add_column("Question", style="white")
    table.add_column("Answer", style="green")

    colours = {
        QuestionDifficulty.EASY: "green",
        QuestionDifficulty.MEDIUM: "yellow",
        QuestionDifficulty.HARD: "red",
    }

    # Texts arrive HTML-encoded by default
    for i, question in enumerate(response.results, start=1):
        colour = colours[question.difficulty]
        table.add_row(
            str(i),
            f"[{colour}]{question.difficulty.value}[/{colour}]",
            escape(html.unescape(question.category)),
            escape(html.unescape(question.question)),
            escape(html.unescape(question.correct_answer)),
        )

    console.print()
    console.print(table)


if __name__ == "__main__":
    app()
