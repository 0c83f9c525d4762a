"""
CLI tool for member search.

Provides commands for creating and seeding the database and for running
searches with the same repository the HTTP API uses.
"""

import asyncio
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from sqlalchemy.exc import SQLAlchemyError

from roster.exceptions import DatabaseError, ValidationError
from roster.repositories.member_repository import MemberQueryRepository
from roster.schemas.filters import MemberSearchCondition
from roster.schemas.member import MemberTeamDto
from roster.schemas.page import PageRequest
from roster.storage.db import async_session, init_db
from roster.storage.pagination import CountStrategy
from roster.storage.seed import seed_sample_data

# Initialize Typer app with help text
typer_app = typer.Typer(
    name="roster-cli",
    help="Member search CLI - seed sample data and run filtered searches",
    add_completion=False,
)
console = Console()


def _members_table(members: list[MemberTeamDto], title: str) -> Table:
    table = Table(
        "ID", "Username", "Age", "Team ID", "Team", title=title, show_lines=True
    )
    for member in members:
        table.add_row(
            str(member.member_id),
            member.username,
            str(member.age),
            "-" if member.team_id is None else str(member.team_id),
            member.team_name or "[dim]no team[/dim]",
        )
    return table



def _fail(title: str, detail: str, hint: str | None = None) -> NoReturn:
    console.print()
    console.print(
        Panel.fit(
            f"[red]{title}[/red]\n\n{escape(detail)}",
            border_style="red",
            title="Error",
        )
    )
    if hint:
        console.print()
        console.print(f"[yellow]Hint:[/yellow] {hint}")
    console.print()
    raise typer.Exit(code=1)


def _run_query(coro):
    """Run a repository call, turning known failures into a clean exit."""
    try:
        return asyncio.run(coro)
    except ValidationError as e:
        _fail("Invalid request", e.message)
    except DatabaseError as e:
        _fail(
            "Database error",
            e.message,
            hint="Create the tables with [cyan]python cli.py init-db[/cyan]",
        )


@typer_app.command(name="init-db")
def init_db_command():
    """
    Create the member and team tables.

    Example:
        python cli.py init-db
    """
    try:
        asyncio.run(init_db())
    except SQLAlchemyError as e:
        _fail("Could not create tables", str(e))
    console.print("[green]Tables created[/green]")


@typer_app.command()
def seed():
    """
    Create the tables and insert two teams with two members each.

    Example:
        python cli.py seed
    """

    async def _seed() -> int:
        await init_db()
        async with async_session() as session:
            members = await seed_sample_data(session)
            await session.commit()
            return len(members)

    try:
        count = asyncio.run(_seed())
    except SQLAlchemyError as e:
        _fail("Could not seed sample data", str(e))
    console.print(f"[green]Inserted {count} members[/green]")


@typer_app.command()
def search(
    username: str = typer.Option(None, help="Exact username"),
    team_name: str = typer.Option(None, "--team", help="Exact team name"),
    age_goe: int = typer.Option(None, "--age-goe", help="Minimum age"),
    age_loe: int = typer.Option(None, "--age-loe", help="Maximum age"),
):
    """
    Display every member matching the filters.

    Example:
        python cli.py search --team teamB --age-goe 35
    """
    condition = MemberSearchCondition(
        username=username, team_name=team_name, age_goe=age_goe, age_loe=age_loe
    )
    members = _run_query(MemberQueryRepository().search(condition))

    console.print()
    console.print(_members_table(members, "Members"))
    console.print(f"[bold]Matches:[/bold] {len(members)}")


@typer_app.command()
def page(
    offset: int = typer.Option(0, help="Rows to skip"),
    limit: int = typer.Option(3, help="Page size"),
    username: str = typer.Option(None, help="Exact username"),
    team_name: str = typer.Option(None, "--team", help="Exact team name"),
    age_goe: int = typer.Option(None, "--age-goe", help="Minimum age"),
    age_loe: int = typer.Option(None, "--age-loe", help="Maximum age"),
    strategy: CountStrategy = typer.Option(
        CountStrategy.ELIDED, help="How the total is obtained"
    ),
):
    """
    Display one page of matching members and the total.

    Example:
        python cli.py page --offset 3 --limit 3 --strategy split
    """
    condition = MemberSearchCondition(
        username=username, team_name=team_name, age_goe=age_goe, age_loe=age_loe
    )
    try:
        page_request = PageRequest.of(offset, limit)
    except ValidationError as e:
        _fail("Invalid page request", e.message)

    result = _run_query(
        MemberQueryRepository().search_page(condition, page_request, strategy)
    )

    console.print()
    console.print(
        Panel.fit(
            f"[bold cyan]Page {result.page} of {result.pages}[/bold cyan] "
            f"(total {result.total}, strategy {strategy.value})",
            border_style="cyan",
        )
    )
    console.print(_members_table(result.content, "Members"))


if __name__ == "__main__":
    typer_app()
