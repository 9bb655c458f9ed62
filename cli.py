"""CLI commands for EventHost administration."""

import asyncio
from uuid import UUID

import typer

from src.accounts.dtos import UserAlreadyExistsError
from src.accounts.repository.read_models import SqlAccountReadModel
from src.accounts.repository.write_models import SqlAccountWriteModel
from src.accounts.security import hash_password
from src.config.settings import settings
from src.email_service import get_email_service
from src.events.repository.read_models import SqlEventReadModel
from src.invitations.notifications import send_invitation_email
from src.invitations.repository.write_models import SqlInvitationWriteModel
from src.polls.repository.read_models import SqlPollReadModel

app = typer.Typer(help="CLI commands for EventHost administration")


@app.command()
def create_host(
    email: str = typer.Argument(..., help="Email address to sign in with"),
    password: str = typer.Argument(..., help="Initial password"),
):
    """Create a user account together with its host profile."""
    try:
        user = asyncio.run(SqlAccountWriteModel().create_user(email, hash_password(password)))
    except UserAlreadyExistsError:
        typer.secho(f"A user with email {email} already exists", fg=typer.colors.RED)
        raise typer.Exit(1)

    typer.secho("Host created!", fg=typer.colors.GREEN)
    typer.secho(f"  Email: {user.email}", fg=typer.colors.BLUE)
    typer.secho(f"  User ID: {user.id}", fg=typer.colors.CYAN)


@app.command()
def invite(
    event_id: str = typer.Argument(..., help="Event UUID"),
    email: str = typer.Argument(..., help="Guest email address"),
    name: str = typer.Option(None, "--name", "-n", help="Guest name"),
    send: bool = typer.Option(True, "--send/--no-send", help="Email the invitation"),
):
    """Invite one guest to an event and print their personal link."""
    base_url = settings.get_base_url(fallback=f"http://localhost:{settings.app_port}")

    async def _invite():
        event = await SqlEventReadModel().get_event(UUID(event_id))
        if not event:
            raise ValueError(f"Event not found: {event_id}")
        invitation = await SqlInvitationWriteModel().create_invitation(
            event.id, email=email, name=name
        )
        if send:
            host = await SqlAccountReadModel().get_host(event.host_id)
            await send_invitation_email(get_email_service(), event, host, invitation, base_url)
        return event, invitation

    try:
        event, invitation = asyncio.run(_invite())
    except ValueError as e:
        typer.secho(str(e), fg=typer.colors.RED)
        raise typer.Exit(1)

    typer.secho(f"Invited {email} to {event.title}", fg=typer.colors.GREEN)
    typer.secho(f"  Invite URL: {base_url}/invite/{invitation.token}", fg=typer.colors.CYAN)
    if send:
        typer.secho("  Invitation email sent", fg=typer.colors.GREEN)


@app.command()
def poll_results(
    poll_id: str = typer.Argument(..., help="Poll UUID"),
):
    """Print the current tally of a poll."""
    results = asyncio.run(SqlPollReadModel().get_results(UUID(poll_id)))
    if not results:
        typer.secho(f"Poll not found: {poll_id}", fg=typer.colors.RED)
        raise typer.Exit(1)

    poll = results.poll
    typer.secho(f"{poll.title} ({poll.effective_status().value})", fg=typer.colors.GREEN)
    for option, count in zip(poll.options, results.vote_counts):
        typer.secho(f"  {option}: {count}", fg=typer.colors.BLUE)
    typer.secho(f"  Total votes: {results.total_votes}", fg=typer.colors.CYAN)


if __name__ == "__main__":
    app()
