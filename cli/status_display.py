"""Token display for the CLI"""

from rich.table import Table

from pipeline import NSOSession, Splatoon3Session
from utils.redaction import redact


def show_tokens(nso: NSOSession, splatoon3: Splatoon3Session, console, reveal: bool = False):
    """
    Display the tokens produced by one pipeline run

    Args:
        nso: Session from the NSO login stage
        splatoon3: Splatoon 3 terminal tokens
        console: Rich console for output
        reveal: Print full token values instead of prefixes
    """
    show = (lambda token: token) if reveal else redact

    table = Table(title="NSO Tokens")
    table.add_column("Token", style="cyan")
    table.add_column("Value")

    table.add_row("session_token", show(nso.session_token))
    table.add_row("access_token", show(nso.credentials.access_token))
    table.add_row("id_token", show(nso.credentials.id_token))
    table.add_row("expires_in", f"{nso.credentials.expires_in}s")
    table.add_row("login_token", show(nso.login_token))
    table.add_row("web_token", show(splatoon3.web_token))
    table.add_row("bullet_token", show(splatoon3.bullet_token))

    console.print(table)
