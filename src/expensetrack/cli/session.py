"""Local login session for the CLI.

The session file only remembers who logged in. Commands resolve it into a
``UserIdentity`` once and pass that identity to the services explicitly.
"""

import json
import logging
from pathlib import Path
from typing import Optional

import click

from expensetrack.domain.auth import AuthService
from expensetrack.domain.entities import UserIdentity

logger = logging.getLogger(__name__)


class SessionStore:
    """JSON file holding the logged-in user's ID and name."""

    def __init__(self, path: str):
        self.path = Path(path)

    def save(self, identity: UserIdentity) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps({"user_id": identity.id, "username": identity.username}),
            encoding="utf-8",
        )

    def load_user_id(self) -> Optional[int]:
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            return int(data["user_id"])
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.warning("Ignoring unreadable session file %s: %s", self.path, e)
            return None

    def clear(self) -> bool:
        """Remove the session. Returns True if one existed."""
        if not self.path.exists():
            return False
        self.path.unlink()
        return True


def require_user(ctx: click.Context) -> UserIdentity:
    """Return the logged-in user, or exit if nobody is logged in."""
    store: SessionStore = ctx.obj["session"]
    user_id = store.load_user_id()
    identity = None
    if user_id is not None:
        identity = AuthService(ctx.obj["db"]).get_identity(user_id)

    if identity is None:
        click.echo("Error: Not logged in. Run 'expensetrack login' first.", err=True)
        ctx.exit(1)
    return identity
