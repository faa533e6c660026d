"""Allow ``python -m email_alias``."""

from .cli import app

app(prog_name="email-alias")
