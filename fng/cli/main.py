"""Main CLI application using Cyclopts."""

import cyclopts

from fng.cli.commands import config
from fng.cli.commands.refresh import refresh
from fng.cli.commands.serve import serve
from fng.cli.commands.show import show

app = cyclopts.App(
    name="fng",
    help="Fear & Greed broadcaster - CLI",
)

app.command(serve, name="serve")
app.command(refresh, name="refresh")
app.command(show, name="show")
app.command(config.app, name="config")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
