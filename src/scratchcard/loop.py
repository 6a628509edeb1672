import os

os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"

import typer

from scratchcard.cli.commands.demo import demo_command

app = typer.Typer(help="Scratch-off reveal surface tools.")

app.command(name="demo")(demo_command)


@app.callback()
def callback() -> None:
    """Keep ``demo`` as an explicit subcommand."""


def main() -> None:
    app()


if __name__ == "__main__":
    main()
