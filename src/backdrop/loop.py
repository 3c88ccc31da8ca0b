import os

os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"

import typer

from backdrop.cli.commands.render import render_command
from backdrop.cli.commands.run import run_command
from backdrop.cli.commands.sample import sample_command

app = typer.Typer(help="Procedural background shading.")

app.command(name="run")(run_command)
app.command(name="render")(render_command)
app.command(name="sample")(sample_command)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
