from __future__ import annotations

import typer

from header_exporter.cli.commands.check import check_command
from header_exporter.cli.commands.export import export_command

app = typer.Typer(
    name="header-exporter",
    help="List the keys of a JSON array of response header descriptions",
    add_completion=False,
)

app.command("export")(export_command)
app.command("check")(check_command)


@app.callback(invoke_without_command=True)
def default(ctx: typer.Context):
    """
    Without a subcommand, export the configured input file.
    """
    if ctx.invoked_subcommand is None:
        export_command(input_path=None, verbose=False)


def main():
    app()


if __name__ == "__main__":
    main()
