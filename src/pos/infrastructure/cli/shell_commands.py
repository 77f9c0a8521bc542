"""Interactive cashier shell.

Reads one command per line and feeds it to a PosSession as a UI event.
The catalog and bill live only as long as the shell does.
"""

from __future__ import annotations

import shlex
from collections.abc import Callable

import click

from pos.application.session import PosSession
from pos.infrastructure.bootstrap import Settings, pos_session
from pos.infrastructure.cli.product_commands import demo_option
from pos.infrastructure.cli.terminal_display import TerminalDisplay


def _expect(args: list[str], count: int, usage: str) -> None:
    if len(args) != count:
        raise click.UsageError(f"usage: {usage}")


def _parse_id(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise click.BadParameter(f"Invalid product id '{raw}'.")


def _cmd_list(session: PosSession, args: list[str]) -> None:
    _expect(args, 0, "list")
    session.render_all()


def _cmd_new(session: PosSession, args: list[str]) -> None:
    _expect(args, 3, "new <name> <price> <label>")
    name, price, label = args
    session.submit_new_product(name, price, label)


def _cmd_add(session: PosSession, args: list[str]) -> None:
    _expect(args, 1, "add <id>")
    session.click_add_to_bill(_parse_id(args[0]))


def _cmd_remove(session: PosSession, args: list[str]) -> None:
    _expect(args, 1, "remove <id>")
    session.click_remove_from_bill(_parse_id(args[0]))


def _cmd_price(session: PosSession, args: list[str]) -> None:
    _expect(args, 2, "price <id> <value>")
    session.edit_product_field(_parse_id(args[0]), "price", args[1])


def _cmd_label(session: PosSession, args: list[str]) -> None:
    _expect(args, 2, "label <id> <value>")
    session.edit_product_field(_parse_id(args[0]), "weight", args[1])


def _cmd_generate(session: PosSession, args: list[str]) -> None:
    _expect(args, 0, "generate")
    session.click_generate_bill()


def _cmd_close(session: PosSession, args: list[str]) -> None:
    _expect(args, 0, "close")
    session.click_close_summary()


def _cmd_help(session: PosSession, args: list[str]) -> None:
    for _, usage in COMMANDS.values():
        click.echo(f"  {usage}")
    click.echo("  quit")


COMMANDS: dict[str, tuple[Callable[[PosSession, list[str]], None], str]] = {
    "list": (_cmd_list, "list                        show products and bill"),
    "new": (_cmd_new, "new <name> <price> <label>  add a product to the catalog"),
    "add": (_cmd_add, "add <id>                    put one unit on the bill"),
    "remove": (_cmd_remove, "remove <id>                 drop a line from the bill"),
    "price": (_cmd_price, "price <id> <value>          edit a product price"),
    "label": (_cmd_label, "label <id> <value>          edit a product weight/size label"),
    "generate": (_cmd_generate, "generate                    show the bill summary"),
    "close": (_cmd_close, "close                       close the summary, start a new bill"),
    "help": (_cmd_help, "help                        this list"),
}


def run_shell(session: PosSession) -> None:
    """Read-eval loop. Ends on ``quit``, ``exit``, EOF or Ctrl-C."""
    session.render_all()
    while True:
        try:
            line = click.prompt("pos", prompt_suffix="> ", default="", show_default=False)
        except click.Abort:
            click.echo()
            return

        try:
            args = shlex.split(line)
        except ValueError as exc:
            click.secho(f"Error: {exc}", fg="red", err=True)
            continue
        if not args:
            continue

        name, rest = args[0].lower(), args[1:]
        if name in ("quit", "exit"):
            return

        entry = COMMANDS.get(name)
        if entry is None:
            click.secho(f"Error: unknown command '{name}' (try 'help')", fg="red", err=True)
            continue

        command, _ = entry
        try:
            command(session, rest)
        except click.UsageError as exc:
            click.secho(f"Error: {exc.format_message()}", fg="red", err=True)


@click.command("shell")
@demo_option
@click.option(
    "--strict-prices",
    is_flag=True,
    default=False,
    envvar="POS_STRICT_PRICE_EDITS",
    help="Reject invalid price edits instead of storing 0.",
)
def shell(demo_catalog: bool, strict_prices: bool) -> None:
    """Start an interactive cashier session."""
    settings = Settings(demo_catalog=demo_catalog, strict_prices=strict_prices)
    run_shell(pos_session(settings, TerminalDisplay()))
