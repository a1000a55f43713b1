"""
Main entry point for the contact-book application.
Runs the Typer app and turns anything it lets escape into a readable exit.
"""

import logging
import sys

import typer
from rich.console import Console

from contact_book.cli.app import app
from contact_book.cli.formatters import format_error_with_suggestions
from contact_book.exceptions import ContactBookError

log = logging.getLogger("contact_book")


def _fail(console: Console, error: Exception, context: dict | None = None) -> None:
    console.print()
    console.print(format_error_with_suggestions(error, context))
    sys.exit(1)


def main(argv: list[str] | None = None) -> None:
    """
    Main entry point function.

    Args:
        argv: Command-line arguments; defaults to sys.argv[1:].
    """
    console = Console(stderr=True)

    try:
        app(args=argv, prog_name="contact-book")
    except (typer.Exit, typer.Abort):
        pass
    except KeyboardInterrupt:
        console.print("\n[yellow]⚠️  Operation cancelled by user.[/yellow]")
        sys.exit(0)
    except ContactBookError as e:
        log.debug("Application error:", exc_info=True)
        _fail(console, e)
    except Exception as e:
        log.debug("Full traceback:", exc_info=True)
        _fail(console, e, {"type": "Unexpected"})


if __name__ == "__main__":
    main()
