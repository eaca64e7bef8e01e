"""Entry point: python -m src.demo [--cases FILE] [--debug]"""

import logging
from pathlib import Path
from typing import Optional

import jsonschema
import typer

from src.demo.showcase import Showcase, ShowcaseConfig, load_cases

logger = logging.getLogger("src.demo")

# Exit code for an unreadable or invalid case file
EXIT_INVALID_CASES = 2

app = typer.Typer(
    name="bitnum-demo",
    help="Demonstrate arbitrary-precision unsigned arithmetic on bit vectors",
    add_completion=False,
)


def setup_logging(debug: bool = False) -> None:
    """Set up logging configuration"""
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    root = logging.getLogger()
    root.handlers = []
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if debug else logging.WARNING)


@app.command()
def main(
    cases: Optional[Path] = typer.Option(
        None, "--cases", help="JSON file with a list of operation cases"
    ),
    a: int = typer.Option(42, help="First headline operand"),
    b: int = typer.Option(58, help="Second headline operand (must be >= a)"),
    no_decimal: bool = typer.Option(False, "--no-decimal", help="Print binary literals only"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Print the BigNum showcase, or evaluate a case file."""
    setup_logging(debug)
    showcase = Showcase(ShowcaseConfig(a=a, b=b, show_decimal=not no_decimal))

    if cases is None:
        try:
            typer.echo(showcase.render())
        except ValueError as e:
            # Out-of-range operands or b < a
            logger.error("%s", e)
            raise typer.Exit(code=EXIT_INVALID_CASES)
        return

    try:
        loaded = load_cases(cases)
    except FileNotFoundError:
        logger.error("File not found: %s", cases)
        raise typer.Exit(code=EXIT_INVALID_CASES)
    except jsonschema.ValidationError as e:
        logger.error("Invalid case in %s: %s", cases, e.message)
        raise typer.Exit(code=EXIT_INVALID_CASES)
    except ValueError as e:
        # Includes json.JSONDecodeError
        logger.error("Invalid case file %s: %s", cases, e)
        raise typer.Exit(code=EXIT_INVALID_CASES)

    typer.echo(showcase.render(showcase.run_cases(loaded)))


if __name__ == "__main__":
    app()
