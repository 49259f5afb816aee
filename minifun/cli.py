import logging
from pathlib import Path
from typing import Any, Optional

import typer
from lark.exceptions import UnexpectedInput
from rich.console import Console
from rich.logging import RichHandler

from minifun.ast.nodes import Expression
from minifun.ast.printer import print_ast
from minifun.parser.parser import parse as minifun_parse
from minifun.parser.parser import parse_string as minifun_parse_string
from minifun.typechecker.infer import infer
from minifun.typechecker.typecheck import get_constraints_str, get_result_str

app = typer.Typer(pretty_exceptions_enable=False)
console = Console()
err_console = Console(stderr=True)


@app.callback()
def setup(
    debug: bool = typer.Option(
        False,
        "--debug",
        envvar="MINIFUN_DEBUG",
        help="Log constraint generation and unification steps",
    ),
) -> None:
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
        )


def _load(input_file: Optional[Path], expression: Optional[str]) -> Expression:
    if (input_file is None) == (expression is None):
        console.print(
            "Provide exactly one of an input file or --expression",
            style="bold red",
        )
        raise typer.Exit(code=2)

    try:
        if expression is not None:
            return minifun_parse_string(expression)
        assert input_file is not None
        return minifun_parse(input_file)
    except UnexpectedInput as e:
        console.print(f"Parsing failed: {e}", style="bold red", markup=False)
        raise typer.Exit(code=1)


@app.command()
def parse(
    input_file: Optional[Path] = typer.Argument(
        None,
        exists=True,
        help="Path to input file",
    ),
    expression: Optional[str] = typer.Option(
        None,
        "--expression",
        "-e",
        help="Source text to use instead of an input file",
    ),
) -> None:
    """Print the syntax tree of a program"""
    print_ast(_load(input_file, expression))


@app.command()
def constraints(
    input_file: Optional[Path] = typer.Argument(
        None,
        exists=True,
        help="Path to input file",
    ),
    expression: Optional[str] = typer.Option(
        None,
        "--expression",
        "-e",
        help="Source text to use instead of an input file",
    ),
) -> None:
    """Print the context and the constraints before solving"""
    print(get_constraints_str(infer(_load(input_file, expression))), end="")


@app.command()
def types(
    input_file: Optional[Path] = typer.Argument(
        None,
        exists=True,
        help="Path to input file",
    ),
    expression: Optional[str] = typer.Option(
        None,
        "--expression",
        "-e",
        help="Source text to use instead of an input file",
    ),
) -> None:
    """Print the full inference report"""
    print(get_result_str(infer(_load(input_file, expression))))


@app.command()
def typecheck(
    input_file: Optional[Path] = typer.Argument(
        None,
        exists=True,
        help="Path to input file",
    ),
    expression: Optional[str] = typer.Option(
        None,
        "--expression",
        "-e",
        help="Source text to use instead of an input file",
    ),
) -> None:
    """Check that a program is well typed"""
    result = infer(_load(input_file, expression))
    if result.ok:
        console.print(
            f"Type checking succeeded: {result.principal_type()}",
            style="bold green",
        )
        return
    console.print(f"Type checking failed: {result.error}", style="bold red")
    raise typer.Exit(code=1)


def main() -> Any:
    return app()
