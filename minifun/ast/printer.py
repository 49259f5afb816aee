from typing import Optional

from minifun.ast.nodes import (
    BoolLiteral,
    Expression,
    FunctionApplication,
    FunctionLiteral,
    IfElse,
    IntLiteral,
    Variable,
)


def format_expr(expr: Expression) -> str:
    """Render an expression back into source syntax."""
    match expr:
        case IntLiteral(value=value):
            return str(value)
        case BoolLiteral(value=value):
            return "true" if value else "false"
        case Variable(name=name):
            return name
        case IfElse(condition=cond, then_expr=then_expr, else_expr=else_expr):
            return (
                f"if {format_expr(cond)} {{ {format_expr(then_expr)} }} "
                f"else {{ {format_expr(else_expr)} }}"
            )
        case FunctionLiteral(param=param, body=body):
            return f"fun {param} {{ {format_expr(body)} }}"
        case FunctionApplication(function=function, argument=argument):
            return f"({format_expr(function)} {format_expr(argument)})"
        case _:
            raise TypeError(f"Unknown expression: {type(expr).__name__}")


def print_ast(
    ast: Expression,
    indent: int = 0,
    max_depth: Optional[int] = None,
) -> None:
    """
    Print an AST as an indented tree.

    Args:
        ast: The AST to print
        indent: Starting indentation level
        max_depth: Maximum depth to print (None for unlimited)
    """
    _print_node(ast, indent, max_depth, 0)


def _print_node(
    node: Expression,
    indent: int,
    max_depth: Optional[int],
    current_depth: int,
) -> None:
    if max_depth is not None and current_depth >= max_depth:
        print("  " * indent + "...")
        return

    prefix = "  " * indent

    match node:
        case IntLiteral(value=value):
            print(f"{prefix}IntLiteral({value})")

        case BoolLiteral(value=value):
            print(f"{prefix}BoolLiteral({value})")

        case Variable(name=name):
            print(f"{prefix}Variable({name})")

        case IfElse(condition=cond, then_expr=then_expr, else_expr=else_expr):
            print(f"{prefix}IfElse")
            for label, child in (
                ("condition", cond),
                ("then", then_expr),
                ("else", else_expr),
            ):
                print(f"{prefix}  {label}:")
                _print_node(child, indent + 2, max_depth, current_depth + 1)

        case FunctionLiteral(param=param, body=body):
            print(f"{prefix}FunctionLiteral({param})")
            _print_node(body, indent + 1, max_depth, current_depth + 1)

        case FunctionApplication(function=function, argument=argument):
            print(f"{prefix}FunctionApplication")
            print(f"{prefix}  function:")
            _print_node(function, indent + 2, max_depth, current_depth + 1)
            print(f"{prefix}  argument:")
            _print_node(argument, indent + 2, max_depth, current_depth + 1)

        case _:
            print(f"{prefix}{type(node).__name__} (unknown node type)")
