import logging
from functools import lru_cache
from pathlib import Path

from lark import Lark, ParseTree

from minifun.ast.nodes import Expression
from minifun.ast.transformer import transform_parse_tree

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _parser() -> Lark:
    return Lark.open("minifun.lark", rel_to=__file__, parser="lalr")


def parse_lark(code: str) -> ParseTree:
    return _parser().parse(code)


def parse_string(code: str) -> Expression:
    """Parse code string and return custom AST."""
    expr = transform_parse_tree(parse_lark(code))
    logger.debug("AST: %s", expr)
    return expr


def parse(path: Path) -> Expression:
    """Parse file and return custom AST."""
    with open(path) as f:
        return parse_string(f.read())
