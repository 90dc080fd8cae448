"""Tree-Sitter Parsing Layer."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .errors import ParseFailure
from . import constants


class ParserFactory(ABC):
    """Abstract factory for obtaining a language parser."""

    @abstractmethod
    def get_parser(self, language: str): ...


class TreeSitterParserFactory(ParserFactory):
    """Concrete factory that delegates to tree-sitter-language-pack."""

    def get_parser(self, language: str):
        import tree_sitter_language_pack as tslp

        return tslp.get_parser(language)


def _first_error_node(node):
    """Depth-first search for the first ERROR or missing node."""
    if node.type == constants.ERROR_NODE_TYPE or node.is_missing:
        return node
    if not node.has_error:
        return None
    return next(
        (
            found
            for child in node.children
            if (found := _first_error_node(child)) is not None
        ),
        None,
    )


class Parser:
    """Thin wrapper around a parser factory that rejects malformed source."""

    def __init__(self, parser_factory: ParserFactory):
        self._factory = parser_factory

    def parse(self, source: str, language: str = constants.LANGUAGE):
        parser = self._factory.get_parser(language)
        tree = parser.parse(source.encode("utf-8"))
        if tree.root_node.has_error:
            bad = _first_error_node(tree.root_node) or tree.root_node
            line, col = bad.start_point[0] + 1, bad.start_point[1]
            what = f"missing '{bad.type}'" if bad.is_missing else "unexpected syntax"
            raise ParseFailure(
                f"SyntaxError: {what} at line {line}, column {col}",
                line=line,
                column=col,
            )
        return tree
