"""Syntax checks for page-level stylesheets."""

from collections.abc import Iterable

from tinycss2 import parse_declaration_list, parse_rule_list, parse_stylesheet
from tinycss2.ast import AtRule, Node, ParseError, QualifiedRule

# At-rules whose block holds nested rules rather than declarations
NESTED_RULE_AT_KEYWORDS = frozenset({"media", "supports", "document", "container", "layer", "scope"})


def _format(error: ParseError) -> str:
    return f"{error.source_line}:{error.source_column} {error.message}"


def _collect(nodes: Iterable[Node]) -> list[str]:
    errors: list[str] = []
    for node in nodes:
        if isinstance(node, ParseError):
            errors.append(_format(node))
        elif isinstance(node, QualifiedRule):
            errors.extend(_collect(parse_declaration_list(node.content, skip_comments=True, skip_whitespace=True)))
        elif isinstance(node, AtRule) and node.content is not None:
            if node.lower_at_keyword in NESTED_RULE_AT_KEYWORDS:
                block = parse_rule_list(node.content, skip_comments=True, skip_whitespace=True)
            else:
                block = parse_declaration_list(node.content, skip_comments=True, skip_whitespace=True)
            errors.extend(_collect(block))
    return errors


def css_errors(css: str) -> list[str]:
    """
    Parse a stylesheet and list its syntax errors.

    Each error reads ``"<line>:<column> <message>"``. An empty list means the
    stylesheet parsed cleanly.
    """
    return _collect(parse_stylesheet(css, skip_comments=True, skip_whitespace=True))


def is_valid_css(css: str) -> bool:
    return not css_errors(css)
