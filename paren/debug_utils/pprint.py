import json

from paren.types.node import (
    IdentifierNode,
    LiteralNode,
    Node,
    OperatorNode,
    QuoteNode,
    RootNode,
)

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_OPERATOR = "\033[94m"
COLOR_LITERAL = "\033[92m"
COLOR_IDENTIFIER = "\033[95m"
COLOR_QUOTE = "\033[96m"
COLOR_ROOT = "\033[90m"

# ----------------- Defaults -----------------
DEFAULT_OPTIONS = {
    "max_depth": 32,
    "display_legend": False,
    "color_operators": True,
    "color_literals": True,
    "color_identifiers": True,
    "color_quotes": True,
    "color_root": True,
}

PLAIN_OPTIONS = {
    **DEFAULT_OPTIONS,
    "color_operators": False,
    "color_literals": False,
    "color_identifiers": False,
    "color_quotes": False,
    "color_root": False,
}


# ----------------- Colorize utility -----------------
def colorize(node: Node, options: dict = DEFAULT_OPTIONS) -> str:
    label = node.label()
    match node:
        case OperatorNode() if options.get("color_operators", True):
            return f"{COLOR_OPERATOR}{label}{RESET}"
        case LiteralNode() if options.get("color_literals", True):
            return f"{COLOR_LITERAL}{label}{RESET}"
        case IdentifierNode() if options.get("color_identifiers", True):
            return f"{COLOR_IDENTIFIER}{label}{RESET}"
        case QuoteNode() if options.get("color_quotes", True):
            return f"{COLOR_QUOTE}{label}{RESET}"
        case RootNode() if options.get("color_root", True):
            return f"{COLOR_ROOT}{label}{RESET}"
    return label


# ----------------- Pretty printer -----------------
def pprint_tree(
    node: Node,
    indent: int = 0,
    options: dict = DEFAULT_OPTIONS,
) -> str:
    """Render `node` one line per node, children indented below their parent."""
    legend_str = ""
    if options.get("display_legend", True) and indent == 0:
        legend_items = [
            f"{COLOR_OPERATOR}Operator{RESET}",
            f"{COLOR_LITERAL}Literal{RESET}",
            f"{COLOR_IDENTIFIER}Identifier{RESET}",
            f"{COLOR_QUOTE}Quote{RESET}",
            f"{COLOR_ROOT}Root{RESET}",
        ]
        legend_str = "Color Key: " + " | ".join(legend_items) + "\n"

    lines: list[str] = []
    # (node, depth) pairs, children pushed in reverse so they pop in order
    stack = [(node, indent)]
    while stack:
        current, depth = stack.pop()
        pad = "  " * depth
        if depth - indent >= options.get("max_depth", 32):
            lines.append(pad + "…")
            continue
        lines.append(pad + colorize(current, options))
        stack.extend((child, depth + 1) for child in reversed(current.children))
    return legend_str + "\n".join(lines)


# ----------------- Load JSON config -----------------
def load_options_from_json(json_str: str) -> dict:
    try:
        user_opts = json.loads(json_str)
    except json.JSONDecodeError:
        return DEFAULT_OPTIONS
    if not isinstance(user_opts, dict):
        return DEFAULT_OPTIONS
    return {**DEFAULT_OPTIONS, **user_opts}
