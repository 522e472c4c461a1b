"""
  Paren Parser

Recursive descent over the token list with one token of lookahead. Builds a
RootNode whose children are the top-level forms:

    - NUMBER / STRING     -> LiteralNode
    - IDENTIFIER          -> IdentifierNode; every following form up to the `)`
                             closing the enclosing group (or end of input at top
                             level) becomes its child
    - ( OPERATOR ... )    -> OperatorNode with every form up to the matching `)`
    - ( anything else )   -> transparent group, its forms go to the enclosing node
    - ' ( ... )           -> QuoteNode wrapping the parsed body of the group

The syntax is fully prefix and parenthesized, so there is no precedence to
resolve: nodes are appended to their parent in the order they are met.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from paren.errors import ParenParsingError
from paren.reader.lexer import Token, TokenKind
from paren.types.node import (
    IdentifierNode,
    LiteralNode,
    Node,
    OperatorNode,
    QuoteNode,
    RootNode,
)
from paren.types.value import String

logger = logging.getLogger(__name__)


class TokenStream:
    def __init__(self, tokens: Iterable[Token]):
        self.tokens: list[Token] = list(tokens)
        self.index = 0

    def peek(self) -> Optional[Token]:
        if self.index < len(self.tokens):
            return self.tokens[self.index]
        return None

    def advance(self) -> Optional[Token]:
        token = self.peek()
        if token is not None:
            self.index += 1
        return token

    def at_group_end(self) -> bool:
        token = self.peek()
        return token is None or token.kind is TokenKind.RPAREN

    # ------------------------
    # Grammar
    # ------------------------
    def parse_program(self) -> RootNode:
        root = RootNode()
        while self.peek() is not None:
            self.parse_form(root)
        return root

    def parse_form(self, parent: Node) -> None:
        token = self.advance()
        if token is None:
            raise ParenParsingError("Unexpected end of input")

        match token.kind:
            case TokenKind.NUMBER:
                parent.add_child(LiteralNode(token.content))
            case TokenKind.STRING:
                parent.add_child(LiteralNode(String(token.content)))
            case TokenKind.IDENTIFIER:
                node = IdentifierNode(token.content)
                # remaining arguments of the enclosing group become children
                while not self.at_group_end():
                    self.parse_form(node)
                parent.add_child(node)
            case TokenKind.LPAREN:
                self.parse_group(parent, token)
            case TokenKind.QUOTE:
                self.parse_quote(parent, token)
            case TokenKind.RPAREN:
                raise ParenParsingError("Unexpected ')' without a matching '('", token)
            case TokenKind.OPERATOR:
                raise ParenParsingError(
                    f"Operator '{token.content}' must directly follow '('", token
                )

    def parse_group(self, parent: Node, lparen: Token) -> None:
        """Parse the body of a group; the opening `(` has been consumed."""
        head = self.peek()
        if head is None:
            raise ParenParsingError("Expected token after '(', found EOF", lparen)

        if head.kind is TokenKind.OPERATOR:
            self.advance()
            node = OperatorNode(head.content)
            self.parse_until_rparen(node, lparen)
            if not node.children:
                raise ParenParsingError(
                    f"Operator '{head.content}' expects at least one operand", head
                )
            parent.add_child(node)
        else:
            self.parse_until_rparen(parent, lparen)

    def parse_until_rparen(self, node: Node, lparen: Token) -> None:
        while True:
            token = self.peek()
            if token is None:
                raise ParenParsingError("Expected ')' before end of input", lparen)
            if token.kind is TokenKind.RPAREN:
                self.advance()
                return
            self.parse_form(node)

    def parse_quote(self, parent: Node, quote: Token) -> None:
        nxt = self.advance()
        if nxt is None:
            raise ParenParsingError("Expected token after '", quote)
        if nxt.kind is not TokenKind.LPAREN:
            raise ParenParsingError(f"Expected '(' after ', found {nxt}", nxt)
        node = QuoteNode()
        self.parse_group(node, nxt)
        parent.add_child(node)


def parse(tokens: Iterable[Token]) -> RootNode:
    """Parse a full token sequence into a RootNode."""
    root = TokenStream(tokens).parse_program()
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Parse result:\n%s", root.render())
    return root
