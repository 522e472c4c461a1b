from paren.reader.lexer import Position, Token, TokenKind, lex, lex_line
from paren.reader.parser import TokenStream, parse
