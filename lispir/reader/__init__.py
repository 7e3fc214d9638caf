from lispir.reader.lexer import Token, tokenize
from lispir.reader.parser import TokenStream, parse, parse_program

__all__ = ["Token", "tokenize", "TokenStream", "parse", "parse_program"]
