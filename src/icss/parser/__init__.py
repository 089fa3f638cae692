from icss.parser.errors import ParseError
from icss.parser.transformer import parse_stylesheet

__all__ = ["ParseError", "parse_stylesheet"]
