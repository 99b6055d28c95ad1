"""Document grammar routines that emit parser events.

    document  := line*
    line      := list_item | property
    property  := identifier ':' ( number | string )
    list_item := '-' word
"""

from miniyaml.diagnostics import (
    PARSER_EXPECTED_COLON,
    PARSER_EXPECTED_VALUE,
    PARSER_UNEXPECTED_CHARACTER,
    Diagnostic,
    DiagnosticSpec,
    diagnostic_from_spec,
)
from miniyaml.lexer import TokenKind
from miniyaml.parser.event import (
    IdentifierEvent,
    ListItemEvent,
    NumberValueEvent,
    StringValueEvent,
)
from miniyaml.parser.parser import Parser, ParserProgress


def parse_document(parser: Parser) -> int:
    """Parse lines until end of input or the first line that does not match.

    Returns the number of recognised lines.
    """
    progress = ParserProgress()
    lines = 0

    while not parser.at_end():
        progress.assert_progressing(parser)
        if not parse_line(parser):
            break
        lines += 1

    return lines


def parse_line(parser: Parser) -> bool:
    checkpoint = parser.checkpoint()

    if parse_list_item(parser):
        return True

    if parse_property(parser):
        return True

    parser.rewind(checkpoint)
    return False


def parse_list_item(parser: Parser) -> bool:
    if parser.expect(TokenKind.DASH) is None:
        return False

    # WORD may be empty, so a dash always completes the item.
    word = parser.expect(TokenKind.WORD)
    if word is None:
        return False
    parser.push(ListItemEvent(word.range))
    return True


def parse_property(parser: Parser) -> bool:
    identifier = parser.expect(TokenKind.IDENTIFIER)
    if identifier is None:
        parser.error(_error_here(parser, PARSER_UNEXPECTED_CHARACTER))
        return False
    parser.push(IdentifierEvent(identifier.range))

    if parser.expect(TokenKind.COLON) is None:
        parser.error(_error_here(parser, PARSER_EXPECTED_COLON))
        return False

    if not parse_value(parser):
        parser.error(_error_here(parser, PARSER_EXPECTED_VALUE))
        return False

    return True


def parse_value(parser: Parser) -> bool:
    # Number first: a digit-led value is never a string.
    number = parser.expect(TokenKind.NUMBER)
    if number is not None:
        parser.push(NumberValueEvent(number.range))
        return True

    string = parser.expect(TokenKind.ALPHA)
    if string is not None:
        parser.push(StringValueEvent(string.range))
        return True

    return False


def _error_here(parser: Parser, spec: DiagnosticSpec) -> Diagnostic:
    return diagnostic_from_spec(spec, parser.current_range)
