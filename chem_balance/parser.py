"""Recursive-descent parser for chemical equations.

Grammar (one token of lookahead):

    equation := entity ('+' entity)* '=' entity ('+' entity)*
    entity   := (element | group | 'e' '-'?)* charge?
    group    := '(' (element | group)+ ')' number?
    element  := SYMBOL number?
    charge   := '{' number? sign '}'
    number   := DIGITS                 ; absent => 1
    sign     := '+' | '-'

Semantic rules are checked while parsing, so every error carries the
character offsets of the offending token or span:
- an electron entity ('e') stands alone, is written once and has charge -1
- any other entity has at least one item, a group is never empty
- numbers follow a symbol, a group or open a charge; they never start a term

Whitespace between tokens is skipped. The cursor counts characters, which are
what ``str`` indexes in Python.
"""

from __future__ import annotations

import logging

from .equation import Equation
from .errors import (
    AdvancingBeyondLastToken,
    ChargeOrChargeSignExpected,
    ChargeSignExpected,
    ClosingParenthesisAfterChargeExpected,
    ElectronNeedsToStandAlone,
    ElementGroupOrClosingParenthesisExpected,
    ElementIsNotParsed,
    EmptyGroup,
    EntityExpected,
    InvalidChargeForElectron,
    InvalidSymbol,
    NumberNotExpected,
    PlusOrEndExpected,
    PlusOrEqualSignExpected,
    TokenMismatch,
    TooBigNumber,
)
from .items import MAX_CHARGE, MAX_COUNT, MIN_CHARGE, Element, Entity, Group, Item
from .patterns import ELECTRON, MINUS_SIGN, SPACES, TOKEN, is_digits, is_symbol

logger = logging.getLogger(__name__)


class Parser:
    def __init__(self, text: str):
        self.text = text
        self.position = 0

    # -------------------------------------------------------------------------
    # Tokens
    # -------------------------------------------------------------------------
    def next_token(self) -> str | None:
        """Peek at the token under the cursor; None at the end of the input."""
        if self.position >= len(self.text):
            return None

        match = TOKEN.match(self.text, self.position)
        if match is None:
            raise InvalidSymbol(self.position)

        token = match.group()
        return "-" if token == MINUS_SIGN else token

    def take_token(self) -> str:
        token = self.next_token()
        if token is None:
            raise AdvancingBeyondLastToken(self.position)
        self.position += len(token)
        self.skip_spaces()
        return token

    def consume(self, expected: str) -> None:
        start = self.position
        token = self.take_token()
        if token != expected:
            raise TokenMismatch(start, start + len(token))

    def skip_spaces(self) -> None:
        match = SPACES.match(self.text, self.position)
        if match is not None:
            self.position = match.end()

    # -------------------------------------------------------------------------
    # Grammar
    # -------------------------------------------------------------------------
    def parse_optional_number(self, limit: int = MAX_COUNT) -> int:
        """Parse a digit run if one is next, else return the implicit 1."""
        token = self.next_token()
        if token is None or not is_digits(token):
            return 1

        start = self.position
        self.take_token()
        # int() refuses very long digit strings, so check the length first
        if len(token.lstrip("0")) > len(str(limit)) or int(token) > limit:
            raise TooBigNumber(start, start + len(token))
        return int(token)

    def _parse_count(self) -> int:
        start = self.position
        count = self.parse_optional_number()
        if count == 0:
            raise NumberNotExpected(start)
        return count

    def parse_element(self) -> Element:
        start = self.position
        token = self.take_token()
        if not is_symbol(token):
            raise ElementIsNotParsed(start, start + len(token))
        return Element(token, self._parse_count())

    def parse_group(self) -> Group:
        start = self.position
        self.consume("(")
        items: list[Item] = []

        while True:
            token = self.next_token()
            if token == "(":
                items.append(self.parse_group())
            elif token is not None and is_symbol(token):
                items.append(self.parse_element())
            elif token == ")":
                self.consume(")")
                if not items:
                    raise EmptyGroup(start, self.position)
                break
            else:
                raise ElementGroupOrClosingParenthesisExpected(self.position)

        return Group(items, self._parse_count())

    def parse_charge(self) -> int | None:
        """Parse an optional ``{n+}`` / ``{n-}`` clause; None when absent."""
        if self.next_token() != "{":
            return None
        self.consume("{")

        if self.next_token() in (None, "}"):
            raise ChargeOrChargeSignExpected(self.position)

        number_start = self.position
        magnitude = self.parse_optional_number(limit=-MIN_CHARGE)

        sign = self.next_token()
        if sign not in ("+", "-"):
            raise ChargeSignExpected(self.position)
        charge = magnitude if sign == "+" else -magnitude
        if charge > MAX_CHARGE:
            raise TooBigNumber(number_start, self.position)
        self.take_token()

        if self.next_token() != "}":
            raise ClosingParenthesisAfterChargeExpected(self.position)
        self.consume("}")
        return charge

    def parse_entity(self) -> Entity:
        start = self.position
        items: list[Item] = []
        is_electron = False

        while True:
            token = self.next_token()
            if token is None:
                break
            if token == "(":
                items.append(self.parse_group())
            elif token == ELECTRON:
                token_start = self.position
                self.consume(ELECTRON)
                if is_electron:
                    raise ElectronNeedsToStandAlone(token_start, token_start + len(ELECTRON))
                is_electron = True
                # "e-" and "e−" spell the same electron
                if self.next_token() == "-":
                    self.consume("-")
            elif is_symbol(token):
                items.append(self.parse_element())
            elif is_digits(token):
                raise NumberNotExpected(self.position)
            else:
                break

        charge = self.parse_charge()

        if is_electron:
            if items:
                raise ElectronNeedsToStandAlone(start, self.position)
            if charge is None:
                charge = -1
            if charge != -1:
                raise InvalidChargeForElectron(start, self.position)
        else:
            if not items:
                raise EntityExpected(start, self.position)
            if charge is None:
                charge = 0

        return Entity(items, charge)

    def parse_equation(self) -> Equation:
        self.skip_spaces()

        reactants = [self.parse_entity()]
        while True:
            token = self.next_token()
            if token == "+":
                self.consume("+")
                reactants.append(self.parse_entity())
            elif token == "=":
                self.consume("=")
                break
            else:
                raise PlusOrEqualSignExpected(self.position)

        products = [self.parse_entity()]
        while True:
            token = self.next_token()
            if token is None:
                break
            if token != "+":
                raise PlusOrEndExpected(self.position)
            self.consume("+")
            products.append(self.parse_entity())

        equation = Equation(reactants, products)
        logger.debug(
            "parsed %r: %d reactant(s), %d product(s)",
            self.text, len(equation.reactants), len(equation.products),
        )
        return equation


def parse_equation(text: str) -> Equation:
    """Parse *text* into an Equation; raises a ParserError subclass on bad input."""
    return Parser(text).parse_equation()
