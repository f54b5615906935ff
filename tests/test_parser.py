"""Test the recursive-descent parser.

Key tests:
- token primitives (peek / take / consume / whitespace skipping)
- elements, nested groups, charges and electrons
- every syntax error kind, with the offsets of the offending span
"""

from __future__ import annotations

import pytest

from chem_balance import errors
from chem_balance.parser import Parser, parse_equation


class TestTokens:
    def test_new(self):
        parser = Parser("H2 + O2 = H2O")
        assert parser.text == "H2 + O2 = H2O"
        assert parser.position == 0

    def test_next_token(self):
        parser = Parser("H2 + O2 = H2O")
        assert parser.next_token() == "H"
        parser.consume("H")
        assert parser.next_token() == "2"

    def test_take_token(self):
        parser = Parser("H2 + O2 = H2O")
        assert parser.take_token() == "H"
        assert parser.position == 1
        assert parser.take_token() == "2"
        assert parser.position == 3
        assert parser.take_token() == "+"
        assert parser.position == 5

    def test_symbol_is_longest_match(self):
        parser = Parser("Fe2")
        assert parser.take_token() == "Fe"
        assert parser.take_token() == "2"
        assert parser.next_token() is None

    def test_typographic_minus_is_minus(self):
        parser = Parser("\u2212")
        assert parser.take_token() == "-"
        assert parser.position == 1

    def test_skip_spaces(self):
        parser = Parser("H2   + O2")
        parser.consume("H")
        assert parser.position == 1
        parser.consume("2")
        assert parser.position == 5

    def test_take_beyond_last_token(self):
        with pytest.raises(errors.AdvancingBeyondLastToken):
            Parser("").take_token()

    def test_consume_mismatch(self):
        with pytest.raises(errors.TokenMismatch) as exc:
            Parser("H2").consume("O")
        assert (exc.value.start_index, exc.value.end_index) == (0, 1)

    def test_parse_optional_number(self):
        parser = Parser("H2 + O2 = H2O")
        parser.consume("H")
        assert parser.parse_optional_number() == 2
        assert parser.parse_optional_number() == 1


class TestGrammar:
    def test_parse_element(self):
        assert Parser("H2 + O2 = H2O").parse_element().format() == "H2"

    def test_parse_element_rejects_non_symbol(self):
        with pytest.raises(errors.ElementIsNotParsed):
            Parser("(H)").parse_element()

    def test_parse_group(self):
        parser = Parser("Al2(SO4)3 = Al2O3 + SO3")
        parser.consume("Al")
        parser.consume("2")
        assert parser.parse_group().format() == "(SO4)3"

    def test_parse_entity(self):
        entity = Parser("Al2(SO4)3 = Al2O3 + SO3").parse_entity()
        assert entity.format() == "Al2(SO4)3"
        assert entity.charge == 0

    def test_parse_nested_groups(self):
        entity = Parser("K4(Fe(CN)6)").parse_entity()
        assert entity.format() == "K4(Fe(CN)6)"
        assert entity.count_element("C") == 6
        assert entity.count_element("N") == 6

    @pytest.mark.parametrize("text, charge", [
        ("Fe{3+}", 3),
        ("CO3{2-}", -2),
        ("CO3{2\u2212}", -2),
        ("H{+}", 1),
        ("Cl{-}", -1),
        ("Na{ 1 + }", 1),
        ("X{0+}", 0),
        ("Fe{127+}", 127),
        ("Fe{128-}", -128),
    ])
    def test_parse_charge(self, text, charge):
        assert Parser(text).parse_entity().charge == charge

    @pytest.mark.parametrize("text", ["e", "e-", "e\u2212", "e{-}", "e{1-}"])
    def test_parse_electron(self, text):
        entity = Parser(text).parse_entity()
        assert entity.is_electron
        assert entity.format() == "e\u2212"

    def test_parse_equation(self):
        eq = parse_equation("H2 + O2 = H2O")
        assert [e.format() for e in eq.reactants] == ["H2", "O2"]
        assert [e.format() for e in eq.products] == ["H2O"]
        assert eq.format([2, 1, 2]) == "2\u00a0H2 + O2 = 2\u00a0H2O"

    def test_parse_equation_whitespace(self):
        eq = parse_equation("  Fe {3+}+e=Fe  ")
        assert [e.format() for e in eq.entities] == ["Fe{3+}", "e\u2212", "Fe"]

    def test_parse_rendered_ionic_output(self):
        eq = parse_equation("Fe{3+} + e\u2212 = Fe")
        assert [e.charge for e in eq.entities] == [3, -1, 0]


def _raises(text: str, error: type[errors.ParserError]) -> errors.ParserError:
    with pytest.raises(error) as exc:
        parse_equation(text)
    return exc.value


class TestErrors:
    def test_invalid_symbol(self):
        assert _raises("H2 + O2 = H2O!", errors.InvalidSymbol).start_index == 13
        assert _raises("h2 = H2", errors.InvalidSymbol).start_index == 0
        assert _raises("H2 + O2 , H2O", errors.InvalidSymbol).start_index == 8

    def test_entity_expected_after_plus(self):
        e = _raises("H2 + = H2O", errors.EntityExpected)
        assert (e.start_index, e.end_index) == (5, 5)

    def test_entity_expected(self):
        e = _raises(" = H2", errors.EntityExpected)
        assert (e.start_index, e.end_index) == (1, 1)
        e = _raises("", errors.EntityExpected)
        assert (e.start_index, e.end_index) == (0, 0)
        e = _raises("H2 = ", errors.EntityExpected)
        assert (e.start_index, e.end_index) == (5, 5)

    def test_number_not_expected(self):
        assert _raises("2H2 + O2 = H2O", errors.NumberNotExpected).start_index == 0
        assert _raises("H0 = H", errors.NumberNotExpected).start_index == 1
        assert _raises("(H)0 = H", errors.NumberNotExpected).start_index == 3

    def test_too_big_number(self):
        e = _raises("H256 = H", errors.TooBigNumber)
        assert (e.start_index, e.end_index) == (1, 4)
        e = _raises("H" + "9" * 5000 + " = H", errors.TooBigNumber)
        assert (e.start_index, e.end_index) == (1, 5001)
        e = _raises("Fe{128+} = Fe", errors.TooBigNumber)
        assert (e.start_index, e.end_index) == (3, 6)
        assert parse_equation("H255 = H").reactants[0].count_element("H") == 255

    def test_plus_or_equal_sign_expected(self):
        assert _raises("H2 + O2 ) H2O", errors.PlusOrEqualSignExpected).start_index == 8
        assert _raises("H2 + O2", errors.PlusOrEqualSignExpected).start_index == 7
        assert _raises("H2 - O2 = H2O", errors.PlusOrEqualSignExpected).start_index == 3

    def test_plus_or_end_expected(self):
        assert _raises("H2 = H2O = O", errors.PlusOrEndExpected).start_index == 9

    def test_empty_group(self):
        e = _raises("H2 + () = H2", errors.EmptyGroup)
        assert (e.start_index, e.end_index) == (5, 8)

    def test_element_group_or_closing_parenthesis_expected(self):
        assert _raises("(H2 = H2", errors.ElementGroupOrClosingParenthesisExpected).start_index == 4
        assert _raises("(H2", errors.ElementGroupOrClosingParenthesisExpected).start_index == 3
        assert _raises("(e) = H", errors.ElementGroupOrClosingParenthesisExpected).start_index == 1

    def test_electron_needs_to_stand_alone(self):
        e = _raises("He e = He", errors.ElectronNeedsToStandAlone)
        assert (e.start_index, e.end_index) == (0, 5)

    @pytest.mark.parametrize("text, span", [
        ("Fe{3+} + e e e = Fe", (11, 12)),
        ("Fe{3+} + ee = Fe", (10, 11)),
        ("Fe{3+} + e- e = Fe", (12, 13)),
    ])
    def test_repeated_electron_is_rejected(self, text, span):
        e = _raises(text, errors.ElectronNeedsToStandAlone)
        assert (e.start_index, e.end_index) == span

    def test_invalid_charge_for_electron(self):
        e = _raises("e{2-} = H", errors.InvalidChargeForElectron)
        assert (e.start_index, e.end_index) == (0, 6)
        _raises("e{+} = H", errors.InvalidChargeForElectron)

    def test_charge_or_charge_sign_expected(self):
        assert _raises("H{", errors.ChargeOrChargeSignExpected).start_index == 2
        assert _raises("H{} = H", errors.ChargeOrChargeSignExpected).start_index == 2

    def test_charge_sign_expected(self):
        assert _raises("H{2 = H", errors.ChargeSignExpected).start_index == 4
        assert _raises("H{2", errors.ChargeSignExpected).start_index == 3

    def test_closing_parenthesis_after_charge_expected(self):
        assert _raises("H{+ = H", errors.ClosingParenthesisAfterChargeExpected).start_index == 4
        assert _raises("H{+", errors.ClosingParenthesisAfterChargeExpected).start_index == 3

    def test_all_parser_errors_are_value_errors(self):
        e = _raises("H2 + = H2O", errors.ParserError)
        assert isinstance(e, ValueError)
        assert isinstance(e, errors.ChemBalanceError)
