"""Error taxonomies of the parser and the balancer.

Two disjoint families share one base class:
- ParserError: malformed input text, attributable to a span of the input
- BalancerError: well-formed input without a unique integer balancing,
  or a failed internal consistency check

Every error kind has a stable ``kind`` id and a fixed description per locale.
Offsets are character indices into the equation text.
"""

from __future__ import annotations

from .config import SUPPORTED_LOCALES, load_settings


class ChemBalanceError(ValueError):
    kind = "error"
    descriptions: dict[str, str] = {"en": "Error.", "ru": "Ошибка."}

    def description(self, locale: str | None = None) -> str:
        """Description in *locale*; None means the configured locale ($CHEM_BALANCE_LOCALE)."""
        if locale is None:
            locale = load_settings().locale
        if locale not in SUPPORTED_LOCALES:
            raise ValueError(f"Unknown locale '{locale}'")
        return self.descriptions[locale]

    def __str__(self) -> str:
        return self.description()


# =============================================================================
# Parser errors
# =============================================================================
class ParserError(ChemBalanceError):
    """Syntax error; ``start_index``/``end_index`` bound the offending span."""

    kind = "parser_error"

    def __init__(self, start_index: int | None = None, end_index: int | None = None):
        super().__init__(start_index, end_index)
        self.start_index = start_index
        self.end_index = end_index

    def __str__(self) -> str:
        text = self.description()
        if self.start_index is None:
            return text
        if self.end_index is None or self.end_index == self.start_index:
            return f"{text} (position {self.start_index})"
        return f"{text} (positions {self.start_index}..{self.end_index})"

    def caret(self, text: str) -> str:
        """Render *text* with a caret line under the offending span."""
        if self.start_index is None:
            return text
        end = self.start_index if self.end_index is None else self.end_index
        width = max(1, end - self.start_index)
        return f"{text}\n{' ' * self.start_index}{'^' * width}"


class AdvancingBeyondLastToken(ParserError):
    kind = "advancing_beyond_last_token"
    descriptions = {
        "en": "Advancing beyond the last token.",
        "ru": "Продвижение за пределы последнего ключа.",
    }


class TokenMismatch(ParserError):
    kind = "token_mismatch"
    descriptions = {
        "en": "The token does not match the expected string.",
        "ru": "Ключ не совпадает со строкой.",
    }


class ChargeOrChargeSignExpected(ParserError):
    kind = "charge_or_charge_sign_expected"
    descriptions = {
        "en": "A charge or a charge sign is expected.",
        "ru": "Ожидается заряд или знак заряда.",
    }


class ChargeSignExpected(ParserError):
    kind = "charge_sign_expected"
    descriptions = {
        "en": "A charge sign is expected.",
        "ru": "Ожидается знак заряда.",
    }


class ClosingParenthesisAfterChargeExpected(ParserError):
    kind = "closing_parenthesis_after_charge_expected"
    descriptions = {
        "en": "A closing bracket is expected after the charge.",
        "ru": "Ожидается закрывающая скобка после заряда.",
    }


class ElectronNeedsToStandAlone(ParserError):
    kind = "electron_needs_to_stand_alone"
    descriptions = {
        "en": "An electron must stand alone.",
        "ru": "Электрон должен стоять один.",
    }


class ElementGroupOrClosingParenthesisExpected(ParserError):
    kind = "element_group_or_closing_parenthesis_expected"
    descriptions = {
        "en": "An element, a group or a closing parenthesis is expected.",
        "ru": "Ожидается элемент, группа или закрывающая скобка.",
    }


class ElementIsNotParsed(ParserError):
    kind = "element_is_not_parsed"
    descriptions = {
        "en": "The element could not be parsed.",
        "ru": "Элемент не разобран.",
    }


class EmptyGroup(ParserError):
    kind = "empty_group"
    descriptions = {
        "en": "Empty group.",
        "ru": "Пустая группа.",
    }


class EntityExpected(ParserError):
    kind = "entity_expected"
    descriptions = {
        "en": "A substance is missing.",
        "ru": "Пропущено вещество.",
    }


class InvalidChargeForElectron(ParserError):
    kind = "invalid_charge_for_electron"
    descriptions = {
        "en": "Invalid charge for an electron.",
        "ru": "Неверный заряд электрона.",
    }


class InvalidSymbol(ParserError):
    kind = "invalid_symbol"
    descriptions = {
        "en": "Invalid symbol.",
        "ru": "Неверный символ.",
    }


class NumberNotExpected(ParserError):
    kind = "number_not_expected"
    descriptions = {
        "en": "A number is not expected here.",
        "ru": "Число не ожидалось.",
    }


class TooBigNumber(ParserError):
    kind = "too_big_number"
    descriptions = {
        "en": "The number is too big.",
        "ru": "Слишком большое число.",
    }


class PlusOrEndExpected(ParserError):
    kind = "plus_or_end_expected"
    descriptions = {
        "en": "A plus sign or the end of the equation is expected.",
        "ru": "Ожидается плюс или завершение.",
    }


class PlusOrEqualSignExpected(ParserError):
    kind = "plus_or_equal_sign_expected"
    descriptions = {
        "en": "A plus sign or an equals sign is expected.",
        "ru": "Ожидается плюс или знак равенства.",
    }


# =============================================================================
# Balancer errors
# =============================================================================
class BalancerError(ChemBalanceError):
    kind = "balancer_error"


class AllCoefficientsAreZero(BalancerError):
    kind = "all_coefficients_are_zero"
    descriptions = {
        "en": "All coefficients are zero.",
        "ru": "Все коэффициенты равны нулю.",
    }


class CoefficientsAreIncorrectlyPlaced(BalancerError):
    kind = "coefficients_are_incorrectly_placed"
    descriptions = {
        "en": "The coefficients are incorrectly placed.",
        "ru": "Коэффициенты расставлены неверно.",
    }


class MismatchInNumberOfCoefficients(BalancerError):
    kind = "mismatch_in_number_of_coefficients"
    descriptions = {
        "en": "Mismatch in the number of coefficients.",
        "ru": "Несоответствие количества коэффициентов.",
    }


class ReactionCanBeEqualizedInInfiniteNumberOfWays(BalancerError):
    kind = "reaction_can_be_equalized_in_infinite_number_of_ways"
    descriptions = {
        "en": "The reaction can be equalized in an infinite number of ways.",
        "ru": "Реакцию можно уравнять бесконечным числом способов.",
    }
