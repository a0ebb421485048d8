"""Locale-aware rendering of float32 components."""

import locale
from collections.abc import Iterable

import numpy as np
from pydantic import BaseModel

GENERAL_SPECS = (None, '', 'G', 'g')

# general float32 form: exponent notation once the decimal point sits right of
# max(significant digits, 7) or more than three places left of the first digit
_SINGLE_PRECISION = 7
_MIN_DECIMAL_POINT = -3


class NumberFormat(BaseModel, frozen=True):
    """
    Separators used when rendering numbers.

    :ivar group_separator: Thousands separator, also used between components.
    :ivar decimal_separator: Separator between integer and fractional part.
    """

    group_separator: str = ','
    decimal_separator: str = '.'

    @classmethod
    def invariant(cls) -> 'NumberFormat':
        return cls()

    @classmethod
    def current(cls) -> 'NumberFormat':
        """
        Separators of the current process locale (``LC_NUMERIC``).

        Empty locale values (e.g. the ``C`` locale has no thousands
        separator) fall back to the invariant ones.
        """
        conv = locale.localeconv()
        return cls(
            group_separator=str(conv.get('thousands_sep') or ','),
            decimal_separator=str(conv.get('decimal_point') or '.'),
        )

    @property
    def component_separator(self) -> str:
        return f'{self.group_separator} '

    def localize(self, text: str) -> str:
        """Swap the C-style ``,`` and ``.`` of ``text`` for this format's separators."""
        if self.group_separator == ',' and self.decimal_separator == '.':
            return text
        table = str.maketrans({',': self.group_separator, '.': self.decimal_separator})
        return text.translate(table)


def format_general(value: float | np.floating) -> str:
    """
    Shortest text that reads back to the same float32.

    Integral values drop the trailing ``.0``; very small and very large
    magnitudes use exponent notation, e.g. ``16777216`` but ``1E+07``
    and ``0.0001`` but ``1E-05``.
    """
    v = np.float32(value)
    if not np.isfinite(v) or v == 0:
        return np.format_float_positional(v, trim='-')

    scientific = np.format_float_scientific(v, trim='-', exp_digits=2)
    mantissa, exponent = scientific.split('e')
    digits = len(mantissa.lstrip('-').replace('.', ''))
    point = int(exponent) + 1

    if point > max(digits, _SINGLE_PRECISION) or point < _MIN_DECIMAL_POINT:
        return scientific.upper()
    return np.format_float_positional(v, trim='-')


def format_component(
    value: float | np.floating, spec: str | None, number_format: NumberFormat
) -> str:
    if spec in GENERAL_SPECS:
        text = format_general(value)
    else:
        text = format(float(value), spec)
    return number_format.localize(text)


def format_components(
    values: Iterable[float | np.floating],
    spec: str | None = None,
    number_format: NumberFormat | None = None,
) -> str:
    """Render ``values`` joined by the group separator and one space."""
    if number_format is None:
        number_format = NumberFormat.current()
    return number_format.component_separator.join(
        format_component(v, spec, number_format) for v in values
    )
