import math
import re

import numpy as np

from app.schemas.raw_series import RawSeries
from app.schemas.stats import Stats
from app.utils.error import InvalidNumericValueError

_ZERO = "0.000"

# Underscores may only separate two digits (or follow a hex prefix)
_DIGITS = r"[0-9](?:_?[0-9])*"
_HEX_DIGITS = r"[0-9a-fA-F](?:_?[0-9a-fA-F])*"

_DECIMAL_PATTERN = re.compile(
    rf"[+-]?(?:{_DIGITS}(?:\.(?:{_DIGITS})?)?|\.{_DIGITS})(?:[eE][+-]?{_DIGITS})?"
)
_HEX_PATTERN = re.compile(
    rf"[+-]?0[xX](?:_?{_HEX_DIGITS}(?:\.(?:{_HEX_DIGITS})?)?|\.{_HEX_DIGITS})"
    rf"[pP][+-]?{_DIGITS}"
)
_SPECIAL_PATTERN = re.compile(r"[+-]?inf(?:inity)?|nan", re.IGNORECASE)


def _parse_value(index: int, raw_value: str) -> float:
    """@brief Parse one series value as a float.

    @description Accepts ASCII decimal and hexadecimal (`0x1p-2`) literals with
    underscores between digits, plus `Inf`/`Infinity`/`NaN` in any case.

    @param index Position of the value in the series.
    @param raw_value Raw value text from upstream.
    @return Parsed float.
    @throws InvalidNumericValueError If the text is not a float literal or a
    finite literal overflows the float range.
    """
    if _SPECIAL_PATTERN.fullmatch(raw_value):
        return float(raw_value)

    try:
        if _DECIMAL_PATTERN.fullmatch(raw_value):
            value = float(raw_value.replace("_", ""))
        elif _HEX_PATTERN.fullmatch(raw_value):
            value = float.fromhex(raw_value.replace("_", ""))
        else:
            raise InvalidNumericValueError(index, raw_value)
    except OverflowError as exc:
        raise InvalidNumericValueError(index, raw_value) from exc

    if math.isinf(value):
        raise InvalidNumericValueError(index, raw_value)
    return value


def _sorted_values(parsed: list[float]) -> list[float]:
    """@brief Sort ascending with NaN values placed before every number."""
    values = np.asarray(parsed, dtype=float)
    nan_mask = np.isnan(values)
    return np.concatenate((values[nan_mask], np.sort(values[~nan_mask]))).tolist()


def _format(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return f"{value:.3f}"


def compute_stats(series: RawSeries) -> Stats:
    """@brief Compute mean, median, min and max of a raw series.

    @description Values are parsed in order and the first unparseable one
    aborts the computation. An empty series yields all-zero statistics.

    @param series Raw series decoded from the upstream payload.
    @return Stats with every field formatted to 3 decimals.
    @throws InvalidNumericValueError If any value is not numeric.
    """
    if not series.values:
        return Stats(mean=_ZERO, median=_ZERO, min=_ZERO, max=_ZERO)

    parsed = [_parse_value(index, raw) for index, raw in enumerate(series.values)]
    values = _sorted_values(parsed)
    length = len(values)

    if length % 2 == 0:
        median = (values[(length - 1) // 2] + values[(length + 1) // 2]) / 2
    else:
        median = values[length // 2]

    return Stats(
        mean=_format(sum(parsed) / length),
        median=_format(median),
        min=_format(values[0]),
        max=_format(values[-1]),
    )
