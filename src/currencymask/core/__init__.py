"""Pure masking primitives.

Every function in this package is a pure function over immutable input:
sanitizing keystroke text, resolving fraction digits, capping integer
digits, converting between values and scaled digit strings, and clamping
into bounds. The stateful session in ``currencymask.runtime`` composes them.

Python 3.13+. Zero external dependencies.
"""

from .bounds import clamp_value
from .capping import CappedDigits, cap_digits
from .codec import (
    EncodedValue,
    decode_digits,
    encode_value,
    scaled_magnitude,
    values_equal_at_scale,
)
from .fractions import FractionDigits, resolve_fraction_digits
from .options import FormattingOptions, ValidationOptions, Validator
from .sanitizer import SanitizedInput, count_sign_markers, sanitize, strip_to_digits

__all__ = [
    "CappedDigits",
    "EncodedValue",
    "FormattingOptions",
    "FractionDigits",
    "SanitizedInput",
    "ValidationOptions",
    "Validator",
    "cap_digits",
    "clamp_value",
    "count_sign_markers",
    "decode_digits",
    "encode_value",
    "resolve_fraction_digits",
    "sanitize",
    "scaled_magnitude",
    "strip_to_digits",
    "values_equal_at_scale",
]
