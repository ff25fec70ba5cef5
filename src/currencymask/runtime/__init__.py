"""Runtime: locale-aware rendering and the stateful masking session.

Python 3.13+. Uses Babel for i18n.
"""

from .locale_context import LocaleContext, get_decimal_separator
from .renderer import InputSymbols, RenderResult, input_symbols, render_digits, render_typed
from .session import EngineState, InputSession

__all__ = [
    "EngineState",
    "InputSession",
    "InputSymbols",
    "LocaleContext",
    "RenderResult",
    "get_decimal_separator",
    "input_symbols",
    "render_digits",
    "render_typed",
]
