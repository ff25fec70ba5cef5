"""Quickstart example for currencymask.

This example walks through a masked currency field: live typing, programmatic
values, validation messages and switching display modes.

Note: Examples print engine state directly. A UI binding would copy
state.text back into the widget and show state.error next to it.
"""

from currencymask import (
    DisplayMode,
    FormattingOptions,
    ValidationOptions,
    api,
    format_currency,
)

# Example 1: Live typing
print("=" * 50)
print("Example 1: Live Typing")
print("=" * 50)

usd = FormattingOptions.create("USD", "en-US")
session = api.init(None, usd)

for keystrokes in ["1", "12", "123", "1234", "1234.", "1234.5", "1234.56"]:
    state = api.on_text_changed(session, keystrokes)
    print(f"{keystrokes!r:>12} -> {state.text!r:<14} value={state.value}")
# Output ends with: '1234.56' -> '$1,234.56'  value=1234.56

# Example 2: Programmatic values
print("\n" + "=" * 50)
print("Example 2: Programmatic Values")
print("=" * 50)

state = api.on_value_set(session, 99.5)
print(state.text)
# Output: $99.50

state = api.on_value_set(session, None)
print(repr(state.text))
# Output: ''

# Example 3: Validation
print("\n" + "=" * 50)
print("Example 3: Validation")
print("=" * 50)

validation = ValidationOptions(
    minimum_value=10,
    maximum_value=1000,
    max_integer_digits=4,
)
session = api.init(None, usd, validation)

print(api.on_text_changed(session, "5").error)
# Output: Value must be >= 10

print(api.on_text_changed(session, "5000").text)
# Output: $1,000.00

state = api.on_text_changed(session, "12345")
print(state.text, "|", state.error)
# Output: $1,000.00 | Maximum digits is 4

# Example 4: Negative values
print("\n" + "=" * 50)
print("Example 4: Negative Values")
print("=" * 50)

session = api.init(None, usd, ValidationOptions(allow_negative=True))
print(api.on_text_changed(session, "-12").text)
# Output: -$12

print(api.on_text_changed(session, "-$12-").text)
# Output: $12

# Example 5: Locales and display modes
print("\n" + "=" * 50)
print("Example 5: Locales and Display Modes")
print("=" * 50)

eur = FormattingOptions.create("EUR", "de-DE")
session = api.init(1234.5, eur)
print(session.text)
# Output: 1.234,50 €

state = api.reconfigure(session, mode=DisplayMode.RAW)
print(state.text)
# Output: 1234,50

print(format_currency(1234, FormattingOptions.create("JPY", "ja-JP", fraction_digits=0)))
# Output: ￥1,234
