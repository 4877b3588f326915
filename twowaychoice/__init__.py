"""A value that is exactly one of two alternatives, neither of them an error.

Build one with :class:`First` or :class:`Second` and annotate it as
:data:`TwoWayChoice`::

    from twowaychoice import First, Second, TwoWayChoice

    age: TwoWayChoice[int, str] = First(42)
    assert age.is_first()
    assert age.into_first() == 42
    assert age.into_second() is None
"""

from .choice import First, Second, TwoWayChoice, WrongVariantError

__all__ = [
    "First",
    "Second",
    "TwoWayChoice",
    "WrongVariantError",
]
