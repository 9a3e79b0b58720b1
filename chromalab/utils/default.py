from typing import Optional, TypeVar

T = TypeVar('T')


def value_or_default(value: Optional[T], default: T) -> T:
    """
    Resolve an optional argument.

    Only ``None`` selects the default, so falsy colors and zero steps are kept.
    """
    return default if value is None else value
