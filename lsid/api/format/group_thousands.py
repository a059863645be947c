"""Group a byte count in blocks of three digits."""


def group_thousands(value: int, digits: int = 3) -> str:
    """Render ``value`` with ``.`` between digit groups.

    The separator is fixed and not localized: ``1234567`` becomes
    ``1.234.567`` and ``42`` stays ``42``.
    """
    radix = 10**digits
    if value < radix:
        return str(value)
    return f"{group_thousands(value // radix, digits)}.{value % radix:0{digits}d}"
