from __future__ import annotations

# Below the smallest limit sys.set_int_max_str_digits() accepts (640), so
# every chunk converts no matter how the interpreter is configured.
_CHUNK = 600


def str_to_int(digits: str) -> int:
    """Convert a run of ASCII digits of any length."""
    try:
        return int(digits)
    except ValueError:
        if not digits.isascii() or not digits.isdigit():
            raise
    value = 0
    for i in range(0, len(digits), _CHUNK):
        chunk = digits[i : i + _CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def int_to_str(n: int) -> str:
    """Decimal text for ``n``, however many digits it has."""
    try:
        return str(n)
    except ValueError:
        pass
    sign = "-" if n < 0 else ""
    n = abs(n)
    base = 10**_CHUNK
    chunks: list[str] = []
    while n:
        n, rem = divmod(n, base)
        chunks.append(f"{rem:0{_CHUNK}d}")
    return sign + "".join(reversed(chunks)).lstrip("0")
