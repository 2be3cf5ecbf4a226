"""Minimal formatted output understanding %d, %l, %x, %p, %s, %c and %%."""

import sys

_DIGITS = "0123456789ABCDEF"
_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _digits(x, base):
    out = []
    while True:
        out.append(_DIGITS[x % base])
        x //= base
        if x == 0:
            break
    return "".join(reversed(out))


def _printint(value, base, signed):
    # Values pass through a 32-bit int, as the conversions do.
    x = value & _MASK32
    if signed and x & 0x80000000:
        return "-" + _digits((1 << 32) - x, base)
    return _digits(x, base)


def _printptr(value):
    return "0x" + f"{value & _MASK64:016X}"


def _char(value):
    if isinstance(value, str):
        return value
    return chr(value & 0xFF)


def format(fmt, *args):
    """Render ``fmt`` with ``args`` and return the resulting text."""
    values = iter(args)

    def arg():
        try:
            return next(values)
        except StopIteration:
            raise TypeError("not enough arguments for format") from None

    out = []
    pending = False
    for c in fmt:
        if not pending:
            if c == "%":
                pending = True
            else:
                out.append(c)
            continue
        pending = False
        if c == "d":
            out.append(_printint(arg(), 10, True))
        elif c == "l":
            out.append(_printint(arg(), 10, False))
        elif c == "x":
            out.append(_printint(arg(), 16, False))
        elif c == "p":
            out.append(_printptr(arg()))
        elif c == "s":
            s = arg()
            out.append("(null)" if s is None else str(s))
        elif c == "c":
            out.append(_char(arg()))
        elif c == "%":
            out.append("%")
        else:
            # Unknown conversion: echo it to draw attention.
            out.append("%" + c)
    return "".join(out)


def fprintf(stream, fmt, *args):
    """Write formatted text to ``stream``."""
    stream.write(format(fmt, *args))


def printf(fmt, *args):
    """Write formatted text to standard output."""
    fprintf(sys.stdout, fmt, *args)