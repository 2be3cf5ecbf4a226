"""A small grep supporting the ^ . * $ operators."""

import sys

_BUFSIZE = 1024


def _matchhere(re, ri, text, ti):
    while True:
        if ri == len(re):
            return True
        if ri + 1 < len(re) and re[ri + 1] == "*":
            return _matchstar(re[ri], re, ri + 2, text, ti)
        if re[ri] == "$" and ri + 1 == len(re):
            return ti == len(text)
        if ti < len(text) and (re[ri] == "." or re[ri] == text[ti]):
            ri += 1
            ti += 1
            continue
        return False


def _matchstar(c, re, ri, text, ti):
    while True:
        if _matchhere(re, ri, text, ti):
            return True
        if ti < len(text) and (text[ti] == c or c == "."):
            ti += 1
        else:
            return False


def match(pattern, text):
    """Return whether ``pattern`` matches anywhere in ``text``."""
    if pattern.startswith("^"):
        return _matchhere(pattern, 1, text, 0)
    return any(_matchhere(pattern, 0, text, i) for i in range(len(text) + 1))


def grep(pattern, stream, out):
    """Write each newline-terminated line of ``stream`` matching ``pattern``.

    A final line without a newline is not examined, and a line too long
    for the line buffer ends the scan.
    """
    for line in stream:
        if not line.endswith("\n") or len(line) > _BUFSIZE - 1:
            break
        if match(pattern, line[:-1]):
            out.write(line)


def main(argv=None):
    """Run grep over the named files, or standard input; return the status."""
    argv = sys.argv[1:] if argv is None else list(argv)
    if not argv:
        print("usage: grep pattern [file ...]", file=sys.stderr)
        return 1
    pattern = argv[0]
    if len(argv) == 1:
        grep(pattern, sys.stdin, sys.stdout)
        return 0
    for path in argv[1:]:
        try:
            f = open(path, encoding="utf-8", errors="replace", newline="\n")
        except OSError:
            print(f"grep: cannot open {path}")
            return 1
        with f:
            grep(pattern, f, sys.stdout)
    return 0