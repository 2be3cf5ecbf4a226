"""Parser for the shell's command language: words, < > >>, |, ;, & and ( )."""

from dataclasses import dataclass, field

from .riscv import O_CREATE, O_RDONLY, O_TRUNC, O_WRONLY

MAXARGS = 10

WHITESPACE = " \t\r\n\v"
SYMBOLS = "<|>&;()"


class ShellSyntaxError(ValueError):
    """The command line could not be parsed."""


@dataclass
class ExecCmd:
    """Run a program with arguments; ``argv[0]`` names the program."""

    argv: list = field(default_factory=list)


@dataclass
class RedirCmd:
    """Run ``cmd`` with descriptor ``fd`` reopened on ``file`` in ``mode``."""

    cmd: object
    file: str
    mode: int
    fd: int


@dataclass
class PipeCmd:
    """Connect the output of ``left`` to the input of ``right``."""

    left: object
    right: object


@dataclass
class ListCmd:
    """Run ``left``, wait for it, then run ``right``."""

    left: object
    right: object


@dataclass
class BackCmd:
    """Run ``cmd`` in the background."""

    cmd: object


class Tokenizer:
    """Splits a command line into shell tokens.

    Token kinds are ``"a"`` for a word, the symbol itself for ``| ( ) ; & < >``,
    ``"+"`` for ``>>`` and ``""`` at the end of input.
    """

    def __init__(self, text):
        self.text = text
        self.pos = 0

    def _skip_space(self):
        while self.pos < len(self.text) and self.text[self.pos] in WHITESPACE:
            self.pos += 1

    @property
    def rest(self):
        """The text not yet consumed."""
        return self.text[self.pos:]

    def peek(self, toks):
        """Skip whitespace and report whether the next character is in ``toks``."""
        self._skip_space()
        return self.pos < len(self.text) and self.text[self.pos] in toks

    def next_token(self):
        """Consume one token and return ``(kind, text)``."""
        self._skip_space()
        text = self.text
        start = self.pos
        if self.pos >= len(text):
            kind = ""
        else:
            c = text[self.pos]
            if c in "|();&<":
                self.pos += 1
                kind = c
            elif c == ">":
                self.pos += 1
                if self.pos < len(text) and text[self.pos] == ">":
                    self.pos += 1
                    kind = "+"
                else:
                    kind = ">"
            else:
                kind = "a"
                while (self.pos < len(text)
                       and text[self.pos] not in WHITESPACE
                       and text[self.pos] not in SYMBOLS):
                    self.pos += 1
        word = text[start:self.pos]
        self._skip_space()
        return kind, word


_REDIRECTIONS = {
    "<": (O_RDONLY, 0),
    ">": (O_WRONLY | O_CREATE | O_TRUNC, 1),
    "+": (O_WRONLY | O_CREATE, 1),
}


def parse_cmd(text):
    """Parse a whole command line into a command tree."""
    tk = Tokenizer(text)
    cmd = _parse_line(tk)
    tk.peek("")
    if tk.rest:
        raise ShellSyntaxError(f"leftovers: {tk.rest}")
    return cmd


def _parse_line(tk):
    cmd = _parse_pipe(tk)
    while tk.peek("&"):
        tk.next_token()
        cmd = BackCmd(cmd)
    if tk.peek(";"):
        tk.next_token()
        cmd = ListCmd(cmd, _parse_line(tk))
    return cmd


def _parse_pipe(tk):
    cmd = _parse_exec(tk)
    if tk.peek("|"):
        tk.next_token()
        cmd = PipeCmd(cmd, _parse_pipe(tk))
    return cmd


def _parse_redirs(cmd, tk):
    while tk.peek("<>"):
        kind, _ = tk.next_token()
        word_kind, word = tk.next_token()
        if word_kind != "a":
            raise ShellSyntaxError("missing file for redirection")
        mode, fd = _REDIRECTIONS[kind]
        cmd = RedirCmd(cmd, word, mode, fd)
    return cmd


def _parse_block(tk):
    if not tk.peek("("):
        raise ShellSyntaxError("parseblock")
    tk.next_token()
    cmd = _parse_line(tk)
    if not tk.peek(")"):
        raise ShellSyntaxError("syntax - missing )")
    tk.next_token()
    return _parse_redirs(cmd, tk)


def _parse_exec(tk):
    if tk.peek("("):
        return _parse_block(tk)
    exec_cmd = ExecCmd()
    ret = _parse_redirs(exec_cmd, tk)
    while not tk.peek("|)&;"):
        kind, word = tk.next_token()
        if kind == "":
            break
        if kind != "a":
            raise ShellSyntaxError("syntax")
        exec_cmd.argv.append(word)
        if len(exec_cmd.argv) >= MAXARGS:
            raise ShellSyntaxError("too many args")
        ret = _parse_redirs(ret, tk)
    return ret