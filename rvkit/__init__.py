"""Sv39 paging helpers, ELF headers, a shell parser, grep, printf, an allocator and a PRNG."""

__version__ = "0.1.0"