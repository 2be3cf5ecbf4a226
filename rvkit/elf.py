"""ELF64 file and program header records."""

import struct
from dataclasses import dataclass, field

ELF_MAGIC = 0x464C457F  # "\x7FELF" read as a little-endian word

ELF_PROG_LOAD = 1

ELF_PROG_FLAG_EXEC = 1
ELF_PROG_FLAG_WRITE = 2
ELF_PROG_FLAG_READ = 4

_ELFHDR = struct.Struct("<I12sHHIQQQIHHHHHH")
_PROGHDR = struct.Struct("<IIQQQQQQ")

ELFHDR_SIZE = _ELFHDR.size
PROGHDR_SIZE = _PROGHDR.size


class ElfFormatError(ValueError):
    """Raised when bytes do not hold a valid ELF header."""


@dataclass
class ElfHeader:
    """The ELF file header."""

    magic: int = ELF_MAGIC
    elf: bytes = field(default=bytes(12))
    type: int = 0
    machine: int = 0
    version: int = 0
    entry: int = 0
    phoff: int = 0
    shoff: int = 0
    flags: int = 0
    ehsize: int = ELFHDR_SIZE
    phentsize: int = PROGHDR_SIZE
    phnum: int = 0
    shentsize: int = 0
    shnum: int = 0
    shstrndx: int = 0

    def pack(self):
        """Encode the header in little-endian on-disk form."""
        return _ELFHDR.pack(
            self.magic, self.elf, self.type, self.machine, self.version,
            self.entry, self.phoff, self.shoff, self.flags, self.ehsize,
            self.phentsize, self.phnum, self.shentsize, self.shnum,
            self.shstrndx,
        )


@dataclass
class ProgramHeader:
    """An ELF program (segment) header."""

    type: int = 0
    flags: int = 0
    off: int = 0
    vaddr: int = 0
    paddr: int = 0
    filesz: int = 0
    memsz: int = 0
    align: int = 0

    def pack(self):
        """Encode the program header in little-endian on-disk form."""
        return _PROGHDR.pack(
            self.type, self.flags, self.off, self.vaddr, self.paddr,
            self.filesz, self.memsz, self.align,
        )


def parse_elf_header(data):
    """Decode the file header at the start of ``data``."""
    if len(data) < ELFHDR_SIZE:
        raise ElfFormatError("truncated ELF header")
    header = ElfHeader(*_ELFHDR.unpack_from(data, 0))
    if header.magic != ELF_MAGIC:
        raise ElfFormatError(f"bad ELF magic 0x{header.magic:08x}")
    return header


def parse_program_header(data):
    """Decode a program header at the start of ``data``."""
    if len(data) < PROGHDR_SIZE:
        raise ElfFormatError("truncated program header")
    return ProgramHeader(*_PROGHDR.unpack_from(data, 0))


def program_headers(data):
    """Yield every program header listed by the file header of ``data``."""
    header = parse_elf_header(data)
    for i in range(header.phnum):
        off = header.phoff + i * header.phentsize
        yield parse_program_header(data[off:off + PROGHDR_SIZE])