import pytest

from rvkit.elf import (
    ELF_MAGIC,
    ELF_PROG_FLAG_EXEC,
    ELF_PROG_FLAG_READ,
    ELF_PROG_LOAD,
    ElfFormatError,
    ElfHeader,
    ProgramHeader,
    parse_elf_header,
    parse_program_header,
    program_headers,
)


def _image(segments):
    header = ElfHeader(entry=0x1000, phoff=64, phnum=len(segments))
    body = header.pack() + b"".join(seg.pack() for seg in segments)
    return header, body


def test_header_starts_with_magic_bytes():
    assert ElfHeader().pack()[:4] == b"\x7fELF"
    assert len(ElfHeader().pack()) == 64


def test_program_header_size():
    assert len(ProgramHeader().pack()) == 56


def test_header_round_trip():
    header = ElfHeader(type=2, machine=243, version=1, entry=0x1234, phoff=64, phnum=3)
    assert parse_elf_header(header.pack()) == header


def test_program_header_round_trip():
    ph = ProgramHeader(
        type=ELF_PROG_LOAD,
        flags=ELF_PROG_FLAG_READ | ELF_PROG_FLAG_EXEC,
        off=0x1000, vaddr=0, paddr=0, filesz=300, memsz=500, align=4096,
    )
    assert parse_program_header(ph.pack()) == ph


def test_program_headers_iterates_all_segments():
    segments = [
        ProgramHeader(type=ELF_PROG_LOAD, vaddr=0, filesz=10, memsz=10),
        ProgramHeader(type=ELF_PROG_LOAD, vaddr=0x1000, filesz=20, memsz=40),
    ]
    _, image = _image(segments)
    assert list(program_headers(image)) == segments


def test_bad_magic_rejected():
    data = ElfHeader(magic=ELF_MAGIC ^ 1).pack()
    with pytest.raises(ElfFormatError):
        parse_elf_header(data)


def test_truncated_data_rejected():
    with pytest.raises(ElfFormatError):
        parse_elf_header(ElfHeader().pack()[:-1])
    with pytest.raises(ElfFormatError):
        parse_program_header(ProgramHeader().pack()[:10])


def test_missing_segment_bytes_rejected():
    _, image = _image([ProgramHeader(type=ELF_PROG_LOAD)])
    with pytest.raises(ElfFormatError):
        list(program_headers(image[:-8]))