# rvkit

A small toolkit for exploring how a teaching operating system on RISC-V
works, written in plain Python with no dependencies.

It contains:

- `rvkit.riscv`: kernel parameters, `open()` mode flags, status and
  interrupt register bits, page-table entry flags, the `virt` machine
  memory layout, and the Sv39 address helpers `pg_round_up`,
  `pg_round_down`, `pa2pte`, `pte2pa`, `pte_flags`, `px`, `make_satp`,
  `kstack`, `clint_mtimecmp` and the PLIC register functions
  (`plic_menable`, `plic_senable`, `plic_mpriority`, `plic_spriority`,
  `plic_mclaim`, `plic_sclaim`).
- `rvkit.elf`: reading and writing 64-bit little-endian ELF file headers
  and program headers (`parse_elf_header`, `parse_program_header`,
  `program_headers`, `ElfHeader.pack`, `ProgramHeader.pack`). A short
  buffer or a bad magic number raises `ElfFormatError`.
- `rvkit.printf`: a small formatter understanding `%d %l %x %p %s %c %%`
  (`format`, `fprintf`, `printf`). Unknown conversions are echoed as they
  are; too few arguments raise `TypeError`.
- `rvkit.grep`: a grep supporting the `^ . * $` operators (`match`,
  `grep`, `main`).
- `rvkit.umalloc`: a first-fit free-list allocator over a simulated
  program break (`Allocator` with `sbrk`, `malloc`, `free` and
  `free_blocks`). Running past the heap limit raises `MemoryError`;
  freeing an address that was not handed out raises `ValueError`.
- `rvkit.shparse`: the parser for a shell command language with pipes,
  redirections (`<`, `>`, `>>`), lists (`;`), background jobs (`&`) and
  parenthesised blocks (`parse_cmd`, `Tokenizer`, and the command nodes
  `ExecCmd`, `RedirCmd`, `PipeCmd`, `ListCmd`, `BackCmd`). Malformed input
  raises `ShellSyntaxError`.
- `rvkit.rand`: the Park–Miller "minimal standard" generator (`do_rand`,
  and `ParkMiller`, which is also an iterator).

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Page arithmetic:

```python
from rvkit.riscv import pg_round_up, pg_round_down

pg_round_up(5000)    # 8192
pg_round_down(5000)  # 4096
```

Pattern matching and formatting:

```python
from rvkit.grep import match
from rvkit.printf import format

match("^ab*c$", "abbbc")   # True
format("%d %x", -5, 255)   # "-5 FF"
```

Allocating from a heap:

```python
from rvkit.umalloc import Allocator

heap = Allocator()
p = heap.malloc(100)
heap.free(p)
heap.free_blocks()   # [(4096, 65536)]: the whole heap, merged back together
```

Parsing a command line:

```python
from rvkit.shparse import parse_cmd

cmd = parse_cmd("cat < in.txt | wc > out.txt; echo done &")
```

Random numbers:

```python
from rvkit.rand import ParkMiller

gen = ParkMiller(31)
values = [gen.next() for _ in range(3)]
```

## Command

```
rvkit-grep PATTERN [FILE ...]
```

With no file it reads standard input. It prints each matching line and
exits with status 1 on a missing pattern or a file it cannot open.

## What it does not do

The package describes the Sv39 paging scheme but does not simulate page
tables or physical memory: there is no mapping, unmapping or copying of
address spaces. The shell parser builds command trees but nothing runs
them. Apart from grep there are no file tools or commands, and no C-style
string helpers.