"""A first-fit free-list allocator over a simulated program break."""

from dataclasses import dataclass

HEADER_SIZE = 16
HEAP_START = 0x1000
_BASE = 0
_MIN_UNITS = 4096


@dataclass
class _Header:
    next: int
    size: int  # in header-sized units, header included


class Allocator:
    """Hands out addresses from a heap grown with ``sbrk`` up to ``limit`` bytes."""

    def __init__(self, limit=16 * 1024 * 1024):
        if limit < 0:
            raise ValueError("limit must not be negative")
        self.limit = limit
        self.start = HEAP_START
        self.brk = HEAP_START
        self._headers = {}
        self._freep = None
        self._allocated = set()

    def sbrk(self, nbytes):
        """Move the break by ``nbytes`` and return the old break."""
        old = self.brk
        new = old + nbytes
        if new < self.start or new > self.start + self.limit:
            raise MemoryError("sbrk: out of memory")
        self.brk = new
        return old

    def _morecore(self, nunits):
        nunits = max(nunits, _MIN_UNITS)
        hp = self.sbrk(nunits * HEADER_SIZE)
        self._headers[hp] = _Header(next=_BASE, size=nunits)
        self._release(hp)
        return self._freep

    def malloc(self, nbytes):
        """Return the address of a block of at least ``nbytes`` bytes."""
        if nbytes < 0:
            raise ValueError("size must not be negative")
        h = self._headers
        nunits = (nbytes + HEADER_SIZE - 1) // HEADER_SIZE + 1
        if self._freep is None:
            h[_BASE] = _Header(next=_BASE, size=0)
            self._freep = _BASE
        prevp = self._freep
        p = h[prevp].next
        while True:
            if h[p].size >= nunits:
                if h[p].size == nunits:
                    h[prevp].next = h[p].next
                else:
                    h[p].size -= nunits
                    p += h[p].size * HEADER_SIZE
                    h[p] = _Header(next=_BASE, size=nunits)
                self._freep = prevp
                self._allocated.add(p + HEADER_SIZE)
                return p + HEADER_SIZE
            if p == self._freep:
                p = self._morecore(nunits)
            prevp = p
            p = h[p].next

    def free(self, ap):
        """Return a block obtained from ``malloc`` to the free list."""
        if ap not in self._allocated:
            raise ValueError(f"free of unallocated address 0x{ap:x}")
        self._allocated.remove(ap)
        self._release(ap - HEADER_SIZE)

    def _release(self, bp):
        h = self._headers
        p = self._freep
        while not (p < bp < h[p].next):
            if p >= h[p].next and (bp > p or bp < h[p].next):
                break
            p = h[p].next
        nxt = h[p].next
        if bp + h[bp].size * HEADER_SIZE == nxt:
            h[bp].size += h[nxt].size
            h[bp].next = h[nxt].next
            del h[nxt]
        else:
            h[bp].next = nxt
        if p + h[p].size * HEADER_SIZE == bp:
            h[p].size += h[bp].size
            h[p].next = h[bp].next
            del h[bp]
        else:
            h[p].next = bp
        self._freep = p

    def free_blocks(self):
        """List the free blocks as (header address, size in bytes), by address."""
        if self._freep is None:
            return []
        h = self._headers
        blocks = []
        p = h[_BASE].next
        while p != _BASE:
            blocks.append((p, h[p].size * HEADER_SIZE))
            p = h[p].next
        return sorted(blocks)