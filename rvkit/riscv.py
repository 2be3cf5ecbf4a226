"""Sv39 paging arithmetic, machine layout and kernel parameters."""

# Kernel parameters.
NPROC = 64
NCPU = 8
NOFILE = 16
NFILE = 100
NINODE = 50
NDEV = 10
ROOTDEV = 1
MAXARG = 32
MAXOPBLOCKS = 10
LOGSIZE = MAXOPBLOCKS * 3
NBUF = MAXOPBLOCKS * 3
FSSIZE = 1000
MAXPATH = 128

# open() mode flags.
O_RDONLY = 0x000
O_WRONLY = 0x001
O_RDWR = 0x002
O_CREATE = 0x200
O_TRUNC = 0x400

# Machine status register.
MSTATUS_MPP_MASK = 3 << 11
MSTATUS_MPP_M = 3 << 11
MSTATUS_MPP_S = 1 << 11
MSTATUS_MPP_U = 0 << 11
MSTATUS_MIE = 1 << 3

# Supervisor status register.
SSTATUS_SPP = 1 << 8
SSTATUS_SPIE = 1 << 5
SSTATUS_UPIE = 1 << 4
SSTATUS_SIE = 1 << 1
SSTATUS_UIE = 1 << 0

# Supervisor interrupt enable.
SIE_SEIE = 1 << 9
SIE_STIE = 1 << 5
SIE_SSIE = 1 << 1

# Machine interrupt enable.
MIE_MEIE = 1 << 11
MIE_MTIE = 1 << 7
MIE_MSIE = 1 << 3

SATP_SV39 = 8 << 60

PGSIZE = 4096
PGSHIFT = 12

PTE_V = 1 << 0
PTE_R = 1 << 1
PTE_W = 1 << 2
PTE_X = 1 << 3
PTE_U = 1 << 4
PTE_A = 1 << 6

PXMASK = 0x1FF

# One beyond the highest usable virtual address.
MAXVA = 1 << (9 + 9 + 9 + 12 - 1)

# Physical memory layout of the virt machine.
UART0 = 0x10000000
UART0_IRQ = 10
VIRTIO0 = 0x10001000
VIRTIO0_IRQ = 1
E1000_IRQ = 33

CLINT = 0x2000000
CLINT_MTIME = CLINT + 0xBFF8

PLIC = 0x0C000000
PLIC_PRIORITY = PLIC + 0x0
PLIC_PENDING = PLIC + 0x1000

KERNBASE = 0x80000000
PHYSTOP = KERNBASE + 128 * 1024 * 1024

TRAMPOLINE = MAXVA - PGSIZE
TRAPFRAME = TRAMPOLINE - PGSIZE
USYSCALL = TRAPFRAME - PGSIZE


def pg_round_up(sz):
    """Round a size up to a page boundary."""
    return (sz + PGSIZE - 1) & ~(PGSIZE - 1)


def pg_round_down(a):
    """Round an address down to a page boundary."""
    return a & ~(PGSIZE - 1)


def pa2pte(pa):
    """Shift a physical address into the PPN field of a PTE."""
    return (pa >> 12) << 10


def pte2pa(pte):
    """Extract the physical address from a PTE."""
    return (pte >> 10) << 12


def pte_flags(pte):
    """Return the low ten flag bits of a PTE."""
    return pte & 0x3FF


def _pxshift(level):
    return PGSHIFT + 9 * level


def px(level, va):
    """Return the 9-bit page-table index of ``va`` at ``level``."""
    return (va >> _pxshift(level)) & PXMASK


def make_satp(pagetable):
    """Build a satp value selecting Sv39 with the given root table."""
    return SATP_SV39 | (pagetable >> 12)


def clint_mtimecmp(hartid):
    return CLINT + 0x4000 + 8 * hartid


def plic_menable(hart):
    return PLIC + 0x2000 + hart * 0x100


def plic_senable(hart):
    return PLIC + 0x2080 + hart * 0x100


def plic_mpriority(hart):
    return PLIC + 0x200000 + hart * 0x2000


def plic_spriority(hart):
    return PLIC + 0x201000 + hart * 0x2000


def plic_mclaim(hart):
    return PLIC + 0x200004 + hart * 0x2000


def plic_sclaim(hart):
    return PLIC + 0x201004 + hart * 0x2000


def kstack(p):
    """Virtual address of process ``p``'s kernel stack, between guard pages."""
    return TRAMPOLINE - p * 2 * PGSIZE - 3 * PGSIZE