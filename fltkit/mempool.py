"""Arena allocation: numbered pools handing out slices of large blocks."""

from __future__ import annotations

from dataclasses import dataclass, field

POOL_BLOCK_SIZE = 16 * 1024
_ALIGNMENT = 8


@dataclass
class _Block:
    data: bytearray
    pos: int

    @property
    def free(self) -> int:
        return len(self.data) - self.pos


@dataclass
class _Pool:
    block_size: int
    blocks: list[_Block] = field(default_factory=list)


class PoolSystem:
    """A registry of memory pools addressed by small integer ids.

    Id 0 is reserved and never handed out; freed ids are reused by later
    pools.  Allocations are rounded up to a multiple of eight bytes and
    are never released individually, only with the whole pool.
    """

    def __init__(self) -> None:
        self._pools: list[_Pool | None] = [None]  # slot 0 reserved

    def __len__(self) -> int:
        return sum(pool is not None for pool in self._pools)

    def create(self, block_size: int = POOL_BLOCK_SIZE) -> int:
        """Create a pool whose blocks hold ``block_size`` bytes; return its id."""
        if block_size < 0:
            raise ValueError(f"block size must not be negative, got {block_size}")
        pool = _Pool(block_size)
        for pool_id in range(1, len(self._pools)):
            if self._pools[pool_id] is None:
                self._pools[pool_id] = pool
                return pool_id
        self._pools.append(pool)
        return len(self._pools) - 1

    def _get(self, pool_id: int) -> _Pool:
        pool = self._pools[pool_id] if 0 < pool_id < len(self._pools) else None
        if pool is None:
            raise KeyError(f"no pool with id {pool_id}")
        return pool

    def destroy(self, pool_id: int) -> None:
        """Release a pool and all memory allocated from it."""
        pool = self._get(pool_id)
        pool.blocks.clear()
        self._pools[pool_id] = None

    def destroy_all(self) -> None:
        """Release every live pool."""
        for pool_id, pool in enumerate(self._pools):
            if pool is not None:
                self.destroy(pool_id)

    def malloc(self, pool_id: int, size: int) -> memoryview:
        """Allocate ``size`` bytes from a pool, as a writable view."""
        if size < 0:
            raise ValueError(f"allocation size must not be negative, got {size}")
        pool = self._get(pool_id)
        aligned = (size + _ALIGNMENT - 1) & ~(_ALIGNMENT - 1)

        block = next((b for b in pool.blocks if aligned <= b.free), None)
        if block is None:
            block = _Block(bytearray(max(pool.block_size, aligned)), 0)
            pool.blocks.append(block)

        start = block.pos
        block.pos += aligned
        return memoryview(block.data)[start : start + size]