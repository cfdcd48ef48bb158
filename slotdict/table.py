"""Fixed-capacity dictionary with direct addressing and reject-on-collision.

Every key lands in exactly one slot, ``hash(key) % capacity``. A slot holds at
most one entry and is never overwritten: ``put`` on an occupied slot is a
``Collision`` even when the stored key equals the new one. The table never
resizes, chains or probes.

Operations report their outcome as result values (``Ok``, ``NotFound``,
``NullKey``, ``Collision``) instead of raising.

A ``Table`` is not synchronized. Callers sharing one between threads must
serialize access themselves.
"""

from dataclasses import dataclass
from typing import Any

from .shared import trace


NUM_SLOTS = 256


@dataclass(frozen=True)
class Ok:
    value: Any = None


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass(frozen=True)
class NullKey:
    @property
    def message(self) -> str:
        return "key must not be None"


@dataclass(frozen=True)
class Collision:
    key: Any
    slot: int
    occupant: Any

    @property
    def message(self) -> str:
        return (
            f"collision in slot {self.slot} inserting key {self.key!s}: "
            f"slot already holds key {self.occupant!s}"
        )


IndexResult = Ok | NullKey
PutResult = Ok | NullKey | Collision
GetResult = Ok | NotFound | NullKey
RemoveResult = Ok | NullKey
ContainsResult = Ok | NullKey


@dataclass(frozen=True)
class Entry:
    key: Any
    value: Any


def slot_index(key: Any, capacity: int = NUM_SLOTS) -> IndexResult:
    if key is None:
        return NullKey()
    # floored modulo: negative hashes still map into [0, capacity)
    return Ok(hash(key) % capacity)


@dataclass
class Table:
    slots: list[Entry | None]

    def __init__(self, capacity: int = NUM_SLOTS) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.slots = [None] * capacity

    @property
    def capacity(self) -> int:
        return len(self.slots)

    def index(self, key: Any) -> IndexResult:
        return slot_index(key, self.capacity)

    def put(self, key: Any, value: Any) -> PutResult:
        result = self.index(key)
        if isinstance(result, NullKey):
            trace("put {0!r}: null key", key)
            return result

        slot = result.value
        occupant = self.slots[slot]
        if occupant is not None:
            trace("put {0!s}: slot {1:d} held by {2!s}", key, slot, occupant.key)
            return Collision(key=key, slot=slot, occupant=occupant.key)

        self.slots[slot] = Entry(key, value)
        trace("put {0!s}: stored in slot {1:d}", key, slot)
        return Ok(True)

    def get(self, key: Any) -> GetResult:
        match self._find_entry(key):
            case NullKey() as err:
                return err
            case None:
                trace("get {0!s}: not found", key)
                return NotFound()
            case (_, entry):
                trace("get {0!s}: found", key)
                return Ok(entry.value)

    def remove(self, key: Any) -> RemoveResult:
        match self._find_entry(key):
            case NullKey() as err:
                return err
            case None:
                trace("remove {0!s}: not found", key)
                return Ok(False)
            case (slot, _):
                self.slots[slot] = None
                trace("remove {0!s}: cleared slot {1:d}", key, slot)
                return Ok(True)

    def contains_key(self, key: Any) -> ContainsResult:
        match self._find_entry(key):
            case NullKey() as err:
                return err
            case found:
                return Ok(found is not None)

    def size(self) -> int:
        count = 0
        for entry in self.slots:
            if entry is not None:
                count += 1
        return count

    def is_empty(self) -> bool:
        return self.size() == 0

    def _find_entry(self, key: Any) -> "tuple[int, Entry] | NullKey | None":
        # a slot held by a different key is reported the same as an empty one
        result = self.index(key)
        if isinstance(result, NullKey):
            trace("lookup {0!r}: null key", key)
            return result

        slot = result.value
        entry = self.slots[slot]
        if entry is not None and entry.key == key:
            return slot, entry
        return None
