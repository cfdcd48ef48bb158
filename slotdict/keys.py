from dataclasses import dataclass, field

from .hashing import hash_fields, hash_string


_BASE36_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def to_base36(n: int) -> str:
    if n < 0:
        return "-" + to_base36(-n)
    if n == 0:
        return "0"

    digits = []
    while n:
        n, rem = divmod(n, 36)
        digits.append(_BASE36_DIGITS[rem])
    return "".join(reversed(digits))


@dataclass(frozen=True)
class StringKey:
    value: str

    def __hash__(self) -> int:
        return hash_string(self.value)

    def __str__(self) -> str:
        return self.value


# Equal by name only; the hash is whatever the caller forces, so two unequal
# keys can be made to share a slot (or two equal ones to split).
@dataclass(frozen=True)
class ForcedHashKey:
    name: str
    forced_hash: int = field(compare=False)

    def __hash__(self) -> int:
        return self.forced_hash

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class SequentialKey:
    id: int
    name: str

    def __hash__(self) -> int:
        return hash_fields(self.id, hash_string(self.name))

    def __str__(self) -> str:
        return f"SequentialKey(id={self.id}, name={self.name!r}, hash={hash(self)})"


@dataclass
class KeyGenerator:
    counter: int = 0

    def next_key(self) -> SequentialKey:
        self.counter += 1
        return SequentialKey(self.counter, to_base36(self.counter))
