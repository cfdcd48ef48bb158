from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator

from .keys import KeyGenerator, SequentialKey
from .shared import printf, trace


DEFAULT_OBJECT_COUNT = 500_000


@dataclass
class CollisionReport:
    total: int = 0
    groups: dict[int, list[Any]] = field(default_factory=dict)

    @property
    def unique_hashes(self) -> int:
        return len(self.groups)

    @property
    def collisions(self) -> dict[int, list[Any]]:
        return {h: keys for h, keys in self.groups.items() if len(keys) > 1}


def generate_keys(
    count: int, generator: KeyGenerator | None = None
) -> Iterator[SequentialKey]:
    if generator is None:
        generator = KeyGenerator()
    for _ in range(count):
        yield generator.next_key()


def find_collisions(keys: Iterable[Any]) -> CollisionReport:
    groups: defaultdict[int, list[Any]] = defaultdict(list)
    total = 0
    for key in keys:
        groups[hash(key)].append(key)
        total += 1

    report = CollisionReport(total=total, groups=dict(groups))
    trace(
        "grouped {0:d} keys into {1:d} hashes", report.total, report.unique_hashes
    )
    return report


def print_report(report: CollisionReport):
    collisions = report.collisions

    printf("Keys generated: {0:d}\n", report.total)
    printf("Unique hashes: {0:d}\n", report.unique_hashes)

    printf("\n--- Colliding hashes (more than one key) ---\n")
    for h, keys in collisions.items():
        printf("Hash: {0:d} ({1:d} keys)\n", h, len(keys))
        for key in keys:
            printf("  - {0!s}\n", key)
        printf("---\n")

    printf("\nSummary:\n")
    printf("Total keys: {0:d}\n", report.total)
    printf("Total colliding hashes: {0:d}\n", len(collisions))
