from dataclasses import dataclass
from typing import List, Sequence, TypeVar

T = TypeVar("T")

A = 16807
M = 0x7FFFFFFF  # 2^31-1


def pm_next(state: int) -> int:
    return (state * A) % M


def fold_seed(seed: int) -> int:
    # Any integer -> valid Park–Miller state in 1..M-1 (0 is a fixed point)
    s = seed % (M - 1)
    return s + 1


def seed_for_level(base_seed: int, index: int) -> int:
    """Seed for level ``index`` of a pack: base advanced (index+1) times."""
    s = fold_seed(base_seed)
    for _ in range(index + 1):
        s = pm_next(s)
    return s


@dataclass
class PMRandom:
    state: int

    @classmethod
    def from_seed(cls, seed: int) -> "PMRandom":
        return cls(fold_seed(seed))

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def below(self, n: int) -> int:
        # 0..n-1
        assert n > 0
        return self.next32() % n

    def percent(self) -> int:
        return self.below(100)

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise IndexError("choice from empty sequence")
        return seq[self.below(len(seq))]

    def shuffle(self, items: List[T]) -> None:
        # Fisher–Yates, in place
        for i in range(len(items) - 1, 0, -1):
            j = self.below(i + 1)
            items[i], items[j] = items[j], items[i]
