"""Monotonic integer identifiers backed by a persisted counter per entity type.

Ids handed out by a sequence are never reused, even after the entity that
carried them is deleted.
"""

from protean.exceptions import ObjectNotFoundError
from protean.fields import Integer, String
from protean.utils.globals import current_domain

from storefront.domain import storefront


@storefront.aggregate
class Sequence:
    name = String(identifier=True, max_length=50)
    last_value = Integer(default=0, min_value=0)

    def advance(self, count: int = 1) -> list[int]:
        start = self.last_value + 1
        self.last_value += count
        return list(range(start, self.last_value + 1))


def allocate(name: str, count: int) -> list[int]:
    """Reserve ``count`` consecutive ids from the named sequence.

    A sequence must be allocated from at most once per unit of work; callers
    needing several ids of one type ask for all of them in a single call.
    """
    if count <= 0:
        return []

    repo = current_domain.repository_for(Sequence)
    try:
        sequence = repo.get(name)
    except ObjectNotFoundError:
        sequence = Sequence(name=name)

    ids = sequence.advance(count)
    repo.add(sequence)
    return ids


def next_id(name: str) -> int:
    return allocate(name, 1)[0]
