from protean import current_domain
from storefront.sequence import Sequence, allocate, next_id


class TestSequence:
    def test_starts_at_one(self):
        assert next_id("widgets") == 1
        assert next_id("widgets") == 2

    def test_sequences_are_independent(self):
        next_id("widgets")
        assert next_id("gadgets") == 1

    def test_allocate_block(self):
        next_id("widgets")
        assert allocate("widgets", 3) == [2, 3, 4]
        assert current_domain.repository_for(Sequence).get("widgets").last_value == 4

    def test_allocate_nothing(self):
        assert allocate("widgets", 0) == []
