"""Performance tests for Sortable Posts."""

import time
from concurrent.futures import ThreadPoolExecutor

import pytest

pytestmark = [pytest.mark.performance, pytest.mark.slow]

from sortable_posts.services.reorder_service import ReorderRequest, ReorderService
from sortable_posts.storage.repositories import PostRepository, TermRepository
from tests.conftest import TestDataGenerator, read_post_order


@pytest.fixture
def many_posts(temp_db) -> list[str]:
    post_ids = [str(i) for i in range(1000)]
    with temp_db.session() as session:
        repo = PostRepository(session)
        for post_id in post_ids:
            repo.create(TestDataGenerator.post(post_id))
    return post_ids


class TestLargeReorders:
    """Reorders of long lists."""

    def test_reorder_thousand_posts(self, temp_db, many_posts):
        order = list(reversed(many_posts))
        with temp_db.session() as session:
            start_time = time.time()
            result = ReorderService(session).reorder(
                ReorderRequest(order=order, start=1, object_type="post")
            )
            elapsed = time.time() - start_time

        assert result.success and result.updated == 1000
        # One batched UPDATE; should be well under the admin UI's request timeout
        assert elapsed < 5.0, f"Reordering 1000 posts took {elapsed:.2f}s"
        orders = read_post_order(temp_db, many_posts)
        assert orders["999"] == 1
        assert orders["0"] == 1000

    def test_reorder_two_hundred_terms(self, temp_db):
        term_ids = [f"t{i}" for i in range(200)]
        with temp_db.session() as session:
            repo = TermRepository(session)
            for term_id in term_ids:
                repo.create(TestDataGenerator.term(term_id))

        with temp_db.session() as session:
            service = ReorderService(session)
            start_time = time.time()
            result = service.reorder(ReorderRequest(order=term_ids, object_type="term"))
            elapsed = time.time() - start_time
            positions = service.current_order(term_ids, "term")

        assert result.success and result.updated == 200
        assert elapsed < 5.0, f"Reordering 200 terms took {elapsed:.2f}s"
        assert positions["t0"] == 1 and positions["t199"] == 200


class TestConcurrentReorders:
    """Independent reorders running at the same time."""

    def test_disjoint_reorders_do_not_interfere(self, temp_db, many_posts):
        slices = [many_posts[i:i + 250] for i in range(0, 1000, 250)]

        def reorder(chunk: list[str]) -> bool:
            with temp_db.session() as session:
                result = ReorderService(session).reorder(
                    ReorderRequest(order=list(reversed(chunk)), start=0, object_type="post")
                )
            return result.success

        with ThreadPoolExecutor(max_workers=4) as executor:
            outcomes = list(executor.map(reorder, slices))

        assert outcomes == [True] * 4
        orders = read_post_order(temp_db, many_posts)
        for chunk in slices:
            assert [orders[post_id] for post_id in reversed(chunk)] == list(range(250))
