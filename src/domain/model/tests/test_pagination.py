"""Tests for the pagination engine (PaginationOptions + paginate)."""

import math
import unittest

from domain.model.pagination import DEFAULT_SIZE, FIRST_PAGE, PaginationOptions, paginate


class TestPaginationOptions(unittest.TestCase):
    """Normalization of page and size."""

    def test_defaults(self):
        opts = PaginationOptions()
        self.assertEqual(opts.page, FIRST_PAGE)
        self.assertEqual(opts.size, DEFAULT_SIZE)

    def test_non_positive_page_becomes_first_page(self):
        for page in (0, -1, -50):
            with self.subTest(page=page):
                self.assertEqual(PaginationOptions(page=page, size=5).normalized().page, 1)

    def test_non_positive_size_becomes_default(self):
        for size in (0, -1, -10):
            with self.subTest(size=size):
                self.assertEqual(PaginationOptions(page=2, size=size).normalized().size, 10)

    def test_valid_values_are_kept(self):
        opts = PaginationOptions(page=3, size=7).normalized()
        self.assertEqual((opts.page, opts.size), (3, 7))

    def test_skip_and_limit(self):
        opts = PaginationOptions(page=3, size=4)
        self.assertEqual(opts.skip, 8)
        self.assertEqual(opts.limit, 4)

    def test_skip_uses_normalized_values(self):
        opts = PaginationOptions(page=-2, size=0)
        self.assertEqual(opts.skip, 0)
        self.assertEqual(opts.limit, DEFAULT_SIZE)


class TestPaginate(unittest.TestCase):
    """Page descriptor computation."""

    def test_first_page_has_more(self):
        page = paginate(10, PaginationOptions(page=1, size=2))
        self.assertEqual(page.total_pages, 5)
        self.assertTrue(page.has_more)
        self.assertEqual(page.current_page, 1)
        self.assertEqual(page.size, 2)
        self.assertEqual(page.total_count, 10)

    def test_page_past_the_end(self):
        page = paginate(10, PaginationOptions(page=6, size=2))
        self.assertEqual(page.total_pages, 5)
        self.assertFalse(page.has_more)
        self.assertEqual(page.current_page, 6)

    def test_last_page_has_no_more(self):
        page = paginate(10, PaginationOptions(page=5, size=2))
        self.assertFalse(page.has_more)

    def test_zero_count(self):
        page = paginate(0, PaginationOptions(page=1, size=10))
        self.assertEqual(page.total_pages, 0)
        self.assertFalse(page.has_more)

    def test_partial_last_page_is_counted(self):
        """11 items in pages of 5 → 3 pages; page 2 still has more."""
        page = paginate(11, PaginationOptions(page=2, size=5))
        self.assertEqual(page.total_pages, 3)
        self.assertTrue(page.has_more)

    def test_ceiling_and_has_more_for_many_inputs(self):
        for total in range(0, 40):
            for size in range(1, 8):
                for current in range(1, 10):
                    page = paginate(total, PaginationOptions(page=current, size=size))
                    expected_pages = math.ceil(total / size)
                    self.assertEqual(page.total_pages, expected_pages)
                    self.assertEqual(page.has_more, current < expected_pages)

    def test_normalizes_options(self):
        page = paginate(25, PaginationOptions(page=0, size=-3))
        self.assertEqual(page.current_page, 1)
        self.assertEqual(page.size, 10)
        self.assertEqual(page.total_pages, 3)
        self.assertTrue(page.has_more)


if __name__ == '__main__':
    unittest.main()
