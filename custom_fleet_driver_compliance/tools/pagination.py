# -*- coding: utf-8 -*-
# Part of SCORE Logistics Suite. See LICENSE file for full copyright and licensing details.

import math

from ..const import DEFAULT_PAGE_SIZE


def total_pages(items, page_size):
    if not page_size or page_size <= 0:
        return 0
    return math.ceil(len(items) / page_size)


def paginate(items, page, page_size):
    """Return the 1-based page of items, [] when the page is out of range."""
    if page < 1 or not page_size or page_size <= 0:
        return []
    end = page * page_size
    return list(items)[end - page_size:end]


class Pager:
    """Current page and page size of a list view.

    Changing the page size brings the view back to the first page.
    """

    def __init__(self, page_size=DEFAULT_PAGE_SIZE, page=1):
        self.page_size = int(page_size)
        self.page = max(int(page), 1)

    def set_page_size(self, page_size):
        self.page_size = int(page_size)
        self.page = 1

    def total_pages(self, items):
        return total_pages(items, self.page_size)

    def next_page(self, items):
        if self.page < self.total_pages(items):
            self.page += 1
        return self.page

    def previous_page(self):
        if self.page > 1:
            self.page -= 1
        return self.page

    def slice(self, items):
        return paginate(items, self.page, self.page_size)
