"""Pagination helpers."""

import math


def total_pages(count: int, limit: int) -> int:
    return math.ceil(count / limit) if limit else 0
