"""Offset/limit page windows for discovery listings.

There is no total count. ``has_more`` is a heuristic: a full page means the
client may ask for the next one, which can come back empty.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PageLimits:
    default_size: int
    min_size: int
    max_size: int


FEED_LIMITS = PageLimits(default_size=12, min_size=5, max_size=50)
EXPLORE_LIMITS = PageLimits(default_size=50, min_size=1, max_size=100)


@dataclass(frozen=True)
class PageWindow:
    page: int
    page_size: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    def has_more(self, returned: int) -> bool:
        return returned == self.page_size


def page_window(page: int | None, page_size: int | None, limits: PageLimits) -> PageWindow:
    """Clamp raw query values into a usable window instead of rejecting them."""
    page_value = max(1, page or 1)
    size_value = page_size if page_size is not None else limits.default_size
    size_value = min(limits.max_size, max(limits.min_size, size_value))
    return PageWindow(page=page_value, page_size=size_value)


def apply_window(query, window: PageWindow):
    return query.offset(window.offset).limit(window.page_size)
