"""Page-number window for the table paginator."""

from typing import List, Union

ELLIPSIS = "..."


def generate_pagination_numbers(
    current: int, last: int, delta: int = 2
) -> List[Union[int, str]]:
    """Choose which page buttons to show.

    All pages are listed when there are at most seven. Otherwise the first
    and last pages are always shown, with a window of ``delta`` pages around
    the current one and an ellipsis standing in for each gap.

    Args:
        current: Page being displayed.
        last: Number of pages.
        delta: Pages shown on each side of the current page.

    Returns:
        Page numbers and ELLIPSIS markers in display order.

    Example:
        >>> generate_pagination_numbers(10, 20)
        [1, '...', 8, 9, 10, 11, 12, '...', 20]
    """
    if last <= 7:
        return list(range(1, last + 1))

    pages: List[Union[int, str]] = [1]

    if current > delta + 2:
        pages.append(ELLIPSIS)

    start = max(2, current - delta)
    end = min(last - 1, current + delta)
    pages.extend(range(start, end + 1))

    if current < last - delta - 1:
        pages.append(ELLIPSIS)

    pages.append(last)
    return pages
