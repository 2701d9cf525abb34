"""
PDF Shuffler - Reorder Engine

Pure page-order arithmetic for double-sided stacks scanned on a single-sided
scanner. The scanner yields every front side first and every back side after
it; the engine interleaves the two halves back into reading order.

No I/O happens here: the functions work on any indexable sequence of page
references (pikepdf pages in production, plain markers in tests).
"""

from collections.abc import Sequence
from enum import Enum
from typing import TypeVar

from pdfshuffler.utils.exceptions import EmptyDocumentError, OddPageCountError

T = TypeVar("T")


class InterleavePolicy(Enum):
    """How the back-side half of the scan is ordered.

    REVERSED_BACK: the flipped stack is scanned last sheet first, so the
        back of sheet 1 is the final page of the scan. This is the default.
    SEQUENTIAL_BACK: the back sides keep the same sheet order as the fronts.
    """

    REVERSED_BACK = "reversed-back"
    SEQUENTIAL_BACK = "sequential-back"

    @classmethod
    def from_name(cls, name: str) -> "InterleavePolicy":
        """Look up a policy by its configuration name.

        Raises:
            ValueError: If the name is not a known policy.
        """
        normalized = name.strip().lower().replace("_", "-")
        for policy in cls:
            if policy.value == normalized:
                return policy
        raise ValueError(f"Unknown interleave policy: '{name}'")


DEFAULT_POLICY = InterleavePolicy.REVERSED_BACK


def check_page_count(page_count: int) -> None:
    """Reject page counts that cannot be interleaved.

    Raises:
        EmptyDocumentError: If there are no pages.
        OddPageCountError: If the count is odd.
    """
    if page_count == 0:
        raise EmptyDocumentError()
    if page_count % 2 != 0:
        raise OddPageCountError(page_count)


def reorder_plan(page_count: int, policy: InterleavePolicy = DEFAULT_POLICY) -> list[int]:
    """Compute the 0-based source index for every output position.

    Output position ``2*i`` always comes from the front half (index ``i``);
    position ``2*i+1`` comes from the back half.

    Args:
        page_count: Number of pages in the scanned document.
        policy: Ordering of the back-side half.

    Returns:
        List of ``page_count`` source indices in output order.
    """
    check_page_count(page_count)

    half = page_count // 2
    plan: list[int] = []
    for i in range(half):
        plan.append(i)
        if policy is InterleavePolicy.REVERSED_BACK:
            plan.append(page_count - 1 - i)
        else:
            plan.append(half + i)
    return plan


def inverse_plan(page_count: int, policy: InterleavePolicy = DEFAULT_POLICY) -> list[int]:
    """Compute the plan that turns a reordered document back into scan order."""
    plan = reorder_plan(page_count, policy)
    inverse = [0] * page_count
    for position, source in enumerate(plan):
        inverse[source] = position
    return inverse


def reorder(pages: Sequence[T], policy: InterleavePolicy = DEFAULT_POLICY) -> list[T]:
    """Interleave a scanned page sequence into front/back reading order.

    The input sequence is not modified.

    Example:
        >>> reorder(["A", "B", "C", "D"])
        ['A', 'D', 'B', 'C']
        >>> reorder(["A", "B", "C", "D"], InterleavePolicy.SEQUENTIAL_BACK)
        ['A', 'C', 'B', 'D']

    Raises:
        EmptyDocumentError: If ``pages`` is empty.
        OddPageCountError: If ``pages`` has an odd length.
    """
    return [pages[index] for index in reorder_plan(len(pages), policy)]


def restore_order(pages: Sequence[T], policy: InterleavePolicy = DEFAULT_POLICY) -> list[T]:
    """Undo :func:`reorder`, returning pages to the order the scanner produced."""
    return [pages[index] for index in inverse_plan(len(pages), policy)]
