"""
Merge primitives over posting sequences sorted by document id.

All three walk both inputs with two pointers. When a document appears in both
inputs the posting from the right-hand side is kept, so the positions carried
forward are those of the most recently combined term.
"""

import logging

from indexor.structures import Posting

logger = logging.getLogger(__name__)


def union(a: list[Posting], b: list[Posting]) -> list[Posting]:
    result = []
    i, j = 0, 0

    while i < len(a) and j < len(b):
        if a[i].doc_id == b[j].doc_id:
            result.append(b[j])
            i += 1
            j += 1
        elif a[i].doc_id < b[j].doc_id:
            result.append(a[i])
            i += 1
        else:
            result.append(b[j])
            j += 1

    result.extend(a[i:])
    result.extend(b[j:])

    return result


def intersect(a: list[Posting], b: list[Posting]) -> list[Posting]:
    result = []
    i, j = 0, 0

    while i < len(a) and j < len(b):
        if a[i].doc_id == b[j].doc_id:
            result.append(b[j])
            i += 1
            j += 1
        elif a[i].doc_id < b[j].doc_id:
            i += 1
        else:
            j += 1

    return result


def _within_window(a_positions: list[int], b_positions: list[int], k: int) -> bool:
    for p1 in a_positions:
        for p2 in b_positions:
            if abs(p1 - p2) <= k:
                return True
            elif p2 > p1:
                break

    return False


def positional_intersect(a: list[Posting], b: list[Posting], k: int) -> list[Posting]:
    """
    Keeps documents present in both inputs where some position of `a` lies
    within `k` tokens of some position of `b`. Accepted documents carry the
    positions of `b`.

    For each position p1 of `a` the scan over `b` stops at the first p2 > p1
    that is out of range; positions of `b` are ascending so no later p2 can
    be closer. The first matching p1 accepts the document.
    """
    answer = []
    i, j = 0, 0

    while i < len(a) and j < len(b):
        if a[i].doc_id == b[j].doc_id:
            if _within_window(a[i].positions, b[j].positions, k):
                answer.append(b[j])
            i += 1
            j += 1
        elif a[i].doc_id < b[j].doc_id:
            i += 1
        else:
            j += 1

    return answer
