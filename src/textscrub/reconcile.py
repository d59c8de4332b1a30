"""Overlay merge — fold classifier masks back onto the pre-classifier text.

The classifier may normalize text it did not mask (case folding and the
like).  The merge keeps every mask the classifier produced and restores
the original character everywhere else.  Masks from the pattern passes
survive because they are already present in ``pre``.
"""

from __future__ import annotations
import logging

from .errors import AlignmentMismatchError
from .masking import MASK_CHAR

logger = logging.getLogger(__name__)


def overlay_merge(pre: str, post: str, mask_char: str = MASK_CHAR, *, strict: bool = False) -> str:
    """Merge ``post`` (classifier output) over ``pre`` character by character.

    Both strings are expected to have the same length.  When they do not:

    - ``strict=False``: the walk stops at the shorter one and the tail is
      dropped (logged as a warning).
    - ``strict=True``: AlignmentMismatchError is raised.
    """
    if len(pre) != len(post):
        if strict:
            raise AlignmentMismatchError(len(pre), len(post))
        logger.warning(
            f"Classifier output length {len(post)} != input length {len(pre)}; "
            f"truncating to {min(len(pre), len(post))} chars"
        )
    return "".join(
        mask_char if c == mask_char else o
        for o, c in zip(pre, post)
    )
