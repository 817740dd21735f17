"""
passmeter.compare

Score two passwords under the same policy and report how the new one moved.
"""

import logging
from typing import Optional

from .evaluator import compute_score
from .models import ComparisonError, PasswordComparison, PasswordOptions

logger = logging.getLogger(__name__)


def compare_passwords(old_password: str, new_password: str,
                      options: Optional[PasswordOptions] = None) -> PasswordComparison:
    """
    difference = change relative to the old score, in percent (2 decimals)
    difference_percentage = new score / old score (2 decimals)

    Invalid passwords take part with their -1 sentinel score. An old score of
    0 only compares against another 0 (difference 0, ratio 1); anything else
    raises ComparisonError.
    """
    old_score = compute_score(old_password, options).score
    new_score = compute_score(new_password, options).score
    logger.debug("compare: old=%d new=%d", old_score, new_score)

    if old_score == new_score:
        return PasswordComparison(
            difference=0.0, difference_percentage=1.0, old_score=old_score, new_score=new_score
        )
    if old_score == 0:
        raise ComparisonError("cannot compare against an old password scoring 0")

    return PasswordComparison(
        difference=round((new_score - old_score) / old_score * 100, 2),
        difference_percentage=round(new_score / old_score, 2),
        old_score=old_score,
        new_score=new_score,
    )
