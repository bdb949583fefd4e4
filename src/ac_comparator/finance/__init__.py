"""Finance — discounting primitives and discounted payback."""

from ac_comparator.finance.discount import discount_factor, present_value_annuity, present_value_single
from ac_comparator.finance.payback import build_difference_rows, compute_lifecycle_payback

__all__ = [
    "discount_factor",
    "present_value_annuity",
    "present_value_single",
    "build_difference_rows",
    "compute_lifecycle_payback",
]
