"""Sort token resolution."""

from typing import Optional, Union

from ..models import SortKey, SortParam, SortSpec


_SORT_VALUES = {
    SortParam.PRICE_HIGH_LOW.value: (SortKey.PRICE, True),
    SortParam.PRICE_LOW_HIGH.value: (SortKey.PRICE, False),
    SortParam.BEST_SELLING.value: (SortKey.BEST_SELLING, False),
    SortParam.NEWEST.value: (SortKey.CREATED, True),
    SortParam.FEATURED.value: (SortKey.MANUAL, False),
}


def get_sort_values_from_param(sort_param: Optional[Union[str, SortParam]]) -> SortSpec:
    """Map a ``sort`` query token to a sort key and direction.

    Absent or unrecognized tokens fall back to relevance order.
    """
    if isinstance(sort_param, SortParam):
        sort_param = sort_param.value
    sort_key, reverse = _SORT_VALUES.get(sort_param or "", (SortKey.RELEVANCE, False))
    return SortSpec(sortKey=sort_key, reverse=reverse)
