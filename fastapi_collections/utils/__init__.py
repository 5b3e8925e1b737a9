"""Query parameter helpers."""

from .query_params import get_csv_param, split_csv, split_sort

__all__ = ["get_csv_param", "split_csv", "split_sort"]
