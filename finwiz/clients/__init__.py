"""Finviz quote scraper - page fetching and table extraction."""
from .finviz import Stock, get_stock_page, stock
from .query import find_table, query_columns, select_columns

__all__ = [
    "Stock",
    "stock",
    "get_stock_page",
    "find_table",
    "query_columns",
    "select_columns",
]
