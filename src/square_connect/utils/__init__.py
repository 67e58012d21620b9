"""Utilities module initialization"""

from square_connect.utils.receipt_parser import parse_receipt_html

__all__ = ["parse_receipt_html"]
