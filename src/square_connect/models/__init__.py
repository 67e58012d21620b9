"""Models module initialization"""

from square_connect.models.receipt_info import ReceiptInfo

__all__ = ["ReceiptInfo"]
