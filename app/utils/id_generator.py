"""
Utility functions for generating payment transaction references.
"""

import random
import time
from datetime import date


def generate_transaction_id() -> str:
    """
    Generate a transaction ID in the format TXN<epoch millis><4 digits>.

    Returns:
        str: A transaction ID (e.g., 'TXN17290000000000042')
    """
    millis = int(time.time() * 1000)
    return f"TXN{millis}{random.randint(0, 9999):04d}"


def generate_transaction_details(amount: float, payer: str, method: str, payment_date: date) -> str:
    """
    Describe a payment in one human-readable sentence.

    Args:
        amount (float): Amount paid
        payer (str): Name of whoever paid
        method (str): Payment method (cash, UPI, ...)
        payment_date (date): Date the payment was made

    Returns:
        str: e.g. 'Payment of ₹5000.00 by Asha via UPI on 2024-06-01'
    """
    when = payment_date.isoformat() if payment_date is not None else "unknown date"
    return f"Payment of ₹{amount:.2f} by {payer} via {method} on {when}"
