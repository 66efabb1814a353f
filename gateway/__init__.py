"""
Withdrawal gateway.

Issues access keys and processes withdrawal requests on behalf of an
external authorization service.
"""

__version__ = "0.1.0"
