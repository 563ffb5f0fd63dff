"""
Fulfillo Operations Hub

Internal operations dashboard for a third-party fulfillment provider.
"""

__version__ = "1.0.0"
