"""
SSM App - Super Simple Stock Market

A bookkeeping model of a small stock exchange. Keeps a registry of
securities, records executed trades in an append-only ledger and computes
market analytics (volume weighted price, All-Share Index) from that ledger.
"""

__version__ = "0.1.0"
__author__ = "SSM Team"
