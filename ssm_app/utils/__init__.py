"""
Utility functions module.

Time Semantics:
- Every timestamp handled by the market is a timezone-aware UTC datetime
- The clock is sampled once per trade execution and once per windowed query
- Callers may inject their own clock for replay or testing
"""
