"""Report rendering for scan results.

This package contains:
- text: Human-readable report written to a text stream
"""
