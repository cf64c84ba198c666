"""Fuzz testing infrastructure for SVGWriter.

This package contains:
- test_serializer_depth_exhaustion: Boundary testing for MAX_DEPTH limits
- test_serializer_oracle: Differential testing against xml.etree parsing

Python 3.13+.
"""
