"""Radix conversion pipeline.

This package decodes signed digit strings into exact integers and
encodes them back in a target base for bases 2, 8, 10, and 16.
"""
