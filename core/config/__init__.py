"""Configuration package for the color wheel.

Constants are split by concern and re-exported through core/constants.py.
"""
