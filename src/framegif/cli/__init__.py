"""
framegif.cli
============

Command-line front end (``framegif`` console script).
"""
