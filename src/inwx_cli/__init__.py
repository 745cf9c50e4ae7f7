"""
INWX CLI

Command-line interface for the INWX client library.
"""
