"""
Command-line interface for oligoprop.
"""
