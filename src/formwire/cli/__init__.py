"""
CLI module for multipart inspection.
"""

from formwire.cli.inspect_body import main as inspect_main

__all__ = ["inspect_main"]
