"""Language model storage layer.

This package loads per-language n-gram frequency tables once at
startup and serves them read-only to every detection run.
"""
