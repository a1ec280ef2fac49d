"""
Multipart secrets.

Stores a key-value secret document that is larger than one Secrets Manager
record by splitting it across numbered parts ({name}, {name}-1, {name}-2, ...)
and reassembling it on read.
"""

__version__ = "0.1.0"
