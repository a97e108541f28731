"""
Version constants for the multipart service.
"""

# API Version
API_VERSION = "1.0.0"

# Component versions (update these when the wire handling changes)
PARSER_VERSION = "multipart-parser-1.0.0"
SERIALIZER_VERSION = "multipart-serializer-1.0.0"
