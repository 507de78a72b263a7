"""
Command-line and HTTP front ends for the txtcheck library.

  - cli: dns-txt-check -d https://example.com -r "verification=..."
  - app: FastAPI app exposing GET /check
"""
