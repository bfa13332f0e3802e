"""
API layer for the webcam capture backend.

Exposes the capture trigger (POST /), health, and the read-only snapshot
browsing endpoints under /api/v1.
"""
