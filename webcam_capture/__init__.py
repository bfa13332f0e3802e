"""
Webcam Capture Backend root package.

This package contains the FastAPI app entry point (main.py), the capture
trigger and snapshot browsing API, domain models, and infrastructure
(MongoDB, blob storage, camera source adapters).
"""
