"""
Domain layer: camera and snapshot models, field constants, repository
interfaces and the capture exception hierarchy. No infrastructure imports.
"""
