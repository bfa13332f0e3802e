"""
Infrastructure layer: MongoDB repositories, blob storage backends, camera
source adapters and the shared HTTP client.
"""
