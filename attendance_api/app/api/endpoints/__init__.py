"""Domain routers mounted by ``api.router``."""
