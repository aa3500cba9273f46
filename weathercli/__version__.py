__version__ = "1.0.0"
__version_info__ = (1, 0, 0)
__release_date__ = "16.10.2026"
