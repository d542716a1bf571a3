"""Version metadata for DealershipManager."""

__app_name__ = "DealershipManager"
__company__ = "Dealership Back Office"
__version__ = "1.0.0"
