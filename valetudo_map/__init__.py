"""Map telemetry decoding and spatial model for Valetudo robot vacuums."""
__version__ = "0.1.0"
