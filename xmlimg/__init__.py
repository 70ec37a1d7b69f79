"""Extract base64-encoded images embedded in XML attributes."""

__version__ = "0.1.0"
