"""easypack: start and shutdown script generation for packaged Java applications."""

__version__ = "0.1.0"
