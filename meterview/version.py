"""MeterView version information."""

__version__ = "1.0.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

APP_NAME = "MeterView"
DESCRIPTION = "OCPP MeterValues trace decoder and channel viewer"
LICENSE = "Apache-2.0"
