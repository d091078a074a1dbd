"""MBTA Subway Info Package

A Python package for answering structural questions about the MBTA subway
network (routes, transfer stations and minimum-transfer trips) with CLI and
MCP server capabilities.
"""

__version__ = "0.1.0"

from .core.client import MBTAClient
from .core.models import Route, Stop, TransferStation, Trip
from .core.service import SubwayService
from .info import MBTAInfo

__all__ = [
    "MBTAClient",
    "MBTAInfo",
    "Route",
    "Stop",
    "SubwayService",
    "TransferStation",
    "Trip",
]
