"""LPSN species lookup: page scraping and the async client."""

from .errors import LPSNError, NetworkError, ParseError, UpstreamTimeoutError
from .lpsn_client import LPSNClient
from .models import Identification, SpeciesRecord

__all__ = [
    "Identification",
    "LPSNClient",
    "LPSNError",
    "NetworkError",
    "ParseError",
    "SpeciesRecord",
    "UpstreamTimeoutError",
]
