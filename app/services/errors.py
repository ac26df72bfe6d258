class EnrichmentError(Exception):
    """Base class for errors raised by the enrichment service."""

class PayloadError(EnrichmentError):
    """The outer request payload cannot be decoded into an object."""
