class CatalogDataError(ValueError):
    """Raised when catalog or issue data is malformed (bad schema, duplicate ids, unparseable costs)."""
    pass


class LeadStoreError(RuntimeError):
    """Base class for lead store failures."""
    pass


class LeadStoreUpstreamError(LeadStoreError):
    """Raised when the lead store fails (timeouts, network errors, non-2xx responses)."""
    pass


class LeadStoreContractError(LeadStoreError):
    """Raised when the lead store returns data in an unexpected shape."""
    pass
