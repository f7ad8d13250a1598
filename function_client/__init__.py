"""Call an Azure-hosted function with a client-credentials token."""

__version__ = "0.1.0"
