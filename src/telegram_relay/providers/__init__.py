"""Default collaborators for payload fetching and value resolution."""

from .config_resolver import ConfigValueResolver
from .http_fetcher import HttpContentFetcher

__all__ = ["ConfigValueResolver", "HttpContentFetcher"]
