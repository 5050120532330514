from prlens.core.services.fetcher import PullRequestFetcher, cache_key_for

__all__ = ["PullRequestFetcher", "cache_key_for"]
