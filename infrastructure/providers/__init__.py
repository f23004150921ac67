from .rate_fetcher import RateFetcher

__all__ = ['RateFetcher']
