"""
Cache key builders for the content cache.

The cache compares keys exactly. Every read and every invalidation of the
same content must go through the same builder here, so that "About" and
"about" land on one entry.
"""

ALL_KEY = "all"


def normalize_key(key: str) -> str:
    """Normalize a free-form key (slug, name) for cache lookups."""
    return key.strip().lower()


def page_slug_key(slug: str) -> str:
    """Generate cache key for a page by slug."""
    return normalize_key(slug)


def post_slug_key(slug: str) -> str:
    """Generate cache key for a post by slug."""
    return normalize_key(slug)


def hot_tags_key(amount: int) -> str:
    """Generate cache key for the hot tag list of a given size."""
    return f"hot-{amount}"
