def join_url(base: str, path: str) -> str:
    """Join the configured base path and a manifest path."""
    if not base:
        return path
    return f"{base.rstrip('/')}/{path.lstrip('/')}"
