"""Build the URL a probe requests for a mirror address."""


def build_probe_url(address: str) -> str:
    """Add ``https://`` when no scheme is given and ensure a trailing slash.

    >>> build_probe_url("registry.npmjs.org")
    'https://registry.npmjs.org/'
    >>> build_probe_url("http://localhost:4873")
    'http://localhost:4873/'
    """
    url = address.strip()
    if "://" not in url:
        url = f"https://{url}"
    if not url.endswith("/"):
        url += "/"
    return url
