from collections.abc import Iterable


def format_cookie(raw_cookies: Iterable[str]) -> str:
    """Collapse raw Set-Cookie values into a single Cookie header value.

    Only the leading `key=value` pair of each entry is kept; attributes such as
    `Path` or `Expires` are dropped. A repeated key takes the later value but
    stays at the position it was first seen.

    >>> format_cookie(["uid=1; path=/", "key=abc; expires=Thu", "uid=2"])
    'uid=2; key=abc'
    """
    pairs: dict[str, str] = {}
    for raw in raw_cookies:
        pair = raw.split(";", 1)[0]
        if "=" not in pair:
            continue

        key, value = pair.split("=", 1)
        key = key.strip()
        if not key:
            continue
        pairs[key] = value.strip()

    return "; ".join(f"{key}={value}" for key, value in pairs.items())
