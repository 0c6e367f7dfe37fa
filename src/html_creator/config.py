"""Configuration constants for html-creator."""

DOCTYPE: str = "<!DOCTYPE html>"

# Attributes of the two meta tags placed in the head by the boilerplate skeleton.
CHARSET_META: dict[str, str] = {"charset": "utf-8"}
VIEWPORT_META: dict[str, str] = {
    "name": "viewport",
    "content": "width=device-width, initial-scale=1, shrink-to-fit=no",
}

# Prefix for every diagnostic message emitted by the reporter.
LOG_PREFIX: str = "HTML-Creator >> "
