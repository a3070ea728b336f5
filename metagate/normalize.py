from __future__ import annotations
import logging
from typing import Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .config import Config

log = logging.getLogger(__name__)

IPFS_SCHEME = "ipfs://"
NUL = "\x00"


def split_domain(domain: str) -> Tuple[str, str]:
    """Split a domain into (prefix, root) at the second dot from the end.

    Purely positional: multi-label suffixes such as co.uk are not recognised.
    prefix + root always reproduces the input.
    """
    last = domain.rfind(".")
    if last <= 0:
        return "", domain
    cut = domain.rfind(".", 0, last)
    if cut == -1:
        return "", domain
    return domain[:cut + 1], domain[cut + 1:]


def clean_string(s: str) -> str:
    """Drop every NUL code point, keep everything else in order."""
    return s.replace(NUL, "")


def resolve_image_url(gateway_base: str, url: str) -> str:
    """Rewrite ipfs:// URLs onto the gateway; anything else is returned as-is."""
    if not url.startswith(IPFS_SCHEME):
        return url
    resolved = gateway_base + url[len(IPFS_SCHEME):]
    log.debug("Image URL %s -> %s", url, resolved)
    return resolved


def parse_image_url(config: Config, url: str) -> str:
    return resolve_image_url(config.ipfs_gateway, url)
