"""URL slug helpers for artist pages."""

import re
import unicodedata

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")

_NON_ALNUM_RUN = re.compile(r"[^a-z0-9]+")


def generate_slug(name: str) -> str:
    """
    Derive a URL-safe slug from a display name.

    Accented letters are folded to their base letter ("Néon" -> "neon"),
    anything else outside [a-z0-9] collapses into a single hyphen, and
    leading/trailing hyphens are dropped. Characters with no ASCII base
    (e.g. CJK) are removed, so the result may be empty.
    """
    decomposed = unicodedata.normalize("NFKD", name)
    ascii_only = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    ascii_only = ascii_only.encode("ascii", "ignore").decode("ascii")
    return _NON_ALNUM_RUN.sub("-", ascii_only.lower()).strip("-")


def is_valid_slug(slug: str) -> bool:
    return bool(SLUG_PATTERN.match(slug))
