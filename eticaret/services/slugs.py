"""URL slugs for product pages (/urun/<slug>)."""
import re

# Turkish letters without an ASCII decomposition
_TURKISH_MAP = str.maketrans({
    "ç": "c", "Ç": "c",
    "ğ": "g", "Ğ": "g",
    "ı": "i", "I": "i", "İ": "i",
    "ö": "o", "Ö": "o",
    "ş": "s", "Ş": "s",
    "ü": "u", "Ü": "u",
})

_INVALID_CHARS = re.compile(r"[^a-z0-9\s-]")
_SEPARATORS = re.compile(r"[\s-]+")


def create_slug(text: str) -> str:
    """
    Build a URL slug from a product name.

    Examples:
        create_slug("Çamaşır Suyu 5 L")   -> "camasir-suyu-5-l"
        create_slug("  Şeffaf Streç Film ") -> "seffaf-strec-film"
    """
    if not text:
        return ""
    slug = text.translate(_TURKISH_MAP).lower()
    slug = _INVALID_CHARS.sub("", slug)
    slug = _SEPARATORS.sub("-", slug)
    return slug.strip("-")
