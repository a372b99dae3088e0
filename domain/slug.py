from slugify import slugify


SLUG_PATTERN = r"[a-z0-9]+(?:-[a-z0-9]+)*"


def make_slug(name: str) -> str:
    """URL friendly version of `name`, e.g. "Crème Brûlée" -> "creme-brulee".

    Returns an empty string when nothing in `name` survives transliteration.
    """
    return slugify(name)

