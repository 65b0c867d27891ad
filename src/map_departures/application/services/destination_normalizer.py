"""Destination text normalization used as the direction grouping key."""


def normalize_destination(destination: str) -> str:
    """Reduce a destination to the part before the first comma, trimmed.

    "Lausanne, gare" and "Lausanne, Flon" both become "Lausanne". The
    departure keeps its original destination text; this is only a key.
    """
    return destination.split(",", 1)[0].strip()
