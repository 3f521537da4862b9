"""AAC keyword sequence handling for output rendering."""

AAC_DELIMITER = " - "


def split_aac_keywords(text: str) -> list[str]:
    """
    Split an AAC keyword sequence into individual keyword chips.

    The model is asked to join keywords with a hyphen surrounded by spaces,
    so a plain hyphen inside a word (e.g. "ice-cream") is kept intact.

    Args:
        text: Model output such as "I - want - water".

    Returns:
        Trimmed, non-empty keywords in order.
    """
    keywords = [part.strip() for part in text.strip().split(AAC_DELIMITER)]
    return [word for word in keywords if word]
