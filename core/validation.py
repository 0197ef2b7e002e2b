from typing import Dict, Sequence

MIN_DESCRIPTION_CHARS = 20


def validate_form(product_name: str, description: str, platforms: Sequence[str]) -> Dict[str, str]:
    """Per-field error messages; an empty dict means the form can be generated."""
    errors = {}
    if not (product_name or "").strip():
        errors["product_name"] = "Product name is required"
    if len((description or "").strip()) < MIN_DESCRIPTION_CHARS:
        errors["description"] = f"Please provide a description of at least {MIN_DESCRIPTION_CHARS} characters"
    if not platforms:
        errors["platforms"] = "Select at least one platform"
    return errors
