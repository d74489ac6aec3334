from typing import Optional


def _base(domain: str) -> str:
    return domain.rstrip("/")


def build_image_url(domain: str, file_name: Optional[str]) -> Optional[str]:
    # photo_nyc_001.jpg is stored under images/nyc/
    if file_name is None:
        return None
    tokens = file_name.split("_")
    if len(tokens) > 1:
        return f"{_base(domain)}/images/{tokens[1]}/{file_name}"
    return f"{_base(domain)}/images/{file_name}"


def build_date_url(domain: str, compact: str) -> str:
    return f"{_base(domain)}/date/{compact}"
