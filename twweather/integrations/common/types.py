def to_camel(name: str) -> str:
    first, *rest = name.split("_")
    return f"{first}{''.join(word.capitalize() for word in rest)}"
