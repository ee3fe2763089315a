def camel_to_snake(name: str) -> str:
    """Convert a PascalCase or camelCase identifier to snake_case.

    An underscore is inserted before an uppercase letter that follows any
    character other than an uppercase letter or underscore, so acronyms stay
    glued: ``ABCdef`` becomes ``abcdef`` and ``GetWebView2Settings`` becomes
    ``get_web_view2_settings``.
    Existing underscores are kept and never doubled.
    """
    parts: list[str] = []
    seen_lowercase = False
    for char in name:
        if char.isupper():
            if seen_lowercase:
                parts.append("_")
                seen_lowercase = False
            parts.append(char.lower())
        elif char == "_":
            seen_lowercase = False
            parts.append(char)
        else:
            seen_lowercase = True
            parts.append(char)
    return "".join(parts)
