def format_number(number: float) -> str:
    text = repr(number)
    # integral floats print like integers: 12.0 -> 12
    if text.endswith('.0'):
        return text[:-2]
    return text
