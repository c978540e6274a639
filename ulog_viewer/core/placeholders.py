MAX_PARAMS = 3


class ConvertedTemplate(str):
    """
    Template text with positional markers (%1, %2, ...) in place of its
    '{...}' spans. `markers` holds the (start, end) offsets of each marker
    in order, so text that merely looks like a marker is never substituted.
    """

    def __new__(cls, text, markers=()):
        obj = super().__new__(cls, text)
        obj.markers = tuple(markers)
        return obj


def _scan(template):
    """Yields (start, end) of each '{...}' span; stops at an unmatched '{'."""
    pos = 0
    while True:
        start = template.find("{", pos)
        if start < 0:
            return
        end = template.find("}", start)
        if end < 0:
            return
        yield start, end + 1
        pos = end + 1


def count_and_convert(template):
    """
    Rewrites every '{...}' span of an alert template into a positional
    marker (%1, %2, ...) in order of appearance.
    Returns (converted_text, placeholder_count).
    An opening brace without a closing one stops the scan; the rest of the
    text is kept as is.
    """
    if not template:
        return ConvertedTemplate(template or ""), 0

    parts = []
    markers = []
    length = 0
    pos = 0
    for slot, (start, end) in enumerate(_scan(template), 1):
        literal = template[pos:start]
        marker = f"%{slot}"
        parts.append(literal)
        length += len(literal)
        markers.append((length, length + len(marker)))
        parts.append(marker)
        length += len(marker)
        pos = end

    parts.append(template[pos:])
    return ConvertedTemplate("".join(parts), markers), len(markers)


def apply(converted, count, params):
    """
    Substitutes the markers written by count_and_convert: slots
    1..min(count, 3) get the given parameter texts, higher slots stay literal.
    Any other '%N' text in the template is left alone.
    """
    markers = getattr(converted, "markers", ())
    if count <= 0 or not markers:
        return str(converted)

    params = list(params)[:MAX_PARAMS]
    limit = min(count, MAX_PARAMS, len(params))

    text = str(converted)
    parts = []
    pos = 0
    for slot, (start, end) in enumerate(markers, 1):
        if slot > limit:
            break
        parts.append(text[pos:start])
        parts.append(str(params[slot - 1]))
        pos = end

    parts.append(text[pos:])
    return "".join(parts)


def format_template(template, params):
    converted, count = count_and_convert(template)
    return apply(converted, count, params)
