"""Media-type string parsing.

Splits strings like ``text/html; charset="utf-8"`` into a lowercase base
type and a mapping of parameters, following the RFC 2045 / RFC 822 token
and quoted-string rules. RFC 2231 continuations are not supported.
"""

from typing import Final

TSPECIALS: Final[str] = '()<>@,;:\\"/[]?='

_WHITESPACE: Final[str] = " \t"


class MediaTypeError(ValueError):
    """Media-type string could not be parsed."""

    pass


class InvalidMediaParameterError(MediaTypeError):
    """Malformed parameter syntax."""

    pass


class DuplicateMediaParameterError(MediaTypeError):
    """Parameter name appears more than once."""

    pass


def is_tspecial(c: str) -> bool:
    """Check if c is one of the RFC 2045 tspecials."""
    return c in TSPECIALS


def is_token_char(c: str) -> bool:
    """Check if c may appear in an unquoted token."""
    return 0x20 < ord(c) < 0x7F and not is_tspecial(c)


def consume_token(v: str) -> tuple[str, str]:
    """Consume a leading token from v.

    Returns:
        (token, rest). token is empty when v does not start with a
        token character.
    """
    for i, c in enumerate(v):
        if not is_token_char(c):
            return v[:i], v[i:]
    return v, ""


def consume_value(v: str) -> tuple[str, str]:
    """Consume a token or quoted-string parameter value from v.

    Returns:
        (value, rest). A quoted string containing a bare CR or LF returns
        ("", v) unchanged; an unterminated quoted string returns ("", "").
    """
    if not v:
        return "", ""
    if v[0] != '"':
        return consume_token(v)

    a = v[1:].encode("utf-8")
    n = len(a)
    data = bytearray()
    i = 0
    while i < n:
        b = a[i]
        if b == ord('"'):
            return data.decode("utf-8"), a[i + 1 :].decode("utf-8")
        if b == ord("\\") and i + 1 < n and is_tspecial(chr(a[i + 1])):
            data.append(a[i + 1])
            i += 2
            continue
        if b in (ord("\r"), ord("\n")):
            return "", v
        data.append(b)
        i += 1

    # Unterminated quoted string
    return "", ""


def consume_media_param(v: str) -> tuple[str, str, str]:
    """Consume one ``;name=value`` parameter from the start of v.

    Returns:
        (name, value, rest) on success, or ("", "", v) on failure.
    """
    rest = v.strip(_WHITESPACE)
    if not rest.startswith(";"):
        return "", "", v

    rest = rest[1:].lstrip(_WHITESPACE)
    param, rest = consume_token(rest)
    if not param:
        return "", "", v
    if not rest.startswith("="):
        return "", "", v

    rest = rest[1:].lstrip(_WHITESPACE)
    value, rest2 = consume_value(rest)
    if value == "" and rest2 == rest:
        return "", "", v

    return param, value, rest2


def parse_media_type(v: str) -> tuple[str, dict[str, str]]:
    """Parse a media-type string with optional parameters.

    The base type is lowercased and trimmed but not otherwise validated.
    Parameter names keep their case; a single trailing ``;`` is accepted.

    Args:
        v: Media-type string, e.g. ``multipart/form-data; boundary=x``

    Returns:
        (base type, parameters)

    Raises:
        InvalidMediaParameterError: If a parameter is malformed.
        DuplicateMediaParameterError: If a parameter name repeats.
    """
    base, sep, tail = v.partition(";")
    media_type = base.lower().strip(_WHITESPACE)

    params: dict[str, str] = {}
    rest = sep + tail
    while rest:
        rest = rest.strip(_WHITESPACE)
        if not rest:
            break
        key, value, remainder = consume_media_param(rest)
        if not key:
            if remainder.strip(_WHITESPACE) == ";":
                break
            raise InvalidMediaParameterError(f"Invalid media parameter in {v!r}")
        if key in params:
            raise DuplicateMediaParameterError(
                f"Duplicate media parameter {key!r} in {v!r}"
            )
        params[key] = value
        rest = remainder

    return media_type, params
