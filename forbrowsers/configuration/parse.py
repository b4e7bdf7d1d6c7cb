"""
Parsers for configuration values. Each takes a :class:`str` and returns the
parsed value, or raises :class:`ValueError`.
"""
import re


TOKEN = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")


def identity(value):
    return value

def header_name(value):
    value = value.strip()
    if not TOKEN.match(value):
        raise ValueError("not a valid HTTP header name")
    return value

def media_type(value):
    value = value.strip().lower()
    type_, _, subtype = value.partition('/')
    if not TOKEN.match(type_) or not TOKEN.match(subtype):
        raise ValueError("%r is not a media type" % value)
    return value

def list_(value):
    # populate out with a single copy of each non-empty item, preserving order
    out = []
    for v in value.split(','):
        v = v.strip()
        if v and not v in out:
            out.append(v)
    return out

def media_types(value):
    return [media_type(v) for v in list_(value)]
