"""
This module parses the HTTP ``Accept`` header.

Parsing of the individual media ranges is delegated to :mod:`mimeparse`.
Matching differs from :func:`mimeparse.quality` in one respect: asking whether
a wildcard like ``*/*`` is accepted only looks for that literal range in the
header, it doesn't match every concrete type the client listed.
"""
import mimeparse

from ..utils import auto_repr


def parse_accept_header(raw):
    """Parse an ``Accept`` header into a list of ``(type, subtype, q)`` tuples.

    Media ranges that :mod:`mimeparse` can't parse are skipped. The order of
    the header is preserved.

    >>> parse_accept_header('text/html; q=0.5, */*')
    [('text', 'html', 0.5), ('*', '*', 1.0)]
    >>> parse_accept_header('garbage, text/xml')
    [('text', 'xml', 1.0)]
    """
    ranges = []
    for element in (raw or '').split(','):
        if not element.strip():
            continue
        try:
            type_, subtype, params = mimeparse.parse_media_range(element)
            q = float(params['q'])
        except ValueError:
            continue
        if not type_ or not subtype:
            continue
        ranges.append((type_.lower(), subtype.lower(), q))
    return ranges


def _split(content_type):
    type_, _, subtype = content_type.strip().lower().partition('/')
    if type_ == '*' and not subtype:
        subtype = '*'
    return type_, subtype


@auto_repr
class AcceptHeader(object):
    """Represent the media ranges of an HTTP ``Accept`` header.

    Attributes:
        raw: the header value as received, or :obj:`None` if it was absent
        ranges: a :class:`list` of ``(type, subtype, q)`` tuples
    """

    __slots__ = ('raw', 'ranges')

    def __init__(self, raw=None):
        self.raw = raw
        self.ranges = parse_accept_header(raw)

    def __bool__(self):
        return bool(self.ranges)

    def quality(self, content_type):
        """Return the q-value the header gives to ``content_type``.

        The most specific matching range wins: an exact match beats
        ``type/*``, which beats ``*/*``. If the same range is listed more than
        once, its highest q-value counts. Returns ``0`` if nothing matches.
        """
        type_, subtype = _split(content_type)
        best_fitness, best_q = -1, 0.0
        for r_type, r_subtype, q in self.ranges:
            if (r_type, r_subtype) == (type_, subtype):
                fitness = 2
            elif '*' in (type_, subtype):
                continue
            elif r_type == type_ and r_subtype == '*':
                fitness = 1
            elif r_type == '*' and r_subtype == '*':
                fitness = 0
            else:
                continue
            if fitness > best_fitness or (fitness == best_fitness and q > best_q):
                best_fitness, best_q = fitness, q
        return best_q

    def accepts(self, content_type):
        """Return :obj:`True` if ``content_type`` has a non-zero q-value.
        """
        return self.quality(content_type) > 0

    def accepted_content_types(self):
        """Return the accepted media types, most preferred first.

        Ranges with ``q=0`` are left out. Ties keep the order of the header.
        """
        out = []
        for type_, subtype, q in sorted(self.ranges, key=lambda r: -r[2]):
            content_type = type_ + '/' + subtype
            if q > 0 and content_type not in out:
                out.append(content_type)
        return out

    def preferred_content_type(self):
        """Return the most preferred media type, or :obj:`None`.
        """
        accepted = self.accepted_content_types()
        return accepted[0] if accepted else None
