from urllib.parse import parse_qs, unquote_plus

from .mapping import CaseInsensitiveMapping, Mapping
from .negotiation import AcceptHeader


FORM_MEDIA_TYPE = 'application/x-www-form-urlencoded'


class Querystring(Mapping):
    """Represent an HTTP querystring.

    Attributes:
        raw: the unparsed form of the querystring - :class:`str`
        decoded: the decoded form of the querystring - :class:`str`
    """

    def __init__(self, raw, errors='replace'):
        """Takes a string of type application/x-www-form-urlencoded.
        """
        if isinstance(raw, bytes):
            raw = raw.decode('ascii', errors)
        self.decoded = unquote_plus(raw, errors=errors)
        self.raw = raw
        as_dict = parse_qs(raw, keep_blank_values=True, strict_parsing=False, errors=errors)
        Mapping.__init__(self, as_dict)


class Headers(CaseInsensitiveMapping):
    """Represent HTTP request headers.

    Takes a :class:`dict` mapping names to a value or a list of values, or an
    iterable of ``(name, value)`` pairs as found on the wire.
    """

    def __init__(self, raw=None):
        CaseInsensitiveMapping.__init__(self)
        if raw is None:
            return
        pairs = raw.items() if hasattr(raw, 'items') else raw
        for name, value in pairs:
            if isinstance(value, (list, tuple)):
                for v in value:
                    self.add(name, v)
            else:
                self.add(name, value)


class Request(object):
    """A minimal HTTP request, usable wherever a request context is expected.

    Host frameworks are free to pass their own request objects to
    :class:`~forbrowsers.browsers.ForBrowsers` instead, as long as they provide
    ``method``, ``header()``, ``param()``, ``accepts()`` and
    ``accepted_content_types()``.

    Args:
        method (str): the HTTP method as received
        headers: anything :class:`Headers` accepts
        querystring (str): the raw querystring, without the leading ``?``
        body (str): the raw request body, parsed as a form if its media type allows
    """

    def __init__(self, method='GET', headers=None, querystring='', body=None):
        self.method = method
        self.headers = headers if isinstance(headers, Headers) else Headers(headers)
        self.querystring = (
            querystring if isinstance(querystring, Querystring) else Querystring(querystring)
        )
        self.body = body
        self._body_params = None

    def __repr__(self):
        return '<%s %s %r>' % (self.__class__.__name__, self.method, self.querystring.raw)

    def prepare_body(self):
        """Parse the body into :attr:`body_params`.

        Only ``application/x-www-form-urlencoded`` bodies are parsed (a missing
        ``Content-Type`` counts as one). Override this to plug in other body
        parsers.
        """
        content_type = self.headers.get('Content-Type') or FORM_MEDIA_TYPE
        media_type = content_type.split(';', 1)[0].strip().lower()
        if self.body and media_type == FORM_MEDIA_TYPE:
            return Querystring(self.body)
        return Mapping()

    @property
    def body_params(self):
        if self._body_params is None:
            self._body_params = self.prepare_body()
        return self._body_params

    @property
    def accept(self):
        # repeated Accept headers are one comma-separated list
        return AcceptHeader(', '.join(self.headers.all('Accept')) or None)

    def header(self, name):
        """Given a header name (any case), return its last value or :obj:`None`.
        """
        return self.headers.get(name)

    def param(self, name):
        """Given a parameter name, return its value or :obj:`None`.

        Body parameters take precedence over query parameters.
        """
        value = self.body_params.get(name)
        if value is None:
            value = self.querystring.get(name)
        return value

    def accepts(self, content_type):
        return self.accept.accepts(content_type)

    def accepted_content_types(self):
        return self.accept.accepted_content_types()

    def preferred_content_type(self):
        return self.accept.preferred_content_type()
