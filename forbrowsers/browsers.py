"""
Writing RESTful apps is a good thing, but if you're also trying to support web
browsers, you're probably going to need some hackish workarounds. This module
provides them, as a decorator around the request object of your framework.

It does two things. First, it lets you "tunnel" PUT and DELETE requests across
a POST, since browser forms can't send anything else. Second, it provides a
heuristic to check if the client is a web browser, regardless of what content
types it claims to accept. A browser may well claim to accept
``application/xml``, but it won't do anything useful with it, and you're best
off giving it HTML.

Usage::

    request = ForBrowsers(framework_request)
    if request.method == 'PUT':
        ...
    if request.looks_like_browser():
        ...

"""
import logging

from .configuration import AJAX_MARKERS, HTML_TYPES, Configuration


logger = logging.getLogger("forbrowsers")

__all__ = ['AJAX_MARKERS', 'HTML_TYPES', 'ForBrowsers', 'default_configuration']

_default_configuration = None


def default_configuration():
    """Return the process-wide :class:`Configuration`, creating it on first use.
    """
    global _default_configuration
    if _default_configuration is None:
        _default_configuration = Configuration()
    return _default_configuration


class ForBrowsers(object):
    """Decorate a request with method tunneling and browser detection.

    Args:
        request: the request to decorate, it must provide ``method``,
            ``header(name)``, ``param(name)``, ``accepts(media_type)`` and
            ``accepted_content_types()``
        configuration (Configuration): defaults to :func:`default_configuration`

    Attributes that aren't defined here are looked up on the wrapped request.

    Construct one of these per request. The resolved method is computed once
    and then kept, even if the parameters or headers change afterwards.
    """

    __slots__ = ('request', 'configuration', '_explicit_method', '_method', '_resolved')

    def __init__(self, request, configuration=None):
        self.request = request
        self.configuration = configuration or default_configuration()
        self._explicit_method = None
        self._method = None
        self._resolved = False

    def __repr__(self):
        return '%s(%r)' % (self.__class__.__name__, self.request)

    def __getattr__(self, name):
        if name in ForBrowsers.__slots__:
            raise AttributeError(name)
        return getattr(self.request, name)


    # Method tunneling
    # ================

    @property
    def raw_method(self):
        """The method of the wrapped request, as received.
        """
        return self.request.method

    @property
    def method(self):
        """The HTTP method the application should act upon.

        Assigning to this attribute is the same as calling :meth:`set_method`.
        """
        return self.resolve_method()

    @method.setter
    def method(self, value):
        self.set_method(value)

    def set_method(self, method):
        """Explicitly set the method, bypassing tunneling for this request.
        """
        self._explicit_method = method
        return method

    def resolve_method(self):
        """Return the effective HTTP method.

        This works just like the method of the wrapped request, except that it
        allows for tunneling of PUT and DELETE requests via a POST. A form
        element named ``x-tunneled-method`` overrides the method of a POST,
        and failing that so does an ``x-http-method-override`` header (Google
        uses this header for its APIs). The override is uppercased.

        This *only* works for a POST. Any other method is returned unchanged.
        """
        if self._explicit_method is not None:
            return self._explicit_method
        if self._resolved:
            return self._method

        method = self.request.method
        if method and method.upper() == 'POST':
            tunneled = self._tunneled_method()
            if tunneled:
                logger.debug("Tunneling %s through %s", tunneled.upper(), method)
                method = tunneled.upper()

        self._method = method
        self._resolved = True
        return method

    def _tunneled_method(self):
        conf = self.configuration
        return (
            self.request.param(conf.tunnel_parameter) or
            self.request.header(conf.override_header)
        )

    @property
    def is_tunneled(self):
        """Whether the method was overridden by a parameter or header.
        """
        raw = self.raw_method
        return self._explicit_method is None and bool(raw) and \
            raw.upper() == 'POST' and self.resolve_method() != raw


    # Browser detection
    # =================

    def classify(self):
        """Return a 2-tuple ``(looks_like_browser, rule)``.

        ``rule`` is the name of the rule that decided, one of ``ajax``,
        ``forced-type``, ``wildcard``, ``html``, ``accept`` and ``default``.
        The rules are tried in that order, see :meth:`looks_like_browser`.
        """
        conf = self.configuration
        request = self.request

        with_ = request.header('X-Requested-With')
        if with_ and with_ in conf.ajax_markers:
            return False, 'ajax'

        if self.resolve_method() == 'GET':
            forced_type = request.param(conf.forced_type_parameter)
            if forced_type and forced_type not in conf.html_types:
                return False, 'forced-type'

        # IE7 does not say it accepts any form of HTML, but does accept */*
        if request.accepts('*/*'):
            return True, 'wildcard'

        if any(request.accepts(t) for t in sorted(conf.html_types)):
            return True, 'html'

        if request.accepted_content_types():
            return False, 'accept'

        return True, 'default'

    def looks_like_browser(self):
        """Return :obj:`True` if the request appears to come from a browser.

        This is a heuristic, and like any heuristic it is probably wrong
        sometimes. Here is how it works, the first matching rule wins:

        1. If the request has an ``X-Requested-With`` header set to either
           ``HTTP.Request`` or ``XMLHttpRequest``, it's not a browser. The
           assumption is that if you're doing XHR, you don't want the request
           treated as if it comes from a browser.
        2. If the client makes a GET request with a ``content-type`` parameter,
           and that type is *not* an HTML type, it's not a browser.
        3. If the ``Accept`` header includes ``*/*``, it's a browser.
        4. If the ``Accept`` header includes ``text/html`` or
           ``application/xhtml+xml``, it's a browser.
        5. If there's an ``Accept`` header of any other sort, it's not a browser.
        6. The default is that the client is a browser.

        The result isn't cached, it always reflects the current headers and
        parameters.
        """
        looks_like_browser, rule = self.classify()
        logger.debug("looks_like_browser=%s (rule: %s)", looks_like_browser, rule)
        return looks_like_browser
