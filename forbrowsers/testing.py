"""
This module provides helpers for testing applications that use forbrowsers.
"""
from .browsers import ForBrowsers
from .configuration import Configuration
from .http.request import Request


class Harness(object):
    """A harness to be used in the forbrowsers test suite itself. Probably not useful to you.
    """

    def __init__(self):
        self._configuration = None

    def hydrate_configuration(self, **kwargs):
        if (self._configuration is None) or kwargs:
            _kwargs = {'env_prefix': None}
            _kwargs.update(kwargs)
            self._configuration = Configuration(**_kwargs)
        return self._configuration

    configuration = property(hydrate_configuration)

    def hit(self, method='GET', headers=None, querystring='', body=None, configuration=None):
        """Build a :class:`Request` and return it decorated with :class:`ForBrowsers`.
        """
        if configuration is not None:
            self.hydrate_configuration(**configuration)
        request = Request(method, headers, querystring, body)
        return ForBrowsers(request, self.configuration)

    def looks_like_browser(self, *a, **kw):
        """A helper to hit and classify in one go.
        """
        return self.hit(*a, **kw).looks_like_browser()
