"""A request decorator for RESTful apps that also serve web browsers.

See :mod:`forbrowsers.browsers`.
"""
from .browsers import AJAX_MARKERS, HTML_TYPES, ForBrowsers
from .configuration import Configuration
from .http.request import Request

__all__ = ['AJAX_MARKERS', 'HTML_TYPES', 'Configuration', 'ForBrowsers', 'Request']
