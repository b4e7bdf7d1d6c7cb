"""
Configuration is resolved knob by knob: first the default, then the
environment (``FORBROWSERS_<NAME>``), then keyword arguments. A value that
starts with ``+`` extends the current value instead of replacing it.
"""
import os

from . import parse
from ..exceptions import ConfigurationError
from ..utils import auto_repr


def configure(knobs, d, env_prefix, kwargs):
    for name, (default, func) in sorted(knobs.items()):

        # set the default value for this variable
        d[name] = default() if callable(default) else default

        def update(value, extend):
            if extend:
                d[name] = d[name] + value
            else:
                d[name] = value

        # get from the environment
        if env_prefix:
            envvar = env_prefix + name.upper()
            raw = os.environ.get(envvar, '').strip()
            if raw:
                update(*parse_conf_var(raw, func, 'environment', envvar))

        # get from kwargs
        raw = kwargs.get(name)
        if isinstance(raw, (str, bytes)):
            update(*parse_conf_var(raw, func, 'kwargs', name))
        elif raw is not None:
            update(raw, False)


def parse_conf_var(raw, from_unicode, context, name_in_context):
    error_detail = None
    if raw[:1] in ('+', b'+'):
        value = raw[1:]
        extend = True
    else:
        value = raw
        extend = False
    try:
        if isinstance(value, bytes):
            value = value.decode('US-ASCII')
        return from_unicode(value), extend
    except UnicodeDecodeError:
        value = value.decode('US-ASCII', 'backslashreplace')
        error_detail = "Configuration values must be US-ASCII"
    except ValueError as error:
        error_detail = error.args[0] if error.args else None

    msg = "Got a bad value '%s' for %s variable %s:"
    msg %= (value, context, name_in_context)
    if error_detail:
        msg += " " + error_detail + "."
    raise ConfigurationError(msg)


#: The media types that count as HTML.
HTML_TYPES = frozenset(('text/html', 'application/xhtml+xml'))

#: Values of ``X-Requested-With`` sent by programmatic (XHR) clients.
AJAX_MARKERS = ('HTTP.Request', 'XMLHttpRequest')

#: The knobs, as ``name: (default, parser)``.
KNOBS = { 'tunnel_parameter': ('x-tunneled-method', parse.identity)
        , 'override_header': ('x-http-method-override', parse.header_name)
        , 'forced_type_parameter': ('content-type', parse.identity)
        , 'html_types': (lambda: sorted(HTML_TYPES), parse.media_types)
        , 'ajax_markers': (lambda: list(AJAX_MARKERS), parse.list_)
         }


@auto_repr
class Configuration(object):
    """Hold the knobs that :class:`~forbrowsers.browsers.ForBrowsers` reads.

    The ``kwargs`` are for configuration, see :data:`KNOBS` for valid keys and
    default values. Unknown keys raise :class:`ConfigurationError`.
    """

    __slots__ = ( 'tunnel_parameter', 'override_header', 'forced_type_parameter'
                , 'html_types', 'ajax_markers'
                 )

    def __init__(self, env_prefix='FORBROWSERS_', **kwargs):
        unknown = sorted(set(kwargs) - set(KNOBS))
        if unknown:
            raise ConfigurationError("Unknown configuration knobs: %s" % ', '.join(unknown))
        d = {}
        configure(KNOBS, d, env_prefix, kwargs)
        self.tunnel_parameter = d['tunnel_parameter']
        self.override_header = d['override_header']
        self.forced_type_parameter = d['forced_type_parameter']
        self.html_types = frozenset(d['html_types'])
        self.ajax_markers = tuple(d['ajax_markers'])
