"""
#########################
 :mod:`forbrowsers.http`
#########################

forbrowsers doesn't implement all of HTTP, only the request state that method
tunneling and browser detection look at.

.. contents::
    :local:

.. automodule:: forbrowsers.http.mapping
.. automodule:: forbrowsers.http.negotiation
.. automodule:: forbrowsers.http.request

"""
