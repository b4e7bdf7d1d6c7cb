import logging

import pytest


def test_no_headers_or_parameters_is_a_browser(harness):
    assert harness.looks_like_browser('GET')

def test_no_accept_header_is_a_browser_for_post_too(harness):
    assert harness.looks_like_browser('POST')


# X-Requested-With
# ================

@pytest.mark.parametrize('marker', ['XMLHttpRequest', 'HTTP.Request'])
def test_xhr_is_not_a_browser(harness, marker):
    assert not harness.looks_like_browser(headers={'X-Requested-With': marker})

@pytest.mark.parametrize('marker', ['XMLHttpRequest', 'HTTP.Request'])
def test_xhr_is_not_a_browser_even_when_accepting_html(harness, marker):
    headers = {'X-Requested-With': marker, 'Accept': 'text/html, */*'}
    assert not harness.looks_like_browser(headers=headers)

def test_x_requested_with_header_name_is_case_insensitive(harness):
    assert not harness.looks_like_browser(headers={'x-requested-with': 'XMLHttpRequest'})

def test_x_requested_with_value_is_case_sensitive(harness):
    assert harness.looks_like_browser(headers={'X-Requested-With': 'xmlhttprequest'})

def test_other_x_requested_with_values_are_ignored(harness):
    assert harness.looks_like_browser(headers={'X-Requested-With': 'com.example.app'})


# Forced content type
# ===================

def test_get_forcing_non_html_type_is_not_a_browser(harness):
    assert not harness.looks_like_browser('GET', querystring='content-type=text/json')

@pytest.mark.parametrize('html_type', ['text/html', 'application/xhtml%2Bxml'])
def test_get_forcing_html_type_is_a_browser(harness, html_type):
    assert harness.looks_like_browser('GET', querystring='content-type=' + html_type)

def test_forced_non_html_type_beats_accept_wildcard(harness):
    assert not harness.looks_like_browser( 'GET'
                                         , headers={'Accept': 'text/html, */*'}
                                         , querystring='content-type=text/json'
                                          )

def test_forced_type_is_ignored_for_post(harness):
    assert harness.looks_like_browser('POST', querystring='content-type=text/json')

def test_forced_type_is_checked_against_the_resolved_method(harness):
    request = harness.hit('POST', querystring='content-type=text/json')
    assert request.looks_like_browser()
    request.set_method('GET')
    assert not request.looks_like_browser()

def test_forced_type_applies_to_tunneled_get(harness):
    request = harness.hit('POST', querystring='x-tunneled-method=get&content-type=text/json')
    assert request.method == 'GET'
    assert not request.looks_like_browser()

def test_empty_forced_type_is_ignored(harness):
    assert harness.looks_like_browser('GET', querystring='content-type=')


# Accept
# ======

def test_accept_wildcard_is_a_browser(harness):
    headers = {'Accept': 'text/xml; q=0.4, */*; q=0.2'}
    assert harness.looks_like_browser(headers=headers)

@pytest.mark.parametrize('accept', [
    'text/html; q=0.4, text/xml; q=0.2',
    'application/xhtml+xml; q=0.4, text/xml; q=0.2',
])
def test_accepting_html_is_a_browser(harness, accept):
    assert harness.looks_like_browser(headers={'Accept': accept})

def test_accepting_text_wildcard_is_a_browser(harness):
    assert harness.looks_like_browser(headers={'Accept': 'text/*'})

def test_accepting_neither_wildcard_nor_html_is_not_a_browser(harness):
    headers = {'Accept': 'text/json; q=0.4, text/xml; q=0.2'}
    assert not harness.looks_like_browser(headers=headers)

def test_html_with_q_zero_is_not_a_browser(harness):
    headers = {'Accept': 'text/html; q=0, application/json'}
    assert not harness.looks_like_browser(headers=headers)

def test_unparseable_accept_header_is_a_browser(harness):
    assert harness.looks_like_browser(headers={'Accept': 'garbage'})

def test_empty_accept_header_is_a_browser(harness):
    assert harness.looks_like_browser(headers={'Accept': ''})


# Freshness
# =========

def test_looks_like_browser_reflects_header_changes(harness):
    request = harness.hit('GET')
    assert request.looks_like_browser()
    request.headers['X-Requested-With'] = 'XMLHttpRequest'
    assert not request.looks_like_browser()
    del request.headers['X-Requested-With']
    assert request.looks_like_browser()

def test_looks_like_browser_reflects_parameter_changes(harness):
    request = harness.hit('GET')
    assert request.looks_like_browser()
    request.querystring['content-type'] = 'application/json'
    assert not request.looks_like_browser()


# classify
# ========

@pytest.mark.parametrize('kw, expected', [
    (dict(headers={'X-Requested-With': 'XMLHttpRequest'}), (False, 'ajax')),
    (dict(querystring='content-type=text/json'), (False, 'forced-type')),
    (dict(headers={'Accept': '*/*'}), (True, 'wildcard')),
    (dict(headers={'Accept': 'application/xhtml+xml'}), (True, 'html')),
    (dict(headers={'Accept': 'application/json'}), (False, 'accept')),
    (dict(), (True, 'default')),
])
def test_classify_names_the_deciding_rule(harness, kw, expected):
    assert harness.hit(**kw).classify() == expected

def test_looks_like_browser_logs_the_deciding_rule(harness, caplog):
    with caplog.at_level(logging.DEBUG, logger='forbrowsers'):
        harness.looks_like_browser(headers={'Accept': 'application/json'})
    assert 'rule: accept' in caplog.text


# Configuration
# =============

def test_html_types_can_be_configured(harness):
    configuration = {'html_types': 'text/html,application/vnd.example+html'}
    assert harness.looks_like_browser( headers={'Accept': 'application/vnd.example+html'}
                                     , configuration=configuration
                                      )
    assert not harness.looks_like_browser( headers={'Accept': 'application/xhtml+xml'}
                                         , configuration=configuration
                                          )

def test_ajax_markers_can_be_extended(harness):
    configuration = {'ajax_markers': '+fetch'}
    assert not harness.looks_like_browser( headers={'X-Requested-With': 'fetch'}
                                         , configuration=configuration
                                          )
    assert not harness.looks_like_browser( headers={'X-Requested-With': 'XMLHttpRequest'}
                                         , configuration=configuration
                                          )

def test_html_repeated_with_q_zero_and_q_one_is_a_browser(harness):
    headers = {'Accept': 'text/html; q=0, text/html'}
    assert harness.hit(headers=headers).classify() == (True, 'html')
