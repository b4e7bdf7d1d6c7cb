import json
from timeit import timeit

from forbrowsers import ForBrowsers, Request


REQUESTS = [
    ('GET', {}, ''),
    ('GET', {'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8'}, ''),
    ('GET', {'Accept': 'application/json'}, ''),
    ('GET', {'X-Requested-With': 'XMLHttpRequest'}, ''),
    ('GET', {}, 'content-type=text/json'),
    ('POST', {'Accept': 'text/json; q=0.4, text/xml; q=0.2'}, 'x-tunneled-method=PUT'),
    ('POST', {'X-HTTP-Method-Override': 'DELETE'}, ''),
]


times = {}
for method, headers, querystring in REQUESTS:
    request = Request(method, headers, querystring)
    classify = lambda: ForBrowsers(request).looks_like_browser()
    time = timeit(classify, number=10000)
    label = '%s %s %s' % (method, json.dumps(headers), querystring)
    print(label, time)
    times[label] = time

print("Total:", sum(times.values()))
