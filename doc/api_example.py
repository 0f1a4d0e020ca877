import io
import cacheobject

values = [
    'max-age=60',
    'public, no-store="yes"',
    'private="Set-Cookie", s-maxage=0',
]

outcomes = [cacheobject.check_value(value) for value in values]
bad_outcomes = [outcome for outcome in outcomes
                if outcome.error is not None]

for outcome in outcomes:
    if outcome.error is None and outcome.directives.max_age is not None:
        print('%r may be cached for %d seconds' %
              (outcome.value, outcome.directives.max_age))

if bad_outcomes:
    with io.open('report.html', 'wb') as f:
        cacheobject.html_report(bad_outcomes, f)
    print('%d values had problems; report written to file' %
          len(bad_outcomes))
