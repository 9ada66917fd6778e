import inspect
import unittest

from _pytest.unittest import UnitTestCase
from testscenarios import WithScenarios


def pytest_pycollect_makeitem(collector, name, obj):
    # pytest binds the test method onto the TestCase instance before calling
    # run(), so testscenarios' per-scenario clones would execute the original,
    # scenario-less instance. Expand scenarios at collection time instead.
    if not (inspect.isclass(obj) and issubclass(obj, WithScenarios)
            and issubclass(obj, unittest.TestCase)):
        return None
    scenarios = getattr(obj, 'scenarios', None)
    if not scenarios:
        return None
    items = []
    for scenario_name, params in scenarios:
        attrs = dict(params)
        attrs['scenarios'] = None
        attrs['__module__'] = obj.__module__
        sub = type('{0}[{1}]'.format(name, scenario_name), (obj,), attrs)
        setattr(collector.obj, sub.__name__, sub)
        items.append(UnitTestCase.from_parent(
            collector, name=sub.__name__, obj=sub))
    return items
