"""
# pytest integration for the contention style test modules.

# Test functions accept a single `test` parameter; the fixture provides a
# &horology.test.library.Test whose skips and failures are reported through pytest.
"""
import pytest

from horology.test import library

class Test(library.Test):
	__slots__ = ()

	def skip(self, condition):
		if condition:
			pytest.skip(str(condition))

	def fail(self, cause):
		pytest.fail(str(cause))

@pytest.fixture
def test(request):
	t = Test(request.node.nodeid, request.function)
	with t.exits:
		yield t
