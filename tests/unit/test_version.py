"""tests/unit/test_version.py"""

import typedurl


def test_version():
    """Verify that the version string is present and valid."""
    assert isinstance(typedurl.__version__, str)
    assert len(typedurl.__version__) > 0
    # Basic semver-ish check
    assert typedurl.__version__.count(".") >= 1
