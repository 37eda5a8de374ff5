"""Unit tests for the version attribute of the sectok package."""
import re
import sectok


def test_version_exists():
    """Test that __version__ attribute exists."""
    assert hasattr(sectok, '__version__')


def test_version_is_string():
    """Test that __version__ is a string."""
    assert isinstance(sectok.__version__, str)
    assert len(sectok.__version__) > 0


def test_version_format():
    """Test that __version__ follows semantic versioning format (X.Y.Z or X.Y.Z.something)."""
    version_pattern = r'^\d+\.\d+\.\d+(?:\.\w+|\w+\d*)?$'
    assert re.match(version_pattern, sectok.__version__), f"Version '{sectok.__version__}' does not match expected format"


def test_version_matches_metadata():
    from importlib import metadata
    assert sectok.__version__ == metadata.version("sectok")
