"""
Pytest configuration for keymaplang tests.
"""
import os
import sys

import pytest

# Make `import keymaplang` work without installing the package
_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
_SRC_DIR = os.path.join(_ROOT, 'src')

if _SRC_DIR not in sys.path:
	sys.path.insert(0, _SRC_DIR)


@pytest.fixture
def keymap_file(tmp_path):
	"""Write keymap source to a temporary file and return its path."""
	def _write(source, name="keys.conf"):
		path = tmp_path / name
		path.write_text(source)
		return str(path)
	return _write
