"""
Testing utilities for Stubwright users.

Register the pytest fixtures in your ``conftest.py``:

    pytest_plugins = ["stubwright.testing.fixtures"]
"""
