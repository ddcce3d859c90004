"""
Room Inspector: browse and edit an application's SQLite database from inside
the running app.
"""

from roominspector.explorer import explore, mount
from roominspector.main import create_app

__version__ = "0.1.0"

__all__ = ["create_app", "explore", "mount"]
