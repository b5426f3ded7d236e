"""Runtime package.

Keep this module dependency-light: importing `relay.runtime.*` from unit tests
should not start a server or touch the filesystem.
"""

__all__: list[str] = []
