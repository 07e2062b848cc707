"""
git-status-of-so-many - find the repositories with work you forgot to commit, push or tag
"""

from .__version__ import __version__
from .core import StatusReport
from .cli.main import main

__all__ = ["StatusReport", "main", "__version__"]
