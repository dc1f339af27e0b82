"""
reqres-probe: integration tests for the ReqRes user, registration and login API.
"""

from invoke import Collection

__version__ = '0.1.0'


def build_namespace() -> Collection:
    """Collect the invoke tasks exposed by the reqres-probe command."""
    from . import tasks
    return Collection.from_module(tasks)
