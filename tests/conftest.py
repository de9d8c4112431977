"""Test configuration and fixtures for the Library API."""

from tests.fixtures import *  # noqa: F401,F403
