"""Command line interface for iniline."""

from .main import app
