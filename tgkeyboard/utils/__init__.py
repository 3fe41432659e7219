"""Utility modules for tgkeyboard."""

from . import logging

__all__ = ["logging"]
