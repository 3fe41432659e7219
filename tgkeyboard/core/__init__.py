"""Configuration for tgkeyboard."""
