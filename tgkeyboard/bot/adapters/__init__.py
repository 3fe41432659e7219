"""Adapters converting keyboard builders into python-telegram-bot markup."""
