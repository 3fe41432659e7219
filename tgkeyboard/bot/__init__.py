"""Telegram reply and inline keyboard builders."""
