"""
Telegram order intake bot.
"""
