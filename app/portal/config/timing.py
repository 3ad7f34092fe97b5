"""Timing constants for feedback and navigation (seconds)"""

# Message area auto-hide
MESSAGE_DISPLAY_SECONDS = 5.0

# Delay between login success and navigation
LOGIN_REDIRECT_DELAY = 1.5

# Delay between signup success and switching back to login
SIGNUP_SWITCH_DELAY = 2.0

__all__ = [
    'MESSAGE_DISPLAY_SECONDS',
    'LOGIN_REDIRECT_DELAY',
    'SIGNUP_SWITCH_DELAY'
]
