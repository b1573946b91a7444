"""
Scenes for Blink Pong.
"""
