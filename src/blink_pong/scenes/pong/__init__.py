"""
Pong scene package: world models and the scene that drives the game.
"""
