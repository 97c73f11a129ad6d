"""
Wrap Pong: two-player paddle-and-ball simulation with screen wrap-around
"""

__version__ = "0.1.0"
