"""
PyGame front-end of Wrap Pong
"""
