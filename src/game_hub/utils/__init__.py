"""
Utils module - configuration, game registry and factory.
"""
