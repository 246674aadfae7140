"""
Core building blocks: configuration, transport, body encoding, errors, logging.
"""
