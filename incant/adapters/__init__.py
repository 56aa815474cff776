# incant/adapters/__init__.py
"""
Infrastructure Adapters: filesystem lexicon source and HTTP API.
"""
