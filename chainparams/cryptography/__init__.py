"""
Hash functions
"""
# cryptography/__init__.py

from chainparams.cryptography.hash_functions import *
