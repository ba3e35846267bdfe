"""
Blocks and block headers
"""
# block/__init__.py
from chainparams.block.block import *
