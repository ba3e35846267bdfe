"""
All methods for manipulating and representing data in chainparams
"""

# data/__init__.py
from chainparams.data.codec import *
from chainparams.data.compact_size import *
from chainparams.data.merkle_trees import *
from chainparams.data.target_bits import *
