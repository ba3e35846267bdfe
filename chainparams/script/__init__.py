"""
Script construction
"""
# script/__init__.py
from chainparams.script.script import *
