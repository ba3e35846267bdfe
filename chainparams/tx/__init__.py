"""
Transactions
"""
# tx/__init__.py
from chainparams.tx.tx import *
