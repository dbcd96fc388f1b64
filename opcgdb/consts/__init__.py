"""
OPCGDB static tables
"""
from .editions import EDITIONS, Edition
from .subtypes import SUBTYPE_TABLE
