"""
OPCGDB data providers
"""
from .card_list_parser import parse_card_entry, parse_card_list_page
from .card_list_provider import CardListProvider
