"""
One Piece Card Game card list database builder
"""
