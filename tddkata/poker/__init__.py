"""Poker league tracking: stores, game, command line and web server."""