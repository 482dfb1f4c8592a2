"""Parsing blog posts from text files in a directory."""