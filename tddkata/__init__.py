"""Small tested building blocks and a poker league tracker."""

__version__ = "0.1.0"