# Routes package
from . import grading

__all__ = ["grading"]
