"""patchview - whole-document diff views and patch visualization"""

__version__ = "1.0.0"
