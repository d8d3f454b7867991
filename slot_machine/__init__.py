"""Three-reel slot machine engine with a Tornado presentation service"""

__version__ = "1.0.0"
